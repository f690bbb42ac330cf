"""
Example: parse a local outline file and print the same JSON envelope the
upload endpoint returns.

Usage:
    python3 outline_demo.py --file /path/to/homework.md
    python3 outline_demo.py --file notes.txt --skip-empty-headers --summary
"""

import argparse
import json
import sys
from pathlib import Path

from study_tracker.parsing import OutlineParser, ParseError, decode_document


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", required=True, type=Path, help="Path to a .txt or .md outline")
    parser.add_argument("--skip-empty-headers", action="store_true", help="Ignore '##' lines without a name")
    parser.add_argument("--summary", action="store_true", help="Print one progress line per subject instead of JSON")
    args = parser.parse_args(argv)

    if not args.file.exists():
        raise FileNotFoundError(f"Outline not found: {args.file}")

    engine = OutlineParser(skip_empty_headers=args.skip_empty_headers)
    try:
        subjects = engine.parse(decode_document(args.file.read_bytes()))
    except ParseError as exc:
        print(json.dumps({"success": False, "error": f"Failed to parse file: {exc}"}, ensure_ascii=False))
        return 1

    if args.summary:
        for subject in subjects:
            print(f"{subject.name or '(unnamed)'}: {subject.completed}/{subject.total}")
    else:
        envelope = {"success": True, "data": [s.to_dict() for s in subjects]}
        print(json.dumps(envelope, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
