from __future__ import annotations

import logging
import re
from typing import List, Optional

from .models import Subject, Task

logger = logging.getLogger(__name__)

HEADER_MARKER = "##"
# "- [x] text", "- [ ] text", "[X]text"; the leading dash is optional.
TASK_PATTERN = re.compile(r"^-?\s*\[(x| )\]\s*(.*)$", re.IGNORECASE)


class ParseError(Exception):
    """
    Raised when a document cannot be scanned at all (e.g. it is not text).
    Odd line shapes never raise; they fall back to plain tasks or are dropped.
    """


class ParsingEngine:
    """
    Abstract outline parser. Implementations should be stateless and reusable.
    """

    def parse(self, content: str) -> List[Subject]:
        raise NotImplementedError


class OutlineParser(ParsingEngine):
    """
    Single-pass parser for ``##`` subject headers followed by task lines.

    Lines before the first header are ignored, blank lines are ignored, and
    any other line under a header becomes a task. Checkbox lines
    (``- [x] ...`` / ``- [ ] ...``) set the completion flag; everything else
    is kept verbatim as an open task.
    """

    def __init__(self, skip_empty_headers: bool = False):
        self.skip_empty_headers = skip_empty_headers

    def parse(self, content: str) -> List[Subject]:
        if not isinstance(content, str):
            logger.error("Cannot parse outline of type %s", type(content).__name__)
            raise ParseError(f"expected text content, got {type(content).__name__}")

        try:
            subjects = self._scan(content)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Outline parsing failed")
            raise ParseError(str(exc) or "parsing failed") from exc

        logger.debug(
            "Parsed %d subject(s), %d task(s)",
            len(subjects),
            sum(s.total for s in subjects),
        )
        return subjects

    def _scan(self, content: str) -> List[Subject]:
        subjects: List[Subject] = []
        current: Optional[Subject] = None

        for raw_line in content.split("\n"):
            line = raw_line.strip()
            if line.startswith(HEADER_MARKER):
                name = line[len(HEADER_MARKER):].strip()
                if not name and self.skip_empty_headers:
                    current = None
                    continue
                current = Subject(name=name)
                subjects.append(current)
            elif line and current is not None:
                current.add_task(self._parse_task(line))

        return subjects

    def _parse_task(self, line: str) -> Task:
        match = TASK_PATTERN.match(line)
        if not match:
            return Task(text=line, completed=False)
        return Task(text=match.group(2).strip(), completed=match.group(1).lower() == "x")


def decode_document(data: bytes) -> str:
    """
    Decode uploaded bytes as UTF-8. A leading BOM is dropped and invalid
    sequences become U+FFFD instead of failing the upload.
    """
    return data.decode("utf-8-sig", errors="replace")


def parse_outline(content: str, skip_empty_headers: bool = False) -> List[Subject]:
    return OutlineParser(skip_empty_headers=skip_empty_headers).parse(content)
