"""
Parsing subsystem exports.
"""

from .engine import OutlineParser, ParseError, ParsingEngine, decode_document, parse_outline
from .models import Subject, Task

__all__ = [
    "OutlineParser",
    "ParseError",
    "ParsingEngine",
    "Subject",
    "Task",
    "decode_document",
    "parse_outline",
]
