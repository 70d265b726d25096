#!/usr/bin/env python3
# ascii_forge/fonts/parser.py
"""
FIGlet .flf font parser.

Header layout (first line):

    flf2a$ 6 5 20 15 3
    |    | | | |  |  \\_ comment line count
    |    | | | |   \\__ old layout (recorded, unused)
    |    | | |  \\_____ max length (recorded, not enforced)
    |    | |  \\_______ baseline
    |    |  \\_________ glyph height
    |     \\___________ hardblank
     \\________________ signature

The body holds the comment block followed by fixed-height glyphs for codes
32..126 and, when present, the seven German extras. Each row ends with one
end-marker, the last row of a glyph usually with two.

Row trimming is the same heuristic the rendered output has always relied on,
not a full FIGfont implementation: no smushing rules, no code-tagged glyphs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Tuple, Union

from ascii_forge.errors import FontParseError

logger = logging.getLogger(__name__)

__all__ = [
    "Font",
    "parse_font",
    "trim_row",
    "ASCII_CODES",
    "GERMAN_CODES",
]

SIGNATURE = "flf2a"
ASCII_CODES = range(32, 127)
GERMAN_CODES = (196, 214, 220, 228, 246, 252, 223)   # Ä Ö Ü ä ö ü ß
END_CHAR_CANDIDATES = ("@", "#", "$")
DEFAULT_END_CHAR = "@"
END_CHAR_LOOKAHEAD = 20


@dataclass(frozen=True)
class Font:
    """Parsed FIGlet font. Shared read-only between render calls."""
    name: str
    height: int
    hardblank: str
    glyphs: Mapping[int, Tuple[str, ...]]
    baseline: int = 0
    max_length: int = 0
    old_layout: int = 0
    comments: str = field(default="", repr=False)
    end_char: str = DEFAULT_END_CHAR

    def __contains__(self, char: str) -> bool:
        return ord(char) in self.glyphs

    def glyph(self, char: str) -> Tuple[str, ...]:
        return self.glyphs[ord(char)]


def trim_row(row: str, end_char: str) -> str:
    """Cut a glyph row at its last end-marker, or at a doubled pair."""
    index = row.rfind(end_char)
    if index == -1:
        return row
    if index > 0 and row[index - 1] == end_char:
        return row[:index - 1]
    return row[:index]


def _decode(name: str, raw: Union[str, bytes]) -> str:
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError:
            # classic fonts are 8-bit
            raw = raw.decode("latin-1")
    if not isinstance(raw, str):
        raise FontParseError(name, f"expected text or bytes, got {type(raw).__name__}")
    return raw.replace("\r\n", "\n")


def _header_int(name: str, fields: List[str], pos: int, label: str) -> int:
    try:
        return int(fields[pos])
    except ValueError:
        raise FontParseError(name, f"{label} {fields[pos]!r} is not an integer") from None


def _detect_end_char(lines: List[str]) -> str:
    for line in lines[:END_CHAR_LOOKAHEAD]:
        if line and line[-1] in END_CHAR_CANDIDATES:
            return line[-1]
    return DEFAULT_END_CHAR


def parse_font(name: str, raw: Union[str, bytes]) -> Font:
    """Parse a FIGlet font description into a Font.

    Fonts that end early are not an error: the glyph set is simply partial.
    Raises FontParseError on a malformed header, a non-positive height or a
    comment block longer than the body.
    """
    text = _decode(name, raw)

    header_end = text.find("\n")
    if header_end == -1:
        raise FontParseError(name, "no line break after header")
    header = text[:header_end]
    fields = header.split()
    if len(fields) < 6:
        raise FontParseError(name, f"header has {len(fields)} fields, expected at least 6")
    signature = fields[0]
    if len(signature) < 6:
        raise FontParseError(name, f"signature {signature!r} carries no hardblank")
    if not signature.startswith(SIGNATURE):
        logger.warning("font %r: unexpected signature %r", name, signature[:5])
    hardblank = signature[5]

    height = _header_int(name, fields, 1, "height")
    if height <= 0:
        raise FontParseError(name, f"height must be positive, got {height}")
    baseline = _header_int(name, fields, 2, "baseline")
    max_length = _header_int(name, fields, 3, "max length")
    old_layout = _header_int(name, fields, 4, "old layout")
    comment_lines = _header_int(name, fields, 5, "comment line count")

    lines = text[header_end + 1:].split("\n")
    if comment_lines < 0 or comment_lines > len(lines):
        raise FontParseError(
            name, f"declares {comment_lines} comment lines but only {len(lines)} lines follow"
        )
    comments = "\n".join(lines[:comment_lines])
    lines = lines[comment_lines:]

    end_char = _detect_end_char(lines)

    def take(start: int) -> Tuple[str, ...]:
        return tuple(trim_row(row, end_char) for row in lines[start:start + height])

    glyphs = {}
    pos = 0
    for code in ASCII_CODES:
        if pos + height > len(lines):
            logger.debug("font %r ends before code %d", name, code)
            break
        glyphs[code] = take(pos)
        pos += height

    if pos + len(GERMAN_CODES) * height <= len(lines):
        for code in GERMAN_CODES:
            glyphs[code] = take(pos)
            pos += height

    logger.debug("font %r: height %d, %d glyphs, end-marker %r", name, height, len(glyphs), end_char)
    return Font(
        name=name,
        height=height,
        hardblank=hardblank,
        glyphs=MappingProxyType(glyphs),
        baseline=baseline,
        max_length=max_length,
        old_layout=old_layout,
        comments=comments,
        end_char=end_char,
    )
