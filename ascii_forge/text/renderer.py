#!/usr/bin/env python3
# ascii_forge/text/renderer.py
"""
Block-text composition from a parsed FIGlet font.

Glyphs are concatenated row by row at their fixed width. Characters the font
has no glyph for are skipped without leaving a gap; callers rely on that
spacing, so there is no fallback glyph.
"""

from __future__ import annotations

import re
from typing import List

from ascii_forge.fonts.parser import Font

__all__ = ["render_text", "to_block_art"]

_BLOCK_ART = str.maketrans({
    "#": "█",
    "|": "▒",
    "/": "▒",
    "\\": "▒",
    "_": "▒",
})


def render_text(text: str, font: Font) -> str:
    """Compose text into font.height lines joined by newlines."""
    rows: List[str] = [""] * font.height
    for ch in text:
        glyph = font.glyphs.get(ord(ch))
        if glyph is None:
            continue
        for i, part in enumerate(glyph):
            rows[i] += part

    result = "\n".join(rows)
    if font.hardblank:
        result = re.sub(re.escape(font.hardblank), " ", result)
    return result


def to_block_art(text: str) -> str:
    """Swap outline strokes for solid and shaded blocks (3-D style fonts)."""
    return text.translate(_BLOCK_ART)
