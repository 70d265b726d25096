#!/usr/bin/env python3
# ascii_forge/rendering/terminal.py
"""
prompt_toolkit output for rendered art.

Style format: list of (style, text) fragments suitable for FormattedText,
where colored cells use "fg:#RRGGBB". Adjacent cells with the same color are
merged into one run.
"""

from __future__ import annotations

import re
from typing import List, Optional, TextIO, Tuple

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText

from ascii_forge.rendering.ascii_image import TRANSPARENT, AsciiResult, CellGrid

StyleRun = Tuple[str, str]                # (style, text)

__all__ = [
    "cells_to_fragments",
    "text_to_fragments",
    "print_result",
    "StyleRun",
]

_RGB = re.compile(r"rgb\((\d{1,3}),(\d{1,3}),(\d{1,3})\)")


def _css_to_style(color: str) -> str:
    if color == TRANSPARENT:
        return ""
    m = _RGB.fullmatch(color)
    if not m:
        return ""
    r, g, b = (int(v) for v in m.groups())
    return f"fg:#{r:02x}{g:02x}{b:02x}"


def cells_to_fragments(cells: CellGrid) -> List[StyleRun]:
    frags: List[StyleRun] = []
    for row in cells:
        run_style: Optional[str] = None
        run_text: List[str] = []
        for cell in row:
            style = _css_to_style(cell.color)
            if style != run_style and run_text:
                frags.append((run_style, "".join(run_text)))
                run_text = []
            run_style = style
            run_text.append(cell.character)
        if run_text:
            frags.append((run_style, "".join(run_text)))
        frags.append(("", "\n"))
    return frags


def text_to_fragments(text: str, style: str = "") -> List[StyleRun]:
    if text and not text.endswith("\n"):
        text += "\n"
    return [(style, text)]


def print_result(result: AsciiResult, file: Optional[TextIO] = None) -> None:
    """Write a result to the terminal, colored when cells are present."""
    if result.cells is not None:
        frags = cells_to_fragments(result.cells)
    else:
        frags = text_to_fragments(result.text)
    print_formatted_text(FormattedText(frags), end="", file=file)
