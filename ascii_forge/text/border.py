#!/usr/bin/env python3
# ascii_forge/text/border.py
"""Frame styles for rendered block text."""

from __future__ import annotations

from typing import Dict, List, Tuple

__all__ = ["wrap_border", "BORDER_FRAMES"]

# (top-left, horizontal, top-right, vertical, bottom-left, bottom-right)
BORDER_FRAMES: Dict[str, Tuple[str, str, str, str, str, str]] = {
    "simple": ("┌", "─", "┐", "│", "└", "┘"),
    "double": ("╔", "═", "╗", "║", "╚", "╝"),
}
RULE = "─"


def _content_lines(text: str) -> List[str]:
    lines = text.split("\n")
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def wrap_border(text: str, style: str) -> str:
    """Wrap text in a frame. "none" returns text untouched."""
    if style == "none":
        return text
    if style not in BORDER_FRAMES and style != "lines":
        raise ValueError(f"Unknown border style {style!r}")
    if not text:
        return ""

    lines = _content_lines(text)
    if not lines:
        return ""
    width = max(len(line) for line in lines)
    padded = [line.ljust(width) for line in lines]

    if style == "lines":
        rule = RULE * width
        return "\n".join([rule, *padded, rule])

    tl, h, tr, v, bl, br = BORDER_FRAMES[style]
    top = tl + h * (width + 2) + tr
    bottom = bl + h * (width + 2) + br
    body = [f"{v} {line} {v}" for line in padded]
    return "\n".join([top, *body, bottom])
