#!/usr/bin/env python3
# ascii_forge/rendering/ramps.py
"""
Character ramps, ordered from the glyph used for black to the one used for
white. Any ordered sequence of single characters works as a ramp.
"""

from __future__ import annotations

from typing import Dict, Iterable, Union

__all__ = ["default_ramps", "resolve_ramp", "RampLike"]

RampLike = Union[str, Iterable[str]]


def default_ramps() -> Dict[str, str]:
    return {
        "standard": "@%#*+=-:. ",                       # high contrast
        "code": "W@B#8&0Qdbphwkmzu1{}?|/;:<>^,.' ",     # source-code look
    }


def resolve_ramp(ramp: RampLike) -> str:
    """Return a ramp string for a character sequence. Names are not looked up here."""
    if isinstance(ramp, str):
        chars = ramp
    else:
        chars = list(ramp)
        if any(not isinstance(c, str) or len(c) != 1 for c in chars):
            raise ValueError("Ramp entries must be single characters")
        chars = "".join(chars)
    if not chars:
        raise ValueError("Ramp must contain at least one character")
    return chars
