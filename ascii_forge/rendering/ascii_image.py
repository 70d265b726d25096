#!/usr/bin/env python3
# ascii_forge/rendering/ascii_image.py
"""
Luminance-to-character mapping for sampled images.

- Luminance uses ITU-R BT.709 weights on 0..255 channels.
- Index into the ramp is floor(L / 255 * (len - 1)), mirrored when inverted.
- Fully transparent samples become spaces (color "transparent").
- The color grid is only built in color mode; otherwise it is None, which
  callers must not confuse with an empty grid.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from ascii_forge.rendering.ramps import RampLike, resolve_ramp

__all__ = [
    "Cell",
    "CellGrid",
    "AsciiResult",
    "LuminanceMapper",
    "AsciiImageRenderer",
    "TRANSPARENT",
]

TRANSPARENT = "transparent"


@dataclass(frozen=True)
class Cell:
    character: str
    color: str          # "rgb(r,g,b)" or "transparent"


CellGrid = List[List[Cell]]


@dataclass(frozen=True)
class AsciiResult:
    text: str
    cells: Optional[CellGrid] = None

    @property
    def has_color(self) -> bool:
        return self.cells is not None


def _as_grid(grid) -> np.ndarray:
    arr = np.asarray(grid, dtype=np.uint8)
    if arr.ndim != 3 or arr.shape[-1] != 4:
        raise ValueError(f"Expected an RGBA grid shaped (rows, cols, 4), got {arr.shape}")
    return arr


class LuminanceMapper:
    """Pick a ramp character for an RGBA sample."""

    def __init__(self, ramp: RampLike, invert: bool = False):
        self.ramp = resolve_ramp(ramp)
        self.invert = bool(invert)

    @staticmethod
    def luminance(r: float, g: float, b: float) -> float:
        return r * 0.2126 + g * 0.7152 + b * 0.0722

    def index_for(self, lum: float) -> int:
        last = len(self.ramp) - 1
        idx = min(last, max(0, math.floor((lum / 255) * last)))
        if self.invert:
            idx = last - idx
        return idx

    def char_for(self, sample: Sequence[int]) -> str:
        r, g, b, a = sample
        if a == 0:
            return " "
        return self.ramp[self.index_for(self.luminance(r, g, b))]

    def map_grid(self, grid) -> np.ndarray:
        """Vectorized char_for over a (rows, cols, 4) grid."""
        arr = _as_grid(grid)
        rgb = arr[..., :3].astype(np.float64)
        lum = self.luminance(rgb[..., 0], rgb[..., 1], rgb[..., 2])
        last = len(self.ramp) - 1
        idx = np.clip(np.floor((lum / 255) * last).astype(np.intp), 0, last)
        if self.invert:
            idx = last - idx
        chars = np.array(list(self.ramp))[idx]
        chars[arr[..., 3] == 0] = " "
        return chars


class AsciiImageRenderer:
    """Turn a sample grid into text and, in color mode, a cell grid."""

    @staticmethod
    def _rgb_to_css(r: int, g: int, b: int) -> str:
        return f"rgb({r},{g},{b})"

    def render(
        self,
        grid,
        ramp: RampLike,
        invert: bool = False,
        color_mode: bool = False,
    ) -> AsciiResult:
        arr = _as_grid(grid)
        chars = LuminanceMapper(ramp, invert).map_grid(arr).tolist()
        text = "".join("".join(row) + "\n" for row in chars)
        if not color_mode:
            return AsciiResult(text, None)

        cells: CellGrid = []
        for y, row in enumerate(chars):
            line: List[Cell] = []
            for x, ch in enumerate(row):
                r, g, b, a = arr[y, x].tolist()
                if a == 0:
                    line.append(Cell(" ", TRANSPARENT))
                else:
                    line.append(Cell(ch, self._rgb_to_css(r, g, b)))
            cells.append(line)
        return AsciiResult(text, cells)
