#!/usr/bin/env python3
# ascii_forge/service.py
"""
Render service: validates requests and drives both engines.

The service owns its FontStore. Build it once at start-up and keep it for
the life of the process; fonts loaded through it are reused by every call.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional, Union

from ascii_forge.config import BORDER_STYLES, Config
from ascii_forge.errors import RequestError
from ascii_forge.fonts.parser import Font
from ascii_forge.fonts.store import FontStore
from ascii_forge.rendering.ascii_image import AsciiImageRenderer, AsciiResult
from ascii_forge.rendering.ramps import default_ramps
from ascii_forge.rendering.sampler import ImageSource, sample_image
from ascii_forge.text.border import wrap_border
from ascii_forge.text.renderer import render_text, to_block_art

logger = logging.getLogger(__name__)

__all__ = ["ArtService", "TextRequest", "ImageRequest"]


@dataclass(frozen=True)
class TextRequest:
    text: str
    font: str
    border: str = "none"
    # Accepted for call compatibility. Output is never wrapped.
    width: Optional[int] = None
    whitespace_break: bool = False


@dataclass(frozen=True)
class ImageRequest:
    image: ImageSource
    width: int = 80
    invert: bool = False
    color_mode: bool = False
    charset: str = "standard"


class ArtService:
    def __init__(self, cfg: Optional[Config] = None, store: Optional[FontStore] = None):
        self.cfg = cfg if cfg is not None else Config()
        self.fonts = store if store is not None else FontStore()
        self.image_renderer = AsciiImageRenderer()
        self.ramps = default_ramps()

    # ------------- fonts -------------

    def load_font(self, name: str, raw: Union[str, bytes]) -> Font:
        return self.fonts.ensure_loaded(name, raw)

    # ------------- text mode -------------

    def render_text(self, req: TextRequest) -> str:
        max_len = int(self.cfg["text"]["max_length"])
        if len(req.text) > max_len:
            raise RequestError(f"Text is {len(req.text)} characters long, limit is {max_len}")
        if req.border not in BORDER_STYLES:
            raise RequestError(f"Unknown border style {req.border!r}")
        if not req.text:
            return ""

        font = self.fonts.get(req.font)
        if req.width is not None or req.whitespace_break:
            logger.debug("Ignoring width=%s whitespace_break=%s: no line wrapping", req.width, req.whitespace_break)

        art = render_text(req.text, font)
        if req.font in self.cfg.block_style_fonts:
            art = to_block_art(art)
        return wrap_border(art, req.border)

    # ------------- image mode -------------

    def render_image(self, req: ImageRequest) -> AsciiResult:
        icfg = self.cfg["image"]
        lo, hi = int(icfg["min_width"]), int(icfg["max_width"])
        if isinstance(req.width, bool) or not isinstance(req.width, int) or not lo <= req.width <= hi:
            raise RequestError(f"Width must be an integer between {lo} and {hi}, got {req.width!r}")
        ramp = self.ramps.get(req.charset)
        if ramp is None:
            raise RequestError(f"Unknown charset {req.charset!r}; choose from {', '.join(sorted(self.ramps))}")

        factor = icfg["color_height_factor"] if req.color_mode else icfg["mono_height_factor"]
        t0 = time.time()
        samples = sample_image(
            req.image,
            req.width,
            color_mode=req.color_mode,
            height_factor=float(factor),
            resample=icfg["resample"],
        )
        result = self.image_renderer.render(samples, ramp, req.invert, req.color_mode)
        logger.debug(
            "Rendered %dx%d cells in %.1f ms",
            samples.shape[1], samples.shape[0], (time.time() - t0) * 1000.0,
        )
        return result
