#!/usr/bin/env python3
# ascii_forge/errors.py
"""
Exception types raised by the font and image engines.

All of them are recoverable: the caller picks another font, width or image
and tries again. Missing glyphs are not an error, they are skipped.
"""

from __future__ import annotations

__all__ = [
    "AsciiForgeError",
    "FontParseError",
    "FontNotLoadedError",
    "ImageDecodeError",
    "RequestError",
]


class AsciiForgeError(Exception):
    """Base class for all engine errors."""


class FontParseError(AsciiForgeError):
    """Font description could not be parsed; nothing was registered."""

    def __init__(self, font_name: str, reason: str):
        super().__init__(f"Cannot parse font {font_name!r}: {reason}")
        self.font_name = font_name
        self.reason = reason


class FontNotLoadedError(AsciiForgeError, KeyError):
    """Requested font has not been loaded into the store."""

    def __init__(self, font_name: str):
        super().__init__(f"Font {font_name!r} is not loaded")
        self.font_name = font_name

    def __str__(self) -> str:
        # KeyError would quote the message
        return self.args[0]


class ImageDecodeError(AsciiForgeError):
    """Source image could not be opened or decoded."""


class RequestError(AsciiForgeError, ValueError):
    """Render request carries an invalid parameter."""
