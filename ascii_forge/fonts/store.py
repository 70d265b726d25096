#!/usr/bin/env python3
# ascii_forge/fonts/store.py
"""
Parsed-font store.

Features:
- One Font per name, parsed once and shared read-only.
- Thread-safe registration. Racing loaders may both parse; the first
  commit wins and later ones get the stored font back.
- No I/O: callers hand in the raw font description.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Union

from ascii_forge.errors import FontNotLoadedError, FontParseError
from ascii_forge.fonts.parser import Font, parse_font

logger = logging.getLogger(__name__)

__all__ = ["FontStore"]


class FontStore:
    """Fonts keyed by name. Constructed once per service."""

    def __init__(self):
        self._fonts: Dict[str, Font] = {}
        self._lock = threading.Lock()

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._fonts

    def __len__(self) -> int:
        with self._lock:
            return len(self._fonts)

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._fonts)

    def get(self, name: str) -> Font:
        with self._lock:
            font = self._fonts.get(name)
        if font is None:
            raise FontNotLoadedError(name)
        return font

    def ensure_loaded(self, name: str, raw: Union[str, bytes]) -> Font:
        """Parse and register a font unless the name is already known."""
        with self._lock:
            known = self._fonts.get(name)
        if known is not None:
            return known

        try:
            font = parse_font(name, raw)
        except FontParseError as e:
            logger.warning("%s", e)
            raise

        with self._lock:
            stored = self._fonts.setdefault(name, font)
        if stored is font:
            logger.info("Registered font %r (height %d, %d glyphs)", name, font.height, len(font.glyphs))
        return stored
