#!/usr/bin/env python3
# ascii_forge/config.py
"""
Config loader/saver and defaults for ascii_forge.

Goals:
- Single JSON file per user.
- Safe atomic writes.
- Deep-merge of user config over defaults.
- Basic validation with sane fallbacks.

Usage:
    from ascii_forge.config import Config, DEFAULT_CONFIG
    cfg = Config.load()                 # ~/.config/ascii_forge/ascii_forge.json
    width = cfg["image"]["width"]
    cfg["text"]["default_border"] = "double"
    cfg.save()
"""

from __future__ import annotations

import json
import os
import platform
import shutil
import tempfile
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

# ----------------------------
# Defaults
# ----------------------------

BORDER_STYLES = ("none", "simple", "double", "lines")
RESAMPLE_FILTERS = ("nearest", "bilinear", "bicubic", "lanczos")

DEFAULT_CONFIG: Dict[str, Any] = {
    "text": {
        "max_length": 25,                 # input box limit
        "default_font": "Doom",
        "default_border": "none",         # none | simple | double | lines
        "block_style_fonts": ["3-D"],     # rendered with block glyphs afterwards
    },
    "image": {
        "width": 80,                      # cells per row
        "min_width": 20,
        "max_width": 150,
        "invert": False,
        "color": False,
        "charset": "standard",            # standard | code
        "mono_height_factor": 0.55,       # glyph cells are taller than wide
        "color_height_factor": 0.60,
        "resample": "bilinear",           # nearest | bilinear | bicubic | lanczos
    },
    "fonts": {
        "dir": None,                      # directory holding <name>.flf files
    },
    "logging": {
        "level": "WARNING",
        "file": None,                     # path or None
        "rotate_bytes": 5 * 1024 * 1024,
        "rotate_keep": 3,
    },
}

# ----------------------------
# Helpers
# ----------------------------

def _os_config_home() -> str:
    """Return per-OS config base directory."""
    if platform.system() == "Windows":
        base = os.environ.get("APPDATA") or os.path.expanduser("~\\AppData\\Roaming")
        return os.path.join(base, "AsciiForge")
    if platform.system() == "Darwin":
        return os.path.join(os.path.expanduser("~/Library/Application Support"), "AsciiForge")
    return os.path.join(os.path.expanduser("~/.config"), "ascii_forge")

def _default_config_path() -> str:
    """Resolve default config path, honoring ASCII_FORGE_CONFIG env override."""
    env = os.environ.get("ASCII_FORGE_CONFIG")
    if env:
        return os.path.expanduser(env)
    return os.path.join(_os_config_home(), "ascii_forge.json")

def _deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    """Return deep-merged copy of dicts: values in b override a."""
    out = dict(a)
    for k, v in b.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out

def _atomic_write_json(path: str, data: Dict[str, Any]) -> None:
    folder = os.path.dirname(path) or "."
    os.makedirs(folder, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=".tmp_cfg_", dir=folder)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=True)
            f.write("\n")
        os.replace(tmp, path)
    except Exception:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise

def _coerce_num(v: Any, default: float, minmax: Optional[Tuple[float, float]] = None) -> float:
    try:
        x = float(v)
    except (TypeError, ValueError):
        return float(default)
    if minmax:
        lo, hi = minmax
        x = min(hi, max(lo, x))
    return x

def _coerce_int(v: Any, default: int, minmax: Optional[Tuple[int, int]] = None) -> int:
    if isinstance(v, bool):
        return int(default)
    try:
        x = int(v)
    except (TypeError, ValueError):
        return int(default)
    if minmax:
        lo, hi = minmax
        x = min(hi, max(lo, x))
    return x

def _coerce_bool(v: Any, default: bool) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, str):
        s = v.strip().lower()
        if s in ("1", "true", "yes", "on"): return True
        if s in ("0", "false", "no", "off"): return False
    return default

def _coerce_names(v: Any, default: List[str]) -> List[str]:
    if isinstance(v, str):
        return [v]
    if isinstance(v, (list, tuple)):
        return [str(x) for x in v if x]
    return list(default)

# ----------------------------
# Validation
# ----------------------------

def _validate(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Return validated copy with fallbacks applied."""
    c = _deep_merge(DEFAULT_CONFIG, cfg or {})

    # text
    t = c["text"]
    t["max_length"] = _coerce_int(t.get("max_length"), DEFAULT_CONFIG["text"]["max_length"], (1, 500))
    t["default_font"] = str(t.get("default_font") or DEFAULT_CONFIG["text"]["default_font"])
    if t.get("default_border") not in BORDER_STYLES:
        t["default_border"] = DEFAULT_CONFIG["text"]["default_border"]
    t["block_style_fonts"] = _coerce_names(t.get("block_style_fonts"), DEFAULT_CONFIG["text"]["block_style_fonts"])

    # image
    im = c["image"]
    im["min_width"] = _coerce_int(im.get("min_width"), 20, (1, 1000))
    im["max_width"] = _coerce_int(im.get("max_width"), 150, (im["min_width"], 1000))
    im["width"]     = _coerce_int(im.get("width"), 80, (im["min_width"], im["max_width"]))
    im["invert"]    = _coerce_bool(im.get("invert"), DEFAULT_CONFIG["image"]["invert"])
    im["color"]     = _coerce_bool(im.get("color"), DEFAULT_CONFIG["image"]["color"])
    im["charset"]   = str(im.get("charset") or DEFAULT_CONFIG["image"]["charset"])
    im["mono_height_factor"]  = _coerce_num(im.get("mono_height_factor"), 0.55, (0.1, 4.0))
    im["color_height_factor"] = _coerce_num(im.get("color_height_factor"), 0.60, (0.1, 4.0))
    if im.get("resample") not in RESAMPLE_FILTERS:
        im["resample"] = DEFAULT_CONFIG["image"]["resample"]

    # fonts
    fd = c["fonts"].get("dir")
    c["fonts"]["dir"] = os.path.expanduser(str(fd)) if fd else None

    # logging
    lg = c["logging"]
    if lg.get("level") not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"):
        lg["level"] = DEFAULT_CONFIG["logging"]["level"]
    lf = lg.get("file")
    lg["file"] = str(lf) if lf else None
    lg["rotate_bytes"] = _coerce_int(lg.get("rotate_bytes"), DEFAULT_CONFIG["logging"]["rotate_bytes"], (256 * 1024, 50 * 1024 * 1024))
    lg["rotate_keep"]  = _coerce_int(lg.get("rotate_keep"), DEFAULT_CONFIG["logging"]["rotate_keep"], (0, 50))

    return c

# ----------------------------
# Public API
# ----------------------------

@dataclass
class Config:
    """Thin wrapper around a nested dict with load/save/merge."""
    data: Dict[str, Any] = field(default_factory=lambda: _validate(json.loads(json.dumps(DEFAULT_CONFIG))))
    path: str = field(default_factory=_default_config_path)

    # --- Mapping-style access
    def __getitem__(self, k: str) -> Any:
        return self.data[k]

    def __setitem__(self, k: str, v: Any) -> None:
        self.data[k] = v

    def get(self, k: str, default: Any = None) -> Any:
        return self.data.get(k, default)

    # --- Ops
    @classmethod
    def load(cls, path: Optional[str] = None, create_if_missing: bool = True) -> "Config":
        cfg_path = os.path.expanduser(path) if path else _default_config_path()
        if not os.path.exists(cfg_path):
            cfg = _validate(DEFAULT_CONFIG)
            if create_if_missing:
                _atomic_write_json(cfg_path, cfg)
            return cls(cfg, cfg_path)

        try:
            with open(cfg_path, "r", encoding="utf-8") as f:
                user_cfg = json.load(f)
        except ValueError:
            # Corrupt file. Keep a copy and fall back to defaults.
            shutil.copyfile(cfg_path, cfg_path + ".corrupt.bak")
            user_cfg = {}
        if not isinstance(user_cfg, dict):
            user_cfg = {}

        return cls(_validate(user_cfg), cfg_path)

    def save(self) -> None:
        """Persist to JSON atomically."""
        full = _validate(self.data)
        _atomic_write_json(self.path, full)
        self.data = full  # sync in-memory with normalized values

    def update(self, partial: Dict[str, Any]) -> None:
        """Deep-merge a partial config then validate."""
        merged = _deep_merge(self.data, partial)
        self.data = _validate(merged)

    # Convenience getters
    @property
    def font_dir(self) -> Optional[str]:
        return self.data["fonts"]["dir"]

    @property
    def block_style_fonts(self) -> List[str]:
        return list(self.data["text"]["block_style_fonts"])


__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "BORDER_STYLES",
    "RESAMPLE_FILTERS",
]
