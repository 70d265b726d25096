#!/usr/bin/env python3
# ascii_forge/cli.py
"""
Entry point for ascii_forge.
Reads fonts and images from disk, hands them to ArtService and prints the art.

    ascii-forge text "NEXUS" --font-file fonts/Doom.flf --border double
    ascii-forge image photo.png --width 100 --color --charset code
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText

from ascii_forge.config import BORDER_STYLES, Config
from ascii_forge.errors import AsciiForgeError, FontNotLoadedError
from ascii_forge.logging_conf import setup_logging
from ascii_forge.rendering.ramps import default_ramps
from ascii_forge.rendering.terminal import print_result, text_to_fragments
from ascii_forge.service import ArtService, ImageRequest, TextRequest
from ascii_forge.version import version_info

logger = logging.getLogger(__name__)


def _build_parser(cfg: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ascii-forge", description="FIGlet text and image to ASCII art.")
    parser.add_argument("--version", action="version", version=version_info())
    parser.add_argument("--config", help="path to JSON config file")
    parser.add_argument("--log-level", help="override logging level (DEBUG, INFO, ...)")
    sub = parser.add_subparsers(dest="command", required=True)

    t = sub.add_parser("text", help="render text with a FIGlet font")
    t.add_argument("text")
    t.add_argument("--font",
                   help="font name; looked up as <fonts.dir>/<name>.flf unless --font-file is given "
                        f"(default: font file stem or {cfg['text']['default_font']})")
    t.add_argument("--font-file", type=Path, help="path to a .flf font")
    t.add_argument("--border", choices=BORDER_STYLES, default=cfg["text"]["default_border"])

    i = sub.add_parser("image", help="render an image as characters")
    i.add_argument("image", type=Path)
    i.add_argument("--width", type=int, default=cfg["image"]["width"])
    i.add_argument("--invert", action=argparse.BooleanOptionalAction, default=cfg["image"]["invert"])
    i.add_argument("--color", action=argparse.BooleanOptionalAction, default=cfg["image"]["color"])
    i.add_argument("--charset", choices=sorted(default_ramps()), default=cfg["image"]["charset"])
    return parser


def _resolve_font(cfg: Config, args) -> Tuple[str, Path]:
    if args.font_file is not None:
        return args.font or args.font_file.stem, args.font_file
    name = args.font or cfg["text"]["default_font"]
    if not cfg.font_dir:
        raise FontNotLoadedError(name)
    return name, Path(cfg.font_dir) / f"{name}.flf"


def _run_text(service: ArtService, cfg: Config, args) -> None:
    name, path = _resolve_font(cfg, args)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise FontNotLoadedError(name) from e
    service.load_font(name, raw)
    art = service.render_text(TextRequest(args.text, name, args.border))
    print_formatted_text(FormattedText(text_to_fragments(art)), end="")


def _run_image(service: ArtService, args) -> None:
    req = ImageRequest(
        image=args.image,
        width=args.width,
        invert=args.invert,
        color_mode=args.color,
        charset=args.charset,
    )
    print_result(service.render_image(req))


def main(argv: Optional[List[str]] = None) -> int:
    # config path must be known before defaults are filled in
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config")
    known, _ = pre.parse_known_args(argv)
    cfg = Config.load(known.config, create_if_missing=False)

    args = _build_parser(cfg).parse_args(argv)
    setup_logging(cfg, args.log_level)

    service = ArtService(cfg)
    try:
        if args.command == "text":
            _run_text(service, cfg, args)
        else:
            _run_image(service, args)
    except AsciiForgeError as e:
        logger.debug("render failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
