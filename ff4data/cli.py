#!/usr/bin/env python3
"""Dump every monster of a Final Fantasy II (US) image as JSON."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import RomMap, load_settings
from .errors import DecodeError
from .export import dump_monsters
from .rom import load_image, parse_monster_data

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = load_settings()
    parser = argparse.ArgumentParser(description="FF4 monster database dumper")
    parser.add_argument(
        "rom",
        nargs="?",
        default=str(settings.rom_path),
        help="Headerless image to decode (default: $FF4_ROM or ff2us.smc)",
    )
    parser.add_argument(
        "--out",
        default=str(settings.out_dir),
        help="Directory for the per-monster JSON files",
    )
    parser.add_argument("--map", help="Region map JSON to use instead of the default")
    parser.add_argument(
        "--save-map", help="Write the active region map to this path and exit"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=settings.verbose,
        help="Log every decoded region",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    rom_map = RomMap.load(args.map) if args.map else RomMap.default()
    if args.save_map:
        rom_map.save(args.save_map)
        logger.info("Saved region map to %s", args.save_map)
        return 0

    try:
        image = load_image(args.rom)
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.rom, exc)
        return 1

    try:
        data = parse_monster_data(image, rom_map)
        dump_monsters(data, args.out)
    except DecodeError as exc:
        logger.error("Decoding failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
