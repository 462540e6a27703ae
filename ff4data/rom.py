"""Decode the monster database out of a full image."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .ai import parse_ai
from .config import RomMap
from .errors import IncompleteRegion
from .monster import MAX_RECORD_SIZE, MonsterData, decode_monster
from .tables import (
    load_drop_tables,
    load_name_table,
    load_region_u16_table,
    load_speed_table,
    load_stat_table,
)

logger = logging.getLogger(__name__)


def load_image(path: Union[str, Path]) -> bytes:
    data = Path(path).read_bytes()
    logger.info("Loaded %s (%d bytes)", path, len(data))
    return data


def parse_monster_data(image: bytes, rom_map: Optional[RomMap] = None) -> MonsterData:
    rom_map = rom_map or RomMap.default()
    if len(image) < rom_map.min_image_size:
        raise IncompleteRegion(
            f"Image is {len(image):#x} bytes, map {rom_map.name} needs "
            f"{rom_map.min_image_size:#x}",
            region="image",
        )

    def _loaded(region_name: str, rows: tuple) -> tuple:
        region = rom_map[region_name]
        logger.debug("%s @ %#07x: %d rows", region.name, region.start, len(rows))
        return rows

    name_table = _loaded(
        "monster_names", load_name_table(image, rom_map["monster_names"])
    )
    gp_table = _loaded("monster_gp", load_region_u16_table(image, rom_map["monster_gp"]))
    xp_table = _loaded("monster_xp", load_region_u16_table(image, rom_map["monster_xp"]))
    offsets = _loaded(
        "monster_offsets", load_region_u16_table(image, rom_map["monster_offsets"])
    )
    stat_table = _loaded(
        "monster_stats", load_stat_table(image, rom_map["monster_stats"])
    )
    speed_table = _loaded(
        "monster_speeds", load_speed_table(image, rom_map["monster_speeds"])
    )
    drop_tables = _loaded(
        "monster_drop_tables", load_drop_tables(image, rom_map["monster_drop_tables"])
    )

    monsters = []
    for index, offset in enumerate(offsets):
        addr = rom_map.monster_info_offset + offset
        record = image[addr : addr + MAX_RECORD_SIZE]
        monsters.append(decode_monster(record, index, base=addr))

    ai = parse_ai(image, rom_map)
    logger.debug(
        "AI: %d conditions, %d condition sets, %d groups, %d+%d scripts",
        len(ai.conditions),
        len(ai.condition_sets),
        len(ai.groups),
        len(ai.earth_scripts),
        len(ai.moon_scripts),
    )
    logger.info("Decoded %d monsters from %s", len(monsters), rom_map.name)

    return MonsterData(
        monsters=tuple(monsters),
        name_table=name_table,
        gp_table=gp_table,
        xp_table=xp_table,
        stat_table=stat_table,
        speed_table=speed_table,
        drop_tables=drop_tables,
        ai=ai,
    )
