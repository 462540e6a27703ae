"""JSON-ready views of decoded monsters."""

from __future__ import annotations

from dataclasses import asdict
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from .monster import MonsterData

logger = logging.getLogger(__name__)


def combine_monster(data: MonsterData, index: int) -> Dict[str, Any]:
    """Gather one monster with the shared rows it points at."""

    monster = data.monsters[index]
    seq = monster.attack_seq_group
    ai = None
    if seq < len(data.ai.groups):
        ai = [asdict(entry) for entry in data.ai.groups[seq].entries]

    drop_table = data.drop_table(monster)
    return {
        "name": data.name(index),
        "monster": asdict(monster),
        "xp": data.xp_table[index],
        "gp": data.gp_table[index],
        "physical_attack": asdict(data.stats(monster.physical_attack_index)),
        "physical_defense": asdict(data.stats(monster.physical_defense_index)),
        "magical_defense": asdict(data.stats(monster.magical_defense_index)),
        "speed": asdict(data.speed(monster.speed_index)),
        "drop_table": asdict(drop_table) if drop_table is not None else None,
        "ai": ai,
    }


def monster_filename(data: MonsterData, index: int) -> str:
    name = data.name(index).replace("/", "_")
    return f"{index:02x}-{name}.json"


def dump_monsters(data: MonsterData, out_dir: Union[str, Path]) -> List[Path]:
    """Write one JSON file per monster.

    A lookup failure in any record raises before `out_dir` is created.
    """

    out = Path(out_dir)
    records = [
        (monster_filename(data, index), combine_monster(data, index))
        for index in range(len(data.monsters))
    ]
    out.mkdir(parents=True, exist_ok=True)
    written = []
    for filename, record in records:
        path = out / filename
        with open(path, "w", encoding="utf-8") as f:
            json.dump(record, f, indent=2, ensure_ascii=False)
        logger.debug("Wrote %s", path)
        written.append(path)
    logger.info("Wrote %d monsters to %s", len(written), out)
    return written
