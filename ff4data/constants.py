"""Address map for the Final Fantasy II (US) monster database.

Every offset below is an address into a headerless image.  The values are a
compatibility contract with the image layout and must not drift, including
the drop-table region that overlaps the tail of the name table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

# Terminator of every variable-length list in the AI and script regions.
SENTINEL = 0xFF

MONSTER_ENTRIES = 0xE0

# Record `i` lives at MONSTER_INFO_OFFSET + monster_offsets[i].
MONSTER_INFO_OFFSET = 0x72860 - 0xA860

MAX_GROUPS = 0x100
MAX_CONDITION_SETS = 0x62
MAX_SCRIPTS = 0x100


@dataclass(frozen=True, slots=True)
class Region:
    """A named byte range of the image.

    `end` is exclusive unless `inclusive` is set; count-based regions give
    `count` entries of `stride` bytes instead.
    """

    name: str
    start: int
    end: Optional[int] = None
    count: Optional[int] = None
    stride: int = 1
    inclusive: bool = False

    def __post_init__(self) -> None:
        if (self.end is None) == (self.count is None):
            raise ValueError(f"Region {self.name} needs exactly one of end/count")
        if self.stride < 1:
            raise ValueError(f"Region {self.name} stride must be positive")

    @property
    def stop(self) -> int:
        if self.count is not None:
            return self.start + self.count * self.stride
        assert self.end is not None
        return self.end + 1 if self.inclusive else self.end

    @property
    def size(self) -> int:
        return self.stop - self.start

    def addresses(self) -> range:
        return range(self.start, self.stop, self.stride)

    @property
    def entries(self) -> int:
        return len(self.addresses())


MONSTER_NAMES = Region("monster_names", 0x71800, end=0x71F00, stride=8)
MONSTER_DROP_TABLES = Region("monster_drop_tables", 0x71E00, end=0x71F00, stride=4)
MONSTER_GP = Region("monster_gp", 0x72000, count=MONSTER_ENTRIES, stride=2)
MONSTER_XP = Region("monster_xp", 0x721C0, count=MONSTER_ENTRIES, stride=2)
MONSTER_STATS = Region("monster_stats", 0x72380, end=0x7261F, stride=3)
MONSTER_SPEEDS = Region("monster_speeds", 0x72620, end=0x7269F, stride=2)
MONSTER_OFFSETS = Region("monster_offsets", 0x726A0, count=MONSTER_ENTRIES, stride=2)

ATTACK_GROUPS = Region("attack_groups", 0x76030, end=0x765FF, inclusive=True)
AI_CONDITION_SETS = Region("ai_condition_sets", 0x76600, end=0x76700)
AI_CONDITIONS = Region("ai_conditions", 0x76700, end=0x76900, stride=4)
AI_EARTH_SCRIPTS = Region("ai_earth_scripts", 0x76900, end=0x771FF, inclusive=True)
AI_MOON_SCRIPTS = Region("ai_moon_scripts", 0x736C0, end=0x73ACF, inclusive=True)

DEFAULT_REGIONS: Tuple[Region, ...] = (
    MONSTER_NAMES,
    MONSTER_DROP_TABLES,
    MONSTER_GP,
    MONSTER_XP,
    MONSTER_STATS,
    MONSTER_SPEEDS,
    MONSTER_OFFSETS,
    ATTACK_GROUPS,
    AI_CONDITION_SETS,
    AI_CONDITIONS,
    AI_EARTH_SCRIPTS,
    AI_MOON_SCRIPTS,
)
