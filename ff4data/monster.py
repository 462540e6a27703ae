"""Monster records and the aggregate monster database model.

A record is a fixed 10-byte header followed by up to 10 extension bytes.  The
flags byte (header byte 9) decides which extension blocks are present, so the
tail is consumed with a running cursor, high flag bit first:

    bit 7  attack statuses   3 bytes
    bit 6  defense statuses  3 bytes
    bit 5  weaknesses        1 byte
    bit 4  spell power       1 byte
    bit 3  creature types    1 byte
    bit 2  reflex attack seq 1 byte

Bits 1 and 0 are unused.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple, TypeVar

from .ai import Ai
from .coding import bit_set
from .decoding.reader import StreamCtx
from .errors import IndexOutOfRange
from .tables import DropTable, Speed, Stats

E = TypeVar("E", bound=Enum)


class Status(str, Enum):
    IMMUNE_TO_ELEMENTS = "immune_to_elements"
    ABSORBS_ELEMENTS = "absorbs_elements"
    RESISTS_ELEMENTS = "resists_elements"
    LIGHT = "light"
    DARK = "dark"
    LIGHTNING = "lightning"
    ICE = "ice"
    FIRE = "fire"
    DEATH = "death"
    STONE = "stone"
    TOAD = "toad"
    TINY = "tiny"
    PIGGY = "piggy"
    MUTE = "mute"
    BLIND = "blind"
    POISON = "poison"
    CURSE = "curse"
    FLOAT = "float"
    PARALYZE = "paralyze"
    SLEEP = "sleep"
    CHARM = "charm"
    BERSERK = "berserk"
    PETRIFY = "petrify"
    D = "d"


class Weakness(str, Enum):
    DAMAGE_4X = "damage_4x"
    FLOATING = "floating"
    SPEARS_ARROW = "spears_arrow"
    LIGHT = "light"
    DARK = "dark"
    LIGHTNING = "lightning"
    ICE = "ice"
    FIRE = "fire"


class CreatureType(str, Enum):
    UNDEAD = "undead"
    MAGE = "mage"
    SLIME = "slime"
    GIANT = "giant"
    SPIRIT = "spirit"
    REPTILE = "reptile"
    MACHINE = "machine"
    DRAGON = "dragon"


# Member order is bit-scan order: bit 7 of the first byte first.
_STATUS_BITS: Tuple[Status, ...] = tuple(Status)
_WEAKNESS_BITS: Tuple[Weakness, ...] = tuple(Weakness)
_CREATURE_TYPE_BITS: Tuple[CreatureType, ...] = tuple(CreatureType)

DROP_RATES = (0, 5, 25, 100)

FLAG_ATTACK_STATUSES = 7
FLAG_DEFENSE_STATUSES = 6
FLAG_WEAKNESSES = 5
FLAG_SPELL_POWER = 4
FLAG_CREATURE_TYPES = 3
FLAG_REFLEX_ATTACK_SEQ = 2

# 10-byte header plus every optional block.
MAX_RECORD_SIZE = 20


@dataclass(frozen=True, slots=True)
class Monster:
    index: int
    is_boss: bool
    level: int
    max_hp: int
    physical_attack_index: int
    physical_defense_index: int
    magical_defense_index: int
    speed_index: int
    drop_rate: int
    drop_table_index: Optional[int]  # None when drop_rate is 0
    attack_seq_group: int
    attack_statuses: Optional[Tuple[Status, ...]] = None
    defense_statuses: Optional[Tuple[Status, ...]] = None
    weaknesses: Optional[Tuple[Weakness, ...]] = None
    spell_power: Optional[int] = None
    creature_types: Optional[Tuple[CreatureType, ...]] = None
    reflex_attack_seq: Optional[int] = None


def _decode_bits(data: Sequence[int], members: Sequence[E]) -> Tuple[E, ...]:
    found = []
    for byte_index, byte in enumerate(data):
        for position in range(8):
            if bit_set(byte, 7 - position):
                found.append(members[byte_index * 8 + position])
    return tuple(found)


def decode_statuses(data: Sequence[int]) -> Tuple[Status, ...]:
    """Decode a 3-byte status mask."""
    return _decode_bits(data[:3], _STATUS_BITS)


def decode_weaknesses(byte: int) -> Tuple[Weakness, ...]:
    return _decode_bits((byte,), _WEAKNESS_BITS)


def decode_creature_types(byte: int) -> Tuple[CreatureType, ...]:
    return _decode_bits((byte,), _CREATURE_TYPE_BITS)


def decode_monster(data: bytes, index: int = 0, *, base: int = 0) -> Monster:
    """Decode one monster record from a window starting at the record."""

    ctx = StreamCtx(data=bytes(data), base=base, region=f"monster[{index:#04x}]")

    b0 = ctx.read_u8()
    max_hp = ctx.read_u16le()
    physical_attack_index = ctx.read_u8()
    physical_defense_index = ctx.read_u8()
    magical_defense_index = ctx.read_u8()
    speed_index = ctx.read_u8() & 0x3F
    drop = ctx.read_u8()
    attack_seq_group = ctx.read_u8()
    flags = ctx.read_u8()

    drop_rate = DROP_RATES[drop >> 6]
    drop_table_index = drop & 0x3F if drop_rate else None

    attack_statuses = defense_statuses = None
    weaknesses = creature_types = None
    spell_power = reflex_attack_seq = None

    if bit_set(flags, FLAG_ATTACK_STATUSES):
        attack_statuses = decode_statuses(ctx.read_bytes(3))
    if bit_set(flags, FLAG_DEFENSE_STATUSES):
        defense_statuses = decode_statuses(ctx.read_bytes(3))
    if bit_set(flags, FLAG_WEAKNESSES):
        weaknesses = decode_weaknesses(ctx.read_u8())
    if bit_set(flags, FLAG_SPELL_POWER):
        spell_power = ctx.read_u8()
    if bit_set(flags, FLAG_CREATURE_TYPES):
        creature_types = decode_creature_types(ctx.read_u8())
    if bit_set(flags, FLAG_REFLEX_ATTACK_SEQ):
        reflex_attack_seq = ctx.read_u8()

    return Monster(
        index=index,
        is_boss=bool(b0 & 0x80),
        level=b0 & 0x7F,
        max_hp=max_hp,
        physical_attack_index=physical_attack_index,
        physical_defense_index=physical_defense_index,
        magical_defense_index=magical_defense_index,
        speed_index=speed_index,
        drop_rate=drop_rate,
        drop_table_index=drop_table_index,
        attack_seq_group=attack_seq_group,
        attack_statuses=attack_statuses,
        defense_statuses=defense_statuses,
        weaknesses=weaknesses,
        spell_power=spell_power,
        creature_types=creature_types,
        reflex_attack_seq=reflex_attack_seq,
    )


def _lookup(table: Sequence, index: int, name: str):
    if not 0 <= index < len(table):
        raise IndexOutOfRange(name, index, len(table))
    return table[index]


@dataclass(frozen=True)
class MonsterData:
    """Everything decoded from the monster database.

    `monsters[i]`, `name_table[i]`, `xp_table[i]` and `gp_table[i]` describe
    the same monster.  Monsters refer to the shared stat, speed and drop
    tables by index.
    """

    monsters: Tuple[Monster, ...]
    name_table: Tuple[str, ...]
    gp_table: Tuple[int, ...]
    xp_table: Tuple[int, ...]
    stat_table: Tuple[Stats, ...]
    speed_table: Tuple[Speed, ...]
    drop_tables: Tuple[DropTable, ...]
    ai: Ai

    def name(self, index: int) -> str:
        return _lookup(self.name_table, index, "monster_names").strip()

    def stats(self, index: int) -> Stats:
        return _lookup(self.stat_table, index, "monster_stats")

    def speed(self, index: int) -> Speed:
        return _lookup(self.speed_table, index, "monster_speeds")

    def drop_table(self, monster: Monster) -> Optional[DropTable]:
        if monster.drop_table_index is None:
            return None
        return _lookup(self.drop_tables, monster.drop_table_index, "monster_drop_tables")
