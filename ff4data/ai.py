"""Monster behaviour tables.

Each monster names an attack group.  A group is a list of entries pairing a
condition set with an action script; a condition set is a list of indexes into
the flat condition table; a condition is an opaque operator plus three
arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, TYPE_CHECKING

from .constants import MAX_CONDITION_SETS, MAX_GROUPS
from .decoding.bind import Script
from .decoding.decode_map import decode_scripts
from .decoding.lists import decode_fixed_rows, decode_sentinel_lists
from .decoding.reader import StreamCtx

if TYPE_CHECKING:
    from .config import RomMap


@dataclass(frozen=True, slots=True)
class Condition:
    op: int
    arg0: int
    arg1: int
    arg2: int


@dataclass(frozen=True, slots=True)
class ConditionSet:
    condition_indexes: Tuple[int, ...]


@dataclass(frozen=True, slots=True)
class GroupEntry:
    condition_set_index: int
    action_index: int


@dataclass(frozen=True, slots=True)
class Group:
    entries: Tuple[GroupEntry, ...]


@dataclass(frozen=True)
class Ai:
    conditions: Tuple[Condition, ...]
    condition_sets: Tuple[ConditionSet, ...]
    groups: Tuple[Group, ...]
    earth_scripts: Tuple[Script, ...] = ()
    moon_scripts: Tuple[Script, ...] = ()


def decode_condition(ctx: StreamCtx) -> Condition:
    op, arg0, arg1, arg2 = ctx.read_bytes(4)
    return Condition(op, arg0, arg1, arg2)


def decode_group_entry(ctx: StreamCtx) -> GroupEntry:
    condition_set_index = ctx.read_u8()
    action_index = ctx.read_u8()
    return GroupEntry(condition_set_index, action_index)


def decode_conditions(ctx: StreamCtx) -> Tuple[Condition, ...]:
    return decode_fixed_rows(ctx, decode_condition, min_count=1)


def decode_condition_sets(ctx: StreamCtx) -> Tuple[ConditionSet, ...]:
    # Bytes after the last set are padding.
    rows = decode_sentinel_lists(
        ctx, StreamCtx.read_u8, max_count=MAX_CONDITION_SETS, exhaust=False
    )
    return tuple(ConditionSet(indexes) for indexes in rows)


def decode_groups(ctx: StreamCtx) -> Tuple[Group, ...]:
    rows = decode_sentinel_lists(
        ctx, decode_group_entry, max_count=MAX_GROUPS, exhaust=True
    )
    return tuple(Group(entries) for entries in rows)


def parse_ai(image: bytes, rom_map: "RomMap") -> Ai:
    return Ai(
        conditions=decode_conditions(
            StreamCtx.for_region(image, rom_map["ai_conditions"])
        ),
        condition_sets=decode_condition_sets(
            StreamCtx.for_region(image, rom_map["ai_condition_sets"])
        ),
        groups=decode_groups(StreamCtx.for_region(image, rom_map["attack_groups"])),
        earth_scripts=decode_scripts(
            StreamCtx.for_region(image, rom_map["ai_earth_scripts"])
        ),
        moon_scripts=decode_scripts(
            StreamCtx.for_region(image, rom_map["ai_moon_scripts"])
        ),
    )
