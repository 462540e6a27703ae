"""Decoder for the Final Fantasy II (US) monster database."""

from .config import RomMap  # noqa: F401
from .errors import (  # noqa: F401
    BufferTooShort,
    DecodeError,
    IncompleteRegion,
    IndexOutOfRange,
    MalformedInstruction,
    UnknownByte,
)
from .monster import Monster, MonsterData  # noqa: F401
from .rom import load_image, parse_monster_data  # noqa: F401

__all__ = [
    "BufferTooShort",
    "DecodeError",
    "IncompleteRegion",
    "IndexOutOfRange",
    "MalformedInstruction",
    "Monster",
    "MonsterData",
    "RomMap",
    "UnknownByte",
    "load_image",
    "parse_monster_data",
]
