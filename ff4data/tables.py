"""Fixed-stride lookup tables shared by every monster record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence, Tuple, TypeVar

from .coding import ByteSource, read_u16le
from .constants import Region
from .errors import BufferTooShort
from . import text

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Stats:
    base: int
    mult: int
    rate: int


@dataclass(frozen=True, slots=True)
class Speed:
    min: int
    max: int


@dataclass(frozen=True, slots=True)
class DropTable:
    common: int
    uncommon: int
    rare: int
    very_rare: int


def decode_stats(row: Sequence[int]) -> Stats:
    # Stored as mult, rate, base.
    return Stats(mult=row[0], rate=row[1], base=row[2])


def decode_speed(row: Sequence[int]) -> Speed:
    return Speed(min=row[0], max=row[1])


def decode_drop_table(row: Sequence[int]) -> DropTable:
    return DropTable(common=row[0], uncommon=row[1], rare=row[2], very_rare=row[3])


def load_u16_table(data: ByteSource, entries: int) -> Tuple[int, ...]:
    return tuple(read_u16le(data, i * 2) for i in range(entries))


def load_rows(
    image: ByteSource, region: Region, decode_row: Callable[[bytes], T]
) -> Tuple[T, ...]:
    """Apply `decode_row` to each `stride`-byte window of `region`."""

    rows = []
    for addr in region.addresses():
        row = bytes(image[addr : addr + region.stride])
        if len(row) < region.stride:
            raise BufferTooShort(
                f"Row needs {region.stride} bytes, have {len(row)}",
                region=region.name,
                offset=addr,
            )
        rows.append(decode_row(row))
    return tuple(rows)


def load_region_u16_table(image: ByteSource, region: Region) -> Tuple[int, ...]:
    data = bytes(image[region.start : region.stop])
    if len(data) < region.size:
        raise BufferTooShort(
            f"Table needs {region.size} bytes, have {len(data)}",
            region=region.name,
            offset=region.start + len(data),
        )
    return load_u16_table(data, region.entries)


def load_name_table(image: ByteSource, region: Region) -> Tuple[str, ...]:
    return tuple(
        text.decode(image[addr : addr + region.stride], region=region.name, base=addr)
        for addr in region.addresses()
    )


def load_stat_table(image: ByteSource, region: Region) -> Tuple[Stats, ...]:
    return load_rows(image, region, decode_stats)


def load_speed_table(image: ByteSource, region: Region) -> Tuple[Speed, ...]:
    return load_rows(image, region, decode_speed)


def load_drop_tables(image: ByteSource, region: Region) -> Tuple[DropTable, ...]:
    return load_rows(image, region, decode_drop_table)
