"""Shared fixtures: a synthetic image laid out like the real one."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional

import pytest

from ff4data.config import RomMap
from ff4data.constants import MONSTER_ENTRIES, SENTINEL

# Synthetic records sit RECORD_STRIDE apart from the record base, clear of
# every mapped region.
RECORD_STRIDE = 0x14


class ImageBuilder:
    """Builds a minimal image every region of which decodes cleanly."""

    def __init__(self, rom_map: Optional[RomMap] = None) -> None:
        self.rom_map = rom_map or RomMap.default()
        self.image = bytearray(self.rom_map.min_image_size)
        self._groups = b""
        self._condition_sets = b""
        self._earth_scripts = b""
        self._moon_scripts = b""

        names = self.rom_map["monster_names"]
        self.image[names.start : names.stop] = bytes([0xFF]) * names.size
        offsets = self.rom_map["monster_offsets"]
        for i in range(MONSTER_ENTRIES):
            addr = offsets.start + i * 2
            self.image[addr : addr + 2] = (i * RECORD_STRIDE).to_bytes(2, "little")

    def record_address(self, index: int) -> int:
        return self.rom_map.monster_info_offset + index * RECORD_STRIDE

    def set_record(self, index: int, record: Iterable[int]) -> "ImageBuilder":
        data = bytes(record)
        assert len(data) <= RECORD_STRIDE
        addr = self.record_address(index)
        self.image[addr : addr + len(data)] = data
        return self

    def set_name(self, index: int, encoded: Iterable[int]) -> "ImageBuilder":
        data = bytes(encoded)
        names = self.rom_map["monster_names"]
        addr = names.start + index * names.stride
        self.image[addr : addr + len(data)] = data
        return self

    def set_u16(self, region_name: str, index: int, value: int) -> "ImageBuilder":
        region = self.rom_map[region_name]
        addr = region.start + index * region.stride
        self.image[addr : addr + 2] = value.to_bytes(2, "little")
        return self

    def set_row(self, region_name: str, index: int, row: Iterable[int]) -> "ImageBuilder":
        data = bytes(row)
        region = self.rom_map[region_name]
        addr = region.start + index * region.stride
        self.image[addr : addr + len(data)] = data
        return self

    def set_groups(self, payload: bytes) -> "ImageBuilder":
        self._groups = payload
        return self

    def set_condition_sets(self, payload: bytes) -> "ImageBuilder":
        self._condition_sets = payload
        return self

    def set_earth_scripts(self, payload: bytes) -> "ImageBuilder":
        self._earth_scripts = payload
        return self

    def set_moon_scripts(self, payload: bytes) -> "ImageBuilder":
        self._moon_scripts = payload
        return self

    def _write_lists(self, region_name: str, payload: bytes, item: bytes) -> None:
        """Write `payload`, then pad with lists of `item` to fill the region."""

        region = self.rom_map[region_name]
        rest = region.size - len(payload)
        assert rest >= 0
        filler = b""
        if rest:
            if (rest - 1) % len(item):
                filler += bytes([SENTINEL])
                rest -= 1
            filler += item * ((rest - 1) // len(item)) + bytes([SENTINEL])
        self.image[region.start : region.stop] = payload + filler

    def build(self) -> bytes:
        self._write_lists("attack_groups", self._groups, b"\x00\x00")
        self._write_lists("ai_earth_scripts", self._earth_scripts, b"\xfe")
        self._write_lists("ai_moon_scripts", self._moon_scripts, b"\xfe")
        sets = self.rom_map["ai_condition_sets"]
        padded = self._condition_sets.ljust(sets.size, bytes([SENTINEL]))
        self.image[sets.start : sets.stop] = padded
        return bytes(self.image)


@pytest.fixture
def image_builder() -> ImageBuilder:
    return ImageBuilder()


@pytest.fixture
def rom_image() -> bytes:
    """The real image, when FF4_ROM points at one."""

    raw = os.getenv("FF4_ROM")
    if not raw or not Path(raw).is_file():
        pytest.skip("Real image not available (set FF4_ROM=/path/to/ff2us.smc)")
    return Path(raw).read_bytes()
