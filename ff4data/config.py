"""Region map and runtime settings for ff4data."""

from __future__ import annotations

from dataclasses import dataclass, field
import json
import os
from pathlib import Path
from typing import Dict, Optional, Union

from .constants import DEFAULT_REGIONS, MONSTER_INFO_OFFSET, Region

REQUIRED_REGIONS = tuple(region.name for region in DEFAULT_REGIONS)


def _hex(value: Optional[int]) -> Optional[str]:
    return None if value is None else f"0x{value:05X}"


def _int(value: Union[str, int, None]) -> Optional[int]:
    if value is None:
        return None
    return int(value, 16) if isinstance(value, str) else value


def region_to_dict(region: Region) -> dict:
    return {
        "name": region.name,
        "start": _hex(region.start),
        "end": _hex(region.end),
        "count": region.count,
        "stride": region.stride,
        "inclusive": region.inclusive,
    }


def region_from_dict(data: dict) -> Region:
    return Region(
        name=data["name"],
        start=_int(data["start"]),
        end=_int(data.get("end")),
        count=data.get("count"),
        stride=data.get("stride", 1),
        inclusive=data.get("inclusive", False),
    )


@dataclass
class RomMap:
    """Versioned table of the image regions the decoders read."""

    name: str = "Final Fantasy II (US)"
    version: str = "1.1"
    monster_info_offset: int = MONSTER_INFO_OFFSET
    regions: Dict[str, Region] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.regions:
            self.regions = {region.name: region for region in DEFAULT_REGIONS}

    @classmethod
    def default(cls) -> "RomMap":
        return cls()

    def __getitem__(self, name: str) -> Region:
        try:
            return self.regions[name]
        except KeyError as exc:
            raise KeyError(f"No region named {name!r} in map {self.name}") from exc

    @property
    def min_image_size(self) -> int:
        return max(region.stop for region in self.regions.values())

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "version": self.version,
            "monster_info_offset": _hex(self.monster_info_offset),
            "regions": [region_to_dict(r) for r in self.regions.values()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "RomMap":
        regions = {}
        for entry in data["regions"]:
            region = region_from_dict(entry)
            regions[region.name] = region
        missing = [name for name in REQUIRED_REGIONS if name not in regions]
        if missing:
            raise KeyError(f"Region map is missing: {', '.join(missing)}")
        return cls(
            name=data.get("name", "Final Fantasy II (US)"),
            version=data.get("version", "1.1"),
            monster_info_offset=_int(
                data.get("monster_info_offset", MONSTER_INFO_OFFSET)
            ),
            regions=regions,
        )

    def save(self, path: Union[str, Path]) -> None:
        """Save the map to a JSON file."""
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "RomMap":
        """Load a map from a JSON file."""
        with open(path, "r") as f:
            return cls.from_dict(json.load(f))


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().casefold()
    return normalized not in {"0", "false", "off", ""}


@dataclass(frozen=True)
class Settings:
    rom_path: Path
    out_dir: Path
    verbose: bool


def load_settings() -> Settings:
    return Settings(
        rom_path=Path(os.getenv("FF4_ROM") or "ff2us.smc"),
        out_dir=Path(os.getenv("FF4_OUT_DIR") or "out/monster"),
        verbose=_env_flag("FF4_VERBOSE", default=False),
    )


__all__ = ["RomMap", "Settings", "load_settings"]
