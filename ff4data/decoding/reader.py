from __future__ import annotations

from dataclasses import dataclass
import struct
from typing import Optional

from ..constants import Region
from ..errors import BufferTooShort


@dataclass
class StreamCtx:
    """
    Sequential reader over one region of the image.

    `base` is the absolute image address of `data[0]` so failures can be
    reported against the image rather than the slice.
    """

    data: bytes
    base: int = 0
    region: Optional[str] = None
    idx: int = 0

    @classmethod
    def for_region(cls, image: bytes, region: Region) -> "StreamCtx":
        return cls(
            data=bytes(image[region.start : region.stop]),
            base=region.start,
            region=region.name,
        )

    def _require(self, count: int) -> None:
        if self.idx + count > len(self.data):
            raise BufferTooShort(
                f"Insufficient bytes: need {count}, "
                f"have {len(self.data) - self.idx} remaining",
                region=self.region,
                offset=self.offset,
            )

    @property
    def offset(self) -> int:
        return self.base + self.idx

    def peek_u8(self) -> int:
        self._require(1)
        return self.data[self.idx]

    def read_u8(self) -> int:
        self._require(1)
        value = self.data[self.idx]
        self.idx += 1
        return value

    def read_u16le(self) -> int:
        self._require(2)
        (value,) = struct.unpack_from("<H", self.data, self.idx)
        self.idx += 2
        return value

    def read_bytes(self, count: int) -> bytes:
        self._require(count)
        chunk = self.data[self.idx : self.idx + count]
        self.idx += count
        return chunk

    def bytes_consumed(self) -> int:
        return self.idx

    def remaining(self) -> int:
        return len(self.data) - self.idx

    def at_end(self) -> bool:
        return self.idx >= len(self.data)
