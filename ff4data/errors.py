"""Exceptions raised while decoding an image."""

from __future__ import annotations

from typing import Optional


class DecodeError(Exception):
    """Base class for every decoding failure.

    `region` and `offset` locate the fault; `offset` is an absolute image
    address when the decoder knows it.
    """

    def __init__(
        self,
        message: str,
        *,
        region: Optional[str] = None,
        offset: Optional[int] = None,
    ) -> None:
        self.message = message
        self.region = region
        self.offset = offset
        super().__init__(self._format())

    def _format(self) -> str:
        where = []
        if self.region is not None:
            where.append(self.region)
        if self.offset is not None:
            where.append(f"{self.offset:#07x}")
        if not where:
            return self.message
        return f"{self.message} ({' @ '.join(where)})"


class UnknownByte(DecodeError):
    def __init__(
        self, byte: int, *, region: Optional[str] = None, offset: Optional[int] = None
    ) -> None:
        self.byte = byte
        super().__init__(f"Unknown text byte {byte:#04x}", region=region, offset=offset)


class MalformedInstruction(DecodeError):
    def __init__(
        self,
        tag: int,
        argument: Optional[int] = None,
        *,
        region: Optional[str] = None,
        offset: Optional[int] = None,
    ) -> None:
        self.tag = tag
        self.argument = argument
        if argument is None:
            message = f"Malformed instruction {tag:#04x}"
        else:
            message = f"Malformed instruction {tag:#04x} {argument:#04x}"
        super().__init__(message, region=region, offset=offset)


class IncompleteRegion(DecodeError):
    pass


class BufferTooShort(IncompleteRegion):
    """Raised when attempting to read past the end of the buffer."""


class IndexOutOfRange(DecodeError):
    def __init__(self, table: str, index: int, size: int) -> None:
        self.table = table
        self.index = index
        self.size = size
        super().__init__(f"Index {index:#x} out of range for {table} ({size} rows)")


__all__ = [
    "BufferTooShort",
    "DecodeError",
    "IncompleteRegion",
    "IndexOutOfRange",
    "MalformedInstruction",
    "UnknownByte",
]
