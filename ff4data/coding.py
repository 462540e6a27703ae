"""Binary decoding helpers used by multiple modules."""

import struct
from typing import Sequence, Union

from .errors import BufferTooShort

ByteSource = Union[bytes, bytearray, memoryview, Sequence[int]]


def read_u16le(data: ByteSource, offset: int = 0) -> int:
    """Little-endian 16-bit read: low byte first."""
    if len(data) - offset < 2:
        raise BufferTooShort(f"Need 2 bytes at +{offset}, have {len(data) - offset}")
    buf = data if isinstance(data, (bytes, bytearray, memoryview)) else bytes(data)
    return struct.unpack_from("<H", buf, offset)[0]


def bit_set(byte: int, bit: int) -> bool:
    if not 0 <= bit < 8:
        raise ValueError(f"Bit index out of range: {bit}")
    return (byte >> bit) & 0x1 == 0x1
