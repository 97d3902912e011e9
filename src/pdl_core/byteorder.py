"""PDL Core - Byte-order specific field readers."""
from __future__ import annotations

import struct

from .protocol import RECORD_HEAD_FMT


class ByteReader:
    """Decode fixed-width fields in one byte order.

    Callers guarantee the buffer holds enough bytes at ``pos``.
    """

    def __init__(self, name: str, prefix: str):
        self.name = name
        self._u32 = struct.Struct(prefix + "I")
        self._f32 = struct.Struct(prefix + "f")
        self._head = struct.Struct(prefix + RECORD_HEAD_FMT)

    def __repr__(self) -> str:
        return f"ByteReader({self.name!r})"

    def u32(self, buf: bytes, pos: int = 0) -> int:
        return self._u32.unpack_from(buf, pos)[0]

    def f32(self, buf: bytes, pos: int = 0) -> float:
        """Reinterpret 4 bytes as an IEEE-754 single, bit for bit."""
        return self._f32.unpack_from(buf, pos)[0]

    def record(self, buf: bytes, pos: int) -> tuple[int, float, float, float]:
        """Read the (type_id, x, y, z) head of a record."""
        return self._head.unpack_from(buf, pos)

    def pack_record(self, type_id: int, x: float, y: float, z: float) -> bytes:
        return self._head.pack(type_id, x, y, z)


BIG_ENDIAN = ByteReader("big", ">")
LITTLE_ENDIAN = ByteReader("little", "<")

# Big-endian is tried first
BYTE_ORDERS = (BIG_ENDIAN, LITTLE_ENDIAN)


def reader_for(name: str) -> ByteReader:
    """Resolve a byte order by name ("big" or "little")."""
    for reader in BYTE_ORDERS:
        if reader.name == name:
            return reader
    raise ValueError(f"Unknown byte order: {name!r}")
