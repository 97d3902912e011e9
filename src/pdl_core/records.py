"""PDL Scan - Decoded records and parse candidates."""
from __future__ import annotations

from dataclasses import dataclass, field

from .byteorder import ByteReader
from .protocol import FALLBACK_TYPE_NAME, TYPE_NAMES


def type_name(type_id: int) -> str:
    """Map a raw type ID to its display name, "Object" when unknown."""
    return TYPE_NAMES.get(type_id, FALLBACK_TYPE_NAME)


@dataclass(frozen=True)
class PDLRecord:
    type_id: int
    x: float
    y: float
    z: float
    offset: int

    @property
    def type_name(self) -> str:
        return type_name(self.type_id)


@dataclass(frozen=True)
class ParseCandidate:
    """One evaluated (record_size, header_offset, byte_order) hypothesis."""

    record_size: int
    header_offset: int
    byte_order: ByteReader | None
    records: tuple[PDLRecord, ...] = field(default=())

    @classmethod
    def empty(cls) -> "ParseCandidate":
        return cls(record_size=0, header_offset=0, byte_order=None)

    @property
    def byte_order_name(self) -> str | None:
        return self.byte_order.name if self.byte_order is not None else None
