"""PDL Core - Record layout, byte readers and type names."""
from .byteorder import BIG_ENDIAN, BYTE_ORDERS, LITTLE_ENDIAN, ByteReader, reader_for
from .records import ParseCandidate, PDLRecord, type_name

__all__ = [
    "BIG_ENDIAN",
    "BYTE_ORDERS",
    "LITTLE_ENDIAN",
    "ByteReader",
    "reader_for",
    "ParseCandidate",
    "PDLRecord",
    "type_name",
]
