"""Record layout detection.

Every (record_size, header_offset, byte_order) hypothesis is scanned greedily
from its header offset until the buffer runs out or a record decodes to an
implausible coordinate. The longest run wins; ties keep the hypothesis that
was enumerated first (sizes in RECORD_SIZES order, big-endian first).
"""
from __future__ import annotations

from pdl_core.byteorder import BYTE_ORDERS, ByteReader
from pdl_core.protocol import COORD_LIMIT, HEADER_OFFSET_LIMIT, HEADER_OFFSET_STEP, RECORD_SIZES
from pdl_core.records import ParseCandidate, PDLRecord

from .crypto import decrypt_buffer


def is_plausible(value: float, limit: float = COORD_LIMIT) -> bool:
    # NaN compares False and is rejected
    return abs(value) < limit


def record_is_plausible(x: float, y: float, z: float) -> bool:
    return is_plausible(x) and is_plausible(y) and is_plausible(z)


def scan_run(buf: bytes, reader: ByteReader, record_size: int, header_offset: int) -> list[PDLRecord]:
    """Consume consecutive plausible records starting at header_offset."""
    records: list[PDLRecord] = []
    pos = header_offset
    end = len(buf)

    while pos + record_size <= end:
        type_id, x, y, z = reader.record(buf, pos)
        if not record_is_plausible(x, y, z):
            # First bad record ends the run, no resync
            break
        records.append(PDLRecord(type_id, x, y, z, pos))
        pos += record_size

    return records


def try_record_size(buf: bytes, record_size: int, reader: ByteReader) -> ParseCandidate:
    """Pick the header offset that yields the longest run for one size and order."""
    best: list[PDLRecord] = []
    best_header = 0

    for header_offset in range(0, HEADER_OFFSET_LIMIT, HEADER_OFFSET_STEP):
        records = scan_run(buf, reader, record_size, header_offset)
        if len(records) > len(best):
            best = records
            best_header = header_offset

    return ParseCandidate(record_size, best_header, reader, tuple(best))


def detect_layout(
    buf: bytes,
    record_sizes: tuple[int, ...] = RECORD_SIZES,
    orders: tuple[ByteReader, ...] = BYTE_ORDERS,
) -> ParseCandidate:
    """Return the best candidate across all sizes and orders.

    A buffer with no plausible records yields ParseCandidate.empty().
    """
    best = ParseCandidate.empty()

    for record_size in record_sizes:
        for reader in orders:
            candidate = try_record_size(buf, record_size, reader)
            if len(candidate.records) > len(best.records):
                best = candidate

    return best


def recover(
    buf: bytes,
    key: str | bytes | None = None,
    orders: tuple[ByteReader, ...] = BYTE_ORDERS,
) -> ParseCandidate:
    """Decrypt (when a key is given) and detect the record layout."""
    if key is not None:
        buf = decrypt_buffer(buf, key)
    return detect_layout(buf, orders=orders)
