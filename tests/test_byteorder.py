import struct

import pytest

from pdl_core.byteorder import BIG_ENDIAN, BYTE_ORDERS, LITTLE_ENDIAN, reader_for


def test_u32_byte_order():
    raw = b"\x00\x00\x00\x01"
    assert BIG_ENDIAN.u32(raw) == 1
    assert LITTLE_ENDIAN.u32(raw) == 0x01000000


def test_f32_reinterprets_bits():
    assert BIG_ENDIAN.f32(b"\x3f\x80\x00\x00") == 1.0
    assert LITTLE_ENDIAN.f32(b"\x00\x00\x80\x3f") == 1.0
    assert BIG_ENDIAN.f32(b"\x00\x00\x80\x3f", 0) != 1.0


def test_reads_at_offset():
    raw = b"\xaa\xbb" + b"\x00\x00\x00\x2a"
    assert BIG_ENDIAN.u32(raw, 2) == 42


@pytest.mark.parametrize("reader", BYTE_ORDERS)
def test_record_round_trip_bit_exact(reader):
    fields = (3437124069, 1.5, -2.25, 98765.4375)
    packed = reader.pack_record(*fields)
    assert len(packed) == 16

    decoded = reader.record(packed, 0)
    assert decoded == fields
    # Each float decodes to the identical 4-byte pattern
    prefix = ">" if reader is BIG_ENDIAN else "<"
    for i, value in enumerate(decoded[1:], start=1):
        assert struct.pack(prefix + "f", value) == packed[4 * i:4 * i + 4]


def test_big_endian_enumerated_first():
    assert BYTE_ORDERS == (BIG_ENDIAN, LITTLE_ENDIAN)


def test_reader_for():
    assert reader_for("big") is BIG_ENDIAN
    assert reader_for("little") is LITTLE_ENDIAN
    with pytest.raises(ValueError):
        reader_for("middle")
