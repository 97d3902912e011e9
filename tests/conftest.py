import struct

import pytest

from pdl_core.byteorder import ByteReader, LITTLE_ENDIAN

VEHICLE = 3437124069
ROAD = 1462988517


def tagged(value: float) -> float:
    # Low mantissa byte 0x5A: implausible when read in the other byte order
    raw = bytearray(struct.pack("<f", value))
    raw[0] = 0x5A
    return struct.unpack("<f", bytes(raw))[0]


@pytest.fixture
def make_blob():
    """Build a blob: 0xFF header, records, 0xFF padding and trailer."""

    def build(
        coords: list[tuple[float, float, float]],
        record_size: int = 16,
        header: int = 0,
        reader: ByteReader = LITTLE_ENDIAN,
        trailing: int = 0,
        tag: bool = True,
    ) -> bytes:
        out = bytearray(b"\xff" * header)
        for i, (x, y, z) in enumerate(coords):
            if tag:
                x, y, z = tagged(x), tagged(y), tagged(z)
            type_id = VEHICLE if i % 2 == 0 else ROAD
            out += reader.pack_record(type_id, x, y, z)
            out += b"\xff" * (record_size - 16)
        out += b"\xff" * trailing
        return bytes(out)

    return build


@pytest.fixture
def points():
    return [(10.0 * i + 1.5, -20.0 * i - 2.5, 3.0 * i + 100.25) for i in range(8)]
