"""Generate a synthetic PDL map blob with a known layout."""
import random
import struct
import sys
from pathlib import Path

from pdl_core.byteorder import reader_for
from pdl_core.protocol import TYPE_NAMES
from pdl_scan.crypto import encrypt_buffer

# --- CONFIGURATION ---
HEADER_FILL = b"\xff"   # NaN pattern, never a plausible coordinate
PAD_FILL = b"\xff"
POISON_VALUE = 250000.0
KNOWN_TYPES = sorted(TYPE_NAMES)


def tag_low_byte(value: float) -> float:
    """Force the float32 mantissa LSB to 0x5A.

    Read back in the opposite byte order the value lands near 2**53, so a
    generated blob can never tie between big and little endian.
    """
    raw = bytearray(struct.pack("<f", value))
    raw[0] = 0x5A
    return struct.unpack("<f", bytes(raw))[0]


def build_blob(
    count: int,
    record_size: int = 24,
    header: int = 8,
    byte_order: str = "little",
    poison_at: int | None = None,
    trailing: int = 0,
    seed: int = 1,
) -> bytes:
    rng = random.Random(seed)
    reader = reader_for(byte_order)
    out = bytearray(HEADER_FILL * header)

    for i in range(count):
        type_id = KNOWN_TYPES[i % len(KNOWN_TYPES)]
        coords = [tag_low_byte(rng.uniform(-5000.0, 5000.0)) for _ in range(3)]
        if i == poison_at:
            coords[0] = POISON_VALUE
        out += reader.pack_record(type_id, *coords)
        out += PAD_FILL * (record_size - 16)

    out += PAD_FILL * trailing
    return bytes(out)


def write_sample(out_path, key: str | None = None, **kwargs) -> Path:
    blob = build_blob(**kwargs)
    if key is not None:
        blob = encrypt_buffer(blob, key)
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(blob)
    print(f"GENERATED: {out} ({len(blob)} bytes)")
    return out


if __name__ == "__main__":
    # Usage:
    #   python tools/make_sample.py OUT [--count N] [--record-size S] [--header H]
    #       [--byte-order big|little] [--poison-at I] [--trailing T] [--key KEY]

    args = [a for a in sys.argv[1:] if a]

    def pop_option(arg_list: list[str], flag: str) -> tuple[str | None, list[str]]:
        """Remove `flag VALUE` from an argv-style list."""
        if flag not in arg_list:
            return None, arg_list
        i = arg_list.index(flag)
        if i + 1 >= len(arg_list):
            raise SystemExit(f"{flag} requires a value")
        return arg_list[i + 1], arg_list[:i] + arg_list[i + 2:]

    kwargs = {}
    for flag, name, conv in [
        ("--count", "count", int),
        ("--record-size", "record_size", int),
        ("--header", "header", int),
        ("--byte-order", "byte_order", str),
        ("--poison-at", "poison_at", int),
        ("--trailing", "trailing", int),
    ]:
        value, args = pop_option(args, flag)
        if value is not None:
            kwargs[name] = conv(value)
    key, args = pop_option(args, "--key")
    kwargs.setdefault("count", 12)

    if not args:
        raise SystemExit("Usage: make_sample.py OUT [options]")
    write_sample(args[0], key=key, **kwargs)
