import struct
import sys
from pathlib import Path

POISON = 1.0e6


def main():
    if len(sys.argv) != 6:
        print("Usage: poison_record.py <file> <header> <record_size> <index> <big|little>")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    header, record_size, index = (int(a) for a in sys.argv[2:5])
    fmt = ">f" if sys.argv[5] == "big" else "<f"

    b = bytearray(p.read_bytes())
    # X coordinate sits 4 bytes into the record, after the type ID.
    idx = header + index * record_size + 4
    if idx + 4 > len(b):
        print("Record index past end of file.")
        raise SystemExit(2)

    b[idx:idx + 4] = struct.pack(fmt, POISON)
    p.write_bytes(bytes(b))
    print(f"Poisoned record {index} (x = {POISON}) at offset {idx} in {p}")

if __name__ == "__main__":
    main()
