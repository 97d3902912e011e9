"""PDL Scan - Recover point records from an unknown-layout map blob."""
from __future__ import annotations

from pathlib import Path

import click

from pdl_core.byteorder import BYTE_ORDERS, reader_for
from pdl_core.records import ParseCandidate
from pdl_scan.const import FatalError
from pdl_scan.crypto import pad_key
from pdl_scan.report import format_summary, write_delimited, write_parquet, write_text
from pdl_scan.search import recover

# Environment variable consulted when --key is not given
KEY_ENVVAR = "PDL_KEY"


def load_buffer(path: Path) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise FatalError("E_SOURCE_UNAVAILABLE", str(e)) from e


def scan_file(path: Path, key: str | None = None, byte_order: str = "auto") -> ParseCandidate:
    """Load a blob, optionally decrypt it, and detect its record layout."""
    print(f"Scanning: {path}")

    # 1. Read the blob once
    buf = load_buffer(path)

    # 2. Search (decryption happens once, before any parsing)
    orders = BYTE_ORDERS if byte_order == "auto" else (reader_for(byte_order),)
    if key is not None:
        # Reject a bad key before announcing decryption
        pad_key(key)
        print(f"  Decrypting {len(buf)} bytes (AES-128-ECB)")
    return recover(buf, key=key, orders=orders)


@click.command()
@click.argument("blob", type=click.Path(path_type=Path))
@click.option("--key", envvar=KEY_ENVVAR, default=None, help="Decrypt the blob with this key (max 16 bytes)")
@click.option(
    "--byte-order",
    type=click.Choice(["auto", "big", "little"]),
    default="auto",
    show_default=True,
    help="Restrict the search to one byte order",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "csv", "tsv", "parquet"]),
    default="text",
    show_default=True,
)
@click.option("--out", type=click.Path(path_type=Path), default=None, help="Write results here instead of stdout")
def main(blob: Path, key: str | None, byte_order: str, fmt: str, out: Path | None) -> None:
    """Detect the record layout of BLOB and list the recovered objects."""
    if fmt != "text" and out is None:
        raise click.UsageError(f"--format {fmt} requires --out")

    try:
        candidate = scan_file(blob, key=key, byte_order=byte_order)

        # 3. Emit only after the search completed
        if fmt == "text":
            if out is None:
                print(format_summary(candidate), end="")
            else:
                write_text(candidate, out)
        elif fmt == "parquet":
            write_parquet(candidate, out)
        else:
            write_delimited(candidate, out, sep="," if fmt == "csv" else "\t")
    except Exception as e:
        # Fail closed with a single-line reason.
        print(f"FATAL: {e}")
        raise SystemExit(1)

    if out is not None:
        print(f"PASS: {len(candidate.records)} records written to {out}")
        print(f"  Record size: {candidate.record_size}")
        print(f"  Header: {candidate.header_offset}")
        print(f"  Byte order: {candidate.byte_order_name or 'n/a'}")


if __name__ == "__main__":
    main()
