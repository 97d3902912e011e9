from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Iterable

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from pdl_core.records import ParseCandidate, PDLRecord, type_name

from .const import FatalError

RECORD_COLUMNS = ["index", "offset", "type_id", "type_name", "x", "y", "z"]
RECORD_DTYPES = {
    "index": "int32",
    "offset": "int64",
    "type_id": "uint32",
    "type_name": "object",
    "x": "float32",
    "y": "float32",
    "z": "float32",
}

RECORD_SCHEMA = pa.schema(
    [
        ("index", pa.int32()),
        ("offset", pa.int64()),
        ("type_id", pa.uint32()),
        ("type_name", pa.string()),
        ("x", pa.float32()),
        ("y", pa.float32()),
        ("z", pa.float32()),
    ]
)


def type_frequencies(records: Iterable[PDLRecord]) -> list[tuple[int, str, int]]:
    """Count records per type ID, ascending by ID."""
    counts = Counter(r.type_id for r in records)
    return [(tid, type_name(tid), counts[tid]) for tid in sorted(counts)]


def format_summary(candidate: ParseCandidate) -> str:
    lines = [
        f"Detected record size: {candidate.record_size} bytes",
        f"Skipped header bytes: {candidate.header_offset}",
        f"Byte order: {candidate.byte_order_name or 'n/a'}",
        f"Parsed {len(candidate.records)} objects:",
        "",
    ]
    for i, r in enumerate(candidate.records):
        lines.append(
            f"{i:3d}. Offset: 0x{r.offset:06x} | Type ID: {r.type_id} ({r.type_name}) "
            f"| Pos: ({r.x:.2f}, {r.y:.2f}, {r.z:.2f})"
        )
    lines.append("")
    lines.append("Type Frequencies:")
    for tid, name, count in type_frequencies(candidate.records):
        lines.append(f"  Type {tid} ({name}): {count} objects")
    return "\n".join(lines) + "\n"


def records_frame(candidate: ParseCandidate) -> pd.DataFrame:
    """Winning records as a DataFrame, in buffer order."""
    rows = [
        {
            "index": i,
            "offset": r.offset,
            "type_id": r.type_id,
            "type_name": r.type_name,
            "x": r.x,
            "y": r.y,
            "z": r.z,
        }
        for i, r in enumerate(candidate.records)
    ]
    df = pd.DataFrame(rows, columns=RECORD_COLUMNS)
    return df.astype(RECORD_DTYPES)


def write_text(candidate: ParseCandidate, path: Path) -> None:
    try:
        Path(path).write_text(format_summary(candidate), encoding="utf-8")
    except OSError as e:
        raise FatalError("E_SINK_UNAVAILABLE", str(e)) from e


def write_delimited(candidate: ParseCandidate, path: Path, sep: str = ",") -> None:
    """Flat delimited text: one header row, one row per record."""
    df = records_frame(candidate)
    try:
        df.to_csv(path, sep=sep, index=False, float_format="%.9g")
    except OSError as e:
        raise FatalError("E_SINK_UNAVAILABLE", str(e)) from e


def write_parquet(candidate: ParseCandidate, path: Path) -> None:
    df = records_frame(candidate)
    if df.empty:
        table = RECORD_SCHEMA.empty_table()
    else:
        table = pa.Table.from_pandas(df, schema=RECORD_SCHEMA, preserve_index=False)
    try:
        pq.write_table(table, path)
    except OSError as e:
        raise FatalError("E_SINK_UNAVAILABLE", str(e)) from e
