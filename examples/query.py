"""Query an exported record table - per-type counts and extents."""
from __future__ import annotations

import sys
from pathlib import Path

import duckdb


def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python query.py <records.parquet> [type_name]")
        print("Example: python query.py out/records.parquet Vehicle")
        sys.exit(1)

    table = Path(sys.argv[1])
    type_filter = sys.argv[2] if len(sys.argv) > 2 else None

    con = duckdb.connect(":memory:")
    con.execute(f"CREATE VIEW records AS SELECT * FROM '{table}'")

    sql = """
    SELECT
        type_id,
        type_name,
        COUNT(*) AS objects,
        MIN(x) AS min_x, MAX(x) AS max_x,
        MIN(y) AS min_y, MAX(y) AS max_y,
        MIN(z) AS min_z, MAX(z) AS max_z
    FROM records
    WHERE ? IS NULL OR type_name = ?
    GROUP BY type_id, type_name
    ORDER BY type_id
    """

    print(f"--- Type Extents: {table} ---\n")

    df = con.execute(sql, [type_filter, type_filter]).fetchdf()
    if df.empty:
        print("No records found.")
    else:
        for _, row in df.iterrows():
            print(f"TYPE: {row['type_id']} ({row['type_name']})")
            print(f"  Objects: {row['objects']}")
            print(f"  X: [{row['min_x']:.2f}, {row['max_x']:.2f}]")
            print(f"  Y: [{row['min_y']:.2f}, {row['max_y']:.2f}]")
            print(f"  Z: [{row['min_z']:.2f}, {row['max_z']:.2f}]")
            print()


if __name__ == "__main__":
    main()
