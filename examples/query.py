"""Query an EDID index - list extracted EDIDs, optionally filtered by name."""
from __future__ import annotations

import sys
from pathlib import Path

import duckdb


def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python query.py <index.parquet> [name_substring]")
        print("Example: python query.py edids.parquet ViewSonic")
        sys.exit(1)

    index = Path(sys.argv[1])
    pattern = sys.argv[2] if len(sys.argv) > 2 else ""

    con = duckdb.connect(":memory:")
    con.execute(f"CREATE VIEW edids AS SELECT * FROM '{index}'")

    sql = """
    SELECT
        ordinal,
        name,
        size,
        source_offset,
        file,
        status
    FROM edids
    WHERE name LIKE '%' || ? || '%'
    ORDER BY ordinal
    """

    print(f"--- EDID index: {index} ---\n")

    df = con.execute(sql, [pattern]).fetchdf()
    if df.empty:
        print("No matching EDIDs found.")
    else:
        for _, row in df.iterrows():
            print(f"EDID #{row['ordinal']}: {row['name']}")
            print(f"  Size: {row['size']} bytes (source offset {row['source_offset']})")
            print(f"  File: {row['file']} [{row['status']}]")
            print()


if __name__ == "__main__":
    main()
