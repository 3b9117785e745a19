"""Parquet index describing the EDID files written by one extraction."""
from __future__ import annotations

import os
from pathlib import Path

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from edid_core.ids import content_hash, record_id

from .records import ExtractionResult

INDEX_SCHEMA = pa.schema(
    [
        ("ordinal", pa.int32()),
        ("record_id", pa.string()),
        ("name", pa.string()),
        ("size", pa.int32()),
        ("source_offset", pa.int64()),
        ("file", pa.string()),
        ("status", pa.string()),
        ("content_hash", pa.string()),
        ("source_hash", pa.string()),
    ]
)

STATUS_WRITTEN = "WRITTEN"
STATUS_FAILED = "FAILED"


def index_rows(result: ExtractionResult) -> list[dict]:
    rows: list[dict] = []
    for ordinal, write in enumerate(result.writes):
        rec = write.record
        h = content_hash(rec.data)
        rows.append(
            {
                "ordinal": ordinal,
                "record_id": record_id(result.source_hash, rec.offset, rec.size, h),
                "name": rec.name,
                "size": int(rec.size),
                "source_offset": int(rec.offset),
                "file": os.path.abspath(write.path),
                "status": STATUS_WRITTEN if write.ok else STATUS_FAILED,
                "content_hash": h,
                "source_hash": result.source_hash,
            }
        )
    return rows


def write_index(result: ExtractionResult, out_path: Path) -> Path | None:
    """Write the index to ``out_path``; nothing is written when no EDID was found."""
    df = pd.DataFrame(index_rows(result))
    if df.empty:
        return None

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    table = pa.Table.from_pandas(df, schema=INDEX_SCHEMA, preserve_index=False)
    pq.write_table(table, out_path)
    return out_path


def read_index(path: Path) -> pd.DataFrame:
    return pq.read_table(path).to_pandas()
