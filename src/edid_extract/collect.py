"""Top-level extraction: load, classify, collect, write."""
from __future__ import annotations

from pathlib import Path
from warnings import warn

from edid_core.errors import EdidIOError, EdidParseError
from edid_core.ids import content_hash

from .classify import Dialect, classify
from .index import write_index
from .log_dialect import iter_log_edids
from .output import resolve_base_filename, write_edid_files
from .records import EdidRecord, ExtractionResult
from .text_dialect import read_text_edid


def load_input(path: Path) -> bytes:
    """Read the whole input file; missing, unreadable or empty input is fatal."""
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise EdidIOError(f'Unable to open file "{path}" ({e.strerror or e}).') from e
    if not data:
        raise EdidIOError(f'File "{path}" is empty.')
    return data


def collect_records(data: bytes, dialect: Dialect) -> list[EdidRecord]:
    """Decode every EDID in ``data``, in the order they appear."""
    if dialect is Dialect.LOG_FORMAT:
        return list(iter_log_edids(data))
    if dialect is Dialect.TEXT_FORMAT:
        try:
            return [read_text_edid(data)]
        except EdidParseError as e:
            warn(f"Unable to read EDID from text dump: {e}")
            return []
    return []


def extract_edids(
    input_path: Path,
    output_file: str | None = None,
    index_path: Path | None = None,
) -> ExtractionResult:
    """Extract all EDIDs from ``input_path`` into binary files.

    ``output_file`` overrides the base output filename. When ``index_path`` is
    given a parquet index of the written files is stored there as well.
    """
    input_path = Path(input_path)
    data = load_input(input_path)

    dialect = classify(data)
    result = ExtractionResult(
        source=input_path,
        source_hash=content_hash(data),
        dialect=dialect,
        records=collect_records(data, dialect),
    )
    # Release the input before anything is written.
    del data

    n = len(result.records)
    print("")
    print(f'Found {n} EDID{"" if n == 1 else "s"} in "{input_path}".')

    if result.records:
        base = resolve_base_filename(output_file)
        result.writes = write_edid_files(result.records, base)

    if index_path is not None:
        written = write_index(result, Path(index_path))
        if written is not None:
            print(f'  Wrote EDID index to "{written}".')

    print("")
    return result
