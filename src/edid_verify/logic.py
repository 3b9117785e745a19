from pathlib import Path

import pyarrow as pa

from edid_core.ids import content_hash
from edid_extract.index import INDEX_SCHEMA, STATUS_WRITTEN, read_index
from .const import ERRORS

REQUIRED_COLUMNS = set(INDEX_SCHEMA.names)

def _fail(errors: list) -> dict:
    return {"status":"FAIL","error_count":len(errors),"errors":errors}

def verify_index(index_path: Path) -> dict:
    """Re-check every written EDID file against its index row.

    Layout problems stop the check at once; per-file mismatches are collected
    so one run reports every damaged file.
    """
    errors = []
    index_path = Path(index_path)
    if not index_path.exists():
        errors.append({"code":"E_INDEX_MISSING","message":ERRORS["E_INDEX_MISSING"],"path":str(index_path)})
        return _fail(errors)

    try:
        df = read_index(index_path)
    except (OSError, pa.ArrowException) as e:
        errors.append({"code":"E_INDEX_SCHEMA","message":ERRORS["E_INDEX_SCHEMA"],"detail":str(e)})
        return _fail(errors)

    missing = sorted(REQUIRED_COLUMNS - set(df.columns))
    if missing:
        errors.append({"code":"E_INDEX_SCHEMA","message":ERRORS["E_INDEX_SCHEMA"],"missing":missing})
        return _fail(errors)

    for row in df.itertuples(index=False):
        if row.status != STATUS_WRITTEN:
            continue
        p = Path(row.file)
        if not p.is_file():
            errors.append({"code":"E_FILE_MISSING","message":ERRORS["E_FILE_MISSING"],"path":str(p)})
            continue
        data = p.read_bytes()
        if len(data) != int(row.size):
            errors.append({"code":"E_SIZE_MISMATCH","message":ERRORS["E_SIZE_MISMATCH"],"path":str(p),"expected":int(row.size),"found":len(data)})
            continue
        computed = content_hash(data)
        if computed != row.content_hash:
            errors.append({"code":"E_HASH_MISMATCH","message":ERRORS["E_HASH_MISMATCH"],"path":str(p),"expected":row.content_hash,"computed":computed})

    if errors:
        return _fail(errors)
    return {"status":"PASS","error_count":0,"errors":[]}
