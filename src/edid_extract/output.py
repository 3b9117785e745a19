"""Writing decoded EDIDs to disk."""
from __future__ import annotations

import os
import pwd
from functools import partial
from pathlib import Path
from typing import Callable, Iterable
from warnings import warn

from edid_core.errors import EdidError
from edid_core.protocol import DEFAULT_OUTPUT_NAME, OUTPUT_FILE_MODE

from .records import EdidRecord, WriteResult

_DIR_ACCESS = os.R_OK | os.W_OK | os.X_OK

Candidate = Callable[[], "str | None"]


def _accessible(directory: str) -> bool:
    return os.access(directory, _DIR_ACCESS)


def _user_option(option: str | None) -> str | None:
    if option is None:
        return None
    if not option:
        raise EdidError("Output filename must not be empty.")
    return os.path.expanduser(option)


def _current_directory() -> str | None:
    if _accessible("."):
        return os.path.join(".", DEFAULT_OUTPUT_NAME)
    return None


def _home_directory() -> str | None:
    home = os.environ.get("HOME")
    if not home:
        try:
            home = pwd.getpwuid(os.getuid()).pw_dir
        except KeyError:
            return None
    if home and _accessible(home):
        return os.path.join(home, DEFAULT_OUTPUT_NAME)
    return None


def _tmp_directory() -> str:
    return os.path.join("/tmp", DEFAULT_OUTPUT_NAME)


def resolve_base_filename(option: str | None = None) -> str:
    """Pick the base output filename; the first candidate that applies wins."""
    candidates: tuple[Candidate, ...] = (
        partial(_user_option, option),
        _current_directory,
        _home_directory,
    )
    for candidate in candidates:
        filename = candidate()
        if filename:
            return filename
    return _tmp_directory()


def unique_filename(base: str | os.PathLike) -> Path:
    """Return ``base``, or the first of ``base.0``, ``base.1``, ... that does not exist.

    There is a race between this check and the file being created by the
    caller; the writer does not guard against it.
    """
    base = os.fspath(base)
    candidate = Path(base)
    n = 0
    while candidate.exists():
        candidate = Path(f"{base}.{n}")
        n += 1
    return candidate


def write_edid_file(record: EdidRecord, base: str | os.PathLike, ordinal: int = 0) -> WriteResult:
    """Write ``record`` to a fresh file derived from ``base`` and report it.

    ``ordinal`` numbers the record within its run so every failure is reported
    on its own line even when names and paths repeat.
    """
    path = unique_filename(base)
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, OUTPUT_FILE_MODE)
        with os.fdopen(fd, "wb") as f:
            f.write(record.data)
    except OSError as e:
        message = e.strerror or str(e)
        warn(
            f'Failed to write EDID #{ordinal} (source offset {record.offset}) '
            f'for "{record.name}" to "{path}" ({message})'
        )
        return WriteResult(record=record, path=path, ok=False, message=message)

    print(f'  Wrote EDID for "{record.name}" to "{path}" ({record.size} bytes).')
    return WriteResult(record=record, path=path, ok=True)


def write_edid_files(records: Iterable[EdidRecord], base: str | os.PathLike) -> list[WriteResult]:
    """Write every record; a failed write does not stop the ones after it."""
    return [write_edid_file(record, base, ordinal) for ordinal, record in enumerate(records)]
