"""Parser for EDIDs dumped into verbose X server logs.

A verbose log contains a raw EDID dump like this::

    (--) NVIDIA(0): Raw EDID bytes:
    (--) NVIDIA(0):
    (--) NVIDIA(0):   00 ff ff ff ff ff ff 00  5a 63 47 4b fc 27 00 00
    (--) NVIDIA(0):   0f 0a 01 02 9e 1e 17 64  ee 04 85 a0 57 4a 9b 26
    ...
    (--) NVIDIA(0):
    (--) NVIDIA(0): --- End of EDID for ViewSonic VPD150 (DFP-1) ---

Newer drivers label lines with ``NVIDIA(GPU-0)`` and the X server may insert
a timestamp between the ``(--)`` prefix and the label.
"""
from __future__ import annotations

import enum
from typing import Iterator
from warnings import warn

from edid_core.cursor import ByteCursor
from edid_core.errors import EdidParseError, MalformedFooter, MalformedLabel, MissingLabel
from edid_core.protocol import (
    LOG_FOOTER_END,
    LOG_FOOTER_START,
    LOG_HEADER,
    LOG_LABEL_GPU,
    LOG_LABEL_PREFIXES,
    MAX_NAME_LEN,
    UNKNOWN_NAME,
)

from .hexstream import NEWLINE, decode_hex_stream, describe, is_digit, is_space
from .records import EdidRecord

_GPU_ID_SEPARATOR = b"-"
_CLOSE_PAREN = ord(")")
_COLON = ord(":")


class LabelState(enum.Enum):
    START_OF_LABEL = "start_of_label"
    SCREEN_NUMBER_IN_LABEL = "screen_number_in_label"
    END_OF_LABEL = "end_of_label"


def _skip_label(cursor: ByteCursor) -> None:
    """Move past the next ``NVIDIA(<n>):`` or ``NVIDIA(GPU-<n>):`` label."""
    state = LabelState.START_OF_LABEL

    while True:
        if state is LabelState.START_OF_LABEL:
            found = cursor.find_any_literal(LOG_LABEL_PREFIXES)
            if found is None:
                raise MissingLabel("no NVIDIA( label before end of input", cursor.position)
            if found == LOG_LABEL_GPU:
                cursor.match_literal(_GPU_ID_SEPARATOR)
            state = LabelState.SCREEN_NUMBER_IN_LABEL
            continue

        c = cursor.peek()

        if state is LabelState.SCREEN_NUMBER_IN_LABEL:
            if is_digit(c):
                cursor.advance()
            elif c == _CLOSE_PAREN:
                cursor.advance()
                state = LabelState.END_OF_LABEL
            else:
                raise MalformedLabel(
                    f"unexpected {describe(c)} in label at offset {cursor.position}", cursor.position
                )
            continue

        # LabelState.END_OF_LABEL
        if c != _COLON:
            raise MalformedLabel(
                f"expected ':' after label at offset {cursor.position}, found {describe(c)}",
                cursor.position,
            )
        cursor.advance()
        return


def _log_separator(cursor: ByteCursor) -> bool:
    c = cursor.peek()
    if c == NEWLINE:
        cursor.advance()
        _skip_label(cursor)
        return True
    if is_space(c):
        cursor.advance()
        return True
    # Anything else (normally the footer's leading '-') ends the data.
    return False


def _read_footer(cursor: ByteCursor) -> str:
    if not cursor.match_literal(LOG_FOOTER_START):
        return UNKNOWN_NAME

    start = cursor.position
    raw = cursor.read_until(LOG_FOOTER_END)
    if raw is None:
        raise MalformedFooter(f"unterminated EDID footer at offset {start}", start)
    if not 1 <= len(raw) <= MAX_NAME_LEN:
        raise MalformedFooter(f"EDID footer name length {len(raw)} outside 1..{MAX_NAME_LEN}", start)
    return raw.decode("utf-8", errors="replace")


def read_log_edid(cursor: ByteCursor) -> EdidRecord:
    """Parse one EDID; ``cursor`` must sit just past a ``Raw EDID bytes:`` header."""
    offset = cursor.position
    data = decode_hex_stream(cursor, _log_separator)
    name = _read_footer(cursor)
    return EdidRecord(data=data, name=name, offset=offset)


def iter_log_edids(data: bytes) -> Iterator[EdidRecord]:
    """Yield every EDID in a verbose log, top to bottom.

    A header that does not lead to a valid record is reported and skipped; the
    search for the next header resumes where that attempt stopped.
    """
    cursor = ByteCursor(data)
    while cursor.find_literal(LOG_HEADER):
        header_end = cursor.position
        try:
            yield read_log_edid(cursor)
        except EdidParseError as e:
            warn(f"Skipping EDID after header at offset {header_end - len(LOG_HEADER)}: {e}")
