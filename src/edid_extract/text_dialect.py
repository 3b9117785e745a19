"""Parser for plain-text EDID dumps.

The dump opens with the EDID as a hex table, one row per line, with an
annotation column after a run of whitespace::

    00 FF FF FF FF FF FF 00-5A 63 47 4B FC 27 00 00    ......ZcGK.'..
    ...

followed by a blank line and ``Field : value`` lines, one of which is
``Monitor Name``. Lines end in CR-LF.
"""
from __future__ import annotations

from edid_core.cursor import ByteCursor
from edid_core.errors import EndOfInput, MalformedFooter, MalformedHexPair
from edid_core.protocol import CRLF, MAX_NAME_LEN, TEXT_NAME_FIELD

from .hexstream import decode_hex_stream, describe, is_space
from .records import EdidRecord

_DASH = ord("-")
_END_OF_TABLE = CRLF + CRLF


def _skip_annotation(cursor: ByteCursor) -> bool:
    """Skip to the end of the current row; True when another row follows."""
    while True:
        if cursor.match_literal(_END_OF_TABLE):
            return False
        if cursor.match_literal(CRLF):
            return True
        if cursor.at_end:
            return False
        # whitespace or annotation text
        cursor.advance()


def _text_separator(cursor: ByteCursor) -> bool:
    c = cursor.peek()
    if c is None:
        return False
    if c == _DASH:
        cursor.advance()
        return True
    if is_space(c):
        if not is_space(cursor.peek(1)):
            cursor.advance()
            return True
        return _skip_annotation(cursor)
    raise MalformedHexPair(
        f"unexpected {describe(c)} in hex table at offset {cursor.position}", cursor.position
    )


def _read_monitor_name(data: bytes) -> str:
    cursor = ByteCursor(data)
    if not cursor.find_literal(TEXT_NAME_FIELD) or not cursor.find_literal(b":"):
        raise MalformedFooter("no Monitor Name field", cursor.position)

    # Two characters are skipped from the colon: the colon and one separator.
    try:
        cursor.advance()
    except EndOfInput:
        raise MalformedFooter("Monitor Name field truncated", cursor.position) from None

    start = cursor.position
    raw = cursor.read_until(CRLF)
    if raw is None:
        raise MalformedFooter(f"unterminated Monitor Name at offset {start}", start)
    if not 1 <= len(raw) <= MAX_NAME_LEN:
        raise MalformedFooter(f"Monitor Name length {len(raw)} outside 1..{MAX_NAME_LEN}", start)
    return raw.decode("utf-8", errors="replace")


def read_text_edid(data: bytes) -> EdidRecord:
    """Parse the single EDID of a text dump; the hex table starts at offset 0."""
    cursor = ByteCursor(data)
    edid = decode_hex_stream(cursor, _text_separator)
    name = _read_monitor_name(data)
    return EdidRecord(data=edid, name=name, offset=0)
