"""Shared ASCII hex byte-stream decoder.

Both input dialects encode an EDID as pairs of hex digits broken up by
dialect-specific noise. The nibble accumulation lives here; each dialect plugs
in a separator handler that decides what the noise between pairs means.
"""
from __future__ import annotations

import enum
from typing import Callable

from edid_core.cursor import ByteCursor
from edid_core.errors import EdidTooLarge, EmptyEdid, MalformedHexPair
from edid_core.protocol import MAX_EDID_SIZE

HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")
DIGITS = frozenset(b"0123456789")
WHITESPACE = frozenset(b" \t\n\r\x0b\x0c")
NEWLINE = ord("\n")

_NIBBLE = {c: int(chr(c), 16) for c in HEX_DIGITS}

# Called with the cursor on a non-hex byte where a top nibble was expected.
# Returns True after consuming separator text, False to end the stream with the
# cursor left on the terminating byte. May raise EdidParseError.
Separator = Callable[[ByteCursor], bool]


class Nibble(enum.Enum):
    TOP = "top"
    BOTTOM = "bottom"


def is_hex(c: int | None) -> bool:
    return c is not None and c in HEX_DIGITS


def is_digit(c: int | None) -> bool:
    return c is not None and c in DIGITS


def is_space(c: int | None) -> bool:
    return c is not None and c in WHITESPACE


def describe(c: int | None) -> str:
    return "end of input" if c is None else repr(chr(c))


def decode_hex_stream(cursor: ByteCursor, separator: Separator, *, limit: int = MAX_EDID_SIZE) -> bytes:
    """Decode hex pairs starting at ``cursor`` until ``separator`` ends the stream.

    Raises EdidTooLarge past ``limit`` bytes, MalformedHexPair on a dangling
    top nibble and EmptyEdid when the stream ends before the first pair.
    """
    out = bytearray()
    state = Nibble.TOP
    high = 0

    while True:
        c = cursor.peek()

        if state is Nibble.TOP:
            if is_hex(c):
                if len(out) >= limit:
                    raise EdidTooLarge(f"EDID exceeds {limit} bytes", cursor.position)
                high = _NIBBLE[c]
                state = Nibble.BOTTOM
                cursor.advance()
                continue

            if separator(cursor):
                continue

            if not out:
                raise EmptyEdid("no EDID bytes before end of data", cursor.position)
            return bytes(out)

        # Nibble.BOTTOM
        if not is_hex(c):
            raise MalformedHexPair(
                f"expected second hex digit at offset {cursor.position}, found {describe(c)}",
                cursor.position,
            )
        out.append((high << 4) | _NIBBLE[c])
        state = Nibble.TOP
        cursor.advance()
