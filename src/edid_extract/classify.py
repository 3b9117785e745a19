from __future__ import annotations

import enum

from edid_core.cursor import ByteCursor
from edid_core.protocol import LOG_HEADER, TEXT_MARKER


class Dialect(enum.Enum):
    LOG_FORMAT = "log"
    TEXT_FORMAT = "text"
    NO_EDID_FOUND = "none"


def classify(data: bytes) -> Dialect:
    """Decide which dialect ``data`` is written in.

    The log header is checked first: it never occurs in text dumps, while a log
    may mention "EDID Version" in passing.
    """
    if ByteCursor(data).find_literal(LOG_HEADER):
        return Dialect.LOG_FORMAT
    if ByteCursor(data).find_literal(TEXT_MARKER):
        return Dialect.TEXT_FORMAT
    return Dialect.NO_EDID_FOUND
