"""Error taxonomy for EDID extraction."""
from __future__ import annotations


class EdidError(ValueError):
    """Base class for everything raised by the extractor."""


class EdidIOError(EdidError):
    """Input could not be opened, read, or is empty. Fatal."""


class EndOfInput(EdidError):
    """A cursor was moved past the end of its data."""


class EdidParseError(EdidError):
    """A header matched but did not yield a valid record.

    ``offset`` is the cursor position at the time of failure.
    """

    def __init__(self, message: str, offset: int | None = None):
        super().__init__(message)
        self.offset = offset


class MalformedHexPair(EdidParseError):
    pass


class MissingLabel(EdidParseError):
    pass


class MalformedLabel(EdidParseError):
    pass


class MalformedFooter(EdidParseError):
    pass


class EdidTooLarge(EdidParseError):
    pass


class EmptyEdid(EdidParseError):
    pass
