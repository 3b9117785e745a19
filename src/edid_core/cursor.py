"""Forward-only cursor over an immutable input buffer."""
from __future__ import annotations

from typing import Sequence

from .errors import EndOfInput


class ByteCursor:
    """Read-only view over ``data`` plus a movable position.

    All scans are bounded by ``len(data)``. The position only moves forward
    except through :meth:`seek`, which parsers use to re-scan from a point they
    saved themselves.
    """

    __slots__ = ("data", "position")

    def __init__(self, data: bytes, position: int = 0):
        self.data = bytes(data)
        self.position = 0
        self.seek(position)

    def __repr__(self) -> str:
        return f"ByteCursor(position={self.position}, length={len(self.data)})"

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.data)

    def seek(self, position: int) -> None:
        if position < 0 or position > len(self.data):
            raise ValueError(f"position {position} outside 0..{len(self.data)}")
        self.position = position

    def peek(self, ahead: int = 0) -> int | None:
        """Return the byte ``ahead`` positions past the cursor, or None past the end."""
        idx = self.position + ahead
        if idx >= len(self.data):
            return None
        return self.data[idx]

    def advance(self, count: int = 1) -> None:
        if self.position + count > len(self.data):
            self.position = len(self.data)
            raise EndOfInput(f"advance past end of input at offset {len(self.data)}")
        self.position += count

    def match_literal(self, literal: bytes) -> bool:
        if self.data.startswith(literal, self.position):
            self.position += len(literal)
            return True
        return False

    def find_literal(self, literal: bytes) -> bool:
        pos = self.data.find(literal, self.position)
        if pos == -1:
            self.position = len(self.data)
            return False
        self.position = pos + len(literal)
        return True

    def find_any_literal(self, literals: Sequence[bytes]) -> bytes | None:
        """Scan forward for the nearest of ``literals``.

        Where several literals match at the same position the earlier one in
        ``literals`` wins, so longer prefixes should be listed first.

        Once one literal has matched, the others are only searched up to that
        match, so the scan never runs past the nearest candidate.
        """
        best: tuple[int, int] | None = None
        by_length = sorted(enumerate(literals), key=lambda item: len(item[1]))
        for order, literal in by_length:
            end = len(self.data) if best is None else best[0] + len(literal)
            pos = self.data.find(literal, self.position, end)
            if pos == -1:
                continue
            if best is None or (pos, order) < best:
                best = (pos, order)
        if best is None:
            self.position = len(self.data)
            return None
        pos, order = best
        self.position = pos + len(literals[order])
        return literals[order]

    def read_until(self, literal: bytes) -> bytes | None:
        """Return the bytes up to ``literal`` and move past it, or None if absent.

        The cursor is left untouched when ``literal`` does not occur.
        """
        pos = self.data.find(literal, self.position)
        if pos == -1:
            return None
        chunk = self.data[self.position:pos]
        self.position = pos + len(literal)
        return chunk
