from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from edid_core.protocol import MAX_EDID_SIZE

from .classify import Dialect


@dataclass(frozen=True)
class EdidRecord:
    """One decoded EDID.

    ``offset`` is where the record's hex data starts in the input file.
    """

    data: bytes
    name: str
    offset: int = 0

    def __post_init__(self) -> None:
        if not 1 <= len(self.data) <= MAX_EDID_SIZE:
            raise ValueError(f"EDID size {len(self.data)} outside 1..{MAX_EDID_SIZE}")
        if not self.name:
            raise ValueError("EDID name must not be empty")

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class WriteResult:
    record: EdidRecord
    path: Path
    ok: bool
    message: str | None = None


@dataclass
class ExtractionResult:
    source: Path
    source_hash: str
    dialect: Dialect
    records: list[EdidRecord] = field(default_factory=list)
    writes: list[WriteResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(w.ok for w in self.writes)
