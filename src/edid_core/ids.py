"""Deterministic identity functions for extracted EDIDs."""
from __future__ import annotations

import base64
import hashlib


def content_hash(data: bytes) -> str:
    """Hex SHA-256 of ``data``."""
    return hashlib.sha256(data).hexdigest()


def _hash(b: bytes, prefix: str) -> str:
    """Compute truncated SHA-256 hash with base32 encoding."""
    h = hashlib.sha256(b).digest()[:15]
    return prefix + base64.b32encode(h).decode("ascii").lower().rstrip("=")


def record_id(source_hash: str, offset: int, size: int, data_hash: str) -> str:
    """Generate a deterministic ID for one EDID found at ``offset`` in a source."""
    payload = f"{source_hash}\x00{offset}\x00{size}\x00{data_hash}"
    return _hash(payload.encode("utf-8"), "r_")
