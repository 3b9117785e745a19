"""EDID Core - Shared protocol constants, cursor and identity."""
from .cursor import ByteCursor
from .ids import content_hash, record_id

__all__ = ["ByteCursor", "content_hash", "record_id"]
