"""Data models."""

from .volume import Capacity, MediaState, VolumeKind, VolumeRecord
from .inventory import (
    Correction,
    CorrectionKind,
    InventorySnapshot,
    ParseResult,
    VolumeEvent,
)

__all__ = [
    "Capacity",
    "MediaState",
    "VolumeKind",
    "VolumeRecord",
    "Correction",
    "CorrectionKind",
    "InventorySnapshot",
    "ParseResult",
    "VolumeEvent",
]
