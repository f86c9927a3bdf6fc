"""Inventory snapshot, parse results and change events."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .volume import VolumeRecord


class CorrectionKind(str, Enum):
    FORCE_NON_REMOVABLE = "force_non_removable"


class Correction(BaseModel):
    """A classification hint for the primary volume found in the mount table."""

    kind: CorrectionKind = CorrectionKind.FORCE_NON_REMOVABLE
    reason: str
    # Entry the hint was attached to; None for file-level directives
    mount_path: Optional[str] = None

    model_config = {"frozen": True}


class ParseResult(BaseModel):
    candidates: list[VolumeRecord] = Field(default_factory=list)
    corrections: list[Correction] = Field(default_factory=list)
    passed_primary_entry: bool = False
    ok: bool = True
    error: Optional[str] = None


class InventorySnapshot(BaseModel):
    """Immutable result of one rescan."""

    internal: VolumeRecord
    primary: VolumeRecord
    secondary_candidates: tuple[VolumeRecord, ...] = ()
    emulated: bool = False

    model_config = {"frozen": True}

    @property
    def secondary(self) -> Optional[VolumeRecord]:
        return self.secondary_candidates[0] if self.secondary_candidates else None


class VolumeEvent(str, Enum):
    MOUNTED = "mounted"
    BAD_REMOVAL = "bad_removal"
    REMOVED = "removed"
    SHARED = "shared"
