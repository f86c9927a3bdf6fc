"""Volume models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, model_validator

# Smallest value rounded_total() will report
MIN_ROUNDED_TOTAL = 1024 * 1024


class VolumeKind(str, Enum):
    INTERNAL = "internal"
    PRIMARY_EXTERNAL = "primary_external"
    SECONDARY = "secondary"


class MediaState(str, Enum):
    MOUNTED = "mounted"
    MOUNTED_READ_ONLY = "mounted_ro"
    SHARED = "shared"
    UNMOUNTED = "unmounted"
    REMOVED = "removed"

    @classmethod
    def from_flags(cls, available: bool, writeable: bool) -> "MediaState":
        if not available:
            return cls.REMOVED
        return cls.MOUNTED if writeable else cls.MOUNTED_READ_ONLY


class Capacity(BaseModel):
    """Free and total bytes of the partition a directory lives on."""

    free_bytes: int = 0
    total_bytes: int = 0

    model_config = {"frozen": True}

    def rounded_total(self) -> int:
        """Guess the nominal size of the medium.

        Returns the next power of two at or above total_bytes, never less
        than 1 MiB. A 14 GiB partition on a 16 GiB card reports 16 GiB.
        """
        g = MIN_ROUNDED_TOTAL
        while self.total_bytes > g:
            g *= 2
        return g


class VolumeRecord(BaseModel):
    """One storage volume of an inventory snapshot."""

    mount_path: str
    display_name: str
    label: str = ""
    kind: VolumeKind
    capacity: Optional[Capacity] = None
    removable: bool = False
    available: bool = False
    writeable: bool = False
    state: MediaState = MediaState.REMOVED

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _writeable_needs_available(self) -> "VolumeRecord":
        if self.writeable and not self.available:
            raise ValueError(f"{self.mount_path}: writeable volume must be available")
        return self
