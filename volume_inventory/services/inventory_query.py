"""Read-only queries over the published inventory."""

from pathlib import Path
from typing import Optional

from ..models.inventory import InventorySnapshot
from ..models.volume import MediaState, VolumeRecord
from .volume_registry import VolumeRegistry


class InventoryQuery:
    """Filters and lookups against the registry's current snapshot.

    Never rescans; VolumeRegistry.snapshot raises InventoryNotReadyError
    until the first rescan has published.
    """

    def __init__(self, registry: VolumeRegistry):
        self.registry = registry

    @property
    def snapshot(self) -> InventorySnapshot:
        return self.registry.snapshot

    def list(
        self,
        name_filter: Optional[str] = None,
        only_available: bool = False,
        include_primary: bool = True,
        include_internal: bool = False,
    ) -> list[VolumeRecord]:
        """Internal, primary, then secondary volumes in mount table order.

        name_filter is a case-insensitive substring of the display name and
        applies to secondary volumes only.
        """
        snap = self.snapshot
        key = name_filter.lower() if name_filter is not None else None
        out = []
        if include_internal and (not only_available or snap.internal.available):
            out.append(snap.internal)
        if include_primary and (not only_available or snap.primary.available):
            out.append(snap.primary)
        for rec in snap.secondary_candidates:
            if key is not None and key not in rec.display_name.lower():
                continue
            if only_available and not rec.available:
                continue
            out.append(rec)
        return out

    def primary(self) -> VolumeRecord:
        return self.snapshot.primary

    def secondary(self) -> Optional[VolumeRecord]:
        return self.snapshot.secondary

    def internal(self) -> VolumeRecord:
        """Always available, built fresh when nothing is published yet."""
        if self.registry.has_snapshot:
            return self.snapshot.internal
        return self.registry.build_internal()

    def is_storage_emulated(self) -> bool:
        return self.snapshot.emulated

    def is_primary_removable(self) -> bool:
        return self.snapshot.primary.removable

    def secondary_state(self) -> Optional[MediaState]:
        """None when the device has no secondary slot at all."""
        rec = self.secondary()
        if rec is None:
            return None
        return MediaState.from_flags(rec.available, rec.writeable)

    def is_secondary_available(self) -> bool:
        rec = self.secondary()
        return rec is not None and rec.available

    def secondary_directory(self) -> Optional[Path]:
        if not self.is_secondary_available():
            return None
        return Path(self.secondary().mount_path)

    def find(self, mount_path: str) -> Optional[VolumeRecord]:
        """Look up a volume by mount path, e.g. a previously chosen one."""
        snap = self.snapshot
        for rec in (snap.internal, snap.primary, *snap.secondary_candidates):
            if rec.mount_path == mount_path:
                return rec
        return None
