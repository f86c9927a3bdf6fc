"""Volume rescan orchestration and snapshot publishing."""

import asyncio
import logging
import threading
from typing import Optional

from ..config import Settings, settings as default_settings
from ..host.base import HostPlatform
from ..models.inventory import InventorySnapshot, ParseResult
from ..models.volume import MediaState, VolumeKind, VolumeRecord
from ..utils.capacity import CapacityProbe
from .heuristics import classify_primary_removable
from .mount_table import MountTableParser

logger = logging.getLogger(__name__)


class InventoryNotReadyError(RuntimeError):
    """No snapshot has been published yet."""


class VolumeRegistry:
    """Owns the current inventory snapshot.

    rescan() is serialized by a lock and publishes by a single reference
    assignment, so readers see either the old or the new snapshot.
    """

    def __init__(
        self,
        host: HostPlatform,
        settings: Optional[Settings] = None,
        probe: Optional[CapacityProbe] = None,
    ):
        self.host = host
        self.settings = settings or default_settings
        self.probe = probe or CapacityProbe(exact=self.settings.capacity_exact)
        self._snapshot: Optional[InventorySnapshot] = None
        self._lock = threading.Lock()
        self.last_parse: Optional[ParseResult] = None

    @property
    def snapshot(self) -> InventorySnapshot:
        snap = self._snapshot
        if snap is None:
            raise InventoryNotReadyError("rescan() has not run yet")
        return snap

    @property
    def has_snapshot(self) -> bool:
        return self._snapshot is not None

    def ensure_scanned(self) -> InventorySnapshot:
        """First-use build; concurrent callers share one rescan."""
        snap = self._snapshot
        if snap is not None:
            return snap
        with self._lock:
            if self._snapshot is None:
                self._rescan_locked()
            return self._snapshot

    def rescan(self) -> InventorySnapshot:
        with self._lock:
            return self._rescan_locked()

    async def refresh(self) -> InventorySnapshot:
        """Run rescan() off the event loop."""
        return await asyncio.to_thread(self.rescan)

    def _rescan_locked(self) -> InventorySnapshot:
        internal = self.build_internal()
        primary = self._build_primary()

        parse = self._parse_mount_table(primary)
        self.last_parse = parse

        secondary = self._dedup(parse.candidates, internal, primary)
        removable = classify_primary_removable(
            primary.mount_path,
            self.host.is_external_storage_removable(),
            parse.corrections,
            has_secondary=bool(secondary),
        )
        primary = primary.model_copy(
            update={
                "removable": removable,
                "display_name": "SD-Card" if removable else "intern 2",
            }
        )

        # unified /data and external store; hosts without the query predate it
        emulated = bool(self.host.is_external_storage_emulated())

        snap = InventorySnapshot(
            internal=internal,
            primary=primary,
            secondary_candidates=secondary,
            emulated=emulated,
        )
        self._snapshot = snap
        logger.info(
            f"Rescan: primary={primary.mount_path} removable={removable} "
            f"secondary={[c.mount_path for c in secondary]} emulated={emulated}"
        )
        return snap

    def build_internal(self) -> VolumeRecord:
        """Internal store record; needs no mount table and no snapshot."""
        path = str(self.host.data_directory())
        return VolumeRecord(
            mount_path=path,
            display_name="intern",
            label=path,
            kind=VolumeKind.INTERNAL,
            capacity=self.probe.probe(path),
            removable=False,
            available=True,
            writeable=True,
            state=MediaState.MOUNTED,
        )

    @staticmethod
    def _dedup(
        candidates: list[VolumeRecord],
        internal: VolumeRecord,
        primary: VolumeRecord,
    ) -> tuple[VolumeRecord, ...]:
        """First entry per mount path, minus the internal and primary paths."""
        seen = {internal.mount_path, primary.mount_path}
        out = []
        for c in candidates:
            if c.mount_path in seen:
                continue
            seen.add(c.mount_path)
            out.append(c)
        return tuple(out)

    def _build_primary(self) -> VolumeRecord:
        path = str(self.host.external_storage_directory())
        state = self.host.external_storage_state()
        if state == MediaState.MOUNTED:
            available = writeable = True
        elif state == MediaState.MOUNTED_READ_ONLY:
            available, writeable = True, False
        else:
            # not removable by implication: shared over USB looks the same
            available = writeable = False
        return VolumeRecord(
            mount_path=path,
            display_name="intern 2",
            label=path,
            kind=VolumeKind.PRIMARY_EXTERNAL,
            capacity=self.probe.probe(path) if available else None,
            available=available,
            writeable=writeable,
            state=state,
        )

    def _parse_mount_table(self, primary: VolumeRecord) -> ParseResult:
        parser = MountTableParser(primary, self.probe)
        directory = self.host.mount_table_directory()
        first_failed: Optional[ParseResult] = None
        for name in self.settings.mount_table_files:
            result = parser.parse_file(directory / name)
            if result.ok:
                return result
            if first_failed is None:
                first_failed = result
            elif not first_failed.candidates and result.candidates:
                first_failed = result
        if first_failed is None:
            return ParseResult(ok=False, error="no mount table configured")
        return first_failed
