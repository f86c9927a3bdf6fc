"""vold mount table parsing.

The vold configuration (``/system/etc/vold.fstab``, on older devices
``vold.conf``) lists every block device the volume daemon may mount.
There is no grammar to speak of; vendors add their own flags and
directives. Only two things are read here:

    dev_mount <label> <mount_point> <part> <sysfs_path...> [flags]
    discard = disable|enable

``dev_mount`` lines become candidate volume records. Trailing flags
containing ``nonremovable`` (Galaxy Note: ``encryptable_nonremovable``)
and a ``discard = disable`` ahead of the primary's own entry are hints
that the primary external store is built-in flash.

Known secondary mount points seen in the field:

    Asus Transformer      /Removable/MicroSD
    HTC Velocity LTE      /mnt/sdcard/ext_sd
    Huawei MediaPad       /mnt/external
    LG Prada              /mnt/sdcard/_ExternalSD
    Motorola Razr         /mnt/sdcard-ext
    Samsung Galaxy S3     /mnt/extSdCard
    Samsung Galaxy Note   /mnt/sdcard/external_sd
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from ..models.inventory import Correction, ParseResult
from ..models.volume import MediaState, VolumeKind, VolumeRecord
from ..utils.capacity import CapacityProbe
from ..utils.permissions import is_readable_dir, is_writable

logger = logging.getLogger(__name__)

DEV_MOUNT = "dev_mount"
DISCARD = "discard"


def is_sub_path(path: str, parent: str) -> bool:
    parent = parent.rstrip("/")
    return path.startswith(parent + "/")


class MountTableParser:
    """Single-pass parser bound to the already-known primary volume."""

    def __init__(self, primary: VolumeRecord, probe: Optional[CapacityProbe] = None):
        self.primary = primary
        self.probe = probe or CapacityProbe()

    def parse_file(self, path: Path) -> ParseResult:
        """Parse a mount table file. A missing or unreadable file gives ok=False."""
        try:
            with open(path, encoding="utf-8") as fh:
                result = self.parse(fh)
        except OSError as e:
            logger.error(f"Cannot read {path.name}: {e}")
            return ParseResult(ok=False, error=str(e))
        if not result.ok:
            logger.error(f"Cannot read {path.name}: {result.error}")
        return result

    def parse(self, lines: Iterable[str]) -> ParseResult:
        """Parse mount table lines.

        A read error while iterating ends the scan with ok=False; entries
        seen up to that point are kept.
        """
        result = ParseResult()
        before_primary = True
        try:
            for line in lines:
                tokens = line.strip().split()
                if not tokens:
                    continue
                keyword = tokens[0]
                if keyword == DEV_MOUNT:
                    if len(tokens) < 3:
                        logger.debug(f"Skipping short dev_mount line: {line.strip()!r}")
                        continue
                    record = self._candidate(tokens[1], tokens[2])
                    result.candidates.append(record)
                    for flag in tokens[3:]:
                        if "nonremovable" in flag:
                            result.corrections.append(
                                Correction(reason=f"flag '{flag}'", mount_path=record.mount_path)
                            )
                    if record.mount_path == self.primary.mount_path:
                        before_primary = False
                        result.passed_primary_entry = True
                elif keyword == DISCARD and before_primary:
                    self._discard(tokens, result)
        except (OSError, UnicodeDecodeError) as e:
            result.ok = False
            result.error = str(e)
        return result

    def _discard(self, tokens: list[str], result: ParseResult) -> None:
        # discard = <value>; should sit inside the primary's {} block, not checked
        if len(tokens) < 3:
            logger.debug(f"Skipping short discard line: {' '.join(tokens)!r}")
            return
        value = tokens[2]
        if value == "disable":
            logger.warning("Found 'discard = disable' ahead of the primary entry")
            result.corrections.append(Correction(reason="discard = disable"))
        elif value == "enable":
            # seen on Galaxy Note and Galaxy Mini 2, both with soldered cards
            logger.warning(
                f"Ignoring 'discard = enable', primary stays removable={self.primary.removable}"
            )
        else:
            logger.warning(f"Unknown discard value: {value}")

    def _candidate(self, label: str, raw_path: str) -> VolumeRecord:
        mount_path = raw_path
        # primary_path:asec_path:lun_path dialect
        if ":" in raw_path and not Path(raw_path).is_dir():
            mount_path = raw_path.split(":", 1)[0]

        capacity = None
        available = is_readable_dir(mount_path)
        writeable = False
        if available:
            capacity = self.probe.probe(mount_path)
            writeable = is_writable(mount_path)
            # bind mount of the primary inside its own tree (Samsung)
            if (
                self.primary.capacity is not None
                and is_sub_path(mount_path, self.primary.mount_path)
                and capacity == self.primary.capacity
            ):
                logger.info(f"{mount_path} is an alias of {self.primary.mount_path}")
                available = writeable = False

        return VolumeRecord(
            mount_path=mount_path,
            display_name=Path(mount_path).name or mount_path,
            label=label,
            kind=VolumeKind.SECONDARY,
            capacity=capacity,
            removable=True,
            available=available,
            writeable=writeable,
            state=MediaState.from_flags(available, writeable),
        )
