"""Removability classification of the primary external volume.

Best effort only: the rules below were collected from a handful of
devices and will misjudge unseen hardware.

The starting value is the host's own removable answer, or fixed storage
(False) when the host has none. Then only downgrades follow, in order:

- "force non-removable" hints from the mount table
- a secondary volume exists, so the primary is the built-in store
"""

import logging
from typing import Iterable, Optional

from ..models.inventory import Correction, CorrectionKind

logger = logging.getLogger(__name__)


def classify_primary_removable(
    primary_path: str,
    platform_removable: Optional[bool],
    corrections: Iterable[Correction],
    has_secondary: bool,
) -> bool:
    removable = platform_removable if platform_removable is not None else False

    for c in corrections:
        if c.kind != CorrectionKind.FORCE_NON_REMOVABLE:
            continue
        if c.mount_path is not None and c.mount_path != primary_path:
            continue
        if removable:
            logger.warning(f"Primary forced non-removable ({c.reason})")
        removable = False

    if has_secondary:
        if removable:
            logger.warning("Primary forced non-removable (secondary volume found)")
        removable = False

    return removable
