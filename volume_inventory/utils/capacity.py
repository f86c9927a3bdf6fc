"""Partition capacity probing."""

import logging
import os
import shutil
from pathlib import Path
from typing import Optional, Union

from ..models.volume import Capacity

logger = logging.getLogger(__name__)


class CapacityProbe:
    """Reads free/total bytes for a directory.

    Never raises: a missing path, a permission problem or any other OS
    error yields Capacity(0, 0), which callers treat as "unknown".
    """

    def __init__(self, exact: bool = True):
        # block arithmetic needs statvfs; without it only the exact query is left
        self.exact = exact or not hasattr(os, "statvfs")

    def probe(self, path: Optional[Union[str, Path]]) -> Capacity:
        if path is None:
            return Capacity()
        try:
            if self.exact:
                usage = shutil.disk_usage(path)
                return Capacity(free_bytes=usage.free, total_bytes=usage.total)
            st = os.statvfs(path)
            return Capacity(
                free_bytes=st.f_bavail * st.f_frsize,
                total_bytes=st.f_blocks * st.f_frsize,
            )
        except (OSError, ValueError) as e:
            logger.debug(f"No capacity for {path}: {e}")
            return Capacity()
