"""Abstract host platform interface."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional

from ..models.inventory import VolumeEvent
from ..models.volume import MediaState

logger = logging.getLogger(__name__)

VolumeListener = Callable[[VolumeEvent, Optional[str]], None]


class HostPlatform(ABC):
    """What the inventory needs from the device it runs on.

    Optional queries return None when the running platform generation
    does not offer them; the registry then falls back to its heuristics.
    """

    package_name: str = ""

    def __init__(self):
        self._volume_listeners: list[VolumeListener] = []

    @abstractmethod
    def data_directory(self) -> Path:
        """Root of the internal store."""
        ...

    @abstractmethod
    def external_storage_directory(self) -> Path:
        """The single officially exposed external storage directory."""
        ...

    @abstractmethod
    def external_storage_state(self) -> MediaState:
        ...

    @abstractmethod
    def mount_table_directory(self) -> Path:
        """Directory holding the vold configuration files."""
        ...

    def is_external_storage_removable(self) -> Optional[bool]:
        return None

    def is_external_storage_emulated(self) -> Optional[bool]:
        return None

    # Per-app directories

    @abstractmethod
    def app_files_dir(self) -> Path:
        ...

    @abstractmethod
    def app_cache_dir(self) -> Path:
        ...

    def external_app_files_dir(self, subpath: Optional[str] = None) -> Optional[Path]:
        return None

    def external_app_cache_dir(self) -> Optional[Path]:
        return None

    def external_public_dir(self, category: str) -> Optional[Path]:
        return None

    # Change notification

    def add_volume_listener(self, callback: VolumeListener) -> None:
        self._volume_listeners.append(callback)

    def remove_volume_listener(self, callback: VolumeListener) -> None:
        if callback in self._volume_listeners:
            self._volume_listeners.remove(callback)

    def emit_volume_event(self, event: VolumeEvent, path: Optional[str] = None) -> None:
        for cb in list(self._volume_listeners):
            try:
                cb(event, path)
            except Exception:
                logger.exception(f"Volume listener failed on {event.value}")
