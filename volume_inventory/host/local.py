"""Host backed by the local filesystem and Settings."""

import logging
from pathlib import Path
from typing import Optional

from ..config import Settings, settings as default_settings
from ..models.volume import MediaState
from ..utils.permissions import is_readable_dir, is_writable
from .base import HostPlatform

logger = logging.getLogger(__name__)


class LocalHost(HostPlatform):
    """Reads platform state straight from configured directories.

    The external storage state is derived from access checks, so a
    directory that is present but not writable reports mounted_ro.
    """

    def __init__(self, settings: Optional[Settings] = None):
        super().__init__()
        self.settings = settings or default_settings
        self.package_name = self.settings.package_name

    def data_directory(self) -> Path:
        return self.settings.data_directory

    def external_storage_directory(self) -> Path:
        return self.settings.external_storage_directory

    def external_storage_state(self) -> MediaState:
        path = self.external_storage_directory()
        if not is_readable_dir(path):
            return MediaState.UNMOUNTED
        return MediaState.MOUNTED if is_writable(path) else MediaState.MOUNTED_READ_ONLY

    def mount_table_directory(self) -> Path:
        return self.settings.mount_table_directory

    def is_external_storage_removable(self) -> Optional[bool]:
        return self.settings.external_storage_removable

    def is_external_storage_emulated(self) -> Optional[bool]:
        return self.settings.external_storage_emulated

    def _app_dir(self, name: str) -> Path:
        path = self.data_directory() / "data" / self.package_name / name
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.debug(f"Cannot create {path}: {e}")
        return path

    def app_files_dir(self) -> Path:
        return self._app_dir("files")

    def app_cache_dir(self) -> Path:
        return self._app_dir("cache")

    def _external_app_dir(self, *parts: str) -> Optional[Path]:
        if not self.settings.external_app_dirs_supported:
            return None
        if self.external_storage_state() != MediaState.MOUNTED:
            return None
        path = self.external_storage_directory().joinpath(
            "Android", "data", self.package_name, *parts
        )
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError:
            return None
        return path

    def external_app_files_dir(self, subpath: Optional[str] = None) -> Optional[Path]:
        if subpath:
            return self._external_app_dir("files", subpath.strip("/"))
        return self._external_app_dir("files")

    def external_app_cache_dir(self) -> Optional[Path]:
        return self._external_app_dir("cache")

    def external_public_dir(self, category: str) -> Optional[Path]:
        if not self.settings.external_app_dirs_supported:
            return None
        return self.external_storage_directory() / category.strip("/")
