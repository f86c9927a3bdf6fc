"""Per-volume application directories.

Internal volumes use the host's own app directories. The primary
external volume uses the host's external app directories when the host
offers them. Everything else gets the conventional layout under the
mount point, created on demand when the volume is writeable:

    <mount>/Android/data/<package>/files[/<subpath>]
    <mount>/Android/data/<package>/cache

A directory that could not be created is still returned; callers check
that it exists.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from ..host.base import HostPlatform
from ..models.volume import VolumeKind, VolumeRecord

logger = logging.getLogger(__name__)


def app_data_dir(record: VolumeRecord, package_name: str, *parts: str) -> Path:
    return Path(record.mount_path).joinpath("Android", "data", package_name, *parts)


def _ensure_dir(record: VolumeRecord, path: Path) -> Path:
    if record.writeable and not path.is_dir():
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.debug(f"Cannot create {path}: {e}")
    return path


def _synth_parts(subpath: Optional[str]) -> tuple[str, ...]:
    if subpath:
        return ("files", subpath.strip("/"))
    return ("files",)


# --- Internal ---


def _internal_files(record: VolumeRecord, host: HostPlatform, subpath: Optional[str]) -> Optional[Path]:
    base = host.app_files_dir()
    if not subpath:
        return base
    path = base / subpath.strip("/")
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.debug(f"Cannot create {path}: {e}")
    return path


def _internal_cache(record: VolumeRecord, host: HostPlatform) -> Optional[Path]:
    return host.app_cache_dir()


def _internal_public(record: VolumeRecord, host: HostPlatform, category: str) -> Optional[Path]:
    # /data has no public area
    return None


# --- Primary external ---


def _primary_files(record: VolumeRecord, host: HostPlatform, subpath: Optional[str]) -> Optional[Path]:
    path = host.external_app_files_dir(subpath)
    if path is not None:
        return path
    return _ensure_dir(record, app_data_dir(record, host.package_name, *_synth_parts(subpath)))


def _primary_cache(record: VolumeRecord, host: HostPlatform) -> Optional[Path]:
    path = host.external_app_cache_dir()
    if path is not None:
        return path
    return _ensure_dir(record, app_data_dir(record, host.package_name, "cache"))


def _primary_public(record: VolumeRecord, host: HostPlatform, category: str) -> Optional[Path]:
    path = host.external_public_dir(category)
    if path is not None:
        return path
    return Path(record.mount_path) / category.strip("/")


# --- Secondary ---


def _secondary_files(record: VolumeRecord, host: HostPlatform, subpath: Optional[str]) -> Optional[Path]:
    return _ensure_dir(record, app_data_dir(record, host.package_name, *_synth_parts(subpath)))


def _secondary_cache(record: VolumeRecord, host: HostPlatform) -> Optional[Path]:
    return _ensure_dir(record, app_data_dir(record, host.package_name, "cache"))


def _secondary_public(record: VolumeRecord, host: HostPlatform, category: str) -> Optional[Path]:
    # like the host's public directories, not created here
    return Path(record.mount_path) / category.strip("/")


FilesResolver = Callable[[VolumeRecord, HostPlatform, Optional[str]], Optional[Path]]
CacheResolver = Callable[[VolumeRecord, HostPlatform], Optional[Path]]
PublicResolver = Callable[[VolumeRecord, HostPlatform, str], Optional[Path]]

RESOLVERS: dict[VolumeKind, tuple[FilesResolver, CacheResolver, PublicResolver]] = {
    VolumeKind.INTERNAL: (_internal_files, _internal_cache, _internal_public),
    VolumeKind.PRIMARY_EXTERNAL: (_primary_files, _primary_cache, _primary_public),
    VolumeKind.SECONDARY: (_secondary_files, _secondary_cache, _secondary_public),
}


def files_dir(record: VolumeRecord, host: HostPlatform, subpath: Optional[str] = None) -> Optional[Path]:
    """App-private files directory on the volume, None if it is unavailable."""
    if not record.available:
        return None
    return RESOLVERS[record.kind][0](record, host, subpath)


def cache_dir(record: VolumeRecord, host: HostPlatform) -> Optional[Path]:
    if not record.available:
        return None
    return RESOLVERS[record.kind][1](record, host)


def public_directory(record: VolumeRecord, host: HostPlatform, category: Optional[str]) -> Optional[Path]:
    """Shared directory for a category such as "Music" or "DCIM".

    Raises ValueError when category is missing.
    """
    if category is None:
        raise ValueError("category must not be None")
    if not record.available:
        return None
    return RESOLVERS[record.kind][2](record, host, category)
