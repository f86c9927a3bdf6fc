from pathlib import Path
from typing import Optional

import pytest

from volume_inventory.config import Settings
from volume_inventory.host.base import HostPlatform
from volume_inventory.models.volume import Capacity, MediaState
from volume_inventory.utils.capacity import CapacityProbe


GiB = 1024 ** 3


class FakeProbe(CapacityProbe):
    """Capacity per path; unknown paths get `default`."""

    def __init__(self, sizes=None, default=Capacity(free_bytes=1 * GiB, total_bytes=8 * GiB)):
        super().__init__()
        self.sizes = {str(k): v for k, v in (sizes or {}).items()}
        self.default = default
        self.calls: list[str] = []

    def probe(self, path):
        if path is None:
            return Capacity()
        self.calls.append(str(path))
        return self.sizes.get(str(path), self.default)


class FakeHost(HostPlatform):
    def __init__(self, root: Path):
        super().__init__()
        self.root = root
        self.package_name = "org.example.app"
        self.data = root / "data"
        self.external = root / "mnt" / "sdcard"
        self.system_etc = root / "system" / "etc"
        for p in (self.data, self.external, self.system_etc):
            p.mkdir(parents=True, exist_ok=True)
        self.state = MediaState.MOUNTED
        self.removable: Optional[bool] = None
        self.emulated: Optional[bool] = None
        self.external_app_dirs = False

    def data_directory(self) -> Path:
        return self.data

    def external_storage_directory(self) -> Path:
        return self.external

    def external_storage_state(self) -> MediaState:
        return self.state

    def mount_table_directory(self) -> Path:
        return self.system_etc

    def is_external_storage_removable(self) -> Optional[bool]:
        return self.removable

    def is_external_storage_emulated(self) -> Optional[bool]:
        return self.emulated

    def app_files_dir(self) -> Path:
        path = self.data / "data" / self.package_name / "files"
        path.mkdir(parents=True, exist_ok=True)
        return path

    def app_cache_dir(self) -> Path:
        path = self.data / "data" / self.package_name / "cache"
        path.mkdir(parents=True, exist_ok=True)
        return path

    def external_app_files_dir(self, subpath=None):
        if not self.external_app_dirs:
            return None
        path = self.external / "platform-files"
        if subpath:
            path = path / subpath
        return path

    def external_app_cache_dir(self):
        if not self.external_app_dirs:
            return None
        return self.external / "platform-cache"

    def write_mount_table(self, text: str, name: str = "vold.fstab") -> Path:
        path = self.system_etc / name
        path.write_text(text)
        return path


@pytest.fixture
def host(tmp_path) -> FakeHost:
    return FakeHost(tmp_path)


@pytest.fixture
def probe() -> FakeProbe:
    return FakeProbe()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(mount_table_files=["vold.fstab", "vold.conf"])
