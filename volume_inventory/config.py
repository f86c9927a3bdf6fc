"""Application settings."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    debug: bool = False
    root_directory: Path = Path("/system")
    mount_table_files: list[str] = ["vold.fstab", "vold.conf"]
    data_directory: Path = Path("/data")
    external_storage_directory: Path = Path("/mnt/sdcard")
    # None means the host does not expose the query
    external_storage_removable: Optional[bool] = None
    external_storage_emulated: Optional[bool] = None
    external_app_dirs_supported: bool = True
    package_name: str = "volume_inventory"
    capacity_exact: bool = True

    model_config = {"env_prefix": "VOLINV_"}

    @property
    def mount_table_directory(self) -> Path:
        return self.root_directory / "etc"


settings = Settings()
