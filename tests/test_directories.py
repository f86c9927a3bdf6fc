import pytest

from volume_inventory.models.volume import MediaState
from volume_inventory.services import directories
from volume_inventory.services.volume_registry import VolumeRegistry


@pytest.fixture
def snapshot(host, probe, test_settings, tmp_path):
    (tmp_path / "extSdCard").mkdir()
    host.write_mount_table(f"dev_mount sdcard1 {tmp_path}/extSdCard auto /devices/b\n")
    return VolumeRegistry(host, test_settings, probe).rescan()


def test_internal_uses_host_dirs(snapshot, host):
    assert directories.files_dir(snapshot.internal, host) == host.app_files_dir()
    assert directories.cache_dir(snapshot.internal, host) == host.app_cache_dir()
    sub = directories.files_dir(snapshot.internal, host, "notes")
    assert sub == host.app_files_dir() / "notes"
    assert sub.is_dir()


def test_internal_has_no_public_dir(snapshot, host):
    assert directories.public_directory(snapshot.internal, host, "Music") is None


def test_primary_uses_host_primitives_when_present(snapshot, host):
    host.external_app_dirs = True
    assert directories.files_dir(snapshot.primary, host) == host.external / "platform-files"
    assert directories.cache_dir(snapshot.primary, host) == host.external / "platform-cache"


def test_primary_falls_back_to_synthesized_layout(snapshot, host):
    path = directories.files_dir(snapshot.primary, host, "Pictures")
    assert path == host.external / "Android" / "data" / host.package_name / "files" / "Pictures"
    assert path.is_dir()
    cache = directories.cache_dir(snapshot.primary, host)
    assert cache == host.external / "Android" / "data" / host.package_name / "cache"
    assert cache.is_dir()
    assert directories.public_directory(snapshot.primary, host, "DCIM") == host.external / "DCIM"


def test_secondary_synthesized_and_created(snapshot, host, tmp_path):
    sec = snapshot.secondary
    path = directories.files_dir(sec, host)
    assert path == tmp_path / "extSdCard" / "Android" / "data" / host.package_name / "files"
    assert path.is_dir()
    public = directories.public_directory(sec, host, "Music")
    assert public == tmp_path / "extSdCard" / "Music"
    assert not public.exists()


def test_read_only_volume_is_not_written(host, probe, test_settings):
    host.state = MediaState.MOUNTED_READ_ONLY
    snap = VolumeRegistry(host, test_settings, probe).rescan()
    path = directories.files_dir(snap.primary, host)
    assert path is not None
    assert not path.exists()


def test_unavailable_volume_gives_none(host, probe, test_settings, tmp_path):
    host.write_mount_table(f"dev_mount sd {tmp_path}/gone auto /x\n")
    snap = VolumeRegistry(host, test_settings, probe).rescan()
    assert directories.files_dir(snap.secondary, host) is None
    assert directories.cache_dir(snap.secondary, host) is None
    assert directories.public_directory(snap.secondary, host, "Music") is None


def test_missing_category_is_invalid(snapshot, host):
    with pytest.raises(ValueError):
        directories.public_directory(snapshot.primary, host, None)


def test_internal_dirs_creation_failure_is_silent(tmp_path):
    from volume_inventory.config import Settings
    from volume_inventory.host.local import LocalHost

    data = tmp_path / "data"
    data.mkdir()
    # a plain file where the per-app tree should go
    (data / "data").write_text("")
    host = LocalHost(Settings(
        root_directory=tmp_path / "system",
        data_directory=data,
        external_storage_directory=tmp_path / "sdcard",
        package_name="org.example.app",
    ))
    snap = VolumeRegistry(host, host.settings).rescan()

    files = directories.files_dir(snap.internal, host)
    assert files == data / "data" / "org.example.app" / "files"
    assert not files.exists()
    cache = directories.cache_dir(snap.internal, host)
    assert not cache.exists()
    assert not directories.files_dir(snap.internal, host, "notes").exists()
