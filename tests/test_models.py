import pytest
from pydantic import ValidationError

from volume_inventory.models.volume import Capacity, MediaState, VolumeKind, VolumeRecord

GiB = 1024 ** 3
MiB = 1024 ** 2


def test_rounded_total_next_power_of_two():
    assert Capacity(free_bytes=0, total_bytes=14 * GiB).rounded_total() == 16 * GiB
    assert Capacity(free_bytes=0, total_bytes=16 * GiB).rounded_total() == 16 * GiB
    assert Capacity(free_bytes=0, total_bytes=3 * MiB).rounded_total() == 4 * MiB


def test_rounded_total_floor():
    assert Capacity().rounded_total() == MiB
    assert Capacity(free_bytes=0, total_bytes=1000).rounded_total() == MiB


def test_writeable_requires_available():
    with pytest.raises(ValidationError):
        VolumeRecord(
            mount_path="/mnt/x",
            display_name="x",
            kind=VolumeKind.SECONDARY,
            available=False,
            writeable=True,
        )


def test_records_are_frozen():
    rec = VolumeRecord(mount_path="/mnt/x", display_name="x", kind=VolumeKind.SECONDARY)
    with pytest.raises(ValidationError):
        rec.removable = True


def test_media_state_from_flags():
    assert MediaState.from_flags(True, True) == MediaState.MOUNTED
    assert MediaState.from_flags(True, False) == MediaState.MOUNTED_READ_ONLY
    assert MediaState.from_flags(False, False) == MediaState.REMOVED
