"""Host platform boundary."""

from .base import HostPlatform, VolumeListener
from .local import LocalHost

__all__ = ["HostPlatform", "VolumeListener", "LocalHost"]
