"""Registry factory."""

import logging
from typing import Optional

from .config import Settings, settings as default_settings
from .host.base import HostPlatform
from .host.local import LocalHost
from .services.inventory_query import InventoryQuery
from .services.volume_registry import VolumeRegistry


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(name)s: %(message)s")
    if settings.debug:
        logging.getLogger("volume_inventory").setLevel(logging.DEBUG)


def create_registry(
    settings: Optional[Settings] = None,
    host: Optional[HostPlatform] = None,
    scan: bool = True,
) -> VolumeRegistry:
    settings = settings or default_settings
    configure_logging(settings)
    registry = VolumeRegistry(host or LocalHost(settings), settings)
    if scan:
        registry.ensure_scanned()
    return registry


def open_inventory(
    settings: Optional[Settings] = None,
    host: Optional[HostPlatform] = None,
) -> InventoryQuery:
    return InventoryQuery(create_registry(settings, host))
