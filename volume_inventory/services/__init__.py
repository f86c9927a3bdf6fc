"""Parsing, classification and inventory services."""

from .heuristics import classify_primary_removable
from .inventory_query import InventoryQuery
from .mount_table import MountTableParser
from .rescan_watcher import RescanWatcher
from .volume_registry import InventoryNotReadyError, VolumeRegistry

__all__ = [
    "classify_primary_removable",
    "InventoryQuery",
    "MountTableParser",
    "RescanWatcher",
    "InventoryNotReadyError",
    "VolumeRegistry",
]
