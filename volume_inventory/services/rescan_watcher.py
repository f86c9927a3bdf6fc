"""Rescan on volume change notifications."""

import inspect
import logging
from typing import Any, Callable, Optional, Union

from ..host.base import HostPlatform
from ..models.inventory import VolumeEvent
from .volume_registry import VolumeRegistry

logger = logging.getLogger(__name__)


class RescanWatcher:
    """Rescans the registry whenever the host reports a volume change.

    The optional callback runs after each rescan, with no arguments.
    attach()/detach() must be paired by the caller.
    """

    def __init__(
        self,
        registry: VolumeRegistry,
        callback: Optional[Callable[[], Any]] = None,
    ):
        self.registry = registry
        self.callback = callback
        self._host: Optional[HostPlatform] = None

    @property
    def attached(self) -> bool:
        return self._host is not None

    def attach(self, host: Optional[HostPlatform] = None) -> None:
        self.registry.ensure_scanned()
        self._host = host or self.registry.host
        self._host.add_volume_listener(self.on_event)

    def detach(self) -> None:
        if self._host is not None:
            self._host.remove_volume_listener(self.on_event)
            self._host = None

    def on_event(self, event: Union[VolumeEvent, str], path: Optional[str] = None) -> None:
        event = VolumeEvent(event)
        logger.info(f"Storage: {event.value}-{path}")
        self.registry.rescan()
        if self.callback is not None:
            self.callback()

    async def on_event_async(self, event: Union[VolumeEvent, str], path: Optional[str] = None) -> None:
        """Event loop variant; the rescan runs in a worker thread and the
        callback may be a coroutine function."""
        event = VolumeEvent(event)
        logger.info(f"Storage: {event.value}-{path}")
        await self.registry.refresh()
        if self.callback is None:
            return
        result = self.callback()
        if inspect.isawaitable(result):
            await result
