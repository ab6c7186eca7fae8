from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

import dbus

from .errors import TransportError

logger = logging.getLogger(__name__)

PROPERTIES_IFACE = "org.freedesktop.DBus.Properties"


async def _blocking(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """
    Run a blocking dbus-python call off the event loop.

    Every remote call goes through here, so dbus errors surface as
    TransportError and nothing else leaks out of this module.
    """
    try:
        return await asyncio.to_thread(fn, *args, **kwargs)
    except dbus.DBusException as e:
        raise TransportError(str(e), error_name=e.get_dbus_name()) from e


class RemoteObject:
    """One object path on one bus name, bound to a single interface."""

    def __init__(self, proxy: Any, interface: str):
        self._proxy = proxy
        self.interface = interface

    async def call(self, method: str, *args: Any, signature: str | None = None) -> Any:
        fn = self._proxy.get_dbus_method(method, dbus_interface=self.interface)
        if signature is not None:
            return await _blocking(fn, *args, signature=signature)
        return await _blocking(fn, *args)

    async def get(self, prop: str) -> Any:
        return await _blocking(
            self._proxy.Get, self.interface, prop, dbus_interface=PROPERTIES_IFACE
        )


class BusSession:
    def __init__(self, bus: Any):
        self._bus = bus

    @classmethod
    async def connect(cls) -> "BusSession":
        bus = await _blocking(dbus.SessionBus)
        return cls(bus)

    async def list_names(self) -> list[str]:
        names = await _blocking(self._bus.list_names)
        return [str(n) for n in names]

    async def remote(self, bus_name: str, object_path: str, interface: str) -> RemoteObject:
        # get_object resolves the name owner, so a vanished service fails here
        proxy = await _blocking(self._bus.get_object, bus_name, object_path, introspect=False)
        logger.debug("Bound %s at %s (%s)", bus_name, object_path, interface)
        return RemoteObject(proxy, interface)
