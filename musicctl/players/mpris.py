from __future__ import annotations

import logging
from typing import Mapping

from musicctl.bus import BusSession, RemoteObject
from musicctl.errors import DecodeError, TransportError

from .base import MPRIS_PREFIX, Player, strip_prefix
from .metadata import ARTIST_KEY, from_metadata
from .types import TrackInfo

logger = logging.getLogger(__name__)

# Property-not-present answers from players that skip CanPlay
_MISSING_PROPERTY_ERRORS = frozenset(
    {
        "org.freedesktop.DBus.Error.UnknownProperty",
        "org.freedesktop.DBus.Error.InvalidArgs",
    }
)


class MprisPlayer(Player):
    object_path = "/org/mpris/MediaPlayer2"
    interface = "org.mpris.MediaPlayer2.Player"

    def __init__(self, bus_name: str, remote: RemoteObject):
        self.bus_name = bus_name
        self._remote = remote

    @classmethod
    async def connect(cls, session: BusSession, bus_name: str) -> "MprisPlayer":
        remote = await session.remote(bus_name, cls.object_path, cls.interface)
        return cls(bus_name, remote)

    async def play(self) -> None:
        await self._remote.call("PlayPause")

    async def stop(self) -> None:
        await self._remote.call("Stop")

    async def next(self) -> None:
        await self._remote.call("Next")

    async def previous(self) -> None:
        await self._remote.call("Previous")

    async def name(self) -> str:
        return f"{strip_prefix(self.bus_name)} (MPRIS)"

    async def metadata(self) -> dict:
        md = await self._remote.get("Metadata")
        # dbus.Dictionary is a dict subclass
        if not isinstance(md, Mapping):
            raise DecodeError(f"Metadata is not a dictionary: {type(md).__name__}")
        return dict(md)

    async def info(self) -> TrackInfo | None:
        return from_metadata(await self.metadata())

    async def _can_play(self) -> bool:
        try:
            return bool(await self._remote.get("CanPlay"))
        except TransportError as e:
            if e.error_name in _MISSING_PROPERTY_ERRORS:
                logger.debug("%s has no CanPlay property, assuming true", self.bus_name)
                return True
            raise

    async def can_play_now(self) -> bool:
        if not await self._can_play():
            return False
        return ARTIST_KEY in await self.metadata()


def is_mpris_name(bus_name: str) -> bool:
    return bus_name.startswith(MPRIS_PREFIX)
