from __future__ import annotations

from typing import Any

from musicctl.bus import BusSession, RemoteObject

from .base import Player
from .metadata import from_state, json_str, parse_state
from .types import TrackInfo

SERVICE_NAME = "com.github.radiotray_ng"
OBJECT_PATH = "/com/github/radiotray_ng"
INTERFACE = "com.github.radiotray_ng"


class RadioTrayPlayer(Player):
    """
    RadioTray-NG internet radio. Stations instead of tracks, no pause,
    and the state comes back as a JSON string.
    """

    def __init__(self, remote: RemoteObject):
        self.bus_name = SERVICE_NAME
        self._remote = remote

    @classmethod
    async def connect(cls, session: BusSession) -> "RadioTrayPlayer":
        return cls(await session.remote(SERVICE_NAME, OBJECT_PATH, INTERFACE))

    async def play(self) -> None:
        await self._remote.call("play")

    async def stop(self) -> None:
        await self._remote.call("stop")

    async def next(self) -> None:
        await self._remote.call("next_station")

    async def previous(self) -> None:
        await self._remote.call("previous_station")

    async def mute(self) -> None:
        await self._remote.call("mute")

    async def name(self) -> str:
        return "RadioTrayNG"

    async def state(self) -> Any:
        return parse_state(await self._remote.call("get_player_state"))

    async def info(self) -> TrackInfo | None:
        return from_state(await self.state())

    async def can_play_now(self) -> bool:
        return bool(json_str(await self.state(), "url"))
