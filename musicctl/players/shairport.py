from __future__ import annotations

from .base import strip_prefix
from .metadata import ARTIST_KEY
from .mpris import MprisPlayer

SERVICE_NAME = "org.mpris.MediaPlayer2.ShairportSync"


class ShairportSyncPlayer(MprisPlayer):
    """
    Shairport Sync (AirPlay receiver) through its native RemoteControl
    interface. Same verbs and metadata as MPRIS, but readiness is the
    "Available" property: whether an AirPlay source is connected.
    """

    object_path = "/org/gnome/ShairportSync"
    interface = "org.gnome.ShairportSync.RemoteControl"

    async def name(self) -> str:
        return strip_prefix(self.bus_name)

    async def can_play_now(self) -> bool:
        if not await self._remote.get("Available"):
            return False
        return ARTIST_KEY in await self.metadata()
