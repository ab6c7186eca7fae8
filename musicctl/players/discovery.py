from __future__ import annotations

import logging

from musicctl.aio import gather_all
from musicctl.bus import BusSession

from . import radiotray, shairport
from .base import Player
from .mpris import MprisPlayer, is_mpris_name
from .radiotray import RadioTrayPlayer
from .shairport import ShairportSyncPlayer

logger = logging.getLogger(__name__)


async def _connect(session: BusSession, bus_name: str) -> Player:
    if bus_name == shairport.SERVICE_NAME:
        return await ShairportSyncPlayer.connect(session, bus_name)
    return await MprisPlayer.connect(session, bus_name)


async def discover(session: BusSession) -> list[Player]:
    """
    Build one Player per known service on the bus.

    MPRIS names come first in bus order, RadioTray-NG last. If any player
    fails to bind, the whole discovery fails.
    """
    names = list(dict.fromkeys(await session.list_names()))
    matches = [n for n in names if is_mpris_name(n)]
    logger.debug("MPRIS names on bus: %s", matches)

    players: list[Player] = await gather_all(_connect(session, n) for n in matches)

    if radiotray.SERVICE_NAME in names:
        players.append(await RadioTrayPlayer.connect(session))

    return players
