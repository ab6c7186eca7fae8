from __future__ import annotations

import logging
from typing import Sequence

from .errors import MusicCtlError, NoActivePlayer
from .players.base import Player

logger = logging.getLogger(__name__)


async def first_active(players: Sequence[Player], instance: str | None = None) -> Player:
    """
    First player (in discovery order) that can play right now and, when
    `instance` is given, whose display name equals it.
    """
    for player in players:
        try:
            eligible = await player.can_play_now()
        except MusicCtlError as e:
            logger.debug("Skipping %r: %s", player, e)
            continue
        if not eligible:
            continue
        if instance is None or await player.name() == instance:
            return player
    raise NoActivePlayer("No active players available")
