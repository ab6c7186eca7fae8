from __future__ import annotations

from .types import TrackInfo

MPRIS_PREFIX = "org.mpris.MediaPlayer2."


def strip_prefix(bus_name: str) -> str:
    if bus_name.startswith(MPRIS_PREFIX):
        return bus_name[len(MPRIS_PREFIX):]
    return bus_name


class Player:
    """
    Uniform control surface over one remote player.

    Every operation is a coroutine wrapping one or more D-Bus calls and
    raises TransportError when the bus or the remote side fails.
    """

    bus_name: str

    async def play(self) -> None:
        """Toggle play/pause (or just play, where the player has no pause)."""
        raise NotImplementedError

    async def stop(self) -> None:
        raise NotImplementedError

    async def next(self) -> None:
        raise NotImplementedError

    async def previous(self) -> None:
        raise NotImplementedError

    async def name(self) -> str:
        raise NotImplementedError

    async def info(self) -> TrackInfo | None:
        """Current track, or None when nothing is loaded."""
        raise NotImplementedError

    async def can_play_now(self) -> bool:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.bus_name!r})"
