from __future__ import annotations

import asyncio
from enum import Enum
import logging
from typing import Sequence

import typer

from musicctl.aio import gather_settled
from musicctl.bus import BusSession
from musicctl.config import AppConfig
from musicctl.errors import MusicCtlError
from musicctl.notify import notify
from musicctl.players import Player, discover
from musicctl.selector import first_active

logger = logging.getLogger(__name__)


class Command(str, Enum):
    LIST = "list"
    PLAY = "play"
    STOP = "stop"
    NEXT = "next"
    PREV = "prev"
    INFO = "info"
    VINFO = "vinfo"
    MUTE = "mute"


async def list_players(players: Sequence[Player], *, debug: bool = False) -> None:
    names = await gather_settled((p.name() for p in players), default="")

    if debug:
        # show everything, failures included
        results = await asyncio.gather(*(p.info() for p in players), return_exceptions=True)
        for name, res in zip(names, results):
            typer.echo(f"{name}: {res!r}")
        return

    infos = await gather_settled(p.info() for p in players)
    for name, info in zip(names, infos):
        if info is not None:
            typer.echo(f"{name}: {info}")


async def show_notification(session: BusSession, cfg: AppConfig, player: Player) -> None:
    try:
        info = await player.info()
    except MusicCtlError as e:
        logger.debug("No track info from %r: %s", player, e)
        return
    if info is None:
        return

    nid = await notify(
        session,
        app_name=cfg.notify_app_name,
        summary=info.display,
        body=await player.name(),
        icon=info.cover,
        timeout_ms=cfg.notify_timeout_ms,
    )
    typer.echo(f"Created Notification: {nid}")


async def run(
    cfg: AppConfig,
    command: Command,
    *,
    debug: bool = False,
    session: BusSession | None = None,
) -> None:
    """
    One invocation: connect -> discover -> select -> dispatch.
    Errors propagate to the caller.
    """
    if session is None:
        session = await BusSession.connect()

    players = await discover(session)
    logger.debug("Discovered players: %s", players)

    if command is Command.LIST:
        await list_players(players, debug=debug)
        return

    active = await first_active(players, cfg.instance)
    logger.debug("Active player: %r", active)

    if command is Command.MUTE:
        raise NotImplementedError("mute is not implemented")

    if command is Command.INFO:
        info = await active.info()
        if info is not None:
            typer.echo(f"{await active.name()}: {info}")
    elif command is Command.PLAY:
        await active.play()
    elif command is Command.STOP:
        await active.stop()
    elif command is Command.NEXT:
        await active.next()
    elif command is Command.PREV:
        await active.previous()
    elif command is Command.VINFO:
        await show_notification(session, cfg, active)
