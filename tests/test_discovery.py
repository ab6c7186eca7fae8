from __future__ import annotations

import asyncio

import pytest

from musicctl.errors import TransportError
from musicctl.players import MprisPlayer, RadioTrayPlayer, ShairportSyncPlayer, discover
from tests.mocks.bus_mock import FakeSession

FOO = "org.mpris.MediaPlayer2.Foo"
SHAIRPORT = "org.mpris.MediaPlayer2.ShairportSync"
RADIOTRAY = "com.github.radiotray_ng"


def _session() -> FakeSession:
    session = FakeSession(
        names=[
            "org.freedesktop.DBus",
            ":1.42",
            FOO,
            SHAIRPORT,
            RADIOTRAY,
            "org.freedesktop.Notifications",
        ]
    )
    session.add_mpris(FOO)
    session.add(SHAIRPORT, props={"Available": False, "Metadata": {}})
    session.add_radiotray(None)
    return session


def test_discovers_each_known_variant():
    players = asyncio.run(discover(_session()))

    assert [type(p) for p in players] == [MprisPlayer, ShairportSyncPlayer, RadioTrayPlayer]
    assert [p.bus_name for p in players] == [FOO, SHAIRPORT, RADIOTRAY]


def test_shairport_override_binds_native_interface():
    session = _session()
    asyncio.run(discover(session))
    assert session.objects[SHAIRPORT].interface == "org.gnome.ShairportSync.RemoteControl"


def test_radiotray_goes_last_regardless_of_bus_order():
    session = FakeSession(names=[RADIOTRAY, "org.mpris.MediaPlayer2.vlc", FOO])
    players = asyncio.run(discover(session))
    assert [p.bus_name for p in players] == ["org.mpris.MediaPlayer2.vlc", FOO, RADIOTRAY]


def test_unrelated_names_are_ignored():
    session = FakeSession(names=["org.freedesktop.DBus", "org.gnome.Shell", "org.mpris.MediaPlayer2"])
    assert asyncio.run(discover(session)) == []
    assert session.bound == []


def test_duplicate_names_collapse():
    session = FakeSession(names=[FOO, FOO])
    players = asyncio.run(discover(session))
    assert [p.bus_name for p in players] == [FOO]


def test_one_failing_player_fails_discovery():
    session = _session()
    session.broken.add(FOO)

    with pytest.raises(TransportError, match="Foo"):
        asyncio.run(discover(session))

    # never reached the radio tray binding
    assert RADIOTRAY not in session.bound


def test_list_names_failure_propagates():
    session = FakeSession()

    async def _fail():
        raise TransportError("Failed to connect to socket")

    session.list_names = _fail  # type: ignore[method-assign]
    with pytest.raises(TransportError):
        asyncio.run(discover(session))
