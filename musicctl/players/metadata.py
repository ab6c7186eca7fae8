"""
Normalization of player metadata into TrackInfo.

Two payload shapes are understood:
  - MPRIS-style property dictionaries (``a{sv}``), where values may be
    strings or (nested) arrays of strings, e.g. ``xesam:artist``;
  - JSON state documents as returned by RadioTray-NG.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from musicctl.errors import DecodeError

from .types import TrackInfo

ARTIST_KEY = "xesam:artist"
TITLE_KEY = "xesam:title"
ALBUM_KEY = "xesam:album"
COVER_KEY = "mpris:artUrl"


def variant_to_str(value: Any) -> str:
    # dbus.String / dbus.ObjectPath subclass str, dbus.Array subclasses list
    if isinstance(value, str):
        return str(value)
    if isinstance(value, (list, tuple)):
        if not value:
            return ""
        return variant_to_str(value[0])
    raise DecodeError(f"Unsupported metadata value {value!r} ({type(value).__name__})")


def _field(md: Mapping[str, Any], key: str) -> str:
    if key not in md:
        return ""
    try:
        return variant_to_str(md[key])
    except DecodeError as e:
        raise DecodeError(f"{key}: {e}") from e


def from_metadata(md: Mapping[str, Any] | None) -> TrackInfo | None:
    if not md:
        return None
    return TrackInfo(
        artist=_field(md, ARTIST_KEY),
        title=_field(md, TITLE_KEY),
        album=_field(md, ALBUM_KEY),
        cover=_field(md, COVER_KEY),
    )


def parse_state(raw: str) -> Any:
    try:
        return json.loads(str(raw))
    except json.JSONDecodeError as e:
        raise DecodeError(f"Malformed player state: {e}") from e


def json_str(doc: Any, key: str) -> str:
    if not isinstance(doc, dict):
        return ""
    value = doc.get(key)
    return value if isinstance(value, str) else ""


def from_state(doc: Any) -> TrackInfo | None:
    if doc is None:
        return None
    return TrackInfo(
        artist=json_str(doc, "artist"),
        title=json_str(doc, "title"),
        album=json_str(doc, "station"),
        cover="",
    )
