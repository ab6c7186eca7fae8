from .base import Player
from .discovery import discover
from .mpris import MprisPlayer
from .radiotray import RadioTrayPlayer
from .shairport import ShairportSyncPlayer
from .types import TrackInfo

__all__ = [
    "MprisPlayer",
    "Player",
    "RadioTrayPlayer",
    "ShairportSyncPlayer",
    "TrackInfo",
    "discover",
]
