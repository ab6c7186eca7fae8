from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TrackInfo:
    artist: str = ""
    title: str = ""
    album: str = ""
    # cover art reference (usually a file:// or http(s) URL)
    cover: str = ""

    @property
    def display(self) -> str:
        out = ""
        if self.album:
            out += f"'{self.album}' "
        if self.title:
            out += f"{self.title} by "
        return out + self.artist

    def __str__(self) -> str:
        return self.display
