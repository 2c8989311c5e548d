"""Player source: the content a player is launched with."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

from yt_embed.domain.playlist import PlaylistID


class SourceKind(str, Enum):
    """Kinds of content a player can be launched with."""

    VIDEO = "video"
    PLAYLIST = "playlist"


@dataclass(frozen=True)
class PlayerSource:
    """A single video or a playlist identifier.

    Notes
    -----
    - Exactly one of ``video_id`` / ``playlist_id`` is set, matching ``kind``.
    - Build instances with ``video`` or ``playlist`` rather than directly.
    """

    kind: SourceKind
    video_id: Optional[str] = None
    playlist_id: Optional[PlaylistID] = None

    def __post_init__(self) -> None:
        if self.kind is SourceKind.VIDEO and (self.video_id is None or self.playlist_id is not None):
            raise ValueError("A video source needs a video id and no playlist")
        if self.kind is SourceKind.PLAYLIST and (self.playlist_id is None or self.video_id is not None):
            raise ValueError("A playlist source needs a playlist identifier and no video id")

    @classmethod
    def video(cls, video_id: str) -> PlayerSource:
        return cls(SourceKind.VIDEO, video_id=video_id)

    @classmethod
    def playlist(cls, playlist: Union[PlaylistID, str, Sequence[str]]) -> PlayerSource:
        """Create a playlist source; strings and string lists are coerced via ``PlaylistID.coerce``."""

        return cls(SourceKind.PLAYLIST, playlist_id=PlaylistID.coerce(playlist))

    @property
    def id(self) -> str:
        """The video id, or the playlist identity key."""

        if self.kind is SourceKind.VIDEO:
            return self.video_id  # type: ignore[return-value]
        return self.playlist_id.identity_key  # type: ignore[union-attr]
