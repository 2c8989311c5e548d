"""Playlist identifier value: a playlist id or an explicit list of video ids."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence, Union


def _is_string_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value)


class PlaylistKind(str, Enum):
    """The two cases of a playlist identifier."""

    PLAYLIST = "playlist"
    VIDEOS = "videos"


@dataclass(frozen=True)
class PlaylistID:
    """A playlist identifier.

    Notes
    -----
    - ``PLAYLIST`` holds a single playlist id string.
    - ``VIDEOS`` holds an ordered tuple of video ids; order is playback order.
    - Equality is structural: ``videos(["x"])`` and ``playlist("x")`` differ even
      though they share the identity key ``"x"``.
    """

    kind: PlaylistKind
    value: Union[str, tuple[str, ...]]

    def __post_init__(self) -> None:
        if self.kind is PlaylistKind.PLAYLIST:
            if not isinstance(self.value, str):
                raise TypeError("A playlist identifier holds a single string")
        else:
            if isinstance(self.value, str) or not _is_string_sequence(self.value):
                raise TypeError("A video list holds a sequence of strings")
            object.__setattr__(self, "value", tuple(self.value))

    @classmethod
    def playlist(cls, playlist: str) -> PlaylistID:
        """Create a playlist identifier."""

        return cls(PlaylistKind.PLAYLIST, playlist)

    @classmethod
    def videos(cls, videos: Sequence[str]) -> PlaylistID:
        """Create an explicit video list."""

        return cls(PlaylistKind.VIDEOS, tuple(videos))

    @classmethod
    def from_string(cls, raw: str) -> PlaylistID:
        """Parse a raw identifier string.

        Parameters
        ----------
        raw: str
            A playlist id, or comma separated video ids.

        Returns
        -------
        PlaylistID
            A video list when splitting on ``,`` yields more than one segment;
            otherwise a playlist holding ``raw`` unchanged.

        Notes
        -----
        - Segments are not trimmed and commas cannot be escaped; callers pass
          clean identifiers.
        """

        video_ids: list[str] = raw.split(",")
        if len(video_ids) > 1:
            return cls.videos(video_ids)
        return cls.playlist(raw)

    @classmethod
    def from_list(cls, videos: Sequence[str]) -> PlaylistID:
        """Create a video list from ``videos``, whatever its length (even 0 or 1)."""

        return cls.videos(videos)

    @classmethod
    def coerce(cls, value: Any) -> PlaylistID:
        """Build an identifier from a string, a sequence of strings, or an identifier.

        Raises
        ------
        TypeError
            If ``value`` is none of the accepted types.
        """

        if isinstance(value, PlaylistID):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        if _is_string_sequence(value):
            return cls.from_list(value)
        raise TypeError(f"Cannot build a playlist identifier from {type(value).__name__}")

    @property
    def identity_key(self) -> str:
        """Lookup key: the playlist id, or the video ids joined with commas.

        Notes
        -----
        - Lossy: never use it as the wire encoding or as a structural equality test.
        - Re-parsing it with ``from_string`` round-trips unless a video id contains
          a comma or the list has fewer than two entries.
        """

        if self.kind is PlaylistKind.PLAYLIST:
            return self.value  # type: ignore[return-value]
        return ",".join(self.value)

    def encode(self) -> Union[str, list[str]]:
        """Wire value: the scalar playlist id, or the ordered list of video ids."""

        if self.kind is PlaylistKind.PLAYLIST:
            return self.value  # type: ignore[return-value]
        return list(self.value)

    def __str__(self) -> str:
        return self.identity_key
