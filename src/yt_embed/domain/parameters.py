"""Request and response payloads for the player parameter API."""
from __future__ import annotations

from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, Field, PlainSerializer, PlainValidator, WithJsonSchema

from yt_embed.domain.configuration import PlayerConfiguration
from yt_embed.domain.playlist import PlaylistID, PlaylistKind


def _parse_playlist(value: Any) -> PlaylistID:
    """Validate a raw playlist value with ``PlaylistID.coerce``.

    Notes
    -----
    - ``TypeError`` is re-raised as ``ValueError`` so pydantic reports a validation
      error (422) instead of letting it escape as a server error.
    """

    try:
        return PlaylistID.coerce(value)
    except TypeError as te:
        raise ValueError(str(te)) from te


# A playlist id, comma separated video ids, or a list of video ids, parsed on input.
PlaylistValue = Annotated[
    PlaylistID,
    PlainValidator(_parse_playlist),
    PlainSerializer(lambda playlist_id: playlist_id.encode()),
    WithJsonSchema(
        {"anyOf": [{"type": "string"}, {"type": "array", "items": {"type": "string"}}]}
    ),
]


class PlayerParametersRequest(BaseModel):
    """Request payload to build player parameters.

    Notes
    -----
    - Exactly one of ``videoId`` and ``playlist`` must be set.
    - ``playlist`` may be a playlist id, comma separated video ids, or a list of
      video ids (a one-element list stays a video list); it is parsed into a
      ``PlaylistID`` during validation.
    - ``configuration`` uses camelCase option names, e.g. ``{"autoPlay": true}``.
    - ``origin`` is sent whenever present, including an empty string.
    """

    videoId: Optional[str] = Field(default=None, description="Video identifier to play")
    playlist: Optional[PlaylistValue] = Field(
        default=None, description="Playlist id, comma separated video ids, or list of video ids"
    )
    configuration: PlayerConfiguration = Field(
        default_factory=PlayerConfiguration, description="Player launch options"
    )
    origin: Optional[str] = Field(default=None, description="Embedding page origin")


class PlayerParametersResponse(BaseModel):
    """Encoded player parameters in the forms accepted by the player runtime."""

    sourceId: str = Field(description="Video id or playlist identity key")
    playerVars: dict[str, Any] = Field(description="Encoded player variables")
    payload: dict[str, Any] = Field(description="JSON payload for the player runtime")
    embedUrl: str = Field(description="Embed URL carrying the player variables")


class PlaylistParseRequest(BaseModel):
    """Request payload to parse a raw playlist identifier."""

    value: PlaylistValue = Field(description="Raw playlist string or list of video ids")


class PlaylistParseResponse(BaseModel):
    """Parsed playlist identifier."""

    kind: PlaylistKind = Field(description="Identifier case")
    id: str = Field(description="Identity key")
    wire: Union[str, list[str]] = Field(description="Wire encoding")
