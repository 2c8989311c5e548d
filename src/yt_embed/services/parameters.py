"""Combine a player source and configuration into player parameters."""
from __future__ import annotations

import logging
from typing import Any, Final, Optional
from urllib.parse import quote, urlencode

from yt_embed.domain.configuration import PlayerConfiguration, encode_configuration
from yt_embed.domain.source import PlayerSource, SourceKind

logger = logging.getLogger(__name__)

DEFAULT_EMBED_BASE_URL: Final[str] = "https://www.youtube.com/embed"


def build_player_variables(
    source: PlayerSource,
    configuration: PlayerConfiguration,
    origin: Optional[str] = None,
) -> dict[str, Any]:
    """Build the player variables for ``source`` launched with ``configuration``.

    Parameters
    ----------
    source: PlayerSource
        The content to play.
    configuration: PlayerConfiguration
        The launch options.
    origin: Optional[str]
        The embedding page origin, sent as ``origin`` unless ``None``. An empty
        string is a value and is sent as-is.

    Returns
    -------
    dict[str, Any]
        The encoded configuration followed by the reserved ``listType``/``list``
        keys for playlist sources and ``origin`` when set.

    Raises
    ------
    ValueError
        If the source kind is not supported.
    """

    player_vars: dict[str, Any] = encode_configuration(configuration)
    if source.kind is SourceKind.PLAYLIST:
        player_vars["listType"] = "playlist"
        player_vars["list"] = source.playlist_id.encode()  # type: ignore[union-attr]
    elif source.kind is not SourceKind.VIDEO:
        raise ValueError(f"Unsupported player source: {source.kind!r}")
    if origin is not None:
        player_vars["origin"] = origin
    logger.debug(
        "Built player variables",
        extra={"sourceKind": source.kind.value, "sourceId": source.id, "playerVars": player_vars},
    )
    return player_vars


def build_player_payload(
    source: PlayerSource,
    configuration: PlayerConfiguration,
    origin: Optional[str] = None,
) -> dict[str, Any]:
    """Build the JSON payload handed to the player runtime.

    Notes
    -----
    - Shape: ``{"videoId": <id>, "playerVars": {...}}``; ``videoId`` is only present
      for video sources. Video lists stay JSON arrays under ``playerVars.list``.
    """

    payload: dict[str, Any] = {}
    if source.kind is SourceKind.VIDEO:
        payload["videoId"] = source.video_id
    payload["playerVars"] = build_player_variables(source, configuration, origin)
    return payload


def build_embed_url(
    source: PlayerSource,
    configuration: PlayerConfiguration,
    origin: Optional[str] = None,
    base_url: str = DEFAULT_EMBED_BASE_URL,
) -> str:
    """Build an embed URL carrying the player variables as its query string.

    Notes
    -----
    - Video sources append the quoted video id as a path segment.
    - Lists are encoded as repeated query keys in playback order (``doseq``); the
      comma-joined identity key is never used on the wire.
    - No query string is appended when there are no variables.
    """

    url: str = base_url.rstrip("/")
    if source.kind is SourceKind.VIDEO:
        url = f"{url}/{quote(source.video_id or '', safe='')}"
    query: str = urlencode(build_player_variables(source, configuration, origin), doseq=True)
    return f"{url}?{query}" if query else url
