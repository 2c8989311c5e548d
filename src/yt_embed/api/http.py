"""HTTP API routes for building player parameters."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException

from yt_embed.core.config import get_settings, Settings
from yt_embed.domain.parameters import (
    PlayerParametersRequest,
    PlayerParametersResponse,
    PlaylistParseRequest,
    PlaylistParseResponse,
)
from yt_embed.domain.playlist import PlaylistID
from yt_embed.domain.source import PlayerSource
from yt_embed.services.parameters import (
    build_embed_url,
    build_player_payload,
    build_player_variables,
)

logger = logging.getLogger(__name__)

router: APIRouter = APIRouter(prefix="/api", tags=["api"])


def _resolve_source(payload: PlayerParametersRequest) -> PlayerSource:
    """Build the player source from a request.

    Raises
    ------
    ValueError
        Unless exactly one of ``videoId`` and ``playlist`` is provided.
    """

    if (payload.videoId is None) == (payload.playlist is None):
        raise ValueError("Provide exactly one of videoId or playlist")
    if payload.videoId is not None:
        return PlayerSource.video(payload.videoId)
    return PlayerSource.playlist(payload.playlist)  # type: ignore[arg-type]


@router.post("/player/parameters", response_model=PlayerParametersResponse)
def post_player_parameters(payload: PlayerParametersRequest) -> PlayerParametersResponse:
    """Encode a source and configuration into player parameters.

    Notes
    -----
    - Falls back to ``default_origin`` from settings when the request has no origin.
    - Returns the player variables, the JSON payload and an embed URL built from the
      same variables.

    Raises
    ------
    HTTPException
        400 when the source is missing or ambiguous.
    """

    settings: Settings = get_settings()
    try:
        source: PlayerSource = _resolve_source(payload)
    except ValueError as ve:
        logger.warning("Rejected player parameters request: %s", ve)
        raise HTTPException(status_code=400, detail=str(ve)) from ve

    origin: Optional[str] = payload.origin if payload.origin is not None else settings.default_origin
    return PlayerParametersResponse(
        sourceId=source.id,
        playerVars=build_player_variables(source, payload.configuration, origin),
        payload=build_player_payload(source, payload.configuration, origin),
        embedUrl=build_embed_url(source, payload.configuration, origin, base_url=settings.embed_base_url),
    )


@router.post("/playlist/parse", response_model=PlaylistParseResponse)
def post_playlist_parse(payload: PlaylistParseRequest) -> PlaylistParseResponse:
    """Report the case, identity key and wire form of a parsed playlist value."""

    playlist_id: PlaylistID = payload.value
    return PlaylistParseResponse(
        kind=playlist_id.kind,
        id=playlist_id.identity_key,
        wire=playlist_id.encode(),
    )
