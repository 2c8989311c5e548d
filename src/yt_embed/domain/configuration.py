"""Player configuration model and its wire-format encoder.

The configuration is a sparse record: every option is optional and an absent
option means "let the remote player decide". Only present options are encoded,
each under a fixed player-parameter key.

Read more: https://developers.google.com/youtube/player_parameters
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Final, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


WireValue = Union[int, str]


class PlayerColor(str, Enum):
    """Progress bar colors accepted by the remote player.

    Notes
    -----
    - Setting the color to ``white`` disables the ``modestbranding`` option on the
      remote side.
    """

    RED = "red"
    WHITE = "white"


# Configuration field -> player parameter key. Order is the encoding order.
WIRE_KEYS: Final[dict[str, str]] = {
    "auto_play": "autoplay",
    "caption_language": "cc_lang_pref",
    "captions_closed": "cc_load_policy",
    "color": "color",
    "show_controls": "controls",
    "keyboard_controls_disabled": "disablekb",
    "enable_js_api": "enablejsapi",
    "end_time": "end",
    "show_fullscreen_button": "fs",
    "language": "hl",
    "show_annotations": "iv_load_policy",
    "loop_enabled": "loop",
    "modest_branding": "modestbranding",
    "play_inline": "playsinline",
    "show_related_videos": "rel",
    "start_time": "start",
    "referrer": "widget_referrer",
}

# Read by the embedding host directly; never sent to the player.
LOCAL_ONLY_FIELDS: Final[frozenset[str]] = frozenset(
    {"is_user_interaction_enabled", "allows_picture_in_picture_media_playback"}
)

# Player parameters owned by the transport layer rather than the configuration.
RESERVED_WIRE_KEYS: Final[tuple[str, ...]] = ("list", "listType", "origin")

ANNOTATIONS_SHOWN: Final[int] = 1
ANNOTATIONS_HIDDEN: Final[int] = 3


class PlayerConfiguration(BaseModel):
    """Immutable set of launch options for the embedded player.

    Notes
    -----
    - Every field defaults to ``None`` (absent). No player default is assumed here.
    - Fields accept either their Python name or the camelCase alias used by API
      payloads (e.g. ``auto_play`` or ``autoPlay``).
    - Instances are frozen and hashable; use ``configure`` to derive a changed copy.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    is_user_interaction_enabled: Optional[bool] = Field(
        default=None,
        alias="isUserInteractionEnabled",
        description="Whether user events reach the player (host-side only, not encoded)",
    )
    allows_picture_in_picture_media_playback: Optional[bool] = Field(
        default=None,
        alias="allowsPictureInPictureMediaPlayback",
        description="Whether videos may play picture in picture (host-side only, not encoded)",
    )
    auto_play: Optional[bool] = Field(
        default=None, alias="autoPlay", description="Start playing the initial video on load"
    )
    caption_language: Optional[str] = Field(
        default=None, alias="captionLanguage", description="ISO 639-1 code for default captions"
    )
    captions_closed: Optional[bool] = Field(
        default=None,
        alias="captionsClosed",
        description="Show closed captions by default, even if the user turned them off",
    )
    color: Optional[PlayerColor] = Field(default=None, description="Progress bar color")
    show_controls: Optional[bool] = Field(
        default=None, alias="showControls", description="Display the player controls"
    )
    keyboard_controls_disabled: Optional[bool] = Field(
        default=None, alias="keyboardControlsDisabled", description="Ignore keyboard controls"
    )
    enable_js_api: Optional[bool] = Field(
        default=None, alias="enableJsAPI", description="Allow control through IFrame Player API calls"
    )
    end_time: Optional[int] = Field(
        default=None, alias="endTime", description="Stop playback at this many seconds"
    )
    show_fullscreen_button: Optional[bool] = Field(
        default=None, alias="showFullscreenButton", description="Display the fullscreen button"
    )
    language: Optional[str] = Field(
        default=None, description="Interface language, ISO 639-1 code or full locale"
    )
    show_annotations: Optional[bool] = Field(
        default=None, alias="showAnnotations", description="Show video annotations"
    )
    loop_enabled: Optional[bool] = Field(
        default=None, alias="loopEnabled", description="Replay the video or playlist when it ends"
    )
    modest_branding: Optional[bool] = Field(
        default=None, alias="modestBranding", description="Hide the logo in the control bar"
    )
    play_inline: Optional[bool] = Field(
        default=None, alias="playInline", description="Play inline instead of fullscreen on iOS"
    )
    show_related_videos: Optional[bool] = Field(
        default=None,
        alias="showRelatedVideos",
        description="When false, related videos come from the same channel",
    )
    start_time: Optional[int] = Field(
        default=None, alias="startTime", description="Begin playback at this many seconds"
    )
    referrer: Optional[str] = Field(
        default=None, description="URL where the player is embedded, used for analytics"
    )

    def configure(self, **changes: Any) -> PlayerConfiguration:
        """Return a validated copy with ``changes`` applied.

        Parameters
        ----------
        **changes: Any
            Field names (or their aliases) mapped to new values. ``None`` clears a field.

        Returns
        -------
        PlayerConfiguration
            A new instance; the receiver is left untouched.
        """

        model = type(self)
        names_by_alias: dict[str, str] = {
            info.alias: name for name, info in model.model_fields.items() if info.alias
        }
        data: dict[str, Any] = self.model_dump()
        for key, value in changes.items():
            data[names_by_alias.get(key, key)] = value
        return model.model_validate(data)

    def encode(self) -> dict[str, WireValue]:
        """Shortcut for ``encode_configuration(self)``."""

        return encode_configuration(self)


def _bit(value: bool) -> int:
    return 1 if value else 0


def _encode_value(field_name: str, value: Any) -> WireValue:
    """Encode a single present option to its wire value.

    Notes
    -----
    - ``show_annotations`` is not a bit: ``1`` shows annotations, ``3`` hides them.
      The protocol reserves ``2`` for a deprecated mode that is never produced.
    - Integers and strings pass through untouched; range checks belong to the player.
    """

    if field_name == "show_annotations":
        return ANNOTATIONS_SHOWN if value else ANNOTATIONS_HIDDEN
    if isinstance(value, PlayerColor):
        return value.value
    if isinstance(value, bool):
        return _bit(value)
    return value


def encode_configuration(configuration: PlayerConfiguration) -> dict[str, WireValue]:
    """Encode a configuration into player parameters.

    Parameters
    ----------
    configuration: PlayerConfiguration
        The configuration to encode.

    Returns
    -------
    dict[str, WireValue]
        One entry per present wire option, keyed by its player parameter name and
        ordered as in ``WIRE_KEYS``. Local-only options never appear.
    """

    encoded: dict[str, WireValue] = {}
    for field_name, wire_key in WIRE_KEYS.items():
        value: Any = getattr(configuration, field_name)
        if value is None:
            continue
        encoded[wire_key] = _encode_value(field_name, value)
    return encoded
