"""Unit tests for player sources and the player parameter builders."""
from __future__ import annotations

import json
import unittest
from typing import Any

from yt_embed.domain.configuration import PlayerConfiguration
from yt_embed.domain.playlist import PlaylistID
from yt_embed.domain.source import PlayerSource, SourceKind
from yt_embed.services.parameters import (
    build_embed_url,
    build_player_payload,
    build_player_variables,
)


class TestPlayerSource(unittest.TestCase):
    """Tests for PlayerSource construction and ids."""

    def test_video_source(self) -> None:
        source = PlayerSource.video("dQw4w9WgXcQ")
        self.assertIs(source.kind, SourceKind.VIDEO)
        self.assertEqual(source.id, "dQw4w9WgXcQ")

    def test_playlist_source_coerces_raw_values(self) -> None:
        """Strings and lists are parsed with PlaylistID rules."""
        self.assertEqual(PlayerSource.playlist("PL1").playlist_id, PlaylistID.playlist("PL1"))
        self.assertEqual(PlayerSource.playlist("a,b").playlist_id, PlaylistID.videos(["a", "b"]))
        self.assertEqual(PlayerSource.playlist(["a"]).playlist_id, PlaylistID.videos(["a"]))
        self.assertEqual(PlayerSource.playlist(["a", "b"]).id, "a,b")

    def test_inconsistent_source_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            PlayerSource(SourceKind.VIDEO)
        with self.assertRaises(ValueError):
            PlayerSource(SourceKind.PLAYLIST, video_id="x")


class TestPlayerVariables(unittest.TestCase):
    """Tests for build_player_variables and build_player_payload."""

    def test_video_source_has_no_list_keys(self) -> None:
        """A video source contributes only the encoded configuration."""
        config = PlayerConfiguration(auto_play=True, start_time=30, end_time=90)
        player_vars: dict[str, Any] = build_player_variables(PlayerSource.video("v1"), config)
        self.assertEqual(player_vars, {"autoplay": 1, "end": 90, "start": 30})

    def test_playlist_source_adds_scalar_list(self) -> None:
        player_vars = build_player_variables(PlayerSource.playlist("PL1"), PlayerConfiguration())
        self.assertEqual(player_vars, {"listType": "playlist", "list": "PL1"})

    def test_video_list_source_adds_array_list(self) -> None:
        """Video lists stay arrays on the wire, never comma-joined."""
        player_vars = build_player_variables(PlayerSource.playlist(["a", "b"]), PlayerConfiguration())
        self.assertEqual(player_vars["list"], ["a", "b"])

    def test_origin_is_added_when_given(self) -> None:
        player_vars = build_player_variables(
            PlayerSource.video("v1"), PlayerConfiguration(), origin="https://example.com"
        )
        self.assertEqual(player_vars, {"origin": "https://example.com"})

    def test_empty_origin_is_a_value(self) -> None:
        """Only None means "no origin"; an empty string is sent as-is."""
        player_vars = build_player_variables(PlayerSource.video("v1"), PlayerConfiguration(), origin="")
        self.assertEqual(player_vars, {"origin": ""})
        url = build_embed_url(PlayerSource.video("v1"), PlayerConfiguration(), origin="")
        self.assertEqual(url, "https://www.youtube.com/embed/v1?origin=")

    def test_debug_log_carries_structured_context(self) -> None:
        """The built variables are logged as extra attributes, not in the message."""
        with self.assertLogs("yt_embed.services.parameters", level="DEBUG") as captured:
            build_player_variables(PlayerSource.playlist(["a", "b"]), PlayerConfiguration(auto_play=True))
        record = captured.records[0]
        self.assertEqual(record.getMessage(), "Built player variables")
        self.assertEqual(record.sourceKind, "playlist")  # type: ignore[attr-defined]
        self.assertEqual(record.sourceId, "a,b")  # type: ignore[attr-defined]
        self.assertEqual(
            record.playerVars,  # type: ignore[attr-defined]
            {"autoplay": 1, "listType": "playlist", "list": ["a", "b"]},
        )

    def test_payload_shapes(self) -> None:
        """videoId is only present for video sources; payloads are JSON-serializable."""
        config = PlayerConfiguration(show_annotations=False)
        video_payload = build_player_payload(PlayerSource.video("v1"), config)
        self.assertEqual(video_payload, {"videoId": "v1", "playerVars": {"iv_load_policy": 3}})

        list_payload = build_player_payload(PlayerSource.playlist("a,b"), config)
        self.assertNotIn("videoId", list_payload)
        self.assertEqual(
            json.loads(json.dumps(list_payload)),
            {"playerVars": {"iv_load_policy": 3, "listType": "playlist", "list": ["a", "b"]}},
        )


class TestEmbedUrl(unittest.TestCase):
    """Tests for build_embed_url."""

    def test_video_url_with_query(self) -> None:
        config = PlayerConfiguration(auto_play=True, start_time=30, end_time=90)
        url: str = build_embed_url(PlayerSource.video("v1"), config)
        self.assertEqual(url, "https://www.youtube.com/embed/v1?autoplay=1&end=90&start=30")

    def test_video_url_without_options(self) -> None:
        url = build_embed_url(PlayerSource.video("v1"), PlayerConfiguration())
        self.assertEqual(url, "https://www.youtube.com/embed/v1")

    def test_video_list_uses_repeated_keys(self) -> None:
        url = build_embed_url(
            PlayerSource.playlist(["a", "b"]),
            PlayerConfiguration(),
            origin="https://example.com",
            base_url="https://player.test/embed/",
        )
        self.assertEqual(
            url,
            "https://player.test/embed?listType=playlist&list=a&list=b&origin=https%3A%2F%2Fexample.com",
        )

    def test_playlist_url(self) -> None:
        url = build_embed_url(PlayerSource.playlist("PL1"), PlayerConfiguration(color="white"))
        self.assertEqual(url, "https://www.youtube.com/embed?color=white&listType=playlist&list=PL1")


if __name__ == "__main__":
    unittest.main()
