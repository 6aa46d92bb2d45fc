"""Tests for the season resolver and the rankings / player fetchers."""
from __future__ import annotations

import pytest

from cr_leaderboard.api.players import (
    encode_player_tag,
    fetch_top_players,
    get_player,
    rankings_endpoint,
)
from cr_leaderboard.api.seasons import get_current_season
from cr_leaderboard.errors import MalformedResponseError, UpstreamRequestError
from cr_leaderboard.models import PlayerRank

from conftest import RANKINGS, SEASON_ID, SEASONS, FakeClient


# ── get_current_season ──────────────────────────────────────────

class TestGetCurrentSeason:
    def test_picks_last_listed_season(self, client):
        assert get_current_season(client) == "2023-02"
        assert client.calls == [SEASONS]

    @pytest.mark.parametrize(
        "payload",
        [{"items": []}, {}, {"items": "2023-02"}, {"items": None}, [], None],
    )
    def test_malformed_items(self, payload):
        with pytest.raises(MalformedResponseError):
            get_current_season(FakeClient({SEASONS: payload}))

    def test_last_season_without_id(self):
        client = FakeClient({SEASONS: {"items": [{"id": "2023-01"}, {}]}})
        with pytest.raises(MalformedResponseError):
            get_current_season(client)

    def test_upstream_error_propagates(self):
        client = FakeClient({SEASONS: UpstreamRequestError(SEASONS, 503, "down")})
        with pytest.raises(UpstreamRequestError):
            get_current_season(client)


# ── fetch_top_players ───────────────────────────────────────────

class TestFetchTopPlayers:
    def test_truncates_to_limit_in_upstream_order(self, client):
        top = fetch_top_players(client, SEASON_ID, limit=10)

        assert len(top) == 10
        assert all(isinstance(p, PlayerRank) for p in top)
        assert [p.tag for p in top] == [f"#TAG{i:02d}" for i in range(10)]
        assert client.calls == [RANKINGS]

    def test_fewer_than_limit(self):
        client = FakeClient({RANKINGS: {"items": [{"tag": "#A", "rank": 1}]}})
        assert [p.tag for p in fetch_top_players(client, SEASON_ID, limit=10)] == ["#A"]

    def test_maps_fields(self, client):
        first = fetch_top_players(client, SEASON_ID, limit=1)[0]
        assert first.exp_level == 14
        assert first.rank == 1
        assert first.clan == {"tag": "#CLAN", "name": "Clan"}

    def test_empty_rankings(self):
        client = FakeClient({RANKINGS: {"items": []}})
        with pytest.raises(MalformedResponseError):
            fetch_top_players(client, SEASON_ID)

    def test_entry_without_tag(self):
        client = FakeClient({RANKINGS: {"items": [{"name": "ghost"}]}})
        with pytest.raises(MalformedResponseError):
            fetch_top_players(client, SEASON_ID)

    def test_rankings_endpoint(self):
        assert rankings_endpoint("2023-02") == RANKINGS


# ── get_player ──────────────────────────────────────────────────

class TestGetPlayer:
    def test_encode_player_tag(self):
        assert encode_player_tag("#ABC123") == "%23ABC123"
        assert encode_player_tag("ABC/1 2") == "ABC%2F1%202"

    def test_encoding_matches_encode_uri_component(self):
        # encodeURIComponent keeps !'()* and -_.~ as they are
        assert encode_player_tag("#A!B(C)*'") == "%23A!B(C)*'"
        assert encode_player_tag("-_.~") == "-_.~"
        assert encode_player_tag("#é") == "%23%C3%A9"

    def test_fetches_encoded_path_and_returns_raw_record(self):
        record = {"tag": "#ABC123", "name": "x", "extra": 1}
        client = FakeClient({"players/%23ABC123": record})

        assert get_player(client, "#ABC123") is record
        assert client.calls == ["players/%23ABC123"]

    @pytest.mark.parametrize("payload", [None, {}])
    def test_empty_record(self, payload):
        client = FakeClient({"players/%23ABC123": payload})
        with pytest.raises(MalformedResponseError):
            get_player(client, "#ABC123")
