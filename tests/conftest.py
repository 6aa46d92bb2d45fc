"""Shared fixtures: a fake Clash Royale client and a controllable clock."""
from __future__ import annotations

import threading

import pytest

from cr_leaderboard.api.players import encode_player_tag
from cr_leaderboard.errors import UpstreamRequestError

SEASON_ID = "2023-02"
SEASONS = "locations/global/seasons"
RANKINGS = f"locations/global/seasons/{SEASON_ID}/rankings/players"


class FakeClient:
    """Answers GETs from a dict of endpoint -> payload and records every call.

    A payload that is an exception instance is raised instead of returned.
    """

    def __init__(self, responses):
        self.responses = dict(responses)
        self.calls = []
        self._lock = threading.Lock()

    def get(self, endpoint):
        with self._lock:
            self.calls.append(endpoint)
        if endpoint not in self.responses:
            raise UpstreamRequestError(endpoint, 404, "not found")
        payload = self.responses[endpoint]
        if isinstance(payload, Exception):
            raise payload
        return payload


class FakeClock:
    def __init__(self, now=1_700_000_000_000):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


def make_player(tag, rank, name=None):
    return {
        "tag": tag,
        "name": name or f"player-{tag}",
        "expLevel": 14,
        "trophies": 9000,
        "currentDeck": [{"name": "Hog Rider", "level": 14}],
        "leagueStatistics": {"currentSeason": {"rank": rank, "trophies": 3000}},
        "badges": [{"name": "Classic12Wins"}],
    }


def make_upstream(num_ranked=15, top_n=10):
    """Seasons, 15 rankings, and a player record for each of the top ten.

    Detail ranks are assigned in reverse of ranking order so sorting is
    observable.
    """
    tags = [f"#TAG{i:02d}" for i in range(num_ranked)]
    responses = {
        SEASONS: {"items": [{"id": "2023-01"}, {"id": SEASON_ID}]},
        RANKINGS: {
            "items": [
                {
                    "tag": tag,
                    "name": f"player-{tag}",
                    "expLevel": 14,
                    "trophies": 9000 - i,
                    "rank": i + 1,
                    "clan": {"tag": "#CLAN", "name": "Clan"},
                }
                for i, tag in enumerate(tags)
            ]
        },
    }
    for i, tag in enumerate(tags[:top_n]):
        responses[f"players/{encode_player_tag(tag)}"] = make_player(tag, rank=top_n - i)
    return responses


@pytest.fixture
def upstream():
    return make_upstream()


@pytest.fixture
def client(upstream):
    return FakeClient(upstream)


@pytest.fixture
def clock():
    return FakeClock()
