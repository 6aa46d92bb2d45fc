# src/cr_leaderboard/leaderboard.py
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, Iterable, List, Optional

from .api.cr_client import CRClient
from .api.players import fetch_top_players, get_player
from .api.seasons import get_current_season
from .cache import SnapshotCache, now_ms
from .config import DEFAULT_STALENESS_MS, DEFAULT_TOP_N, Settings
from .models import FormattedPlayer

logger = logging.getLogger(__name__)


def format_player(player: Dict[str, Any]) -> FormattedPlayer:
    return FormattedPlayer.from_api(player)


def sort_by_season_rank(players: Iterable[FormattedPlayer]) -> List[FormattedPlayer]:
    """Ascending by current-season rank; unranked players go last."""
    return sorted(
        players,
        key=lambda p: (p.current_season_rank is None, p.current_season_rank or 0),
    )


def build_leaderboard(client: CRClient, top_n: int = DEFAULT_TOP_N) -> List[FormattedPlayer]:
    """
    Run the whole fetch chain once.

    season -> top `top_n` rankings -> player records (fetched in parallel)
    -> formatted -> sorted. Any upstream error aborts the chain.
    """
    season_id = get_current_season(client)
    logger.debug("current season is %s", season_id)

    rankings = fetch_top_players(client, season_id, limit=top_n)

    # map() keeps input order and re-raises the first worker error on iteration
    with ThreadPoolExecutor(max_workers=len(rankings)) as pool:
        records = list(pool.map(lambda rank: get_player(client, rank.tag), rankings))

    return sort_by_season_rank(format_player(record) for record in records)


class LeaderboardService:
    """Serves the cached leaderboard, refreshing it once it goes stale."""

    def __init__(
        self,
        client: CRClient,
        top_n: int = DEFAULT_TOP_N,
        staleness_ms: int = DEFAULT_STALENESS_MS,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.client = client
        self.top_n = top_n
        self.cache: SnapshotCache[List[FormattedPlayer]] = SnapshotCache(
            self._build, staleness_ms, clock=clock
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, client: Optional[CRClient] = None
    ) -> "LeaderboardService":
        return cls(
            client or CRClient.from_settings(settings),
            top_n=settings.top_n,
            staleness_ms=settings.staleness_ms,
        )

    def _build(self) -> List[FormattedPlayer]:
        players = build_leaderboard(self.client, self.top_n)
        logger.info("fetched %d players", len(players))
        return players

    def get_snapshot(self) -> List[FormattedPlayer]:
        return self.cache.get_or_refresh()

    def refresh(self) -> List[FormattedPlayer]:
        return self.cache.refresh()
