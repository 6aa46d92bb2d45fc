# src/cr_leaderboard/models.py
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional

from .errors import MalformedResponseError


@dataclass
class PlayerRank:
    """One row of a season's global player ranking."""

    tag: str
    name: Optional[str] = None
    exp_level: Optional[int] = None
    trophies: Optional[int] = None
    rank: Optional[int] = None
    clan: Any = None

    @classmethod
    def from_api(cls, item: Any, endpoint: str = "rankings") -> "PlayerRank":
        if not isinstance(item, dict) or not item.get("tag"):
            raise MalformedResponseError(endpoint, "ranking entry has no 'tag'")
        return cls(
            tag=item["tag"],
            name=item.get("name"),
            exp_level=item.get("expLevel"),
            trophies=item.get("trophies"),
            rank=item.get("rank"),
            clan=item.get("clan"),
        )


WIRE_KEYS = ("name", "currentDeck", "leagueStatistics")


@dataclass
class FormattedPlayer:
    """The reduced player shape served by /detailedLeaderboard."""

    name: Optional[str] = None
    current_deck: Any = None
    league_statistics: Any = None
    # wire keys the upstream record actually carried; explicit nulls count
    present: FrozenSet[str] = field(
        default=frozenset(WIRE_KEYS), repr=False, compare=False
    )

    @classmethod
    def from_api(cls, player: Dict[str, Any]) -> "FormattedPlayer":
        # everything else in the record is dropped
        return cls(
            name=player.get("name"),
            current_deck=player.get("currentDeck"),
            league_statistics=player.get("leagueStatistics"),
            present=frozenset(key for key in WIRE_KEYS if key in player),
        )

    @property
    def current_season_rank(self) -> Optional[int]:
        stats = self.league_statistics
        if not isinstance(stats, dict):
            return None
        season = stats.get("currentSeason")
        if not isinstance(season, dict):
            return None
        return season.get("rank")

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "name": self.name,
            "currentDeck": self.current_deck,
            "leagueStatistics": self.league_statistics,
        }
        return {key: value for key, value in data.items() if key in self.present}
