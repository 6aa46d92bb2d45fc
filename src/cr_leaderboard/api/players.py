# src/cr_leaderboard/api/players.py
from typing import Any, Dict, List
from urllib.parse import quote

from ..errors import MalformedResponseError
from ..models import PlayerRank
from .cr_client import CRClient, get_items

# characters encodeURIComponent leaves alone besides letters, digits and -_.~
URI_COMPONENT_SAFE = "!'()*"


def encode_path_segment(value: str) -> str:
    """Percent-encode like JavaScript's encodeURIComponent."""
    return quote(value, safe=URI_COMPONENT_SAFE)


def rankings_endpoint(season_id: str) -> str:
    return f"locations/global/seasons/{encode_path_segment(season_id)}/rankings/players"


def fetch_top_players(client: CRClient, season_id: str, limit: int = 10) -> List[PlayerRank]:
    """
    Returns the top `limit` players of a season's global ranking.

    The endpoint hands back up to 10k entries; everything past the head is
    dropped. Upstream order is kept.
    """
    endpoint = rankings_endpoint(season_id)
    items = get_items(client.get(endpoint), endpoint)
    return [PlayerRank.from_api(item, endpoint) for item in items[:limit]]


def encode_player_tag(tag: str) -> str:
    """Percent-encode a tag for use as a path segment ('#ABC' -> '%23ABC')."""
    return encode_path_segment(tag)


def get_player(client: CRClient, tag: str) -> Dict[str, Any]:
    """
    Fetch the full player record for a tag.

    Uses:
      GET /v1/players/%23{TAG}

    Returns:
        The raw player dict, unmodified.
    """
    endpoint = f"players/{encode_player_tag(tag)}"
    data = client.get(endpoint)
    if not data:
        raise MalformedResponseError(endpoint, "empty player record")
    return data
