# src/cr_leaderboard/api/seasons.py
from ..errors import MalformedResponseError
from .cr_client import CRClient, get_items

SEASONS_ENDPOINT = "locations/global/seasons"


def get_current_season(client: CRClient) -> str:
    """
    Return the id of the most recent global season.

    The API lists seasons oldest first and, as of writing, without paging,
    so the last item is the current one. If the endpoint ever starts to
    paginate this quietly picks an older season.
    """
    items = get_items(client.get(SEASONS_ENDPOINT), SEASONS_ENDPOINT)
    latest = items[-1]
    season_id = latest.get("id") if isinstance(latest, dict) else None
    if not season_id:
        raise MalformedResponseError(SEASONS_ENDPOINT, "latest season has no 'id'")
    return season_id
