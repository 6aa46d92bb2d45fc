from .cr_client import CRClient
from .players import encode_player_tag, fetch_top_players, get_player
from .seasons import get_current_season

__all__ = [
    "CRClient",
    "encode_player_tag",
    "fetch_top_players",
    "get_current_season",
    "get_player",
]
