"""
grab_player.py

Goal:
- Load .env
- Call Clash Royale API: GET /players/{playerTag}
- Print the full raw JSON and the reduced leaderboard shape

Expected .env:
PLAYER_TAG=#8C83JQLG
CR_API_KEY=...
"""

import json
import os

from cr_leaderboard.api import CRClient, get_player
from cr_leaderboard.config import load_settings
from cr_leaderboard.leaderboard import format_player


def main() -> None:
    settings = load_settings()

    player_tag = os.getenv("PLAYER_TAG", "").strip()
    if not player_tag:
        raise SystemExit("ERROR: PLAYER_TAG is missing in .env")

    data = get_player(CRClient.from_settings(settings), player_tag)

    print("\n=== PLAYER INFO (RAW JSON) ===")
    print(json.dumps(data, indent=2, ensure_ascii=False))

    print("\n=== FORMATTED ===")
    print(json.dumps(format_player(data).to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
