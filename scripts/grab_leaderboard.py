"""
grab_leaderboard.py

Goal:
- Load .env
- Run the full leaderboard fetch chain once against the real API
- Print the formatted players as they would be served

Expected .env:
CR_API_KEY=...
TOP_N=10  (optional)
"""

import json

from cr_leaderboard.api import CRClient
from cr_leaderboard.config import load_settings
from cr_leaderboard.leaderboard import build_leaderboard


def main() -> None:
    settings = load_settings()
    client = CRClient.from_settings(settings)

    players = build_leaderboard(client, settings.top_n)

    print("=== DETAILED LEADERBOARD (JSON) ===")
    print(json.dumps([p.to_dict() for p in players], indent=2, ensure_ascii=False))

    print("\n=== QUICK PEEK ===")
    for p in players:
        print(f"{p.current_season_rank!s:>5}  {p.name}")


if __name__ == "__main__":
    main()
