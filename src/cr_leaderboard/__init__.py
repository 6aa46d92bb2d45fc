"""Cached Clash Royale top-player leaderboard served over HTTP."""

__version__ = "0.1.0"
