# src/cr_leaderboard/app.py
import logging
from typing import Optional

from flask import Flask, current_app, jsonify

from .config import Settings, load_settings
from .errors import LeaderboardError
from .leaderboard import LeaderboardService

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[LeaderboardService] = None,
) -> Flask:
    """
    Application factory.

    Either pass a ready LeaderboardService (tests do this) or let one be
    built from `settings`, which default to the environment.
    """
    if service is None:
        service = LeaderboardService.from_settings(settings or load_settings())

    app = Flask(__name__)
    app.extensions["leaderboard"] = service

    @app.route("/detailedLeaderboard", methods=["GET"])
    def detailed_leaderboard():
        players = current_app.extensions["leaderboard"].get_snapshot()
        return jsonify([player.to_dict() for player in players])

    @app.errorhandler(LeaderboardError)
    def handle_leaderboard_error(exc):
        logger.error("failed to serve leaderboard: %s", exc, exc_info=exc)
        return jsonify({"error": type(exc).__name__, "message": str(exc)}), 502

    return app
