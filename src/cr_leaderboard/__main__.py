# src/cr_leaderboard/__main__.py
import logging

from .app import create_app
from .config import load_settings
from .errors import StartupConfigError

logger = logging.getLogger("cr_leaderboard")


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = load_settings()
    except StartupConfigError as exc:
        logger.error("%s", exc)
        return 1

    logging.getLogger().setLevel(settings.log_level)
    app = create_app(settings)
    logger.info("Server is running at http://%s:%s", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port, threaded=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
