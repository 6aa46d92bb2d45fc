# src/cr_leaderboard/config.py
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .errors import StartupConfigError

DEFAULT_API_ROOT = "https://api.clashroyale.com/v1"
DEFAULT_PORT = 80
DEFAULT_TOP_N = 10
DEFAULT_STALENESS_MS = 1000 * 60 * 60 * 24 * 7  # 1 week
DEFAULT_REQUEST_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:
    api_key: str
    api_root: str = DEFAULT_API_ROOT
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    top_n: int = DEFAULT_TOP_N
    staleness_ms: int = DEFAULT_STALENESS_MS
    request_timeout: Optional[float] = DEFAULT_REQUEST_TIMEOUT
    log_level: str = "INFO"


def _get_int(
    env: Mapping[str, str],
    name: str,
    default: int,
    minimum: int,
    maximum: Optional[int] = None,
) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise StartupConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise StartupConfigError(f"{name} must be >= {minimum}, got {value}")
    if maximum is not None and value > maximum:
        raise StartupConfigError(f"{name} must be <= {maximum}, got {value}")
    return value


def _get_timeout(env: Mapping[str, str]) -> Optional[float]:
    raw = env.get("REQUEST_TIMEOUT", "").strip()
    if not raw:
        return DEFAULT_REQUEST_TIMEOUT
    if raw.lower() == "none":
        return None
    try:
        value = float(raw)
    except ValueError:
        raise StartupConfigError(
            f"REQUEST_TIMEOUT must be a number of seconds, got {raw!r}"
        ) from None
    # 0 means wait forever
    return value if value > 0 else None


def _get_log_level(env: Mapping[str, str]) -> str:
    level = (env.get("LOG_LEVEL", "").strip() or "INFO").upper()
    # getLevelName maps known names to their int value
    if not isinstance(logging.getLevelName(level), int):
        raise StartupConfigError(f"LOG_LEVEL must be a logging level name, got {level!r}")
    return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        environ: Mapping to read instead of the process environment. When
            omitted, variables from a local .env file are loaded first.

    Returns:
        A frozen Settings instance.

    Raises:
        StartupConfigError if CR_API_KEY is missing or a numeric value is bad.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    api_key = environ.get("CR_API_KEY", "").strip()
    if not api_key:
        raise StartupConfigError(
            "CR_API_KEY is not set. Please add it to your .env file."
        )

    return Settings(
        api_key=api_key,
        api_root=(environ.get("CR_API_ROOT", "").strip() or DEFAULT_API_ROOT).rstrip("/"),
        host=environ.get("HOST", "").strip() or "0.0.0.0",
        port=_get_int(environ, "PORT", DEFAULT_PORT, minimum=0, maximum=65535),
        top_n=_get_int(environ, "TOP_N", DEFAULT_TOP_N, minimum=1),
        staleness_ms=_get_int(environ, "CACHE_STALENESS_MS", DEFAULT_STALENESS_MS, minimum=0),
        request_timeout=_get_timeout(environ),
        log_level=_get_log_level(environ),
    )
