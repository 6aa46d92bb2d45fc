# src/cr_leaderboard/errors.py
from typing import Optional


class LeaderboardError(Exception):
    """Base class for every error raised by this package."""


class StartupConfigError(LeaderboardError):
    """Required configuration is missing or unparsable."""


class UpstreamRequestError(LeaderboardError):
    """The Clash Royale API answered with a non-success status (or not at all)."""

    def __init__(
        self,
        endpoint: str,
        status_code: Optional[int] = None,
        body: str = "",
    ) -> None:
        self.endpoint = endpoint
        self.status_code = status_code
        self.body = body
        if status_code is None:
            msg = f"Request to Clash Royale API ({endpoint}) failed: {body}"
        else:
            msg = f"Clash Royale API error {status_code} for ({endpoint})"
        super().__init__(msg)


class MalformedResponseError(LeaderboardError):
    """The API answered 2xx but the body is missing what we need."""

    def __init__(self, endpoint: str, reason: str) -> None:
        self.endpoint = endpoint
        self.reason = reason
        super().__init__(f"Malformed response from ({endpoint}): {reason}")
