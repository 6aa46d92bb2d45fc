# src/cr_leaderboard/api/cr_client.py
import logging
from typing import Any, Dict, List, Optional

import requests

from ..config import DEFAULT_API_ROOT, DEFAULT_REQUEST_TIMEOUT, Settings
from ..errors import MalformedResponseError, UpstreamRequestError

logger = logging.getLogger(__name__)


class CRClient:
    """Authenticated GET access to the Clash Royale API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_API_ROOT,
        timeout: Optional[float] = DEFAULT_REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings) -> "CRClient":
        return cls(
            settings.api_key,
            base_url=settings.api_root,
            timeout=settings.request_timeout,
        )

    def _get_headers(self) -> Dict[str, str]:
        """Return auth headers for the Clash Royale API."""
        return {
            "authorization": f"Bearer {self.api_key}",
            "content-type": "application/json",
        }

    def get(self, endpoint: str) -> Any:
        """
        Low-level helper for GET requests to the Clash Royale API.

        Args:
            endpoint: Path below the API root, e.g. 'locations/global/seasons'.

        Returns:
            Parsed JSON response body.

        Raises:
            UpstreamRequestError if the request fails or the status is not 2xx.
            MalformedResponseError if a 2xx body is not valid JSON.
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        logger.debug("GET %s", url)
        try:
            response = self.session.get(
                url, headers=self._get_headers(), timeout=self.timeout
            )
        except requests.RequestException as exc:
            logger.error("Request to Clash Royale API (%s) failed: %s", endpoint, exc)
            raise UpstreamRequestError(endpoint, body=str(exc)) from exc

        if not response.ok:
            logger.error(
                "Clash Royale API error %s for (%s): %s",
                response.status_code,
                endpoint,
                response.text,
            )
            raise UpstreamRequestError(endpoint, response.status_code, response.text)

        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(endpoint, "body is not valid JSON") from exc


def get_items(data: Any, endpoint: str) -> List[Any]:
    """Pull the non-empty 'items' list out of a list-style API response."""
    items = data.get("items") if isinstance(data, dict) else None
    if not isinstance(items, list):
        raise MalformedResponseError(endpoint, "'items' is missing or not a list")
    if not items:
        raise MalformedResponseError(endpoint, "'items' is empty")
    return items
