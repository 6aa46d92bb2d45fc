# src/cr_leaderboard/cache.py
"""
Single-slot snapshot cache with a staleness window.

The value and its timestamp are swapped in one assignment, so readers on
other threads see either the old snapshot or the new one, never a mix.
There is no lock: two requests that both find the cache stale each run a
refresh and the one that finishes last wins.
"""
import logging
import time
from typing import Callable, Generic, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def now_ms() -> int:
    return int(time.time() * 1000)


class SnapshotCache(Generic[T]):
    def __init__(
        self,
        refresh: Callable[[], T],
        staleness_ms: int,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._refresh = refresh
        self.staleness_ms = staleness_ms
        self.clock = clock
        self._entry: Tuple[Optional[T], int] = (None, 0)

    @property
    def value(self) -> Optional[T]:
        return self._entry[0]

    @property
    def updated_at(self) -> int:
        """Milliseconds since epoch of the last successful refresh (0 if never)."""
        return self._entry[1]

    @property
    def is_empty(self) -> bool:
        return self._entry[0] is None

    def _is_stale(self, entry: Tuple[Optional[T], int], now: Optional[int]) -> bool:
        if entry[0] is None:
            return True
        if now is None:
            now = self.clock()
        return now - entry[1] > self.staleness_ms

    def is_stale(self, now: Optional[int] = None) -> bool:
        return self._is_stale(self._entry, now)

    def refresh(self) -> T:
        """Run the refresh function and replace the snapshot with its result.

        On failure the previous snapshot is kept and the error propagates.
        """
        logger.info("updating cache")
        try:
            value = self._refresh()
        except Exception:
            logger.warning("cache refresh failed, keeping previous snapshot")
            raise
        self._entry = (value, self.clock())
        logger.info("done updating cache")
        return value

    def get_or_refresh(self) -> T:
        entry = self._entry
        if self._is_stale(entry, None):
            return self.refresh()
        return entry[0]
