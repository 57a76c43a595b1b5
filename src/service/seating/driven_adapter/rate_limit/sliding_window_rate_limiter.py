"""
In-process sliding window rate limiter

Keeps the timestamps of the calls made inside the current window per key.
A call is rejected when `limit` calls already happened within the last
`window_ms` milliseconds. Keys whose calls all left the window are dropped,
at most once per window, so the map only holds recently active callers.
"""

from collections import deque
import threading
import time
from typing import Callable, Deque, Dict

from src.platform.exception.exceptions import RateLimitExceededError
from src.platform.logging.loguru_io import Logger
from src.service.seating.app.interface.i_rate_limiter import IRateLimiter


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


class SlidingWindowRateLimiter(IRateLimiter):
    def __init__(
        self,
        *,
        limit: int,
        window_ms: int,
        clock: Callable[[], float] = _monotonic_ms,
    ) -> None:
        if limit < 1 or window_ms < 1:
            raise ValueError('limit and window_ms must be positive')
        self.limit = limit
        self.window_ms = window_ms
        self._clock = clock
        self._calls: Dict[str, Deque[float]] = {}
        self._last_sweep_ms: float | None = None
        self._lock = threading.Lock()

    def hit(self, *, key: str) -> None:
        with self._lock:
            now = self._clock()
            self._sweep_expired_keys(now)

            calls = self._calls.setdefault(key, deque())
            while calls and calls[0] <= now - self.window_ms:
                calls.popleft()

            if len(calls) >= self.limit:
                retry_after_ms = int(calls[0] + self.window_ms - now)
                Logger.base.warning(
                    f'⏱️ [RATE_LIMIT] {key} exceeded {self.limit}/{self.window_ms}ms'
                )
                raise RateLimitExceededError(
                    'Too many requests, please retry later', retry_after_ms=max(retry_after_ms, 1)
                )

            calls.append(now)

    def _sweep_expired_keys(self, now: float) -> None:
        if self._last_sweep_ms is not None and now - self._last_sweep_ms < self.window_ms:
            return
        self._last_sweep_ms = now
        cutoff = now - self.window_ms
        expired = [key for key, calls in self._calls.items() if not calls or calls[-1] <= cutoff]
        for key in expired:
            del self._calls[key]

    def reset(self) -> None:
        with self._lock:
            self._calls.clear()
            self._last_sweep_ms = None
