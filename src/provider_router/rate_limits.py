from __future__ import annotations

import threading
import time
from collections.abc import Callable

import structlog

from .metrics import rate_limit_marks_total
from .tiering import Provider, provider_id

log = structlog.get_logger()


class RateLimitTracker:
    """
    Advisory record of throttled providers.

    Maps provider id -> absolute reset time on ``clock``. A provider with no entry,
    or whose reset time has passed, is available. Marking overwrites any existing
    window, even a longer one.
    """

    def __init__(self, *, clock: Callable[[], float] | None = None):
        self._clock: Callable[[], float] = clock or time.monotonic
        self._lock = threading.Lock()
        self._reset_at: dict[str, float] = {}

    def mark_rate_limited(self, provider: Provider | str, seconds: float) -> None:
        if seconds < 0:
            raise ValueError("seconds must be >= 0")
        key = provider_id(provider)
        with self._lock:
            self._reset_at[key] = self._clock() + seconds
        rate_limit_marks_total.labels(provider=key).inc()
        log.info("provider_rate_limited", provider=key, seconds=seconds)

    def is_rate_limited(self, provider: Provider | str) -> bool:
        key = provider_id(provider)
        with self._lock:
            reset = self._reset_at.get(key)
            if reset is None:
                return False
            return self._clock() < reset

    def reset_at(self, provider: Provider | str) -> float | None:
        with self._lock:
            return self._reset_at.get(provider_id(provider))

    def limited_providers(self) -> frozenset[str]:
        with self._lock:
            now = self._clock()
            return frozenset(p for p, reset in self._reset_at.items() if now < reset)

    def clear(self, provider: Provider | str | None = None) -> None:
        with self._lock:
            if provider is None:
                self._reset_at.clear()
            else:
                self._reset_at.pop(provider_id(provider), None)
