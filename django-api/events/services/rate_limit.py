"""Fixed-window rate limiting keyed by client identity.

Counters live in an in-process cache alias; each counter expires with its
window, so the cache's own expiry removes stale entries. This is a
best-effort guard, not a distributed limiter.
"""

import logging

from django.core.cache.backends.base import BaseCache

logger = logging.getLogger(__name__)


class RateLimiter:
    """Allow at most `limit` hits per identity within `window_seconds`."""

    def __init__(
        self, cache: BaseCache, limit: int, window_seconds: int, scope: str = "signup"
    ) -> None:
        self._cache = cache
        self._limit = limit
        self._window = window_seconds
        self._scope = scope

    def _key(self, identity: str) -> str:
        return f"ratelimit:{self._scope}:{identity}"

    def hit(self, identity: str) -> bool:
        """Record one attempt. Returns False once the window's limit is used up."""
        key = self._key(identity)
        # add() only succeeds for the first hit of a window and starts its timer.
        if self._cache.add(key, 1, timeout=self._window):
            return True
        try:
            count = self._cache.incr(key)
        except ValueError:
            # The window expired between add() and incr().
            self._cache.set(key, 1, timeout=self._window)
            return True
        if count > self._limit:
            logger.info("Rate limit exceeded for %s (%d attempts)", identity, count)
            return False
        return True
