from __future__ import annotations

from typing import Optional

from ..logging import get_logger

logger = get_logger("cache")


class CacheAside:
    """
    Read and write halves of a cache-aside lookup against a Redis-like client
    (``get(key)`` and ``setex(key, ttl, value)``).

    Both halves swallow every cache error: a failed read is a miss and a failed
    write is skipped. Callers always fall back to the source of truth.
    """

    def __init__(self, cache, ttl_seconds: int):
        self.cache = cache
        self.ttl_seconds = int(ttl_seconds)

    def read(self, key: str) -> Optional[str]:
        try:
            raw = self.cache.get(key)
        except Exception as e:
            logger.warning(f"cache read failed key={key}: {e}")
            return None
        if raw is None:
            return None
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8", errors="replace")
        return raw or None

    def write(self, key: str, payload: str) -> bool:
        try:
            self.cache.setex(key, self.ttl_seconds, payload)
        except Exception as e:
            logger.warning(f"cache write failed key={key}: {e}")
            return False
        return True
