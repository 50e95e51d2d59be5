from __future__ import annotations

from typing import Optional, Type, TypeVar

from pydantic import ValidationError

from ..logging import get_logger
from ..schemas import InterviewPage, PerformanceSnapshot
from ..schemas.base import CamelModel
from .aside import CacheAside
from .redis_cache import CACHE_TTL, INTERVIEW_LIST_PREFIX, USER_STATS_PREFIX, cache_key

logger = get_logger("cache")

M = TypeVar("M", bound=CamelModel)


def _load(aside: CacheAside, key: str, model: Type[M]) -> Optional[M]:
    raw = aside.read(key)
    if raw is None:
        return None
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        logger.warning(f"discarding malformed cache entry key={key}: {e.error_count()} error(s)")
        return None


class CacheGateway:
    """Serves user stats snapshots from Redis, recomputing through the aggregator on miss or refresh."""

    def __init__(self, cache, aggregator, ttl_seconds: int = CACHE_TTL["USER_STATS"]):
        self.aside = CacheAside(cache, ttl_seconds)
        self.aggregator = aggregator

    @staticmethod
    def key_for(user_id: str) -> str:
        return cache_key(USER_STATS_PREFIX, user_id)

    def get_or_compute(self, user_id: str, force_refresh: bool = False) -> PerformanceSnapshot:
        key = self.key_for(user_id)
        if not force_refresh:
            cached = _load(self.aside, key, PerformanceSnapshot)
            if cached is not None:
                logger.debug(f"stats cache hit user_id={user_id}")
                return cached

        snapshot = self.aggregator.compute_stats(user_id)
        self.aside.write(key, snapshot.to_json())
        return snapshot


class InterviewPageGateway:
    """Same cache-aside policy for paginated interview listings."""

    def __init__(self, cache, repository, ttl_seconds: int = CACHE_TTL["INTERVIEW_LIST"]):
        self.aside = CacheAside(cache, ttl_seconds)
        self.repository = repository

    def get_or_fetch(
        self, user_id: str, *, scope: str = "user", page: int = 1, limit: int = 10, force_refresh: bool = False
    ) -> InterviewPage:
        key = cache_key(INTERVIEW_LIST_PREFIX, user_id, scope, page, limit)
        if not force_refresh:
            cached = _load(self.aside, key, InterviewPage)
            if cached is not None:
                return cached

        result = self.repository.page_interviews(user_id, scope=scope, page=page, limit=limit)
        self.aside.write(key, result.to_json())
        return result
