from .aside import CacheAside
from .gateway import CacheGateway, InterviewPageGateway
from .redis_cache import CACHE_TTL, cache_key, make_redis_client

__all__ = [
    "CACHE_TTL",
    "CacheAside",
    "CacheGateway",
    "InterviewPageGateway",
    "cache_key",
    "make_redis_client",
]
