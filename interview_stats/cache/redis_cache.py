from __future__ import annotations

import redis

from ..settings import REDIS_HOST, REDIS_PASSWORD, REDIS_PORT, REDIS_SOCKET_TIMEOUT

# seconds
CACHE_TTL = {
    "USER_STATS": 300,
    "INTERVIEW_LIST": 60,
}

USER_STATS_PREFIX = "user-stats"
INTERVIEW_LIST_PREFIX = "interviews"


def cache_key(prefix: str, *parts) -> str:
    return ":".join([prefix, *(str(p) for p in parts)])


def make_redis_client(
    host: str = REDIS_HOST,
    port: int = REDIS_PORT,
    password: str | None = REDIS_PASSWORD,
    socket_timeout: float = REDIS_SOCKET_TIMEOUT,
) -> redis.Redis:
    # fail fast; callers treat any error as a miss
    return redis.Redis(
        host=host,
        port=port,
        password=password,
        socket_timeout=socket_timeout,
        socket_connect_timeout=socket_timeout,
        retry_on_timeout=False,
        decode_responses=True,
    )
