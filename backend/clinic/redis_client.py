# backend/clinic/redis_client.py
"""
Shared Redis client.

Only the capacity colour cache lives in Redis. When REDIS_URL is not
configured the client is None and colour caching is skipped.
"""

from redis import Redis

from .config import settings

redis_client: Redis | None = (
    Redis.from_url(settings.redis_url, decode_responses=True)
    if settings.redis_url
    else None
)


def get_redis() -> Redis | None:
    """FastAPI dependency returning the shared client (or None)."""
    return redis_client
