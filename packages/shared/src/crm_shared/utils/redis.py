"""Redis client management."""

from typing import Optional
import logging

import redis

logger = logging.getLogger(__name__)

_redis_client: Optional[redis.Redis] = None


def get_redis_client(url: Optional[str] = None) -> redis.Redis:
    """Get or create Redis client (singleton pattern).

    Args:
        url: Redis URL (only used for initial creation)

    Returns:
        Redis client returning ``str`` values
    """
    global _redis_client

    if _redis_client is None:
        from ..config import settings
        url = url or settings.REDIS_URL
        if not url:
            raise ValueError("REDIS_URL not configured")
        _redis_client = redis.Redis.from_url(url, decode_responses=True)
        logger.info("[redis] Client created")

    return _redis_client


def close_redis():
    """Close Redis connection gracefully."""
    global _redis_client

    if _redis_client is not None:
        _redis_client.close()
        _redis_client = None
        logger.info("[redis] Client closed")


__all__ = ["get_redis_client", "close_redis"]
