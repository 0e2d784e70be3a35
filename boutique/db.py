"""
Database Module - Redis Client

Provides the singleton Upstash Redis client that backs durable cart storage,
plus the key layout and backend selection read from the environment.
"""

import os
from typing import Optional

from upstash_redis import Redis

from boutique.errors import ERROR_STORAGE_NOT_CONFIGURED


# Upstash uses REST_URL and REST_TOKEN
UPSTASH_REDIS_REST_URL = os.environ.get("UPSTASH_REDIS_REST_URL", "")
UPSTASH_REDIS_REST_TOKEN = os.environ.get("UPSTASH_REDIS_REST_TOKEN", "")

# "redis" for Upstash, "memory" for a process-local store
CART_STORAGE_BACKEND = os.environ.get("CART_STORAGE_BACKEND", "memory").lower()


_redis_client: Optional[Redis] = None


def get_redis_sync() -> Redis:
    """
    Get sync Upstash Redis client (singleton).

    Cart operations run to completion synchronously, so the store uses the
    sync client rather than the asyncio one.
    """
    global _redis_client

    if _redis_client is None:
        if not UPSTASH_REDIS_REST_URL or not UPSTASH_REDIS_REST_TOKEN:
            raise ValueError(ERROR_STORAGE_NOT_CONFIGURED)
        _redis_client = Redis(url=UPSTASH_REDIS_REST_URL, token=UPSTASH_REDIS_REST_TOKEN)

    return _redis_client


class RedisKeys:
    """Redis key prefixes for different data types."""

    CART = "cart:"  # cart:{session_id}:cartItems
    CART_ITEMS = "cartItems"

    @staticmethod
    def cart_key(session_id: str) -> str:
        return f"{RedisKeys.CART}{session_id}:{RedisKeys.CART_ITEMS}"
