"""Durable key/value storage for cart blobs."""
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional

from boutique.db import CART_STORAGE_BACKEND, get_redis_sync
from boutique.errors import ERROR_UNKNOWN_BACKEND


class CartStorage(ABC):
    """String key/value contract the cart store persists through."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored string, or None when the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        ...


class MemoryCartStorage(CartStorage):
    """Process-local storage. Entries live as long as the process."""

    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data


class RedisCartStorage(CartStorage):
    """
    Upstash Redis storage.

    Keys are written without a TTL: a cart lives until it is cleared.
    """

    def __init__(self, client_factory: Callable = get_redis_sync) -> None:
        self._client_factory = client_factory
        self._redis = None  # Lazy initialization

    @property
    def redis(self):
        """Get Redis client (lazy initialization)."""
        if self._redis is None:
            self._redis = self._client_factory()
        return self._redis

    def get(self, key: str) -> Optional[str]:
        value = self.redis.get(key)
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def set(self, key: str, value: str) -> None:
        self.redis.set(key, value)

    def delete(self, key: str) -> None:
        self.redis.delete(key)


def create_storage(backend: str = CART_STORAGE_BACKEND) -> CartStorage:
    """Build the storage backend named by CART_STORAGE_BACKEND."""
    if backend == "redis":
        return RedisCartStorage()
    if backend == "memory":
        return MemoryCartStorage()
    raise ValueError(f"{ERROR_UNKNOWN_BACKEND}: {backend}")
