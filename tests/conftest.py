"""Pytest configuration and fixtures"""
import os
import pytest
from decimal import Decimal
from unittest.mock import Mock

# Set test environment variables
os.environ.setdefault("CART_STORAGE_BACKEND", "memory")
os.environ.setdefault("UPSTASH_REDIS_REST_URL", "https://test.upstash.io")
os.environ.setdefault("UPSTASH_REDIS_REST_TOKEN", "test_token")

from boutique.cart import CartLine, CartStore, MemoryCartStorage


@pytest.fixture
def memory_storage():
    """Fresh process-local storage"""
    return MemoryCartStorage()


@pytest.fixture
def failing_storage():
    """Storage whose every call raises, as when Redis is unreachable"""
    storage = Mock()
    storage.get.side_effect = ConnectionError("redis down")
    storage.set.side_effect = ConnectionError("redis down")
    storage.delete.side_effect = ConnectionError("redis down")
    return storage


@pytest.fixture
def mock_redis_client():
    """Mock Upstash Redis sync client backed by a dict"""
    data = {}
    client = Mock()
    client.get.side_effect = lambda key: data.get(key)
    client.set.side_effect = lambda key, value: data.__setitem__(key, value)
    client.delete.side_effect = lambda key: data.pop(key, None)
    client.data = data
    return client


@pytest.fixture
def store(memory_storage):
    """Initialized empty cart store"""
    cart_store = CartStore(memory_storage, "session-123")
    cart_store.initialize()
    return cart_store


@pytest.fixture
def sample_lines():
    """Three distinct cart lines"""
    return [
        CartLine(name="Dress A", size="M", price=Decimal("1000"), image="/img/a.jpg", quantity=1),
        CartLine(name="Dress B", size="S", price=Decimal("1500"), image="/img/b.jpg", quantity=2),
        CartLine(name="Scarf", size="WS-25", price=Decimal("450.50"), quantity=1),
    ]
