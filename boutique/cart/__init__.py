"""Cart package: models, storage, and the cart store."""
from .models import CartLine, DEFAULT_DETAIL_NAME, DEFAULT_NAME, DEFAULT_SIZE, dump_lines, load_lines
from .service import CartStore, open_cart
from .storage import CartStorage, MemoryCartStorage, RedisCartStorage, create_storage

__all__ = [
    "CartLine",
    "DEFAULT_DETAIL_NAME",
    "DEFAULT_NAME",
    "DEFAULT_SIZE",
    "dump_lines",
    "load_lines",
    "CartStore",
    "open_cart",
    "CartStorage",
    "MemoryCartStorage",
    "RedisCartStorage",
    "create_storage",
]
