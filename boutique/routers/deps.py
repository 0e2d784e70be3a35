"""
Shared Dependencies for Routers

Lazy-loaded storage singleton and per-request cart stores.
"""

from typing import Optional

from fastapi import Depends, Header, HTTPException

from boutique.cart import CartStorage, CartStore, create_storage, open_cart
from boutique.errors import ERROR_SESSION_REQUIRED


_cart_storage: Optional[CartStorage] = None


def get_cart_storage() -> CartStorage:
    """Get or create the configured CartStorage singleton (lazy loaded)"""
    global _cart_storage
    if _cart_storage is None:
        _cart_storage = create_storage()
    return _cart_storage


def get_session_id(x_cart_session: Optional[str] = Header(default=None)) -> str:
    """Session id that scopes the cart key, taken from X-Cart-Session."""
    session_id = (x_cart_session or "").strip()
    if not session_id:
        raise HTTPException(status_code=400, detail=ERROR_SESSION_REQUIRED)
    return session_id


def get_cart_store(
    session_id: str = Depends(get_session_id),
    storage: CartStorage = Depends(get_cart_storage),
) -> CartStore:
    """Restore the session's cart for one request."""
    return open_cart(storage, session_id)
