"""Cart store: in-memory cart mirrored write-through to durable storage."""
from dataclasses import replace
from decimal import Decimal
from typing import Callable, List, Optional

from boutique.db import RedisKeys
from boutique.logging import get_logger, sanitize_id_for_logging, sanitize_string_for_logging
from boutique.services.money import round_money
from .models import CartLine, dump_lines, load_lines
from .storage import CartStorage

logger = get_logger(__name__)

CountListener = Callable[[int], None]


class CartStore:
    """
    Owns one session's cart.

    Features:
    - Lines merge by (name, size); a repeat add bumps the quantity
    - Every mutation is persisted immediately (write-through)
    - Storage failures are logged and never reach the caller
    - Count listeners are told the new item count after every change
    """

    def __init__(self, storage: CartStorage, session_id: str):
        self.storage = storage
        self.session_id = session_id
        self.key = RedisKeys.cart_key(session_id)
        self._items: List[CartLine] = []
        self._listeners: List[CountListener] = []

    # ==================== LIFECYCLE ====================

    def initialize(self) -> None:
        """Restore the cart from storage, falling back to an empty cart."""
        self._items = self._restore()
        self._refresh_count()

    def _restore(self) -> List[CartLine]:
        try:
            blob = self.storage.get(self.key)
        except Exception as e:
            logger.error(
                f"Error loading cart for session {sanitize_id_for_logging(self.session_id)}: {e}"
            )
            return []

        if not blob:
            return []

        try:
            return load_lines(blob)
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(
                f"Corrupted cart data for session {sanitize_id_for_logging(self.session_id)}: {e}"
            )
            return []

    # ==================== MUTATIONS ====================

    def add_item(self, candidate: CartLine) -> None:
        """
        Add a line, merging into an existing line with the same (name, size).

        A missing or zero quantity counts as 1; anything else is added as given.
        """
        quantity = candidate.quantity or 1

        existing = next(
            (line for line in self._items if line.identity == candidate.identity),
            None
        )

        if existing:
            existing.quantity += quantity
        else:
            self._items.append(replace(candidate, quantity=quantity))

        logger.debug(
            f"Added {quantity} x {sanitize_string_for_logging(candidate.name)} "
            f"({sanitize_string_for_logging(candidate.size)})"
        )
        self._persist()
        self._refresh_count()

    def remove_item(self, index: int) -> None:
        """Remove the line at a zero-based index. Out-of-range is a no-op."""
        if not 0 <= index < len(self._items):
            return

        del self._items[index]
        self._persist()
        self._refresh_count()

    def clear(self) -> None:
        """Empty the cart and drop the storage key entirely."""
        self._items = []
        try:
            self.storage.delete(self.key)
        except Exception as e:
            logger.error(
                f"Error clearing cart for session {sanitize_id_for_logging(self.session_id)}: {e}"
            )
        self._refresh_count()

    def save(self) -> None:
        """Persist the current cart without changing it."""
        self._persist()

    def _persist(self) -> None:
        # Memory stays ahead of storage until the next successful write
        try:
            self.storage.set(self.key, dump_lines(self._items))
        except Exception as e:
            logger.error(
                f"Error saving cart for session {sanitize_id_for_logging(self.session_id)}: {e}"
            )

    # ==================== QUERIES ====================

    def get_items(self) -> List[CartLine]:
        """The live cart. Callers must not mutate it."""
        return self._items

    def projected_count(self) -> int:
        """Total number of units in the cart."""
        return sum(line.quantity or 1 for line in self._items)

    def subtotal(self) -> Decimal:
        return round_money(sum((line.line_total for line in self._items), Decimal("0")))

    # ==================== COUNT PROJECTION ====================

    def subscribe(self, listener: CountListener) -> None:
        """Register a callback that receives the item count after each change."""
        self._listeners.append(listener)

    def _refresh_count(self) -> None:
        count = self.projected_count()
        for listener in self._listeners:
            try:
                listener(count)
            except Exception as e:
                logger.error(f"Cart count listener failed: {e}", exc_info=True)


def open_cart(storage: CartStorage, session_id: str, listener: Optional[CountListener] = None) -> CartStore:
    """Create a store for a session and restore it from storage."""
    store = CartStore(storage, session_id)
    if listener is not None:
        store.subscribe(listener)
    store.initialize()
    return store
