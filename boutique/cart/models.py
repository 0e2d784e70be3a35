"""Cart line model and the JSON blob format used for durable storage."""
import json
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Tuple

from boutique.services.money import round_money, multiply, to_decimal


DEFAULT_SIZE = "WS-25"
DEFAULT_NAME = "Unnamed Product"
DEFAULT_DETAIL_NAME = "Product"


@dataclass
class CartLine:
    """One purchasable line, identified by (name, size)."""
    name: str
    size: str
    price: Decimal
    image: Optional[str] = None
    quantity: int = 1

    def __post_init__(self):
        self.price = to_decimal(self.price)

    @property
    def identity(self) -> Tuple[str, str]:
        return (self.name, self.size)

    @property
    def line_total(self) -> Decimal:
        """Price for all units of this line."""
        return round_money(multiply(self.price, self.quantity or 1))

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "size": self.size,
            "price": str(self.price),
            "image": self.image,
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartLine":
        """
        Create from dictionary.

        Older storefront pages wrote the picture under "img"; both keys are read.
        A stored quantity is kept as is, only a missing one defaults to 1.
        """
        quantity = data.get("quantity")
        return cls(
            name=data["name"],
            size=data.get("size", DEFAULT_SIZE),
            price=to_decimal(data.get("price", 0)),
            image=data.get("image", data.get("img")),
            quantity=1 if quantity is None else int(quantity),
        )


def dump_lines(lines: List[CartLine]) -> str:
    """Serialize the whole cart as one JSON array."""
    return json.dumps([line.to_dict() for line in lines])


def load_lines(blob: str) -> List[CartLine]:
    """
    Parse a stored cart blob.

    Raises ValueError, KeyError or TypeError when the blob is not a JSON
    array of line objects.
    """
    data = json.loads(blob)
    if not isinstance(data, list):
        raise TypeError(f"cart blob must be a JSON array, got {type(data).__name__}")
    return [CartLine.from_dict(item) for item in data]
