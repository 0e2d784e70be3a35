"""
Cart API Pydantic Models
"""
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, Field


class AddToCartRequest(BaseModel):
    """
    Add-to-cart event from a product card or a product detail page.

    Cards send the rendered price label ("Rs. 1,250") as price_text; the
    detail page may send a numeric price. A numeric price wins. source says
    which page sent the event and picks the fallback name.
    """
    source: Literal["card", "detail"] = "card"
    name: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, ge=0)
    price_text: Optional[str] = None
    image: Optional[str] = None
    size: Optional[str] = None
    quantity: Optional[int] = None


class CartLineResponse(BaseModel):
    name: str
    size: str
    price: float
    image: Optional[str] = None
    quantity: int
    line_total: float


class CartResponse(BaseModel):
    items: list[CartLineResponse]
    count: int
    subtotal: float


class CartCountResponse(BaseModel):
    count: int
