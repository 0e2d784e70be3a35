"""
Cart Router

Binds storefront UI events to the cart store:
- add-to-cart buttons on product cards and the detail page
- remove buttons on the basket page (zero-based index)
- the bag icon, which saves the cart and opens the basket page
"""
import os

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import RedirectResponse

from boutique.cart import CartLine, CartStore, DEFAULT_DETAIL_NAME, DEFAULT_NAME, DEFAULT_SIZE
from boutique.errors import (
    ERROR_CART_ADD,
    ERROR_CART_CLEAR,
    ERROR_CART_READ,
    ERROR_CART_REMOVE,
    ERROR_NEGATIVE_PRICE,
)
from boutique.logging import get_logger
from boutique.services.money import parse_price_text, to_float
from .deps import get_cart_store
from .models import AddToCartRequest, CartCountResponse, CartResponse

logger = get_logger(__name__)

BASKET_URL = os.environ.get("BASKET_URL", "basket.html")

router = APIRouter(tags=["cart"])


def _format_cart_response(store: CartStore) -> dict:
    """Cart payload for the basket page and the count badge."""
    return {
        "items": [
            {
                "name": line.name,
                "size": line.size,
                "price": to_float(line.price),
                "image": line.image,
                "quantity": line.quantity,
                "line_total": to_float(line.line_total),
            }
            for line in store.get_items()
        ],
        "count": store.projected_count(),
        "subtotal": to_float(store.subtotal()),
    }


def _line_from_request(request: AddToCartRequest) -> CartLine:
    if request.price is not None:
        price = request.price
    else:
        price = parse_price_text(request.price_text)
        if price < 0:
            raise HTTPException(status_code=422, detail=ERROR_NEGATIVE_PRICE)

    fallback_name = DEFAULT_DETAIL_NAME if request.source == "detail" else DEFAULT_NAME

    return CartLine(
        name=request.name or fallback_name,
        size=request.size or DEFAULT_SIZE,
        price=price,
        image=request.image,
        quantity=request.quantity or 1,
    )


@router.get("/cart", response_model=CartResponse)
def get_cart(store: CartStore = Depends(get_cart_store)):
    """Get the session's cart."""
    try:
        return _format_cart_response(store)
    except Exception as e:
        logger.error(f"Failed to get cart: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=ERROR_CART_READ)


@router.get("/cart/count", response_model=CartCountResponse)
def get_cart_count(store: CartStore = Depends(get_cart_store)):
    """Item count for the bag badge."""
    return {"count": store.projected_count()}


@router.post("/cart/add", response_model=CartResponse)
def add_to_cart(request: AddToCartRequest, store: CartStore = Depends(get_cart_store)):
    """Add an item; a repeat (name, size) bumps the existing line."""
    try:
        store.add_item(_line_from_request(request))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Failed to add to cart: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=ERROR_CART_ADD)

    return _format_cart_response(store)


@router.delete("/cart/item/{index}", response_model=CartResponse)
def remove_cart_item(index: int, store: CartStore = Depends(get_cart_store)):
    """Remove the line at index. Unknown indices leave the cart as it is."""
    try:
        store.remove_item(index)
    except Exception as e:
        logger.error(f"Failed to remove cart item: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=ERROR_CART_REMOVE)

    return _format_cart_response(store)


@router.delete("/cart", response_model=CartResponse)
def clear_cart(store: CartStore = Depends(get_cart_store)):
    """Empty the cart and drop its storage entry."""
    try:
        store.clear()
    except Exception as e:
        logger.error(f"Failed to clear cart: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=ERROR_CART_CLEAR)

    return _format_cart_response(store)


@router.get("/cart/basket")
def open_basket(store: CartStore = Depends(get_cart_store)):
    """Save the cart and send the shopper to the basket page."""
    store.save()
    return RedirectResponse(url=BASKET_URL, status_code=303)
