"""Cart state handling.

A ``CartState`` is the customer's session cart. Handlers receive it
explicitly, update it in place and hand it back; persisting it is the
caller's job.
"""

from decimal import Decimal
from typing import Iterable

from app.schemas.catalog.catalog_schemas import CartItem, CartState, CatalogProduct
from app.utils.decimal_utils import round_money


def cart_total(items: Iterable[CartItem]) -> Decimal:
    return round_money(sum((i.sell_price * i.quantity for i in items), 0))


def add_item(cart: CartState, product: CatalogProduct, quantity: int = 1) -> CartState:
    """Add ``quantity`` of a product; an existing line for it is incremented."""
    for item in cart.items:
        if item.id == product.id:
            item.quantity += quantity
            break
    else:
        cart.items.append(
            CartItem(
                id=product.id,
                name=product.name,
                category=product.category,
                sell_price=product.sell_price,
                quantity=quantity,
                pharmacy_id=product.pharmacy_id,
                pharmacy_name=product.pharmacy_name,
            )
        )

    cart.total_amount = cart_total(cart.items)
    return cart
