from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.constants.catalog import CART_ORDER_PREFIX
from app.constants.error_codes import ErrorCode
from app.core.exceptions import AppException
from app.models.enums.order_status import OrderStatus
from app.models.orders.order_models import Order
from app.schemas.catalog.catalog_schemas import CartAdd, CartItem, CartState
from app.services.catalog.cart_core import add_item, cart_total
from app.services.catalog.product_discovery_service import get_catalog_product
from app.utils.logger import get_logger

logger = get_logger(__name__)


async def _fetch_cart_order(db: AsyncSession, owner_id: str) -> Order | None:
    return await db.scalar(
        select(Order)
        .where(Order.user_id == owner_id, Order.status == OrderStatus.cart)
        .order_by(Order.created_at.desc())
        .limit(1)
    )


def _cart_state(order: Order | None) -> CartState:
    if order is None:
        return CartState()

    items = [
        CartItem.model_validate(i)
        for i in (order.items or [])
        if isinstance(i, dict) and i.get("id")
    ]
    return CartState(
        order_id=order.id,
        order_number=order.order_number,
        items=items,
        total_amount=cart_total(items),
    )


async def load_cart(db: AsyncSession, owner_id: str) -> CartState:
    return _cart_state(await _fetch_cart_order(db, owner_id))


async def add_to_cart(
    db: AsyncSession,
    owner_id: str,
    payload: CartAdd,
    now: datetime | None = None,
) -> CartState:
    product = await get_catalog_product(db, payload.product_id)
    if product is None:
        raise AppException(
            404,
            "Product not found or not available",
            ErrorCode.PRODUCT_NOT_FOUND,
        )

    order = await _fetch_cart_order(db, owner_id)
    cart = add_item(_cart_state(order), product, payload.quantity)

    if order is None:
        now = now or datetime.now(timezone.utc)
        order = Order(
            user_id=owner_id,
            status=OrderStatus.cart,
            order_number=f"{CART_ORDER_PREFIX}-{owner_id}-{int(now.timestamp() * 1000)}",
        )
        db.add(order)

    # JSON column: assign a fresh list so the change is flushed
    order.items = [i.model_dump(mode="json") for i in cart.items]
    order.total_amount = cart.total_amount

    await db.commit()
    await db.refresh(order)

    logger.info(
        "Cart updated",
        extra={"order_id": order.id, "product_id": product.id, "quantity": payload.quantity},
    )
    return _cart_state(order)
