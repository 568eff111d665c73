from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.enums.order_status import OrderStatus
from app.models.orders.order_models import Order
from app.models.users.profile_models import Profile
from app.schemas.orders.order_tracking_schemas import TrackedOrder, TrackedOrderListData
from app.services.orders.order_tracking_core import (
    build_tracking_updates,
    estimate_delivery,
    filter_orders,
    first_pharmacy_id,
    pharmacy_display_name,
)
from app.utils.logger import get_logger

logger = get_logger(__name__)


async def _load_profiles(db: AsyncSession, orders: list[Order]) -> dict[str, Profile]:
    pharmacy_ids = {pid for pid in (first_pharmacy_id(o.items) for o in orders) if pid}
    if not pharmacy_ids:
        return {}

    result = await db.execute(select(Profile).where(Profile.id.in_(pharmacy_ids)))
    return {p.id: p for p in result.scalars().all()}


def _map_order(order: Order, profile: Profile | None, now: datetime | None) -> TrackedOrder:
    return TrackedOrder(
        id=order.id,
        order_number=order.order_number,
        status=order.status,
        total_amount=order.total_amount,
        created_at=order.created_at,
        items=order.items or [],
        pharmacy_name=pharmacy_display_name(profile),
        pharmacy_phone=(profile.phone or "") if profile else "",
        estimated_delivery=estimate_delivery(order.created_at, order.status),
        tracking_updates=build_tracking_updates(order.created_at, order.status, now),
    )


async def list_tracked_orders(
    db: AsyncSession,
    owner_id: str,
    search: str | None = None,
    now: datetime | None = None,
) -> TrackedOrderListData:
    result = await db.execute(
        select(Order)
        .where(
            Order.user_id == owner_id,
            Order.status != OrderStatus.cart,
        )
        .order_by(Order.created_at.desc())
    )
    orders = list(result.scalars().all())
    profiles = await _load_profiles(db, orders)

    tracked = [
        _map_order(o, profiles.get(first_pharmacy_id(o.items)), now)
        for o in orders
    ]
    items = filter_orders(tracked, search)

    logger.info(
        "Tracked orders fetched",
        extra={"orders": len(tracked), "matched": len(items)},
    )
    return TrackedOrderListData(total=len(items), items=items)
