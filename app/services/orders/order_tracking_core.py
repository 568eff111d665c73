"""Delivery estimates and tracking timelines for already-fetched orders."""

from datetime import datetime, timezone
from typing import Any, Iterable

from app.constants.order_tracking import (
    CONFIRMED_OFFSET,
    DEFAULT_DELIVERY_LEAD_TIME,
    DELIVERY_LEAD_TIMES,
    OUT_FOR_DELIVERY_OFFSET,
    UNKNOWN_PHARMACY,
)
from app.models.enums.order_status import OrderStatus
from app.schemas.orders.order_tracking_schemas import TrackingUpdate

CONFIRMED_OR_LATER = {OrderStatus.confirmed, OrderStatus.shipped, OrderStatus.delivered}
SHIPPED_OR_LATER = {OrderStatus.shipped, OrderStatus.delivered}


def _status(value) -> OrderStatus | None:
    try:
        return OrderStatus(value)
    except ValueError:
        return None


def estimate_delivery(created_at: datetime, status) -> datetime:
    lead_time = DELIVERY_LEAD_TIMES.get(_status(status), DEFAULT_DELIVERY_LEAD_TIME)
    return created_at + lead_time


def build_tracking_updates(
    created_at: datetime,
    status,
    now: datetime | None = None,
) -> list[TrackingUpdate]:
    now = now or datetime.now(timezone.utc)
    current = _status(status)

    updates = [
        TrackingUpdate(
            status="Order Placed",
            timestamp=created_at,
            description="Your order has been placed successfully",
            completed=True,
        )
    ]

    if current in CONFIRMED_OR_LATER:
        updates.append(
            TrackingUpdate(
                status="Order Confirmed",
                timestamp=now - CONFIRMED_OFFSET,
                description="Pharmacy has confirmed your order",
                completed=True,
            )
        )

    if current in SHIPPED_OR_LATER:
        updates.append(
            TrackingUpdate(
                status="Out for Delivery",
                timestamp=now - OUT_FOR_DELIVERY_OFFSET,
                description="Your order is on the way",
                completed=True,
            )
        )

    if current == OrderStatus.delivered:
        updates.append(
            TrackingUpdate(
                status="Delivered",
                timestamp=now,
                description="Order delivered successfully",
                completed=True,
            )
        )
    else:
        updates.append(
            TrackingUpdate(
                status="Estimated Delivery",
                timestamp=estimate_delivery(created_at, status),
                description="Expected delivery time",
                completed=False,
            )
        )

    return updates


def first_pharmacy_id(items: Any) -> str | None:
    if not items or not isinstance(items, list):
        return None
    first = items[0]
    if isinstance(first, dict) and first.get("pharmacy_id"):
        return str(first["pharmacy_id"])
    return None


def pharmacy_display_name(profile) -> str:
    if profile is None:
        return UNKNOWN_PHARMACY
    return (
        profile.pharmacy_name
        or profile.business_name
        or profile.name
        or UNKNOWN_PHARMACY
    )


def filter_orders(orders: Iterable[Any], search: str | None) -> list[Any]:
    term = (search or "").strip().lower()
    if not term:
        return list(orders)

    return [
        o for o in orders
        if term in o.order_number.lower()
        or term in (o.pharmacy_name or "").lower()
        or term in str(getattr(o.status, "value", o.status)).lower()
    ]
