"""Day-over-day figures for the retail dashboard."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Iterable

from app.utils.decimal_utils import coerce_decimal, round_money

ONE_DAY = timedelta(days=1)


def naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def day_bounds(now: datetime) -> tuple[datetime, datetime, datetime]:
    """Start of yesterday, start of today and start of tomorrow, in UTC."""
    today = naive_utc(now).replace(hour=0, minute=0, second=0, microsecond=0)
    return today - ONE_DAY, today, today + ONE_DAY


def percent_change(current, previous) -> Decimal:
    current = coerce_decimal(current)
    previous = coerce_decimal(previous)
    if previous == 0:
        return Decimal("100.00") if current > 0 else Decimal("0.00")
    return round_money((current - previous) / previous * 100)


def sold_by(order: Any, pharmacy_id: str) -> bool:
    items = order.items if isinstance(order.items, list) else []
    return any(
        isinstance(i, dict) and i.get("pharmacy_id") == pharmacy_id
        for i in items
    )


def day_figures(orders: Iterable[Any]) -> tuple[Decimal, int, int]:
    orders = list(orders)
    sales = sum((coerce_decimal(o.total_amount) for o in orders), Decimal("0"))
    customers = {o.user_id for o in orders}
    return round_money(sales), len(orders), len(customers)


def split_by_day(orders: Iterable[Any], now: datetime) -> tuple[list[Any], list[Any]]:
    yesterday, today, tomorrow = day_bounds(now)
    previous, current = [], []

    for order in orders:
        created = naive_utc(order.created_at)
        if today <= created < tomorrow:
            current.append(order)
        elif yesterday <= created < today:
            previous.append(order)

    return current, previous
