from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.enums.order_status import OrderStatus
from app.models.inventory.product_models import Product
from app.models.orders.order_models import Order
from app.schemas.dashboard.dashboard_schemas import DashboardStats
from app.services.dashboard.dashboard_core import (
    day_bounds,
    day_figures,
    percent_change,
    sold_by,
    split_by_day,
)
from app.services.inventory.inventory_aggregation_core import aggregate, low_stock_alerts
from app.utils.logger import get_logger

logger = get_logger(__name__)

NOT_SALES = (OrderStatus.cart, OrderStatus.cancelled)


async def get_dashboard_stats(
    db: AsyncSession,
    owner_id: str,
    now: datetime | None = None,
) -> DashboardStats:
    now = now or datetime.now(timezone.utc)
    yesterday, _, tomorrow = day_bounds(now)

    # orders carry the selling pharmacy per line, so filter lines in Python
    result = await db.execute(
        select(Order).where(
            Order.status.not_in(NOT_SALES),
            Order.created_at >= yesterday.replace(tzinfo=timezone.utc),
            Order.created_at < tomorrow.replace(tzinfo=timezone.utc),
        )
    )
    sales_orders = [o for o in result.scalars().all() if sold_by(o, owner_id)]
    current, previous = split_by_day(sales_orders, now)

    sales, orders, customers = day_figures(current)
    prev_sales, prev_orders, prev_customers = day_figures(previous)

    rows = await db.execute(select(Product).where(Product.user_id == owner_id))
    products = aggregate(rows.scalars().all())

    stats = DashboardStats(
        today_sales=sales,
        sales_change=percent_change(sales, prev_sales),
        orders_today=orders,
        orders_change=percent_change(orders, prev_orders),
        customers_today=customers,
        customers_change=percent_change(customers, prev_customers),
        product_count=len(products),
        low_stock_count=len(low_stock_alerts(products)),
    )

    logger.info("Dashboard stats computed", extra={"orders_today": orders})
    return stats
