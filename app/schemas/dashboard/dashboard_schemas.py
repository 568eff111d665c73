# app/schemas/dashboard/dashboard_schemas.py

from pydantic import BaseModel
from decimal import Decimal


class DashboardStats(BaseModel):
    # changes are percentages against the previous day
    today_sales: Decimal
    sales_change: Decimal
    orders_today: int
    orders_change: Decimal
    customers_today: int
    customers_change: Decimal
    product_count: int
    low_stock_count: int
