# app/constants/order_tracking.py

from datetime import timedelta

from app.models.enums.order_status import OrderStatus

DELIVERY_LEAD_TIMES = {
    OrderStatus.pending: timedelta(days=2),
    OrderStatus.confirmed: timedelta(days=1),
    OrderStatus.shipped: timedelta(hours=6),
}
DEFAULT_DELIVERY_LEAD_TIME = timedelta(days=1)

# how far before "now" the synthesized milestones are stamped
CONFIRMED_OFFSET = timedelta(hours=1)
OUT_FOR_DELIVERY_OFFSET = timedelta(minutes=30)

UNKNOWN_PHARMACY = "Unknown Pharmacy"
