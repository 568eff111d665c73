# app/schemas/orders/order_tracking_schemas.py

from pydantic import BaseModel
from typing import Any, List
from decimal import Decimal
from datetime import datetime

from app.models.enums.order_status import OrderStatus


class TrackingUpdate(BaseModel):
    status: str
    timestamp: datetime
    description: str
    completed: bool


class TrackedOrder(BaseModel):
    id: str
    order_number: str
    status: OrderStatus
    total_amount: Decimal
    created_at: datetime
    items: List[Any]
    pharmacy_name: str
    pharmacy_phone: str
    estimated_delivery: datetime
    tracking_updates: List[TrackingUpdate]


class TrackedOrderListData(BaseModel):
    total: int
    items: List[TrackedOrder]
