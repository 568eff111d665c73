# app/models/enums/order_status.py
import enum


class OrderStatus(str, enum.Enum):
    cart = "cart"
    pending = "pending"
    confirmed = "confirmed"
    shipped = "shipped"
    delivered = "delivered"
    cancelled = "cancelled"
