from sqlalchemy import Column, String, Numeric, Enum, JSON, Index
from app.core.db import Base
from app.models.base.mixins import UUIDPrimaryKeyMixin, OwnedMixin, TimestampMixin
from app.models.enums.order_status import OrderStatus


class Order(Base, UUIDPrimaryKeyMixin, OwnedMixin, TimestampMixin):
    __tablename__ = "orders"

    order_number = Column(String(100), nullable=False, index=True)
    status = Column(Enum(OrderStatus), nullable=False, default=OrderStatus.pending, index=True)
    total_amount = Column(Numeric(12, 2), nullable=False, default=0)
    # snapshot of cart lines; each line may carry a pharmacy_id
    items = Column(JSON, nullable=False, default=list)

    __table_args__ = (Index("ix_order_owner_status", "user_id", "status"),)

    def __repr__(self):
        return f"<Order id={self.id} number={self.order_number} status={self.status}>"
