from sqlalchemy import Column, Integer, String, Enum, ForeignKey, Index
from sqlalchemy.orm import relationship
from app.core.db import Base
from app.models.base.mixins import UUIDPrimaryKeyMixin, OwnedMixin, TimestampMixin
from app.models.enums.stock_transfer_status import TransferStatus, AdjustmentType


class StockAdjustment(Base, UUIDPrimaryKeyMixin, OwnedMixin, TimestampMixin):
    """Stock change at a branch. Transfers are stored as a negative quantity at the source."""

    __tablename__ = "stock_adjustments"

    product_id = Column(String(36), ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    branch_id = Column(String(36), ForeignKey("branches.id", ondelete="SET NULL"), nullable=True, index=True)
    transfer_to_branch_id = Column(String(36), ForeignKey("branches.id", ondelete="SET NULL"), nullable=True, index=True)
    quantity = Column(Integer, nullable=False)
    adjustment_type = Column(Enum(AdjustmentType), nullable=False, index=True)
    reason = Column(String(255), nullable=True)
    status = Column(Enum(TransferStatus), nullable=False, default=TransferStatus.pending, index=True)
    created_by = Column(String(64), nullable=True)

    product = relationship("Product", lazy="selectin")
    from_branch = relationship("Branch", foreign_keys=[branch_id], lazy="selectin")
    to_branch = relationship("Branch", foreign_keys=[transfer_to_branch_id], lazy="selectin")

    __table_args__ = (
        Index("ix_stock_adjustment_owner_type", "user_id", "adjustment_type"),
    )

    def __repr__(self):
        return f"<StockAdjustment id={self.id} {self.branch_id}->{self.transfer_to_branch_id} qty={self.quantity} status={self.status}>"
