from sqlalchemy import Boolean, Column, Integer, String, Numeric, Date, ForeignKey, Index, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship
from app.core.db import Base
from app.models.base.mixins import UUIDPrimaryKeyMixin, OwnedMixin, TimestampMixin


class Product(Base, UUIDPrimaryKeyMixin, OwnedMixin, TimestampMixin):
    """One row per product per branch; rows sharing a SKU are the same logical product."""

    __tablename__ = "products"

    branch_id = Column(String(36), ForeignKey("branches.id", ondelete="SET NULL"), nullable=True, index=True)
    sku = Column(String(50), nullable=False, index=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(String(500), nullable=True)
    category = Column(String(100), nullable=True, index=True)
    stock = Column(Integer, nullable=False, default=0)
    min_stock_level = Column(Integer, nullable=False, default=0)
    sell_price = Column(Numeric(12, 2), nullable=False, default=0)
    buy_price = Column(Numeric(12, 2), nullable=False, default=0)
    expiry_date = Column(Date, nullable=True)
    batch_number = Column(String(100), nullable=True)
    status = Column(String(30), nullable=False, default="in-stock")
    # listed in the public catalogue when either flag is set
    is_retail_product = Column(Boolean, nullable=False, default=False)
    is_public_product = Column(Boolean, nullable=False, default=False)

    branch = relationship("Branch", back_populates="products", lazy="selectin")

    __table_args__ = (
        UniqueConstraint("user_id", "sku", "branch_id", name="uq_product_owner_sku_branch"),
        CheckConstraint("stock >= 0", name="ck_product_stock_non_negative"),
        Index("ix_product_owner_name", "user_id", "name"),
    )

    def __repr__(self):
        return f"<Product id={self.id} sku={self.sku} branch_id={self.branch_id} stock={self.stock}>"
