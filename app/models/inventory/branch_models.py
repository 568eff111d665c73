from sqlalchemy import Column, String, Boolean, Index, UniqueConstraint
from sqlalchemy.orm import relationship
from app.core.db import Base
from app.models.base.mixins import UUIDPrimaryKeyMixin, OwnedMixin, TimestampMixin


class Branch(Base, UUIDPrimaryKeyMixin, OwnedMixin, TimestampMixin):
    __tablename__ = "branches"

    name = Column(String(100), nullable=False)
    code = Column(String(50), nullable=False)
    address = Column(String(255), nullable=True)
    manager_name = Column(String(100), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    products = relationship("Product", back_populates="branch", lazy="selectin")

    __table_args__ = (
        UniqueConstraint("user_id", "code", name="uq_branch_owner_code"),
        Index("ix_branch_owner_active", "user_id", "is_active"),
    )

    def __repr__(self):
        return f"<Branch id={self.id} code={self.code} active={self.is_active}>"
