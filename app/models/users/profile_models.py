from sqlalchemy import Boolean, Column, Numeric, String
from app.core.db import Base
from app.models.base.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class Profile(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """Pharmacy profile; its id is the operator id that owns products and orders."""

    __tablename__ = "profiles"

    name = Column(String(255), nullable=True)
    business_name = Column(String(255), nullable=True)
    pharmacy_name = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    address = Column(String(255), nullable=True)
    role = Column(String(30), nullable=True, index=True)
    is_approved = Column(Boolean, nullable=False, default=False)
    pharmacy_rating = Column(Numeric(3, 1), nullable=True)
    operating_hours = Column(String(100), nullable=True)

    def __repr__(self):
        return f"<Profile id={self.id} pharmacy={self.pharmacy_name}>"
