import uuid

from sqlalchemy import Column, DateTime, String
from sqlalchemy.sql import func


def new_uuid() -> str:
    return str(uuid.uuid4())


class UUIDPrimaryKeyMixin:
    id = Column(String(36), primary_key=True, default=new_uuid)


class OwnedMixin:
    # operator that owns the row; issued by the upstream auth gateway
    user_id = Column(String(64), nullable=False, index=True)


class TimestampMixin:
    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )
    updated_at = Column(
        DateTime(timezone=True),
        onupdate=func.now()
    )
