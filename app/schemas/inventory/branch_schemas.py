# app/schemas/inventory/branch_schemas.py

from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime

_FALSE_FLAGS = {"false", "0", "no", "off", "n", "f", ""}


class BranchRef(BaseModel):
    """Branch reference data as read from loose rows; every field has a default."""

    id: str = ""
    name: str = ""
    code: Optional[str] = None
    address: Optional[str] = None
    manager_name: Optional[str] = None
    is_active: bool = True

    model_config = {"from_attributes": True}

    @field_validator("id", "name", mode="before")
    @classmethod
    def _as_text(cls, value):
        # a blank id never matches a branch key
        return "" if value is None else str(value)

    @field_validator("code", "address", "manager_name", mode="before")
    @classmethod
    def _optional_text(cls, value):
        return None if value is None else str(value)

    @field_validator("is_active", mode="before")
    @classmethod
    def _active_flag(cls, value):
        # nullable column: an unset flag counts as active
        if value is None:
            return True
        if isinstance(value, str):
            return value.strip().lower() not in _FALSE_FLAGS
        return bool(value)


class BranchCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    code: str = Field(..., min_length=2, max_length=50)
    address: Optional[str] = None
    manager_name: Optional[str] = None


class BranchOut(BranchRef):
    created_at: datetime
    updated_at: Optional[datetime]
