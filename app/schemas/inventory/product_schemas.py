# app/schemas/inventory/product_schemas.py

from pydantic import BaseModel, Field, field_validator
from typing import Any, Optional
from decimal import Decimal
from datetime import date, datetime

from app.utils.decimal_utils import coerce_decimal, coerce_int


def _text(value: Any) -> str:
    return "" if value is None else str(value)


class ProductRecord(BaseModel):
    """A raw per-branch product row, with lenient defaulting of loose backend data."""

    id: Optional[str] = None
    sku: str = ""
    branch_id: Optional[str] = None
    name: str = ""
    category: str = ""
    stock: int = 0
    min_stock_level: int = 0
    sell_price: Decimal = Decimal("0")
    buy_price: Decimal = Decimal("0")

    model_config = {"from_attributes": True}

    @field_validator("id", "branch_id", mode="before")
    @classmethod
    def _optional_id(cls, value):
        if value is None or value == "":
            return None
        return str(value)

    @field_validator("sku", "name", "category", mode="before")
    @classmethod
    def _blank_text(cls, value):
        return _text(value)

    @field_validator("stock", "min_stock_level", mode="before")
    @classmethod
    def _lenient_int(cls, value):
        return coerce_int(value)

    @field_validator("sell_price", "buy_price", mode="before")
    @classmethod
    def _lenient_decimal(cls, value):
        return coerce_decimal(value)


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    sku: str = Field(..., min_length=1, max_length=50)
    branch_id: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    buy_price: Decimal = Decimal("0")
    sell_price: Decimal = Decimal("0")
    stock: int = 0
    min_stock_level: int = 0
    expiry_date: Optional[date] = None
    batch_number: Optional[str] = None
    is_retail_product: bool = False
    is_public_product: bool = False

    @field_validator("branch_id", "description", "category", "batch_number", "expiry_date", mode="before")
    @classmethod
    def _empty_is_none(cls, value):
        return None if value == "" else value

    @field_validator("stock", "min_stock_level", mode="before")
    @classmethod
    def _lenient_int(cls, value):
        return max(coerce_int(value), 0)

    @field_validator("sell_price", "buy_price", mode="before")
    @classmethod
    def _lenient_decimal(cls, value):
        return max(coerce_decimal(value), Decimal("0"))


class ProductOut(BaseModel):
    id: str
    sku: str
    branch_id: Optional[str]
    name: str
    description: Optional[str]
    category: Optional[str]
    stock: int
    min_stock_level: int
    sell_price: Decimal
    buy_price: Decimal
    expiry_date: Optional[date]
    batch_number: Optional[str]
    status: str
    is_retail_product: bool
    is_public_product: bool
    created_at: datetime

    model_config = {"from_attributes": True}
