# app/schemas/catalog/catalog_schemas.py

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from decimal import Decimal

from app.utils.decimal_utils import coerce_decimal, coerce_int


class CatalogProduct(BaseModel):
    id: str
    sku: str
    name: str
    category: str = ""
    description: Optional[str] = None
    sell_price: Decimal
    stock: int
    pharmacy_id: str
    pharmacy_name: str
    pharmacy_phone: Optional[str] = None
    pharmacy_address: Optional[str] = None
    pharmacy_rating: Decimal = Decimal("0")


class CatalogProductListData(BaseModel):
    total: int
    items: List[CatalogProduct]


# =========================
# CART
# =========================
class CartItem(BaseModel):
    """One cart line, stored as JSON inside the cart order."""

    id: str
    name: str = ""
    category: str = ""
    sell_price: Decimal = Decimal("0")
    quantity: int = 1
    pharmacy_id: Optional[str] = None
    pharmacy_name: Optional[str] = None

    @field_validator("sell_price", mode="before")
    @classmethod
    def _lenient_price(cls, value):
        return coerce_decimal(value)

    @field_validator("quantity", mode="before")
    @classmethod
    def _lenient_quantity(cls, value):
        return max(coerce_int(value), 0)


class CartState(BaseModel):
    order_id: Optional[str] = None
    order_number: Optional[str] = None
    items: List[CartItem] = Field(default_factory=list)
    total_amount: Decimal = Decimal("0.00")


class CartAdd(BaseModel):
    product_id: str = Field(..., min_length=1)
    quantity: int = Field(1, gt=0)
