# app/schemas/inventory/inventory_schemas.py

from pydantic import BaseModel, Field
from typing import Dict, List, Optional
from decimal import Decimal

from app.models.enums.stock_status import StockStatus


class AggregatedProduct(BaseModel):
    id: Optional[str] = None
    sku: str
    name: str
    category: str
    total_stock: int
    branch_stocks: Dict[str, int] = Field(default_factory=dict)
    min_stock_level: int
    sell_price: Decimal
    buy_price: Decimal
    stock_status: StockStatus = StockStatus.in_stock


class BranchStockOut(BaseModel):
    branch_key: str
    branch_name: str
    quantity: int


class AggregatedProductOut(AggregatedProduct):
    status_label: str
    value: Decimal
    branch_distribution: List[BranchStockOut]


class BranchStockTotal(BaseModel):
    branch_id: str
    branch_name: str
    address: Optional[str]
    manager_name: Optional[str]
    total_items: int


class InventorySummary(BaseModel):
    branch_count: int = 0
    product_count: int = 0
    low_stock_count: int = 0
    total_value: Decimal = Decimal("0")


class InventoryOverview(BaseModel):
    summary: InventorySummary
    items: List[AggregatedProductOut]
    low_stock: List[AggregatedProductOut]
