# app/models/enums/stock_status.py
import enum


class StockStatus(str, enum.Enum):
    out_of_stock = "out_of_stock"
    low_stock = "low_stock"
    in_stock = "in_stock"

    @property
    def label(self) -> str:
        return STOCK_STATUS_LABELS[self]


STOCK_STATUS_LABELS = {
    StockStatus.out_of_stock: "Out of Stock",
    StockStatus.low_stock: "Low Stock",
    StockStatus.in_stock: "In Stock",
}
