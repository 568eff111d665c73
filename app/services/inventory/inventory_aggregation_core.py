"""Pure aggregation of per-branch product rows into per-SKU inventory views.

Nothing here touches the database; callers fetch rows and branches first and
pass them in. Every function tolerates loose input and never raises.
"""

from decimal import Decimal
from typing import Any, Iterable, Mapping, Sequence

from app.constants.inventory import (
    ALL_BRANCHES,
    MAIN_BRANCH_KEY,
    MAIN_BRANCH_LABEL,
    UNKNOWN_BRANCH_LABEL,
)
from app.models.enums.stock_status import StockStatus
from app.schemas.inventory.branch_schemas import BranchRef
from app.schemas.inventory.inventory_schemas import (
    AggregatedProduct,
    BranchStockTotal,
    InventorySummary,
)
from app.schemas.inventory.product_schemas import ProductRecord
from app.utils.logger import get_logger

logger = get_logger(__name__)


def _as_record(row: Any) -> ProductRecord:
    if isinstance(row, ProductRecord):
        return row
    if isinstance(row, Mapping):
        return ProductRecord.model_validate(dict(row))
    return ProductRecord.model_validate(row, from_attributes=True)


def branch_key(record: ProductRecord) -> str:
    return record.branch_id or MAIN_BRANCH_KEY


# =====================================================
# AGGREGATE
# =====================================================
def aggregate(records: Iterable[Any]) -> list[AggregatedProduct]:
    """Merge rows by SKU, in first-seen order.

    The first row of a SKU fixes its threshold and prices. Within a SKU,
    ``branch_stocks`` keeps the last value seen per branch while
    ``total_stock`` adds every row's stock.
    """
    by_sku: dict[str, AggregatedProduct] = {}
    row_count = 0

    for row in records:
        row_count += 1
        record = _as_record(row)
        key = branch_key(record)

        existing = by_sku.get(record.sku)
        if existing is None:
            by_sku[record.sku] = AggregatedProduct(
                id=record.id,
                sku=record.sku,
                name=record.name,
                category=record.category,
                total_stock=record.stock,
                branch_stocks={key: record.stock},
                min_stock_level=record.min_stock_level,
                sell_price=record.sell_price,
                buy_price=record.buy_price,
            )
        else:
            existing.total_stock += record.stock
            existing.branch_stocks[key] = record.stock

    products = list(by_sku.values())
    for product in products:
        product.stock_status = classify_status(product)

    logger.debug(
        "Aggregated inventory rows",
        extra={"rows": row_count, "products": len(products)},
    )
    return products


# =====================================================
# STATUS / VALUATION / ALERTS
# =====================================================
def classify_status(product: AggregatedProduct) -> StockStatus:
    if product.total_stock <= 0:
        return StockStatus.out_of_stock
    if product.total_stock <= product.min_stock_level:
        return StockStatus.low_stock
    return StockStatus.in_stock


def compute_valuation(products: Iterable[AggregatedProduct]) -> Decimal:
    # retail value, not cost
    return sum(
        (p.total_stock * p.sell_price for p in products),
        Decimal("0"),
    )


def low_stock_alerts(products: Iterable[AggregatedProduct]) -> list[AggregatedProduct]:
    return [p for p in products if classify_status(p) != StockStatus.in_stock]


# =====================================================
# BRANCH LOOKUP
# =====================================================
def resolve_branch_name(key: str, branches: Sequence[Any]) -> str:
    if key == MAIN_BRANCH_KEY:
        return MAIN_BRANCH_LABEL

    for branch in active_branches(branches):
        if key and branch.id == key:
            return branch.name or UNKNOWN_BRANCH_LABEL

    return UNKNOWN_BRANCH_LABEL


def active_branches(branches: Iterable[Any]) -> list[BranchRef]:
    refs = []
    for branch in branches or ():
        if branch is None or isinstance(branch, (str, bytes, int, float)):
            continue
        ref = branch if isinstance(branch, BranchRef) else BranchRef.model_validate(
            branch, from_attributes=not isinstance(branch, Mapping)
        )
        if ref.is_active:
            refs.append(ref)
    return refs


# =====================================================
# FILTERS / ANALYTICS
# =====================================================
def filter_products(
    products: Iterable[AggregatedProduct],
    search: str | None = None,
    branch: str | None = ALL_BRANCHES,
) -> list[AggregatedProduct]:
    term = (search or "").strip().lower()
    only_branch = branch not in (None, "", ALL_BRANCHES)

    matched = []
    for product in products:
        if term and not (
            term in product.name.lower()
            or term in product.sku.lower()
            or term in product.category.lower()
        ):
            continue
        if only_branch and product.branch_stocks.get(branch, 0) <= 0:
            continue
        matched.append(product)

    return matched


def branch_stock_totals(
    products: Sequence[AggregatedProduct],
    branches: Iterable[Any],
) -> list[BranchStockTotal]:
    return [
        BranchStockTotal(
            branch_id=branch.id,
            branch_name=branch.name,
            address=branch.address,
            manager_name=branch.manager_name,
            total_items=sum(p.branch_stocks.get(branch.id, 0) for p in products),
        )
        for branch in active_branches(branches)
    ]


def summarize(
    products: Sequence[AggregatedProduct],
    branches: Iterable[Any],
) -> InventorySummary:
    return InventorySummary(
        branch_count=len(active_branches(branches)),
        product_count=len(products),
        low_stock_count=len(low_stock_alerts(products)),
        total_value=compute_valuation(products),
    )
