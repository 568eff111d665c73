import time
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.constants.error_codes import ErrorCode
from app.constants.inventory import ALL_BRANCHES, PRODUCT_STATUS_IN_STOCK
from app.core.exceptions import AppException
from app.models.inventory.branch_models import Branch
from app.models.inventory.product_models import Product
from app.schemas.inventory.inventory_schemas import (
    AggregatedProduct,
    AggregatedProductOut,
    BranchStockOut,
    BranchStockTotal,
    InventoryOverview,
)
from app.schemas.inventory.product_schemas import ProductCreate, ProductOut
from app.services.inventory.inventory_aggregation_core import (
    aggregate,
    branch_stock_totals,
    filter_products,
    low_stock_alerts,
    resolve_branch_name,
    summarize,
)
from app.utils.logger import get_logger

logger = get_logger(__name__)


# =====================================================
# MAPPER
# =====================================================
def _map_aggregated(product: AggregatedProduct, branches: list[Branch]) -> AggregatedProductOut:
    return AggregatedProductOut(
        **product.model_dump(),
        status_label=product.stock_status.label,
        value=product.total_stock * product.sell_price,
        branch_distribution=[
            BranchStockOut(
                branch_key=key,
                branch_name=resolve_branch_name(key, branches),
                quantity=quantity,
            )
            for key, quantity in product.branch_stocks.items()
        ],
    )


# =====================================================
# FETCH
# =====================================================
async def _fetch_active_branches(db: AsyncSession, owner_id: str) -> list[Branch]:
    result = await db.execute(
        select(Branch)
        .where(Branch.user_id == owner_id, Branch.is_active.is_(True))
        .order_by(Branch.name.asc())
    )
    return list(result.scalars().all())


async def _fetch_aggregated(db: AsyncSession, owner_id: str):
    t0 = time.perf_counter()

    result = await db.execute(
        select(Product)
        .where(Product.user_id == owner_id)
        .order_by(Product.name.asc(), Product.created_at.asc())
    )
    rows = result.scalars().all()
    branches = await _fetch_active_branches(db, owner_id)

    t1 = time.perf_counter()
    products = aggregate(rows)

    logger.info(
        "[INV] inventory aggregated",
        extra={
            "rows": len(rows),
            "products": len(products),
            "t_db": round(t1 - t0, 4),
            "t_aggregate": round(time.perf_counter() - t1, 4),
        },
    )
    return products, branches


# =====================================================
# OVERVIEW
# =====================================================
async def get_inventory_overview(
    db: AsyncSession,
    owner_id: str,
    search: str | None = None,
    branch: str | None = ALL_BRANCHES,
) -> InventoryOverview:
    products, branches = await _fetch_aggregated(db, owner_id)

    visible = filter_products(products, search=search, branch=branch)

    return InventoryOverview(
        summary=summarize(products, branches),
        items=[_map_aggregated(p, branches) for p in visible],
        low_stock=[_map_aggregated(p, branches) for p in low_stock_alerts(products)],
    )


# =====================================================
# LOW STOCK ALERTS
# =====================================================
async def list_low_stock(db: AsyncSession, owner_id: str) -> list[AggregatedProductOut]:
    logger.info("Fetch low stock products")
    products, branches = await _fetch_aggregated(db, owner_id)
    return [_map_aggregated(p, branches) for p in low_stock_alerts(products)]


# =====================================================
# BRANCH TOTALS
# =====================================================
async def get_branch_totals(db: AsyncSession, owner_id: str) -> list[BranchStockTotal]:
    products, branches = await _fetch_aggregated(db, owner_id)
    return branch_stock_totals(products, branches)


# =====================================================
# CREATE PRODUCT ROW
# =====================================================
async def create_product(
    db: AsyncSession,
    owner_id: str,
    payload: ProductCreate,
) -> ProductOut:
    if payload.branch_id:
        branch_exists = await db.scalar(
            select(Branch.id).where(
                Branch.id == payload.branch_id,
                Branch.user_id == owner_id,
                Branch.is_active.is_(True),
            )
        )
        if not branch_exists:
            raise AppException(
                400,
                "Invalid or inactive branch",
                ErrorCode.BRANCH_NOT_FOUND,
            )

    branch_filter = (
        Product.branch_id == payload.branch_id
        if payload.branch_id
        else Product.branch_id.is_(None)
    )
    exists = await db.scalar(
        select(Product.id).where(
            Product.user_id == owner_id,
            Product.sku == payload.sku,
            branch_filter,
        )
    )
    if exists:
        raise AppException(
            409,
            "SKU already exists at this branch",
            ErrorCode.PRODUCT_SKU_EXISTS,
        )

    product = Product(
        **payload.model_dump(),
        user_id=owner_id,
        status=PRODUCT_STATUS_IN_STOCK,
    )
    db.add(product)

    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise AppException(
            409,
            "SKU already exists at this branch",
            ErrorCode.PRODUCT_SKU_EXISTS,
        )

    await db.refresh(product)
    logger.info("Product created", extra={"sku": product.sku, "branch_id": product.branch_id})
    return ProductOut.model_validate(product)
