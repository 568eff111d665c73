from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.constants.inventory import ALL_BRANCHES
from app.core.db import get_db
from app.utils.get_user import get_current_owner
from app.utils.response import success_response, APIResponse

from app.services.inventory.inventory_balance_service import (
    create_product,
    get_branch_totals,
    get_inventory_overview,
    list_low_stock,
)

from app.schemas.inventory.inventory_schemas import (
    AggregatedProductOut,
    BranchStockTotal,
    InventoryOverview,
)
from app.schemas.inventory.product_schemas import ProductCreate, ProductOut

router = APIRouter(
    prefix="/inventory",
    tags=["Inventory"],
)


# =========================
# INVENTORY OVERVIEW
# =========================
@router.get(
    "/",
    response_model=APIResponse[InventoryOverview],
)
async def inventory_overview_api(
    db: AsyncSession = Depends(get_db),
    owner_id: str = Depends(get_current_owner),
    search: str | None = Query(None, description="Search by name, SKU or category"),
    branch: str = Query(ALL_BRANCHES, description="Branch id, 'main' or 'all'"),
):
    overview = await get_inventory_overview(
        db=db,
        owner_id=owner_id,
        search=search,
        branch=branch,
    )

    return success_response(
        "Inventory fetched successfully",
        overview,
    )


# =========================
# LOW STOCK ALERTS
# =========================
@router.get(
    "/low-stock",
    response_model=APIResponse[list[AggregatedProductOut]],
)
async def low_stock_alerts_api(
    db: AsyncSession = Depends(get_db),
    owner_id: str = Depends(get_current_owner),
):
    items = await list_low_stock(db, owner_id)

    return success_response(
        "Low stock items fetched successfully",
        items,
    )


# =========================
# BRANCH TOTALS
# =========================
@router.get(
    "/branch-totals",
    response_model=APIResponse[list[BranchStockTotal]],
)
async def branch_totals_api(
    db: AsyncSession = Depends(get_db),
    owner_id: str = Depends(get_current_owner),
):
    totals = await get_branch_totals(db, owner_id)

    return success_response(
        "Branch totals fetched successfully",
        totals,
    )


# =========================
# CREATE PRODUCT
# =========================
@router.post(
    "/products",
    response_model=APIResponse[ProductOut],
    status_code=201,
)
async def create_product_api(
    payload: ProductCreate,
    db: AsyncSession = Depends(get_db),
    owner_id: str = Depends(get_current_owner),
):
    product = await create_product(db, owner_id, payload)

    return success_response(
        "Product created successfully",
        product,
    )
