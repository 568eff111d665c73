from decimal import Decimal

import pytest

from app.constants.error_codes import ErrorCode
from app.core.exceptions import AppException
from app.models.enums.stock_status import StockStatus
from app.schemas.inventory.branch_schemas import BranchCreate
from app.schemas.inventory.product_schemas import ProductCreate
from app.services.inventory.branch_service import (
    create_branch,
    deactivate_branch,
    list_branches,
)
from app.services.inventory.inventory_balance_service import (
    create_product,
    get_branch_totals,
    get_inventory_overview,
    list_low_stock,
)

from conftest import OTHER_OWNER, OWNER


# ---------------- branches ----------------

async def test_create_and_list_branches(db):
    await create_branch(db, OWNER, BranchCreate(name="Mwanza", code="mw01", manager_name="Neema"))
    await create_branch(db, OWNER, BranchCreate(name="Arusha", code="ar01"))
    await create_branch(db, OTHER_OWNER, BranchCreate(name="Dodoma", code="dd01"))

    branches = await list_branches(db, OWNER)

    assert [b.name for b in branches] == ["Arusha", "Mwanza"]
    assert branches[1].code == "MW01"
    assert branches[1].manager_name == "Neema"


async def test_duplicate_branch_code_conflicts(db):
    await create_branch(db, OWNER, BranchCreate(name="Mwanza", code="MW01"))

    with pytest.raises(AppException) as exc:
        await create_branch(db, OWNER, BranchCreate(name="Mwanza Two", code="mw01"))

    assert exc.value.status_code == 409
    assert exc.value.error_code == ErrorCode.BRANCH_CODE_EXISTS


async def test_deactivated_branch_leaves_listing(db):
    branch = await create_branch(db, OWNER, BranchCreate(name="Mwanza", code="MW01"))

    result = await deactivate_branch(db, OWNER, branch.id)

    assert result.is_active is False
    assert await list_branches(db, OWNER) == []

    with pytest.raises(AppException) as exc:
        await deactivate_branch(db, OWNER, branch.id)
    assert exc.value.status_code == 404


# ---------------- products ----------------

async def test_create_product_with_lenient_numbers(db, add_branch):
    branch = await add_branch("Downtown", "DT01")

    product = await create_product(
        db,
        OWNER,
        ProductCreate(
            name="Paracetamol 500mg",
            sku="PARA-500",
            branch_id=branch.id,
            category="Medicines",
            sell_price="1500",
            buy_price="",
            stock="abc",
            min_stock_level="10",
            expiry_date="",
        ),
    )

    assert product.branch_id == branch.id
    assert product.sell_price == Decimal("1500")
    assert product.buy_price == 0
    assert product.stock == 0
    assert product.min_stock_level == 10
    assert product.expiry_date is None
    assert product.status == "in-stock"


async def test_create_product_rejects_duplicate_sku_at_same_branch(db):
    payload = ProductCreate(name="Vitamin C", sku="VITC")
    await create_product(db, OWNER, payload)

    with pytest.raises(AppException) as exc:
        await create_product(db, OWNER, payload)

    assert exc.value.status_code == 409
    assert exc.value.error_code == ErrorCode.PRODUCT_SKU_EXISTS


async def test_create_product_rejects_unknown_branch(db):
    with pytest.raises(AppException) as exc:
        await create_product(db, OWNER, ProductCreate(name="ORS", sku="ORS", branch_id="nope"))

    assert exc.value.status_code == 400
    assert exc.value.error_code == ErrorCode.BRANCH_NOT_FOUND


# ---------------- aggregation over stored rows ----------------

async def _seed(add_branch, add_product):
    downtown = await add_branch("Downtown", "DT01")
    airport = await add_branch("Airport", "AP01")
    closed = await add_branch("Closed", "CL01", is_active=False)

    await add_product("AMOX", 10, downtown.id, name="Amoxicillin", sell_price=Decimal("1000"), min_stock_level=5)
    await add_product("AMOX", 4, airport.id, name="Amoxicillin", sell_price=Decimal("1000"), min_stock_level=5)
    await add_product("IBU", 5, None, name="Ibuprofen", sell_price=Decimal("2000"), min_stock_level=5)
    await add_product("ORS", 0, closed.id, name="ORS Sachet", sell_price=Decimal("300"), min_stock_level=2)
    await add_product("AMOX", 99, downtown.id, owner=OTHER_OWNER, name="Amoxicillin")

    return downtown, airport, closed


async def test_inventory_overview(db, add_branch, add_product):
    downtown, airport, closed = await _seed(add_branch, add_product)

    overview = await get_inventory_overview(db, OWNER)

    assert overview.summary.branch_count == 2
    assert overview.summary.product_count == 3
    assert overview.summary.low_stock_count == 2
    assert overview.summary.total_value == 14 * 1000 + 5 * 2000

    by_sku = {p.sku: p for p in overview.items}
    assert by_sku["AMOX"].total_stock == 14
    assert by_sku["AMOX"].branch_stocks == {downtown.id: 10, airport.id: 4}
    assert by_sku["AMOX"].stock_status == StockStatus.in_stock
    assert by_sku["IBU"].status_label == "Low Stock"
    assert by_sku["IBU"].value == 10000

    names = {d.branch_key: d.branch_name for d in by_sku["AMOX"].branch_distribution}
    assert names == {downtown.id: "Downtown", airport.id: "Airport"}
    assert by_sku["IBU"].branch_distribution[0].branch_name == "Main Branch"
    assert by_sku["ORS"].branch_distribution[0].branch_name == "Unknown Branch"


async def test_inventory_overview_filters(db, add_branch, add_product):
    downtown, airport, _ = await _seed(add_branch, add_product)

    only_airport = await get_inventory_overview(db, OWNER, branch=airport.id)
    searched = await get_inventory_overview(db, OWNER, search="ibu")

    assert [p.sku for p in only_airport.items] == ["AMOX"]
    assert [p.sku for p in searched.items] == ["IBU"]
    # summary always covers the full inventory
    assert searched.summary.product_count == 3


async def test_low_stock_and_branch_totals(db, add_branch, add_product):
    downtown, airport, _ = await _seed(add_branch, add_product)

    alerts = await list_low_stock(db, OWNER)
    totals = await get_branch_totals(db, OWNER)

    assert sorted(a.sku for a in alerts) == ["IBU", "ORS"]
    assert [(t.branch_name, t.total_items) for t in totals] == [("Airport", 4), ("Downtown", 10)]


async def test_empty_inventory(db):
    overview = await get_inventory_overview(db, OWNER)

    assert overview.items == []
    assert overview.low_stock == []
    assert overview.summary.product_count == 0
    assert overview.summary.total_value == 0
