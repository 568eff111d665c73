from decimal import Decimal
from types import SimpleNamespace

from app.models.enums.stock_status import StockStatus
from app.schemas.inventory.inventory_schemas import AggregatedProduct
from app.services.inventory.inventory_aggregation_core import (
    aggregate,
    branch_stock_totals,
    classify_status,
    compute_valuation,
    filter_products,
    low_stock_alerts,
    resolve_branch_name,
    summarize,
)


def _row(sku, stock, branch_id=None, **extra):
    row = {
        "sku": sku,
        "branch_id": branch_id,
        "name": extra.pop("name", f"Product {sku}"),
        "category": extra.pop("category", "Medicines"),
        "stock": stock,
        "min_stock_level": extra.pop("min_stock_level", 5),
        "sell_price": extra.pop("sell_price", 100),
        "buy_price": extra.pop("buy_price", 60),
    }
    row.update(extra)
    return row


def _product(total_stock, sell_price=0, min_stock_level=0, branch_stocks=None, **extra):
    return AggregatedProduct(
        sku=extra.pop("sku", "SKU"),
        name=extra.pop("name", "Paracetamol"),
        category=extra.pop("category", "Medicines"),
        total_stock=total_stock,
        branch_stocks=branch_stocks or {"main": total_stock},
        min_stock_level=min_stock_level,
        sell_price=Decimal(sell_price),
        buy_price=Decimal("0"),
        **extra,
    )


# ---------------- aggregate ----------------

def test_aggregate_merges_rows_by_sku_in_first_seen_order():
    products = aggregate([
        _row("B", 4, "b1"),
        _row("A", 10, "b1"),
        _row("B", 6, "b2"),
        _row("A", 1),
    ])

    assert [p.sku for p in products] == ["B", "A"]
    assert products[0].total_stock == 10
    assert products[0].branch_stocks == {"b1": 4, "b2": 6}
    assert products[1].branch_stocks == {"b1": 10, "main": 1}


def test_total_stock_equals_sum_of_branch_stocks():
    rows = [
        _row("A", 3, "b1"),
        _row("A", 7, "b2"),
        _row("B", 0, None),
        _row("C", 12, "b1"),
        _row("C", 8),
    ]

    for product in aggregate(rows):
        assert product.total_stock == sum(product.branch_stocks.values())


def test_aggregate_is_deterministic_for_the_same_input():
    rows = [_row("A", 3, "b1"), _row("B", 2, "b2"), _row("A", 5, "b2")]

    first = [p.model_dump() for p in aggregate(rows)]
    second = [p.model_dump() for p in aggregate(rows)]

    assert first == second


def test_same_branch_twice_keeps_last_stock_but_adds_to_total():
    products = aggregate([_row("A", 5, "b1"), _row("A", 3, "b1")])

    assert len(products) == 1
    assert products[0].branch_stocks == {"b1": 3}
    assert products[0].total_stock == 8


def test_first_row_fixes_threshold_and_prices():
    products = aggregate([
        _row("A", 5, "b1", min_stock_level=2, sell_price=100, buy_price=70),
        _row("A", 5, "b2", min_stock_level=50, sell_price=999, buy_price=1),
    ])

    assert products[0].min_stock_level == 2
    assert products[0].sell_price == Decimal("100")
    assert products[0].buy_price == Decimal("70")


def test_missing_or_empty_branch_maps_to_main():
    products = aggregate([_row("A", 2, None), _row("B", 3, "")])

    assert products[0].branch_stocks == {"main": 2}
    assert products[1].branch_stocks == {"main": 3}


def test_malformed_numbers_are_coerced_to_zero():
    products = aggregate([
        {"sku": "A", "stock": "lots", "min_stock_level": None, "sell_price": "n/a", "buy_price": "NaN"},
        {"sku": "A", "stock": "4", "branch_id": 7},
    ])

    product = products[0]
    assert product.total_stock == 4
    assert product.branch_stocks == {"main": 0, "7": 4}
    assert product.min_stock_level == 0
    assert product.sell_price == 0
    assert product.buy_price == 0
    assert product.name == ""
    assert product.category == ""


def test_fractional_stock_truncates():
    products = aggregate([_row("A", "7.9"), _row("B", 2.5)])

    assert products[0].total_stock == 7
    assert products[1].total_stock == 2


def test_aggregate_accepts_attribute_rows():
    rows = [
        SimpleNamespace(id="p1", sku="A", branch_id="b1", name="Amoxicillin", category="Antibiotic",
                        stock=4, min_stock_level=2, sell_price=Decimal("250.00"), buy_price=Decimal("180.00")),
        SimpleNamespace(id="p2", sku="A", branch_id="b2", name="Amoxicillin", category="Antibiotic",
                        stock=6, min_stock_level=2, sell_price=Decimal("250.00"), buy_price=Decimal("180.00")),
    ]

    products = aggregate(rows)

    assert products[0].id == "p1"
    assert products[0].total_stock == 10
    assert products[0].stock_status == StockStatus.in_stock


def test_aggregate_sets_stock_status():
    products = aggregate([
        _row("A", 0, min_stock_level=5),
        _row("B", 5, min_stock_level=5),
        _row("C", 6, min_stock_level=5),
    ])

    assert [p.stock_status for p in products] == [
        StockStatus.out_of_stock,
        StockStatus.low_stock,
        StockStatus.in_stock,
    ]


# ---------------- classify_status ----------------

def test_status_boundary_is_inclusive_on_the_low_side():
    assert classify_status(SimpleNamespace(total_stock=5, min_stock_level=5)) == StockStatus.low_stock
    assert classify_status(SimpleNamespace(total_stock=6, min_stock_level=5)) == StockStatus.in_stock


def test_classify_status_on_aggregated_products():
    assert classify_status(_product(3, min_stock_level=5)) == StockStatus.low_stock
    assert classify_status(_product(30, min_stock_level=5)) == StockStatus.in_stock


def test_zero_stock_is_out_of_stock_regardless_of_threshold():
    assert classify_status(SimpleNamespace(total_stock=0, min_stock_level=0)) == StockStatus.out_of_stock
    assert classify_status(SimpleNamespace(total_stock=0, min_stock_level=100)) == StockStatus.out_of_stock


def test_status_labels():
    assert StockStatus.out_of_stock.label == "Out of Stock"
    assert StockStatus.low_stock.label == "Low Stock"
    assert StockStatus.in_stock.label == "In Stock"


# ---------------- valuation / alerts ----------------

def test_valuation_uses_sell_price():
    products = [_product(10, sell_price=1000), _product(5, sell_price=2000)]

    assert compute_valuation(products) == 20000


def test_low_stock_alerts_keep_input_order_and_include_out_of_stock():
    healthy = _product(50, min_stock_level=5, sku="H")
    empty = _product(0, min_stock_level=5, sku="E")
    low = _product(3, min_stock_level=5, sku="L")

    alerts = low_stock_alerts([low, healthy, empty])

    assert [p.sku for p in alerts] == ["L", "E"]


def test_empty_input():
    assert aggregate([]) == []
    assert compute_valuation([]) == 0
    assert low_stock_alerts([]) == []


# ---------------- branch names ----------------

def test_resolve_branch_name():
    branches = [{"id": "b1", "name": "Downtown"}]

    assert resolve_branch_name("main", branches) == "Main Branch"
    assert resolve_branch_name("b1", branches) == "Downtown"
    assert resolve_branch_name("b2", branches) == "Unknown Branch"


def test_resolve_branch_name_ignores_inactive_and_takes_first_match():
    branches = [
        SimpleNamespace(id="b1", name="Closed", code="C", address=None, manager_name=None, is_active=False),
        {"id": "b1", "name": "Downtown"},
        {"id": "b1", "name": "Duplicate"},
    ]

    assert resolve_branch_name("b1", branches) == "Downtown"
    assert resolve_branch_name("b1", branches[:1]) == "Unknown Branch"


def test_loose_branch_rows_are_coerced():
    branches = [
        {"id": "b1", "name": "Downtown", "is_active": None},
        {"name": "No Id"},
        {"id": None, "name": "Null Id"},
        {"id": 7, "name": None, "code": 42, "address": 1, "manager_name": 3.5},
        {"id": "b9", "name": "Closed", "is_active": "false"},
        None,
    ]

    assert resolve_branch_name("b1", branches) == "Downtown"
    assert resolve_branch_name("b2", branches) == "Unknown Branch"
    assert resolve_branch_name("", branches) == "Unknown Branch"
    assert resolve_branch_name("7", branches) == "Unknown Branch"
    assert resolve_branch_name("b9", branches) == "Unknown Branch"
    assert resolve_branch_name("b1", None) == "Unknown Branch"


def test_loose_branch_rows_in_totals_and_summary():
    products = aggregate([_row("A", 4, "b1")])
    branches = [
        {"id": "b1", "name": "Downtown", "is_active": None},
        {"id": 7, "code": 42, "address": 1},
    ]

    totals = branch_stock_totals(products, branches)
    summary = summarize([], branches)

    assert [(t.branch_id, t.total_items) for t in totals] == [("b1", 4), ("7", 0)]
    assert totals[1].address == "1"
    assert summary.branch_count == 2


# ---------------- filters / analytics ----------------

def test_filter_products_by_search_term():
    products = aggregate([
        _row("PARA-500", 10, name="Paracetamol", category="Pain Relief"),
        _row("AMOX-250", 10, name="Amoxicillin", category="Antibiotic"),
        _row("VITC-1000", 10, name="Vitamin C", category="Supplements"),
    ])

    assert [p.sku for p in filter_products(products, search="amox")] == ["AMOX-250"]
    assert [p.sku for p in filter_products(products, search="vitc")] == ["VITC-1000"]
    assert [p.sku for p in filter_products(products, search="PAIN")] == ["PARA-500"]
    assert len(filter_products(products, search="  ")) == 3


def test_filter_products_by_branch_requires_positive_stock_there():
    products = aggregate([
        _row("A", 4, "b1"),
        _row("B", 0, "b1"),
        _row("B", 9, "b2"),
        _row("C", 2),
    ])

    assert [p.sku for p in filter_products(products, branch="b1")] == ["A"]
    assert [p.sku for p in filter_products(products, branch="main")] == ["C"]
    assert [p.sku for p in filter_products(products, branch="all")] == ["A", "B", "C"]
    assert [p.sku for p in filter_products(products, branch=None)] == ["A", "B", "C"]


def test_branch_stock_totals_only_for_active_branches():
    products = aggregate([
        _row("A", 4, "b1"),
        _row("A", 6, "b2"),
        _row("B", 3, "b1"),
    ])
    branches = [
        {"id": "b1", "name": "Downtown", "address": "1 Main St", "manager_name": "Asha"},
        {"id": "b2", "name": "Airport", "is_active": False},
        {"id": "b3", "name": "Harbour"},
    ]

    totals = branch_stock_totals(products, branches)

    assert [(t.branch_name, t.total_items) for t in totals] == [("Downtown", 7), ("Harbour", 0)]
    assert totals[0].manager_name == "Asha"


def test_summarize():
    products = aggregate([
        _row("A", 10, "b1", sell_price=1000, min_stock_level=2),
        _row("B", 5, "b1", sell_price=2000, min_stock_level=5),
    ])

    summary = summarize(products, [{"id": "b1", "name": "Downtown"}])

    assert summary.branch_count == 1
    assert summary.product_count == 2
    assert summary.low_stock_count == 1
    assert summary.total_value == 20000


def test_summarize_empty():
    summary = summarize([], [])

    assert summary.branch_count == 0
    assert summary.product_count == 0
    assert summary.low_stock_count == 0
    assert summary.total_value == 0
