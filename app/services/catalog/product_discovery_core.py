"""Public product catalogue: mapping listed rows and filtering them."""

from typing import Any, Iterable

from app.constants.catalog import ALL_CATEGORIES, ALL_PHARMACIES
from app.constants.order_tracking import UNKNOWN_PHARMACY
from app.schemas.catalog.catalog_schemas import CatalogProduct
from app.utils.decimal_utils import coerce_decimal, coerce_int


def catalog_pharmacy_name(profile: Any) -> str:
    if profile is None:
        return UNKNOWN_PHARMACY
    return profile.pharmacy_name or profile.name or UNKNOWN_PHARMACY


def to_catalog_product(product: Any, profile: Any) -> CatalogProduct:
    return CatalogProduct(
        id=product.id,
        sku=product.sku,
        name=product.name,
        category=product.category or "",
        description=product.description,
        sell_price=coerce_decimal(product.sell_price),
        stock=coerce_int(product.stock),
        pharmacy_id=product.user_id,
        pharmacy_name=catalog_pharmacy_name(profile),
        pharmacy_phone=profile.phone if profile else None,
        pharmacy_address=profile.address if profile else None,
        pharmacy_rating=coerce_decimal(profile.pharmacy_rating) if profile else 0,
    )


def filter_catalog(
    items: Iterable[CatalogProduct],
    search: str | None = None,
    category: str | None = ALL_CATEGORIES,
    pharmacy: str | None = ALL_PHARMACIES,
) -> list[CatalogProduct]:
    """Search matches name, category or pharmacy name; category is exact."""
    term = (search or "").strip().lower()
    any_category = category in (None, "", ALL_CATEGORIES)
    any_pharmacy = pharmacy in (None, "", ALL_PHARMACIES)

    return [
        item for item in items
        if (
            not term
            or term in item.name.lower()
            or term in item.category.lower()
            or term in item.pharmacy_name.lower()
        )
        and (any_category or item.category == category)
        and (any_pharmacy or item.pharmacy_id == pharmacy)
    ]
