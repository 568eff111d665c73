from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.constants.catalog import ALL_CATEGORIES, ALL_PHARMACIES
from app.constants.inventory import PRODUCT_STATUS_IN_STOCK
from app.models.inventory.product_models import Product
from app.models.users.profile_models import Profile
from app.schemas.catalog.catalog_schemas import CatalogProduct, CatalogProductListData
from app.services.catalog.product_discovery_core import filter_catalog, to_catalog_product
from app.utils.logger import get_logger

logger = get_logger(__name__)


def discoverable_products():
    """Select listed products: retail or public, in stock, with units left."""
    return select(Product).where(
        or_(
            Product.is_retail_product.is_(True),
            Product.is_public_product.is_(True),
        ),
        Product.status == PRODUCT_STATUS_IN_STOCK,
        Product.stock > 0,
    )


async def load_pharmacy_profiles(db: AsyncSession, pharmacy_ids) -> dict[str, Profile]:
    ids = {pid for pid in pharmacy_ids if pid}
    if not ids:
        return {}

    result = await db.execute(select(Profile).where(Profile.id.in_(ids)))
    return {p.id: p for p in result.scalars().all()}


async def get_catalog_product(db: AsyncSession, product_id: str) -> CatalogProduct | None:
    product = await db.scalar(discoverable_products().where(Product.id == product_id))
    if product is None:
        return None

    profiles = await load_pharmacy_profiles(db, [product.user_id])
    return to_catalog_product(product, profiles.get(product.user_id))


async def list_catalog(
    db: AsyncSession,
    search: str | None = None,
    category: str | None = ALL_CATEGORIES,
    pharmacy: str | None = ALL_PHARMACIES,
) -> CatalogProductListData:
    result = await db.execute(
        discoverable_products().order_by(Product.name.asc(), Product.created_at.asc())
    )
    rows = result.scalars().all()
    profiles = await load_pharmacy_profiles(db, (p.user_id for p in rows))

    items = filter_catalog(
        [to_catalog_product(p, profiles.get(p.user_id)) for p in rows],
        search=search,
        category=category,
        pharmacy=pharmacy,
    )

    logger.info(
        "Catalogue fetched",
        extra={"listed": len(rows), "matched": len(items)},
    )
    return CatalogProductListData(total=len(items), items=items)
