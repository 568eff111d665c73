from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.constants.catalog import ALL_CATEGORIES, ALL_PHARMACIES, CATALOG_CATEGORIES
from app.core.db import get_db
from app.schemas.catalog.catalog_schemas import CatalogProductListData
from app.services.catalog.product_discovery_service import list_catalog
from app.utils.response import APIResponse, success_response

router = APIRouter(prefix="/catalog", tags=["Product Discovery"])


# public: browsing needs no operator id
@router.get("/products", response_model=APIResponse[CatalogProductListData])
async def list_catalog_api(
    db: AsyncSession = Depends(get_db),
    search: str | None = Query(None, description="Product name, category or pharmacy"),
    category: str = Query(ALL_CATEGORIES),
    pharmacy: str = Query(ALL_PHARMACIES, description="Pharmacy id or 'all'"),
):
    data = await list_catalog(db, search=search, category=category, pharmacy=pharmacy)
    return success_response("Products fetched successfully", data)


@router.get("/categories", response_model=APIResponse[list[str]])
async def list_categories_api():
    return success_response("Categories fetched successfully", CATALOG_CATEGORIES)
