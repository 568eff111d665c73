from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.schemas.pharmacies.pharmacy_schemas import PharmacyListData
from app.services.pharmacies.pharmacy_directory_service import list_pharmacies
from app.utils.response import APIResponse, success_response

router = APIRouter(prefix="/pharmacies", tags=["Pharmacy Directory"])


@router.get("/", response_model=APIResponse[PharmacyListData])
async def list_pharmacies_api(
    db: AsyncSession = Depends(get_db),
    search: str | None = Query(None, description="Pharmacy name or address"),
):
    data = await list_pharmacies(db, search=search)
    return success_response("Pharmacies fetched successfully", data)
