from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.schemas.dashboard.dashboard_schemas import DashboardStats
from app.services.dashboard.dashboard_service import get_dashboard_stats
from app.utils.get_user import get_current_owner
from app.utils.response import APIResponse, success_response

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=APIResponse[DashboardStats])
async def dashboard_stats_api(
    db: AsyncSession = Depends(get_db),
    owner_id: str = Depends(get_current_owner),
):
    stats = await get_dashboard_stats(db, owner_id)
    return success_response("Dashboard stats fetched successfully", stats)
