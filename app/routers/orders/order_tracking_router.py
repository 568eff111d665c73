from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.schemas.orders.order_tracking_schemas import TrackedOrderListData
from app.services.orders.order_tracking_service import list_tracked_orders
from app.utils.get_user import get_current_owner
from app.utils.response import APIResponse, success_response

router = APIRouter(prefix="/orders", tags=["Order Tracking"])


@router.get("/tracking", response_model=APIResponse[TrackedOrderListData])
async def list_tracked_orders_api(
    db: AsyncSession = Depends(get_db),
    owner_id: str = Depends(get_current_owner),
    search: str | None = Query(None, description="Order number, pharmacy or status"),
):
    data = await list_tracked_orders(db, owner_id, search=search)
    return success_response("Orders fetched successfully", data)
