from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.schemas.inventory.stock_transfer_schemas import (
    StockTransferCreate,
    StockTransferOut,
)
from app.services.inventory.stock_transfer_service import (
    create_stock_transfer,
    list_stock_transfers,
)
from app.utils.get_user import get_current_owner
from app.utils.response import APIResponse, success_response

router = APIRouter(prefix="/stock-transfers", tags=["Stock Transfers"])


@router.post("/", response_model=APIResponse[StockTransferOut], status_code=201)
async def create_stock_transfer_api(
    payload: StockTransferCreate,
    db: AsyncSession = Depends(get_db),
    owner_id: str = Depends(get_current_owner),
):
    transfer = await create_stock_transfer(db, owner_id, payload)
    return success_response("Transfer initiated", transfer)


@router.get("/", response_model=APIResponse[list[StockTransferOut]])
async def list_stock_transfers_api(
    db: AsyncSession = Depends(get_db),
    owner_id: str = Depends(get_current_owner),
):
    transfers = await list_stock_transfers(db, owner_id)
    return success_response("Stock transfers fetched successfully", transfers)
