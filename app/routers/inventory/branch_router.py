from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.schemas.inventory.branch_schemas import BranchCreate, BranchOut
from app.services.inventory.branch_service import (
    create_branch,
    deactivate_branch,
    list_branches,
)
from app.utils.get_user import get_current_owner
from app.utils.response import APIResponse, success_response
from app.utils.logger import get_logger

router = APIRouter(prefix="/branches", tags=["Branches"])
logger = get_logger(__name__)


@router.post("/", response_model=APIResponse[BranchOut], status_code=201)
async def create_branch_api(
    payload: BranchCreate,
    db: AsyncSession = Depends(get_db),
    owner_id: str = Depends(get_current_owner),
):
    logger.info("Create branch", extra={"branch_code": payload.code})
    branch = await create_branch(db, owner_id, payload)
    return success_response("Branch created successfully", branch)


@router.get("/", response_model=APIResponse[list[BranchOut]])
async def list_branches_api(
    db: AsyncSession = Depends(get_db),
    owner_id: str = Depends(get_current_owner),
):
    branches = await list_branches(db, owner_id)
    return success_response("Branches fetched successfully", branches)


@router.patch("/{branch_id}/deactivate", response_model=APIResponse[BranchOut])
async def deactivate_branch_api(
    branch_id: str,
    db: AsyncSession = Depends(get_db),
    owner_id: str = Depends(get_current_owner),
):
    branch = await deactivate_branch(db, owner_id, branch_id)
    return success_response("Branch deactivated successfully", branch)
