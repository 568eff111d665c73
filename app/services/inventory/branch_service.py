from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError

from app.constants.error_codes import ErrorCode
from app.core.exceptions import AppException
from app.models.inventory.branch_models import Branch
from app.schemas.inventory.branch_schemas import BranchCreate, BranchOut
from app.utils.logger import get_logger

logger = get_logger(__name__)


# =====================================================
# CREATE BRANCH
# =====================================================
async def create_branch(
    db: AsyncSession,
    owner_id: str,
    payload: BranchCreate,
) -> BranchOut:
    code = payload.code.strip().upper()

    exists = await db.scalar(
        select(Branch.id).where(Branch.user_id == owner_id, Branch.code == code)
    )
    if exists:
        raise AppException(
            409,
            "Branch code already exists",
            ErrorCode.BRANCH_CODE_EXISTS,
        )

    branch = Branch(
        user_id=owner_id,
        name=payload.name.strip(),
        code=code,
        address=payload.address,
        manager_name=payload.manager_name,
    )
    db.add(branch)

    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise AppException(
            409,
            "Branch code already exists",
            ErrorCode.BRANCH_CODE_EXISTS,
        )

    await db.refresh(branch)
    logger.info("Branch created", extra={"branch_code": branch.code})
    return BranchOut.model_validate(branch)


# =====================================================
# LIST ACTIVE BRANCHES
# =====================================================
async def list_branches(db: AsyncSession, owner_id: str) -> list[BranchOut]:
    result = await db.execute(
        select(Branch)
        .where(Branch.user_id == owner_id, Branch.is_active.is_(True))
        .order_by(Branch.name.asc())
    )
    return [BranchOut.model_validate(b) for b in result.scalars().all()]


# =====================================================
# DEACTIVATE BRANCH
# =====================================================
async def deactivate_branch(
    db: AsyncSession,
    owner_id: str,
    branch_id: str,
) -> BranchOut:
    stmt = (
        update(Branch)
        .where(
            Branch.id == branch_id,
            Branch.user_id == owner_id,
            Branch.is_active.is_(True),
        )
        .values(is_active=False)
        .returning(Branch)
    )

    result = await db.execute(stmt)
    branch = result.scalar_one_or_none()

    if not branch:
        raise AppException(
            404,
            "Branch not found or already inactive",
            ErrorCode.BRANCH_NOT_FOUND,
        )

    await db.commit()
    await db.refresh(branch)
    return BranchOut.model_validate(branch)
