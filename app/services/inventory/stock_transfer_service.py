from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func

from app.core.config import TRANSFER_HISTORY_LIMIT
from app.core.exceptions import AppException
from app.constants.error_codes import ErrorCode
from app.constants.inventory import UNKNOWN_PRODUCT, UNKNOWN_TRANSFER_BRANCH

from app.models.inventory.branch_models import Branch
from app.models.inventory.product_models import Product
from app.models.inventory.stock_adjustment_models import StockAdjustment
from app.models.enums.stock_transfer_status import AdjustmentType, TransferStatus

from app.schemas.inventory.stock_transfer_schemas import (
    StockTransferCreate,
    StockTransferOut,
)
from app.utils.logger import get_logger

logger = get_logger(__name__)


def _map_transfer(t: StockAdjustment) -> StockTransferOut:
    return StockTransferOut(
        id=t.id,
        product_name=t.product.name if t.product else UNKNOWN_PRODUCT,
        from_branch=t.from_branch.name if t.from_branch else UNKNOWN_TRANSFER_BRANCH,
        to_branch=t.to_branch.name if t.to_branch else UNKNOWN_TRANSFER_BRANCH,
        quantity=abs(t.quantity),
        status=t.status,
        created_at=t.created_at,
    )


async def create_stock_transfer(
    db: AsyncSession,
    owner_id: str,
    payload: StockTransferCreate,
) -> StockTransferOut:
    if payload.from_branch_id == payload.to_branch_id:
        raise AppException(
            400,
            "Source and destination branches must differ",
            ErrorCode.STOCK_TRANSFER_INVALID_BRANCH,
        )

    count = await db.scalar(
        select(func.count())
        .select_from(Branch)
        .where(
            Branch.id.in_([payload.from_branch_id, payload.to_branch_id]),
            Branch.user_id == owner_id,
            Branch.is_active.is_(True),
        )
    )

    if count != 2:
        raise AppException(
            400,
            "Invalid or inactive branch",
            ErrorCode.STOCK_TRANSFER_INVALID_BRANCH,
        )

    product = await db.scalar(
        select(Product).where(
            Product.id == payload.product_id,
            Product.user_id == owner_id,
        )
    )

    if not product or product.branch_id != payload.from_branch_id:
        raise AppException(
            400,
            "Product is not stocked at the source branch",
            ErrorCode.STOCK_TRANSFER_INVALID_PRODUCT,
        )

    if product.stock < payload.quantity:
        raise AppException(
            409,
            "Insufficient stock at source branch",
            ErrorCode.STOCK_TRANSFER_INSUFFICIENT_STOCK,
            details={"available": product.stock, "requested": payload.quantity},
        )

    transfer = StockAdjustment(
        user_id=owner_id,
        product_id=product.id,
        branch_id=payload.from_branch_id,
        transfer_to_branch_id=payload.to_branch_id,
        quantity=-payload.quantity,
        adjustment_type=AdjustmentType.transfer,
        reason=f"Transfer to {payload.to_branch_id}",
        status=TransferStatus.pending,
        created_by=owner_id,
    )

    db.add(transfer)
    await db.commit()

    transfer = await db.scalar(
        select(StockAdjustment)
        .where(StockAdjustment.id == transfer.id)
        .execution_options(populate_existing=True)
    )

    logger.info(
        "Stock transfer created",
        extra={"transfer_id": transfer.id, "quantity": payload.quantity},
    )
    return _map_transfer(transfer)


async def list_stock_transfers(
    db: AsyncSession,
    owner_id: str,
) -> list[StockTransferOut]:
    result = await db.execute(
        select(StockAdjustment)
        .where(
            StockAdjustment.user_id == owner_id,
            StockAdjustment.adjustment_type == AdjustmentType.transfer,
        )
        .order_by(StockAdjustment.created_at.desc())
        .limit(TRANSFER_HISTORY_LIMIT)
    )

    return [_map_transfer(t) for t in result.scalars().all()]
