from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.constants.catalog import RETAIL_ROLE
from app.models.users.profile_models import Profile
from app.schemas.pharmacies.pharmacy_schemas import PharmacyListData
from app.services.pharmacies.pharmacy_directory_core import (
    filter_pharmacies,
    sort_listings,
    to_listing,
)
from app.utils.logger import get_logger

logger = get_logger(__name__)


async def list_pharmacies(db: AsyncSession, search: str | None = None) -> PharmacyListData:
    result = await db.execute(
        select(Profile).where(
            Profile.role == RETAIL_ROLE,
            Profile.is_approved.is_(True),
        )
    )
    profiles = result.scalars().all()

    items = filter_pharmacies(sort_listings(to_listing(p) for p in profiles), search)

    logger.info(
        "Pharmacy directory fetched",
        extra={"approved": len(profiles), "matched": len(items)},
    )
    return PharmacyListData(total=len(items), items=items)
