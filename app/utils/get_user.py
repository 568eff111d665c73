from fastapi import Header, Request

from app.constants.error_codes import ErrorCode
from app.core.exceptions import AppException
from app.utils.logger import get_logger

logger = get_logger("auth.guard")


async def get_current_owner(
    request: Request,
    x_user_id: str | None = Header(None),
) -> str:
    """Operator id forwarded by the auth gateway; every query is scoped by it."""
    owner_id = (x_user_id or "").strip()
    if not owner_id:
        logger.warning("Missing operator header", extra={"path": request.url.path})
        raise AppException(
            401,
            "Missing X-User-Id header",
            ErrorCode.UNAUTHORIZED,
        )

    request.state.owner_id = owner_id
    return owner_id
