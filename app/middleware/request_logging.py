import time
from fastapi import Request

from app.utils.logger import get_logger

logger = get_logger("access")


def _operator(request: Request) -> str:
    # set by get_current_owner once the route has resolved the header
    owner_id = getattr(request.state, "owner_id", None)
    return owner_id or request.headers.get("x-user-id") or "-"


async def request_logging_middleware(request: Request, call_next):
    started = time.perf_counter()

    response = await call_next(request)

    elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"

    logger.info(
        "",
        extra={
            "client_addr": request.client.host if request.client else "unknown",
            "user_id": _operator(request),
            "method": request.method,
            "path": path,
            "status_code": response.status_code,
            "process_time_ms": elapsed_ms,
        },
    )

    response.headers["X-Process-Time-Ms"] = str(elapsed_ms)
    return response
