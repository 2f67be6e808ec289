# server/middleware/logging.py
"""Request tracing: one log line per request and an X-Request-ID header"""
from time import perf_counter
from uuid import uuid4

from fastapi import Request

from core.logger import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


async def add_request_id_middleware(request: Request, call_next):
    """Tag the request with an id (client-supplied or new) and log its outcome."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
    request.state.request_id = request_id

    started = perf_counter()
    response = await call_next(request)
    elapsed_ms = round((perf_counter() - started) * 1000, 1)

    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} in {elapsed_ms}ms",
        extra={
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": elapsed_ms,
        }
    )

    response.headers[REQUEST_ID_HEADER] = request_id
    return response
