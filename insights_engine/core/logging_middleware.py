"""
Request logging middleware.
Assigns a correlation ID per request, times it, and logs the outcome.
Unhandled errors become a 500 that still carries the correlation ID.
"""
import time

from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from insights_engine.core.logging_config import (
    clear_correlation_id,
    get_logger,
    log_api_request,
    set_correlation_id,
)

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        cid = set_correlation_id(request.headers.get(REQUEST_ID_HEADER))
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.exception(f"Unhandled error on {request.method} {request.url.path} after {duration_ms:.1f} ms")
            response = JSONResponse(status_code=500, content={"detail": "Internal Server Error"})

        duration_ms = (time.perf_counter() - start) * 1000
        response.headers[REQUEST_ID_HEADER] = cid
        log_api_request(request.method, request.url.path, response.status_code, duration_ms)
        clear_correlation_id()
        return response
