"""
Request timing: ``X-Process-Time`` header plus one structured log line per request.
"""

import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from ..core.structured_logger import get_logger

logger = get_logger("http")


class PerformanceMiddleware(BaseHTTPMiddleware):
    """Times each request and logs it with method, path, status and latency.

    Requests slower than ``slow_request_ms`` are logged again at WARNING.
    The fields travel in ``extra_data`` so the JSON formatter emits them as
    top-level keys.
    """

    def __init__(self, app, slow_request_ms: float = 1000.0):
        super().__init__(app)
        self.slow_request_ms = slow_request_ms

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        latency_ms = round((time.perf_counter() - started) * 1000, 2)

        response.headers["X-Process-Time"] = str(latency_ms)

        fields = {
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "latency_ms": latency_ms,
            "request_id": getattr(request.state, "request_id", None),
        }
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} in {latency_ms}ms",
            extra={"extra_data": fields},
        )
        if latency_ms > self.slow_request_ms:
            logger.warning(
                f"Slow request: {request.method} {request.url.path} took {latency_ms}ms",
                extra={"extra_data": {**fields, "slow_request_ms": self.slow_request_ms}},
            )

        return response
