"""Middleware de contexto de requisição (tempo, request id, headers de segurança)"""
import uuid
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from time import perf_counter
import logging

logger = logging.getLogger(__name__)

SLOW_REQUEST_SECONDS = 1.0


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Mede o tempo de processamento e propaga X-Request-ID"""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        request.state.request_id = request_id
        start_time = perf_counter()

        response = await call_next(request)

        process_time = perf_counter() - start_time
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        response.headers["X-Request-ID"] = request_id

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"

        if process_time > SLOW_REQUEST_SECONDS:
            logger.warning(
                f"Slow request [{request_id}]: {request.method} {request.url.path} "
                f"took {process_time:.4f}s"
            )

        return response
