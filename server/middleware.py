"""
FastAPI middleware for request logging and timing.
"""
import logging
import time

from fastapi import Request

logger = logging.getLogger(__name__)

# Probed by orchestrators every few seconds
QUIET_PATHS = {"/health"}


async def log_requests_middleware(request: Request, call_next):
    """Log each bridge call with its status and duration

    The duration is also returned to the caller in X-Process-Time.
    """
    started = time.perf_counter()
    response = await call_next(request)
    elapsed = time.perf_counter() - started

    response.headers["X-Process-Time"] = f"{elapsed:.3f}"
    level = logging.DEBUG if request.url.path in QUIET_PATHS else logging.INFO
    logger.log(level, f"{request.method} {request.url.path} - {response.status_code} - {elapsed:.3f}s")

    return response
