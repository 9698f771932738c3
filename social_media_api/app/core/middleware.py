"""HTTP middleware that writes one access log line per request."""

import logging
import time
from typing import Callable

from fastapi import Request, Response

from .logging_config import ACCESS_LOGGER


logger = logging.getLogger(ACCESS_LOGGER)


async def log_requests(request: Request, call_next: Callable) -> Response:
    start = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        latency_ms = (time.perf_counter() - start) * 1000.0
        logger.error(
            "%s %s -> 500 (%.2f ms)", request.method, request.url.path, latency_ms
        )
        raise

    latency_ms = (time.perf_counter() - start) * 1000.0
    logger.info(
        "%s %s -> %s (%.2f ms)",
        request.method,
        request.url.path,
        response.status_code,
        latency_ms,
    )
    return response
