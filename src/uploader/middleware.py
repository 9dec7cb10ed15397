"""HTTP middleware: access logging and crash recovery."""

import logging
import time
from typing import Awaitable, Callable

from fastapi import Request, Response, status
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]


def _format_latency(seconds: float) -> str:
    if seconds < 1e-3:
        return f"{seconds * 1e6:.0f}µs"
    if seconds < 1:
        return f"{seconds * 1e3:.2f}ms"
    return f"{seconds:.2f}s"


async def log_requests(request: Request, call_next: CallNext) -> Response:
    """Log one line per request: client, latency, method, uri, status, error."""
    start_time = time.perf_counter()
    response = await call_next(request)
    latency = _format_latency(time.perf_counter() - start_time)

    client = request.client.host if request.client else "-"
    uri = request.url.path
    if request.url.query:
        uri = f"{uri}?{request.url.query}"
    line = f"{client} {latency} {request.method} {uri} {response.status_code}"
    # Set by the error handlers further in
    error = getattr(request.state, "error", None)
    if error:
        line = f"{line} {error}"
    logger.info(line)
    return response


async def handle_broad_exceptions(request: Request, call_next: CallNext) -> Response:
    """Turn any exception a handler let escape into a plain 500."""
    try:
        return await call_next(request)
    except Exception as e:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        request.state.error = str(e)
        return PlainTextResponse(
            "Internal Server Error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
