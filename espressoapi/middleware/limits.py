from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

import structlog
from fastapi import Request, Response
from fastapi.responses import JSONResponse

Middleware = Callable[[Request, Callable], Awaitable[Response]]


def max_body_size_middleware(max_bytes: int) -> Middleware:
    """Reject request bodies larger than ``max_bytes`` with 413."""

    async def _middleware(request: Request, call_next: Callable) -> Response:
        declared = request.headers.get("content-length")
        if declared is not None:
            if declared.isdigit() and int(declared) > max_bytes:
                return _too_large()
        elif request.method in {"POST", "PUT", "PATCH"}:
            # No declared length (chunked); the body is cached for the handler
            if len(await request.body()) > max_bytes:
                return _too_large()
        return await call_next(request)

    return _middleware


def _too_large() -> JSONResponse:
    return JSONResponse(status_code=413, content={"msg": "request body too large"})


def timeout_middleware(seconds: float) -> Middleware:
    """Abort requests running longer than ``seconds`` with 504.

    Cancellation reaches the in-flight database call, which releases its
    connection back to the pool.
    """

    async def _middleware(request: Request, call_next: Callable) -> Response:
        try:
            async with asyncio.timeout(seconds):
                return await call_next(request)
        except TimeoutError:
            structlog.get_logger(__name__).warning("request_timeout", timeout_s=seconds)
            return JSONResponse(status_code=504, content={"msg": "request timed out"})

    return _middleware
