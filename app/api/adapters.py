"""
Adapters between platform invocation conventions and the handler core.

* HTTP: a Starlette request becomes a ``HandlerRequest``; a
  ``HandlerResponse`` becomes a JSON or plain-text response.
* Callable: ``POST {"data": ...}`` with an optional bearer token is turned
  into ``(data, CallableContext)``; the handler's return value is sent back
  as ``{"result": ...}``.
"""

import json
import logging
from typing import Any, Awaitable, Callable, Mapping, Optional

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from app.core.auth_context import AuthContext, CallableContext
from app.handlers.base import HandlerRequest, HandlerResponse
from app.middleware.auth import resolve_auth_token

logger = logging.getLogger(__name__)

CallableHandler = Callable[[Any, CallableContext], Awaitable[Any]]


async def read_json_body(request: Request) -> Any:
    """Decoded JSON body, or None for an empty or undecodable body."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        logger.debug(f"Ignoring non-JSON body on {request.method} {request.url.path}")
        return None


async def to_handler_request(request: Request, query: Optional[Mapping[str, Any]] = None) -> HandlerRequest:
    return HandlerRequest(
        method=request.method,
        body=await read_json_body(request),
        query=dict(request.query_params) if query is None else dict(query),
        auth=AuthContext.from_request(request),
    )


def to_response(result: HandlerResponse) -> Response:
    if isinstance(result.body, str):
        return PlainTextResponse(result.body, status_code=result.status_code)
    return JSONResponse(result.body, status_code=result.status_code)


def _callable_error(status: str, message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": {"status": status, "message": message}}, status_code=status_code)


async def invoke_callable(request: Request, handler: CallableHandler) -> Response:
    """Run ``handler`` under the callable protocol."""
    if request.method != "POST":
        return _callable_error("INVALID_ARGUMENT", "Bad Request", 400)

    body = await read_json_body(request)
    if not isinstance(body, dict) or "data" not in body:
        return _callable_error("INVALID_ARGUMENT", "Bad Request", 400)

    context = CallableContext(
        auth=resolve_auth_token(request.headers.get("Authorization")),
        raw_request=request,
    )

    try:
        result = await handler(body["data"], context)
    except Exception:
        logger.error(
            f"Callable {request.url.path} failed",
            exc_info=True,
            extra={"request_id": getattr(request.state, "request_id", "unknown")},
        )
        return _callable_error("INTERNAL", "INTERNAL", 500)

    return JSONResponse({"result": result}, status_code=200)
