"""Cross-origin admission for browser clients."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.config.settings import Settings


class OptionsShortCircuitMiddleware(BaseHTTPMiddleware):
    """
    Answer every ``OPTIONS`` request with 204 before routing.

    ``CORSMiddleware`` only handles preflights carrying
    ``Access-Control-Request-Method``; any other ``OPTIONS`` lands here and
    never reaches a handler.
    """

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=204)
        return await call_next(request)


def install_cors(app: FastAPI, settings: Settings) -> None:
    """
    Mount the CORS filter.

    With the default origin regex every ``Origin`` is reflected back, and
    ``OPTIONS`` requests are answered before routing. Requests without an
    ``Origin`` header pass through untouched.
    """
    app.add_middleware(OptionsShortCircuitMiddleware)
    app.add_middleware(CORSMiddleware, **settings.get_cors_config())
