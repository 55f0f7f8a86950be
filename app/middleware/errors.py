"""
Catch-all for unexpected exceptions raised below the CORS filter.

Starlette renders ``Exception`` handlers from its outermost middleware, so
those 500s would leave without CORS headers. This middleware renders them
through the same error handler from inside the CORS filter instead.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from app.core.error_handlers import error_handler


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as e:
            return await error_handler.handle_generic_exception(request, e)
