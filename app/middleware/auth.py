"""
Authentication middleware for bearer identity tokens.

Attaches the verified caller identity to ``request.state.auth``. The
middleware never rejects a request; handlers decide what an absent identity
means for their endpoint.
"""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
import logging

from app.core.auth_context import AuthToken
from app.core.jwt import bearer_token, verify_id_token, uid_from_claims

logger = logging.getLogger(__name__)


def resolve_auth_token(authorization: str | None) -> AuthToken | None:
    """Verify an Authorization header value and build the identity it carries."""
    token = bearer_token(authorization)
    if token is None:
        return None
    claims = verify_id_token(token)
    uid = uid_from_claims(claims)
    if uid is None:
        return None
    return AuthToken(uid=uid, claims=claims)


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """
    Bearer token authentication middleware.

    Requests without a usable token continue with ``request.state.auth``
    set to None.
    """

    async def dispatch(self, request: Request, call_next):
        authorization = request.headers.get("Authorization")
        auth = resolve_auth_token(authorization)

        if authorization and auth is None:
            logger.warning(
                f"Rejected identity token for request {getattr(request.state, 'request_id', 'unknown')}",
                extra={
                    'request_id': getattr(request.state, 'request_id', 'unknown'),
                    'path': request.url.path,
                    'client_ip': request.client.host if request.client else 'unknown'
                }
            )
        elif auth is not None:
            logger.debug(
                f"Request {getattr(request.state, 'request_id', 'unknown')} authenticated as {auth.uid}"
            )

        request.state.auth = auth
        return await call_next(request)
