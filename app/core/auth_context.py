"""
Caller identity resolution.

Two transports deliver identity differently:

* callable invocations carry a ``CallableContext`` whose ``auth`` is filled
  in by the transport after it verified the caller's token;
* plain HTTP requests carry an ``AuthToken`` on ``request.state.auth``,
  attached by ``AuthenticationMiddleware``.

``AuthContext`` folds both into one value that handlers consume.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from starlette.requests import Request


@dataclass(frozen=True)
class AuthToken:
    """Verified identity attached by an authentication layer."""
    uid: str
    claims: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class CallableContext:
    """Invocation context of a callable request."""
    auth: Optional[AuthToken] = None
    raw_request: Optional[Request] = None


@dataclass(frozen=True)
class AuthContext:
    uid: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.uid)

    @classmethod
    def unauthenticated(cls) -> "AuthContext":
        return cls(uid=None)

    @classmethod
    def from_auth_token(cls, token: Optional[AuthToken]) -> "AuthContext":
        if token is None or not token.uid:
            return cls.unauthenticated()
        return cls(uid=token.uid)

    @classmethod
    def from_callable_context(cls, context: Optional[CallableContext]) -> "AuthContext":
        """Identity pre-verified by the callable transport."""
        if context is None:
            return cls.unauthenticated()
        return cls.from_auth_token(context.auth)

    @classmethod
    def from_request(cls, request: Request) -> "AuthContext":
        """Identity attached to the request by the authentication middleware."""
        return cls.from_auth_token(getattr(request.state, "auth", None))
