"""Transport-agnostic request/response types shared by all handlers."""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from app.core.auth_context import AuthContext


@dataclass
class HandlerRequest:
    method: str = "GET"
    body: Any = None
    query: Mapping[str, str] = field(default_factory=dict)
    auth: AuthContext = field(default_factory=AuthContext.unauthenticated)

    def json_body(self) -> Dict[str, Any]:
        """The body as a mapping; non-object bodies read as empty."""
        return self.body if isinstance(self.body, dict) else {}


@dataclass
class HandlerResponse:
    status_code: int = 200
    body: Any = None
