"""
Shared outcome model for calls to upstream providers.

Every provider call ends in exactly one of three outcomes: the provider
answered with usable data, the provider answered but declared a logical
failure, or the exchange itself did not complete.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Optional

import httpx


class UpstreamOutcome(str, Enum):
    SUCCESS = "success"
    PROVIDER_ERROR = "provider_error"
    TRANSPORT_FAILURE = "transport_failure"


@dataclass
class UpstreamResult:
    outcome: UpstreamOutcome
    payload: Any = None
    error: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.outcome == UpstreamOutcome.SUCCESS

    @classmethod
    def success(cls, payload: Any) -> "UpstreamResult":
        return cls(UpstreamOutcome.SUCCESS, payload=payload)

    @classmethod
    def provider_error(cls, payload: Any) -> "UpstreamResult":
        return cls(UpstreamOutcome.PROVIDER_ERROR, payload=payload)

    @classmethod
    def transport_failure(cls, exc: Exception, secrets: Iterable[str] = ()) -> "UpstreamResult":
        return cls(UpstreamOutcome.TRANSPORT_FAILURE, error=describe_exception(exc, secrets))


@dataclass(frozen=True)
class ErrorExposurePolicy:
    """How much upstream detail an endpoint hands back to its caller."""
    expose_provider_payload: bool
    expose_transport_error: bool


# Translate hides upstream details, Places passes them through.
TRANSLATE_EXPOSURE = ErrorExposurePolicy(expose_provider_payload=False, expose_transport_error=False)
PLACES_EXPOSURE = ErrorExposurePolicy(expose_provider_payload=True, expose_transport_error=True)


def _redact(text: str, secrets: Iterable[str]) -> str:
    for secret in secrets:
        if secret:
            text = text.replace(secret, "***")
    return text


def describe_exception(exc: Exception, secrets: Iterable[str] = ()) -> Dict[str, Any]:
    """
    JSON-safe description of a failed call, suitable for passthrough.

    Any value in ``secrets`` (provider API keys) is masked in the message.
    """
    secrets = [s for s in secrets if s]
    error: Dict[str, Any] = {
        "name": exc.__class__.__name__,
        "message": _redact(str(exc), secrets),
    }
    if isinstance(exc, httpx.HTTPStatusError):
        error["status_code"] = exc.response.status_code
        try:
            error["body"] = exc.response.json()
        except ValueError:
            error["body"] = exc.response.text
    if isinstance(exc, httpx.RequestError):
        try:
            error["url"] = str(exc.request.url.copy_remove_param("key"))
        except RuntimeError:
            pass
    return error
