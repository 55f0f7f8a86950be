"""
Core building blocks: identity resolution, error model, persistence setup
and logging.
"""

from .auth_context import AuthContext, AuthToken, CallableContext
from .exceptions import AggregatorException, DocumentStoreError, ErrorCode, ProviderNotConfiguredError

__all__ = [
    "AuthContext",
    "AuthToken",
    "CallableContext",
    "AggregatorException",
    "DocumentStoreError",
    "ErrorCode",
    "ProviderNotConfiguredError",
]
