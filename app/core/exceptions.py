"""
Custom exceptions for the travel favorites backend.

Outcomes whose response shape is fixed by an endpoint contract (provider
errors, missing identity, wrong method) are produced by the handlers
directly. The exceptions here cover the failures that fall outside those
contracts and are rendered by the global error handlers.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Upstream provider errors
    PROVIDER_NOT_CONFIGURED = "PROVIDER_NOT_CONFIGURED"

    # Persistence errors
    DOCUMENT_STORE_ERROR = "DOCUMENT_STORE_ERROR"

    # Generic errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    HTTP_ERROR = "HTTP_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class AggregatorException(Exception):
    """Base exception for the travel favorites backend."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class ProviderNotConfiguredError(AggregatorException):
    """Raised when an upstream provider has no API key configured."""

    def __init__(self, provider: str):
        super().__init__(
            message=f"API key for provider '{provider}' is not configured",
            error_code=ErrorCode.PROVIDER_NOT_CONFIGURED,
            details={"provider": provider},
            status_code=500
        )
        self.provider = provider


class DocumentStoreError(AggregatorException):
    """Raised when a document store operation fails."""

    def __init__(self, operation: str, cause: Exception):
        super().__init__(
            message=f"Document store {operation} failed",
            error_code=ErrorCode.DOCUMENT_STORE_ERROR,
            details={"operation": operation, "cause": cause.__class__.__name__},
            status_code=500
        )
        self.operation = operation
        self.cause = cause
