"""
Middleware package for FastAPI application.
"""

from .auth import AuthenticationMiddleware
from .cors import OptionsShortCircuitMiddleware, install_cors
from .errors import UnhandledErrorMiddleware
from .request_context import RequestContextMiddleware

__all__ = [
    "AuthenticationMiddleware",
    "OptionsShortCircuitMiddleware",
    "RequestContextMiddleware",
    "UnhandledErrorMiddleware",
    "install_cors",
]
