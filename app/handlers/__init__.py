"""
Request handlers.

Each handler composes identity, upstream clients and the favorites
repository into one request/response cycle without knowing which
transport invoked it.
"""

from .base import HandlerRequest, HandlerResponse
from .favorites import get_favorites, post_favorite
from .places import places
from .translate import translate

__all__ = [
    "HandlerRequest",
    "HandlerResponse",
    "get_favorites",
    "post_favorite",
    "places",
    "translate",
]
