"""
Services package: upstream provider clients and the favorites repository.
"""

from .upstream import UpstreamOutcome, UpstreamResult, ErrorExposurePolicy
from .translation_client import TranslationClient, get_translation_client
from .places_client import PlacesClient, get_places_client
from .document_store import DocumentStore, get_document_store
from .favorites_repository import FavoritesRepository, get_favorites_repository

__all__ = [
    "UpstreamOutcome",
    "UpstreamResult",
    "ErrorExposurePolicy",
    "TranslationClient",
    "get_translation_client",
    "PlacesClient",
    "get_places_client",
    "DocumentStore",
    "get_document_store",
    "FavoritesRepository",
    "get_favorites_repository",
]
