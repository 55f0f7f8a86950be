"""
Dependency providers for FastAPI.

Process-wide collaborators (document store, provider clients) are created
lazily by their modules and handed to endpoints through ``Depends`` so tests
can swap them with ``app.dependency_overrides``.
"""

from fastapi import Depends, Request

from app.services.document_store import DocumentStore, get_document_store
from app.services.favorites_repository import FavoritesRepository, get_favorites_repository
from app.services.places_client import PlacesClient, get_places_client
from app.services.translation_client import TranslationClient, get_translation_client


def get_store() -> DocumentStore:
    return get_document_store()


def get_repository(store: DocumentStore = Depends(get_store)) -> FavoritesRepository:
    return get_favorites_repository(store)


def get_translator() -> TranslationClient:
    return get_translation_client()


def get_places() -> PlacesClient:
    return get_places_client()


def get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")
