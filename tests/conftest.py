"""
Shared fixtures: an in-memory document store, provider stubs built on
httpx.MockTransport, and identity tokens.
"""
import os

# Must be set before app modules build the settings singleton.
os.environ.setdefault("STORE_DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTH_TOKEN_SECRET", "test-secret")
os.environ.setdefault("TRANSLATION_API_KEY", "test-translation-key")
os.environ.setdefault("PLACES_API_KEY", "test-places-key")

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.db import build_engine
from app.core.dependencies import get_places, get_store, get_translator
from app.core.jwt import create_id_token
from app.services.document_store import DocumentStore
from app.services.favorites_repository import FavoritesRepository
from app.services.places_client import PlacesClient
from app.services.translation_client import TranslationClient


@pytest.fixture
def store():
    store = DocumentStore(build_engine("sqlite://"))
    store.create_tables()
    return store


@pytest.fixture
def repository(store):
    return FavoritesRepository(store, collection="favorite")


@pytest.fixture
def test_app(store):
    from app.main import app as fastapi_app

    fastapi_app.dependency_overrides[get_store] = lambda: store
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def client(test_app):
    with TestClient(test_app) as test_client:
        yield test_client


@pytest.fixture
def provider_requests():
    """Requests seen by the stubbed providers, in call order."""
    return []


@pytest.fixture
def stub_translation(test_app, provider_requests):
    """Install a translation provider stub: ``stub_translation(handler)``."""
    def install(handler):
        def recording(request: httpx.Request):
            provider_requests.append(request)
            return handler(request)

        client = TranslationClient(transport=httpx.MockTransport(recording))
        test_app.dependency_overrides[get_translator] = lambda: client
        return client
    return install


@pytest.fixture
def stub_places(test_app, provider_requests):
    """Install a places provider stub: ``stub_places(handler)``."""
    def install(handler):
        def recording(request: httpx.Request):
            provider_requests.append(request)
            return handler(request)

        client = PlacesClient(transport=httpx.MockTransport(recording))
        test_app.dependency_overrides[get_places] = lambda: client
        return client
    return install


@pytest.fixture
def auth_headers():
    def make(uid: str = "user-1"):
        return {"Authorization": f"Bearer {create_id_token(uid)}"}
    return make
