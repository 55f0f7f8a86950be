import pytest

from app.core.db import build_engine
from app.core.exceptions import DocumentStoreError
from app.services.document_store import DocumentStore


def test_get_missing_document(store):
    assert store.get("favorite", "nobody") is None


def test_set_then_get(store):
    store.set("favorite", "user-1", {"places": ["a"]})
    assert store.get("favorite", "user-1") == {"places": ["a"]}


def test_set_replaces_document(store):
    store.set("favorite", "user-1", {"places": ["a"]})
    store.set("favorite", "user-1", {"places": ["b"]})
    assert store.get("favorite", "user-1") == {"places": ["b"]}


def test_add_generates_distinct_ids(store):
    ids = {store.add("favorite", {"n": i}) for i in range(5)}
    assert len(ids) == 5


def test_collections_are_separate(store):
    store.set("favorite", "same-id", {"v": 1})
    assert store.get("other", "same-id") is None


def test_store_errors_are_wrapped():
    store = DocumentStore(build_engine("sqlite://"))  # tables never created
    with pytest.raises(DocumentStoreError) as exc_info:
        store.add("favorite", {"v": 1})
    assert exc_info.value.operation == "add"
    assert exc_info.value.status_code == 500


def test_ping(store):
    assert store.ping()
