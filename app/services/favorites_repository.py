"""Per-user favorites backed by the document store."""

import logging
from typing import Any, Dict, Optional

from starlette.concurrency import run_in_threadpool

from app.config.settings import get_settings
from app.schemas.favorite import FavoriteCreate, FavoriteEntry
from app.services.document_store import DocumentStore, get_document_store

logger = logging.getLogger(__name__)

NOT_FOUND = {"message": "No favorites found", "code": 404}


class FavoritesRepository:
    """
    Reads a user's favorites record and appends favorite entries.

    Callers are expected to have authenticated the user already; the
    repository trusts the ``user_id`` it is given.
    """

    def __init__(self, store: DocumentStore, collection: str = "favorite"):
        self.store = store
        self.collection = collection

    async def get_favorites(self, user_id: str) -> Dict[str, Any]:
        """
        Return the favorites record keyed by ``user_id``.

        A missing record yields ``{"message": "No favorites found", "code": 404}``.

        Raises:
            DocumentStoreError: the store could not be read.
        """
        record = await run_in_threadpool(self.store.get, self.collection, user_id)
        if record is None:
            logger.info(f"No favorites record for user {user_id}")
            return dict(NOT_FOUND)
        return record

    async def post_favorite(self, favorite: FavoriteCreate, user_id: str) -> str:
        """
        Append a favorite entry owned by ``user_id`` and return its id.

        Raises:
            DocumentStoreError: the store rejected the write.
        """
        entry = FavoriteEntry(**favorite.model_dump(), user_id=user_id)
        doc_id = await run_in_threadpool(self.store.add, self.collection, entry.model_dump())
        logger.info(f"Stored favorite {doc_id} for user {user_id}")
        return doc_id


def get_favorites_repository(store: Optional[DocumentStore] = None) -> FavoritesRepository:
    return FavoritesRepository(
        store or get_document_store(),
        collection=get_settings().store.favorites_collection,
    )
