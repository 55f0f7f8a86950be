"""
Document store backed by SQLAlchemy.

Documents live in named collections and are addressed by (collection, id).
Every operation touches a single row in its own session, so atomicity is
whatever the database gives a single-row statement.
"""

import logging
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from sqlalchemy import select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.db import Base, get_engine, session_factory
from app.core.exceptions import DocumentStoreError
from app.models.document import Document

logger = logging.getLogger(__name__)


class DocumentStore:
    def __init__(self, engine: Engine):
        self.engine = engine
        self._sessions = session_factory(engine)

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        session = self._sessions()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Document store {operation} failed: {e}")
            raise DocumentStoreError(operation, e) from e
        finally:
            session.close()

    def create_tables(self) -> None:
        Base.metadata.create_all(self.engine, tables=[Document.__table__])

    def ping(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Document store ping failed: {e}")
            return False

    def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        """Return the document's data, or None when it does not exist."""
        with self._session("get") as session:
            doc = session.execute(
                select(Document).where(
                    Document.collection == collection,
                    Document.id == doc_id,
                )
            ).scalar_one_or_none()
            return dict(doc.data) if doc is not None else None

    def set(self, collection: str, doc_id: str, data: Dict[str, Any]) -> None:
        """Create or replace the document at (collection, doc_id)."""
        with self._session("set") as session:
            session.merge(Document(collection=collection, id=doc_id, data=data))

    def add(self, collection: str, data: Dict[str, Any]) -> str:
        """Append a document under a generated id and return the id."""
        doc_id = uuid.uuid4().hex
        with self._session("add") as session:
            session.add(Document(collection=collection, id=doc_id, data=data))
        return doc_id


_store: Optional[DocumentStore] = None


def get_document_store() -> DocumentStore:
    """Process-wide store handle; created on first use, never torn down."""
    global _store
    if _store is None:
        _store = DocumentStore(get_engine())
    return _store
