from sqlalchemy import Column, String, DateTime, JSON, func
from app.core.db import Base


class Document(Base):
    """One document of a named collection."""
    __tablename__ = "documents"
    collection = Column(String(128), primary_key=True)
    id = Column(String(128), primary_key=True)
    data = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self) -> str:  # pragma: no cover
        return f"<Document {self.collection}/{self.id}>"
