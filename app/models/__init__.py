"""
SQLAlchemy models for the document store.
"""

from .document import Document

__all__ = ["Document"]
