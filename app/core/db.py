from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from typing import Optional
import logging

from app.config.settings import get_settings

logger = logging.getLogger(__name__)

# SQLAlchemy declarative base for models
Base = declarative_base()


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine; in-memory SQLite shares one connection across threads."""
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, future=True, **kwargs)
    return create_engine(database_url, echo=echo, pool_pre_ping=True, future=True)


def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        bind=engine, autoflush=False, autocommit=False, expire_on_commit=False
    )


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Process-wide engine, created on first use and never disposed."""
    global _engine
    if _engine is None:
        store = get_settings().store
        _engine = build_engine(store.database_url, echo=store.echo)
        logger.info(f"Document store engine created for {_engine.url.render_as_string(hide_password=True)}")
    return _engine
