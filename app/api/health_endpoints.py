"""Health check endpoint."""

from fastapi import APIRouter, Depends
from datetime import datetime, timezone
import logging

from starlette.concurrency import run_in_threadpool

from app.config.settings import get_settings
from app.core.dependencies import get_store
from app.core.error_handlers import error_handler
from app.services.document_store import DocumentStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(store: DocumentStore = Depends(get_store)):
    """Application status with a document store probe."""
    settings = get_settings()
    store_ok = await run_in_threadpool(store.ping)

    return {
        "status": "healthy" if store_ok else "degraded",
        "version": settings.app_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "details": {
            "document_store": {"status": "healthy" if store_ok else "unhealthy"},
            "providers": {
                "translation": "configured" if settings.translation.key else "missing_key",
                "places": "configured" if settings.places.key else "missing_key",
            },
        },
        "error_statistics": error_handler.get_error_statistics(),
    }
