# API endpoints and routers

from .translation_endpoints import router as translation_router
from .places_endpoints import router as places_router
from .favorites_endpoints import router as favorites_router
from .health_endpoints import router as health_router

__all__ = [
    "translation_router",
    "places_router",
    "favorites_router",
    "health_router",
]
