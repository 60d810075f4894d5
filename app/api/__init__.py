# API endpoints and routers

from .translation_endpoints import router as translation_router
from .favorite_endpoints import router as favorite_router
from .language_endpoints import router as language_router
from .health_endpoints import router as health_router

__all__ = [
    "translation_router",
    "favorite_router",
    "language_router",
    "health_router",
]
