# Business logic services

from .translation_service import TranslationService
from .translation_query_service import TranslationQueryService
from .favorite_service import FavoriteService

__all__ = [
    "TranslationService",
    "TranslationQueryService",
    "FavoriteService",
]
