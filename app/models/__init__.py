"""
ORM models for translations and per-user favorite markers.
"""

from .translation import Language, Translation
from .favorite import FavoriteTranslation

__all__ = [
    "Language",
    "Translation",
    "FavoriteTranslation",
]
