"""
Core infrastructure: database session handling, exceptions, error handlers
and logging setup.
"""

from .exceptions import (
    ErrorCode,
    TranslationAppException,
    TranslationNotFoundError,
    AlreadyFavoritedError,
)

__all__ = [
    "ErrorCode",
    "TranslationAppException",
    "TranslationNotFoundError",
    "AlreadyFavoritedError",
]
