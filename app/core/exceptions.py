"""
Custom exceptions for the translation bookmarks backend.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Favorite conflicts
    TRANSLATION_NOT_FOUND = "TRANSLATION_NOT_FOUND"
    ALREADY_FAVORITED = "ALREADY_FAVORITED"

    # Lookups
    NOT_FOUND = "NOT_FOUND"

    # Persistence
    DATABASE_ERROR = "DATABASE_ERROR"

    # Generic errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class TranslationAppException(Exception):
    """Base exception for user-facing failures."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class TranslationNotFoundError(TranslationAppException):
    """Raised when favoriting a translation that does not exist."""

    def __init__(self, translation_id: int):
        super().__init__(
            message="Translation not found",
            error_code=ErrorCode.TRANSLATION_NOT_FOUND,
            details={"translation_id": translation_id},
            status_code=404
        )


class AlreadyFavoritedError(TranslationAppException):
    """Raised when a user favorites the same translation twice."""

    def __init__(self, translation_id: int, user_id: str):
        super().__init__(
            message="Translation is already favorited by this user",
            error_code=ErrorCode.ALREADY_FAVORITED,
            details={"translation_id": translation_id, "user_id": user_id},
            status_code=409
        )
