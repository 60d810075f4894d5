from pydantic import BaseModel, ConfigDict, Field, model_validator
from datetime import datetime
from typing import Optional

from app.models.translation import Language
from app.schemas.user_scope import UserScope

DEFAULT_LIMIT = 50


class CreateTranslationInput(BaseModel):
    source_text: str = Field(..., min_length=1)
    source_language: Language
    target_language: Language
    user_id: Optional[str] = None  # absent or null both mean anonymous

    @model_validator(mode="after")
    def check_languages_differ(self):
        if self.source_language == self.target_language:
            raise ValueError("Source and target languages must be different")
        return self


class TranslationRead(BaseModel):
    id: int
    source_text: str
    translated_text: str
    source_language: Language
    target_language: Language
    user_id: Optional[str]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TranslationWithFavorite(TranslationRead):
    is_favorite: bool


class GetTranslationHistoryInput(BaseModel):
    """
    History query.

    ``user_id`` has three states: left out (all translations), given as
    ``None`` (anonymous translations only) or given as a string (that user's
    translations only). Use :attr:`scope` rather than reading ``user_id``.
    """
    user_id: Optional[str] = None
    limit: int = Field(DEFAULT_LIMIT, gt=0)
    offset: int = Field(0, ge=0)

    @property
    def scope(self) -> UserScope:
        if "user_id" not in self.model_fields_set:
            return UserScope.unspecified()
        if self.user_id is None:
            return UserScope.anonymous()
        return UserScope.owner(self.user_id)


class LanguageDetection(BaseModel):
    detected_language: Language
    confidence: float
