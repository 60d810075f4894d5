"""Translation endpoints: create, history, lookup by id."""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.core.db import get_db
from app.schemas.base import Envelope
from app.schemas.translation import (
    CreateTranslationInput,
    GetTranslationHistoryInput,
    TranslationRead,
    TranslationWithFavorite,
)
from app.services.translation_query_service import TranslationQueryService
from app.services.translation_service import TranslationService

settings = get_settings()

router = APIRouter(prefix="/translations", tags=["translations"])


@router.post("", response_model=Envelope[TranslationRead], status_code=status.HTTP_201_CREATED)
async def create_translation(
    data: CreateTranslationInput,
    db: AsyncSession = Depends(get_db),
):
    """
    Translate text and store it

    - **source_text**: Text to translate (non-empty)
    - **source_language** / **target_language**: zh or en, must differ
    - **user_id**: Owner; omit or send null for an anonymous translation
    """
    service = TranslationService(db)
    translation = await service.create_translation(data)
    return Envelope(status="ok", data=TranslationRead.model_validate(translation))


@router.get("/history", response_model=Envelope[list[TranslationWithFavorite]])
async def get_translation_history(
    user_id: Optional[str] = Query(None, description="Only this user's translations"),
    anonymous_only: bool = Query(False, description="Only anonymous translations"),
    limit: int = Query(settings.pagination.default_limit, gt=0, le=settings.pagination.max_limit),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    """
    List translations, newest first

    - no **user_id** and no **anonymous_only**: every translation
    - **anonymous_only=true**: anonymous translations only
    - **user_id**: that user's translations, with their favorites marked
    """
    if anonymous_only and user_id is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="user_id and anonymous_only cannot be combined",
        )

    if anonymous_only:
        query = GetTranslationHistoryInput(user_id=None, limit=limit, offset=offset)
    elif user_id is not None:
        query = GetTranslationHistoryInput(user_id=user_id, limit=limit, offset=offset)
    else:
        query = GetTranslationHistoryInput(limit=limit, offset=offset)

    service = TranslationQueryService(db)
    history = await service.get_translation_history(query)
    return Envelope(status="ok", data=history)


@router.get("/{translation_id}", response_model=Envelope[TranslationRead])
async def get_translation_by_id(
    translation_id: int,
    user_id: Optional[str] = Query(None, description="Requesting user"),
    db: AsyncSession = Depends(get_db),
):
    """
    Get one translation

    Private translations of other users are reported as not found.
    """
    service = TranslationQueryService(db)
    translation = await service.get_translation_by_id(translation_id, user_id)
    if translation is None:
        raise HTTPException(status_code=404, detail="Translation not found")
    return Envelope(status="ok", data=TranslationRead.model_validate(translation))
