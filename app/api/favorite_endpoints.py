"""Favorite endpoints: add, remove and list a user's favorite translations."""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.core.db import get_db
from app.schemas.base import DeleteResult, Envelope
from app.schemas.favorite import (
    CreateFavoriteInput,
    DeleteFavoriteInput,
    FavoriteRead,
    GetFavoritesInput,
)
from app.schemas.translation import TranslationWithFavorite
from app.services.favorite_service import FavoriteService

settings = get_settings()

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.post("", response_model=Envelope[FavoriteRead], status_code=status.HTTP_201_CREATED)
async def create_favorite(
    data: CreateFavoriteInput,
    db: AsyncSession = Depends(get_db),
):
    """
    Favorite a translation

    Responds 404 TRANSLATION_NOT_FOUND or 409 ALREADY_FAVORITED on conflict.
    """
    service = FavoriteService(db)
    favorite = await service.create_favorite(data)
    return Envelope(status="ok", data=FavoriteRead.model_validate(favorite))


@router.delete("", response_model=Envelope[DeleteResult])
async def delete_favorite(
    translation_id: int = Query(...),
    user_id: str = Query(...),
    db: AsyncSession = Depends(get_db),
):
    """Remove a favorite; success is false when there was nothing to remove."""
    service = FavoriteService(db)
    removed = await service.delete_favorite(
        DeleteFavoriteInput(translation_id=translation_id, user_id=user_id)
    )
    return Envelope(status="ok", data=DeleteResult(success=removed))


@router.get("", response_model=Envelope[list[TranslationWithFavorite]])
async def get_favorites(
    user_id: str = Query(...),
    limit: int = Query(settings.pagination.default_limit, gt=0, le=settings.pagination.max_limit),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
):
    """List a user's favorites, most recently favorited first."""
    service = FavoriteService(db)
    favorites = await service.get_favorites(
        GetFavoritesInput(user_id=user_id, limit=limit, offset=offset)
    )
    return Envelope(status="ok", data=favorites)
