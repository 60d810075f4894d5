"""
Favorite Service - per-user favorite markers on translations
"""
import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import AlreadyFavoritedError, TranslationNotFoundError
from app.models.favorite import FavoriteTranslation
from app.models.translation import Translation
from app.schemas.favorite import CreateFavoriteInput, DeleteFavoriteInput, GetFavoritesInput
from app.schemas.translation import TranslationWithFavorite
from app.services.translation_query_service import to_translation_with_favorite

logger = logging.getLogger(__name__)


class FavoriteService:
    """Creates, removes and lists favorite markers"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_favorite(self, data: CreateFavoriteInput) -> FavoriteTranslation:
        """
        Mark a translation as a favorite of a user

        Args:
            data: translation_id and user_id

        Returns:
            Created favorite marker

        Raises:
            TranslationNotFoundError: translation does not exist
            AlreadyFavoritedError: the user already favorited it
        """
        try:
            if not await self._translation_exists(data.translation_id):
                raise TranslationNotFoundError(data.translation_id)

            if await self._favorite_exists(data.translation_id, data.user_id):
                raise AlreadyFavoritedError(data.translation_id, data.user_id)

            favorite = FavoriteTranslation(
                translation_id=data.translation_id,
                user_id=data.user_id,
            )
            self.db.add(favorite)
            try:
                await self.db.commit()
            except IntegrityError:
                # A concurrent request won the race past the checks above
                await self.db.rollback()
                if not await self._translation_exists(data.translation_id):
                    raise TranslationNotFoundError(data.translation_id)
                raise AlreadyFavoritedError(data.translation_id, data.user_id)
            await self.db.refresh(favorite)
        except SQLAlchemyError:
            await self.db.rollback()
            logger.error("Favorite creation failed", exc_info=True)
            raise

        logger.info(
            "Favorite created",
            extra={"favorite_id": favorite.id, "translation_id": favorite.translation_id},
        )
        return favorite

    async def delete_favorite(self, data: DeleteFavoriteInput) -> bool:
        """
        Remove the favorite matching both translation_id and user_id

        Returns:
            True if a marker was removed, False if none matched
        """
        stmt = delete(FavoriteTranslation).where(
            FavoriteTranslation.translation_id == data.translation_id,
            FavoriteTranslation.user_id == data.user_id,
        )
        try:
            result = await self.db.execute(stmt)
            removed = result.rowcount
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            logger.error("Favorite deletion failed", exc_info=True)
            raise

        logger.info(
            "Favorite deleted" if removed else "No favorite to delete",
            extra={"translation_id": data.translation_id},
        )
        return removed > 0

    async def get_favorites(self, data: GetFavoritesInput) -> List[TranslationWithFavorite]:
        """
        List a user's favorited translations, most recently favorited first

        Args:
            data: user_id, limit and offset

        Returns:
            Page of translations, all with is_favorite=True
        """
        stmt = (
            select(Translation)
            .join(FavoriteTranslation, FavoriteTranslation.translation_id == Translation.id)
            .where(FavoriteTranslation.user_id == data.user_id)
            .order_by(FavoriteTranslation.created_at.desc(), FavoriteTranslation.id.desc())
            .limit(data.limit)
            .offset(data.offset)
        )
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError:
            logger.error("Favorites retrieval failed", exc_info=True)
            raise

        return [to_translation_with_favorite(t, True) for t in result.scalars().all()]

    async def _translation_exists(self, translation_id: int) -> bool:
        stmt = select(Translation.id).where(Translation.id == translation_id)
        return (await self.db.execute(stmt)).first() is not None

    async def _favorite_exists(self, translation_id: int, user_id: str) -> bool:
        stmt = select(FavoriteTranslation.id).where(
            FavoriteTranslation.translation_id == translation_id,
            FavoriteTranslation.user_id == user_id,
        )
        return (await self.db.execute(stmt)).first() is not None
