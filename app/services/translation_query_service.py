"""
Visibility-aware translation queries: single lookups and paginated history
"""
import logging
from typing import List, Optional

from sqlalchemy import exists, false, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.favorite import FavoriteTranslation
from app.models.translation import Translation
from app.schemas.translation import GetTranslationHistoryInput, TranslationWithFavorite
from app.schemas.user_scope import ScopeKind, UserScope

logger = logging.getLogger(__name__)


def to_translation_with_favorite(translation: Translation, is_favorite: bool) -> TranslationWithFavorite:
    return TranslationWithFavorite(
        id=translation.id,
        source_text=translation.source_text,
        translated_text=translation.translated_text,
        source_language=translation.source_language,
        target_language=translation.target_language,
        user_id=translation.user_id,
        created_at=translation.created_at,
        is_favorite=bool(is_favorite),
    )


class TranslationQueryService:
    """Reads translations while enforcing ownership visibility"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_translation_by_id(
        self,
        translation_id: int,
        user_id: Optional[str] = None,
    ) -> Optional[Translation]:
        """
        Get a translation the requester is allowed to see

        Args:
            translation_id: Translation ID
            user_id: Requesting user, None for anonymous callers

        Returns:
            The translation, or None when it is missing or owned by someone
            else (the two cases look the same to the caller)
        """
        try:
            translation = await self.db.get(Translation, translation_id)
        except SQLAlchemyError:
            logger.error("Translation lookup failed", exc_info=True)
            raise

        if translation is None or not translation.is_visible_to(user_id):
            return None
        return translation

    async def get_translation_history(
        self, data: GetTranslationHistoryInput
    ) -> List[TranslationWithFavorite]:
        """
        List translations newest first, annotated with favorite status

        Args:
            data: Query with user scope, limit and offset

        Returns:
            Page of translations; is_favorite is only ever true for an
            identified requester
        """
        scope = data.scope
        stmt = select(Translation, self._is_favorite_column(scope))

        if scope.kind == ScopeKind.ANONYMOUS:
            stmt = stmt.where(Translation.user_id.is_(None))
        elif scope.kind == ScopeKind.OWNER:
            stmt = stmt.where(Translation.user_id == scope.user_id)

        stmt = (
            stmt.order_by(Translation.created_at.desc(), Translation.id.desc())
            .limit(data.limit)
            .offset(data.offset)
        )

        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError:
            logger.error("Translation history retrieval failed", exc_info=True)
            raise

        return [
            to_translation_with_favorite(translation, is_favorite)
            for translation, is_favorite in result.all()
        ]

    @staticmethod
    def _is_favorite_column(scope: UserScope):
        # EXISTS keeps one row per translation regardless of favorite count
        favorites_user_id = scope.favorites_user_id
        if favorites_user_id is None:
            return false().label("is_favorite")
        return (
            exists()
            .where(
                FavoriteTranslation.translation_id == Translation.id,
                FavoriteTranslation.user_id == favorites_user_id,
            )
            .label("is_favorite")
        )
