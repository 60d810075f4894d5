"""
Translation Service - creates translation records using the mock translator
"""
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.translation import Translation
from app.schemas.translation import CreateTranslationInput
from app.services import mock_translator

logger = logging.getLogger(__name__)


class TranslationService:
    """Creates and persists translations"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_translation(self, data: CreateTranslationInput) -> Translation:
        """
        Translate the source text and store the result

        Args:
            data: Validated creation input; a missing or null user_id
                stores an anonymous translation

        Returns:
            Persisted translation with id and created_at populated
        """
        translated_text = mock_translator.translate(
            data.source_text, data.source_language, data.target_language
        )

        translation = Translation(
            source_text=data.source_text,
            translated_text=translated_text,
            source_language=data.source_language.value,
            target_language=data.target_language.value,
            user_id=data.user_id,
        )
        try:
            self.db.add(translation)
            await self.db.commit()
            await self.db.refresh(translation)
        except SQLAlchemyError:
            await self.db.rollback()
            logger.error("Translation creation failed", exc_info=True)
            raise

        logger.info(
            "Translation created",
            extra={
                "translation_id": translation.id,
                "source_language": translation.source_language,
                "target_language": translation.target_language,
                "anonymous": translation.user_id is None,
                "dictionary_hit": mock_translator.is_dictionary_hit(
                    data.source_text, data.source_language
                ),
            },
        )
        return translation
