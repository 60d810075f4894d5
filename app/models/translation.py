import enum

from sqlalchemy.orm import relationship
from app.core.db import Base
from sqlalchemy import Column, Integer, String, DateTime, Text, func


class Language(str, enum.Enum):
    """Languages a translation can be made between"""
    ZH = "zh"
    EN = "en"


class Translation(Base):
    __tablename__ = "translations"
    id = Column(Integer, primary_key=True)
    source_text = Column(Text, nullable=False)
    translated_text = Column(Text, nullable=False)
    source_language = Column(String(8), nullable=False)
    target_language = Column(String(8), nullable=False)
    user_id = Column(Text, nullable=True, index=True)  # NULL means anonymous/public
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    favorites = relationship(
        "FavoriteTranslation",
        back_populates="translation",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def is_public(self) -> bool:
        return self.user_id is None

    def is_visible_to(self, user_id: str | None) -> bool:
        """Public translations are visible to anyone, owned ones only to their owner."""
        return self.is_public or (user_id is not None and self.user_id == user_id)
