from sqlalchemy.orm import relationship
from sqlalchemy import Column, Integer, Text, ForeignKey, DateTime, UniqueConstraint, func
from app.core.db import Base


class FavoriteTranslation(Base):
    __tablename__ = "favorite_translations"
    __table_args__ = (
        UniqueConstraint("translation_id", "user_id", name="uq_favorite_translation_user"),
    )

    id = Column(Integer, primary_key=True)
    translation_id = Column(
        Integer,
        ForeignKey("translations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(Text, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    translation = relationship("Translation", back_populates="favorites")
