from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from app.schemas.translation import DEFAULT_LIMIT


class CreateFavoriteInput(BaseModel):
    translation_id: int
    user_id: str


class DeleteFavoriteInput(BaseModel):
    translation_id: int
    user_id: str


class GetFavoritesInput(BaseModel):
    user_id: str
    limit: int = Field(DEFAULT_LIMIT, gt=0)
    offset: int = Field(0, ge=0)


class FavoriteRead(BaseModel):
    id: int
    translation_id: int
    user_id: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
