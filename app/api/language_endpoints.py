"""Language detection endpoint used for live input hints."""
from fastapi import APIRouter, Query

from app.schemas.base import Envelope
from app.schemas.translation import LanguageDetection
from app.services.lang_detect import detect_language

router = APIRouter(tags=["language"])


@router.get("/detect-language", response_model=Envelope[LanguageDetection])
async def detect(text: str = Query(..., min_length=1)):
    language, confidence = detect_language(text)
    return Envelope(
        status="ok",
        data=LanguageDetection(detected_language=language, confidence=confidence),
    )
