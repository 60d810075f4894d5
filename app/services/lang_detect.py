"""Very lightweight heuristic language detection helper."""

from typing import Tuple

from app.models.translation import Language

# Reported for every detection; the heuristic has no real notion of certainty.
DETECTION_CONFIDENCE = 0.95


def detect_language(text: str) -> Tuple[Language, float]:
    """
    Detect language using simple heuristics.

    Args:
        text: Input text to analyze

    Returns:
        (language, confidence): zh if any CJK unified ideograph is present,
        otherwise en
    """
    for char in text:
        if '\u4e00' <= char <= '\u9fff':
            return Language.ZH, DETECTION_CONFIDENCE
    return Language.EN, DETECTION_CONFIDENCE
