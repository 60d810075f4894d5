"""
Unit tests for heuristic language detection
"""
from app.models.translation import Language
from app.services.lang_detect import DETECTION_CONFIDENCE, detect_language


def test_chinese_text_detected():
    assert detect_language("你好世界") == (Language.ZH, DETECTION_CONFIDENCE)


def test_mixed_text_with_chinese_is_chinese():
    language, _ = detect_language("I said 谢谢 to her")
    assert language == Language.ZH


def test_latin_text_defaults_to_english():
    assert detect_language("Good morning") == (Language.EN, 0.95)


def test_other_scripts_default_to_english():
    language, _ = detect_language("こんにちは")
    assert language == Language.EN
