"""
Dictionary-backed mock translator for the zh/en pair.

There is no real machine translation here: known phrases come from a fixed
phrasebook and everything else gets a deterministic placeholder that embeds
the original text.
"""

from types import MappingProxyType
from typing import Mapping

from app.models.translation import Language

EN_TO_ZH: Mapping[str, str] = MappingProxyType({
    "hello": "你好",
    "goodbye": "再见",
    "thank you": "谢谢",
    "how are you": "你好吗",
    "good morning": "早上好",
})

ZH_TO_EN: Mapping[str, str] = MappingProxyType({zh: en for en, zh in EN_TO_ZH.items()})


def translate(source_text: str, source_language: Language, target_language: Language) -> str:
    """
    Translate ``source_text`` between zh and en.

    English lookups ignore case, Chinese lookups are exact. Misses fall back
    to a placeholder that always contains ``source_text``.
    """
    source_language = Language(source_language)
    target_language = Language(target_language)

    if source_language == Language.EN and target_language == Language.ZH:
        return EN_TO_ZH.get(source_text.lower(), f"{source_text}的中文翻译")
    if source_language == Language.ZH and target_language == Language.EN:
        return ZH_TO_EN.get(source_text, f"English translation of {source_text}")

    return (
        f"Mock translation from {source_language.value} to {target_language.value}: "
        f"{source_text}"
    )


def is_dictionary_hit(source_text: str, source_language: Language) -> bool:
    if Language(source_language) == Language.EN:
        return source_text.lower() in EN_TO_ZH
    return source_text in ZH_TO_EN
