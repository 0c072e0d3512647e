"""Marker vocabularies for each supported summary language.

A vocabulary is pure data: the glyphs, bold labels, status cue words and
placeholder strings one language variant of the summary uses. The pipeline
never branches on language; it only reads these tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from lab_summary.schemas.defaults import NO_READING, UNSPECIFIED_RESULT


class UnknownLanguageError(ValueError):
    """Raised when a language code has no registered vocabulary."""


@dataclass(frozen=True)
class FieldMarker:
    glyph: str  # e.g., "📊"
    label: str  # bold label text, e.g., "Results"


@dataclass(frozen=True)
class MarkerVocabulary:
    language: str
    heading: FieldMarker
    importance: FieldMarker
    results: FieldMarker
    tip: FieldMarker
    verdict: FieldMarker
    final_tip_glyph: str
    alias_keywords: tuple[str, ...]
    low_annotations: tuple[str, ...]
    low_cues: tuple[str, ...]
    high_annotations: tuple[str, ...]
    high_cues: tuple[str, ...]
    no_reading: str
    unspecified_result: str


ENGLISH = MarkerVocabulary(
    language="en",
    heading=FieldMarker("🧪", "Test"),
    importance=FieldMarker("🧠", "Why this test matters"),
    results=FieldMarker("📊", "Results"),
    tip=FieldMarker("🩺", "Tiny Tip"),
    verdict=FieldMarker("🎯", "Verdict & Vibes"),
    final_tip_glyph="👉",
    alias_keywords=("aka",),
    low_annotations=("(low)",),
    low_cues=("low",),
    high_annotations=("(high)",),
    high_cues=("high",),
    no_reading=NO_READING,
    unspecified_result=UNSPECIFIED_RESULT,
)

# Hindi summaries keep the emoji glyphs and translate the labels. The model
# still mixes in English "low"/"high", so those cues stay alongside Hindi ones.
HINDI = MarkerVocabulary(
    language="hi",
    heading=FieldMarker("🧪", "टेस्ट"),
    importance=FieldMarker("🧠", "यह टेस्ट क्यों ज़रूरी है"),
    results=FieldMarker("📊", "परिणाम"),
    tip=FieldMarker("🩺", "छोटी सलाह"),
    verdict=FieldMarker("🎯", "फ़ैसला और वाइब्स"),
    final_tip_glyph="👉",
    alias_keywords=("aka", "उर्फ़", "उर्फ"),
    low_annotations=("(low)", "(कम)"),
    low_cues=("low", "कम"),
    high_annotations=("(high)", "(अधिक)", "(ज़्यादा)"),
    high_cues=("high", "अधिक", "ज़्यादा", "ज्यादा"),
    no_reading="कोई रीडिंग उपलब्ध नहीं",
    unspecified_result="निर्दिष्ट नहीं",
)

# Written only by register_vocabulary at import/setup time; parsing only reads.
_REGISTRY: dict[str, MarkerVocabulary] = {
    "en": ENGLISH,
    "english": ENGLISH,
    "hi": HINDI,
    "hindi": HINDI,
}

VOCABULARIES: Mapping[str, MarkerVocabulary] = MappingProxyType(_REGISTRY)


def get_vocabulary(language: str) -> MarkerVocabulary:
    """
    Resolve a language code ("en", "hi", or the full name) to its vocabulary.

    Raises UnknownLanguageError for codes with no registered table.
    """
    if not isinstance(language, str):
        raise TypeError(f"language must be a str, got {type(language).__name__}")

    normalized = language.lower().strip()
    if normalized not in _REGISTRY:
        known = ", ".join(sorted(_REGISTRY))
        raise UnknownLanguageError(f"Unknown summary language {language!r} (known: {known})")
    return _REGISTRY[normalized]


def register_vocabulary(vocabulary: MarkerVocabulary, *aliases: str) -> None:
    """Register a new language variant under its code and any extra aliases.

    Meant to be called once, at import time of the module defining the table,
    before any parsing starts. Codes are add-only: re-registering a code with
    a different table raises ValueError, so a language never changes meaning
    while summaries are being parsed. Re-registering the same table is a no-op.
    """
    codes = [code.lower().strip() for code in (vocabulary.language, *aliases)]
    for code in codes:
        existing = _REGISTRY.get(code)
        if existing is not None and existing != vocabulary:
            raise ValueError(f"Language code {code!r} is already registered")
    for code in codes:
        _REGISTRY[code] = vocabulary
