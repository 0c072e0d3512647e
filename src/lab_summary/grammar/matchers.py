"""Compiled per-field matchers built from a MarkerVocabulary.

Each matcher looks for exactly one field and returns None when its marker is
absent, so a missing or garbled line never affects the other fields. All value
captures are single negated character classes; there are no nested unbounded
quantifiers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from lab_summary.grammar.vocabulary import FieldMarker, MarkerVocabulary

EM_DASH = "—"
# Whitespace that never crosses a line break; every capture is single-line.
INLINE_SPACE = r"[^\S\n]"


def _label_prefix(marker: FieldMarker) -> str:
    return rf"{re.escape(marker.glyph)}{INLINE_SPACE}+\*\*{re.escape(marker.label)}\*\*:"


@dataclass(frozen=True)
class LineMatcher:
    """Captures the rest of the line after `<glyph> **<label>**:`."""

    pattern: re.Pattern[str]

    @classmethod
    def for_marker(cls, marker: FieldMarker) -> LineMatcher:
        return cls(re.compile(_label_prefix(marker) + rf"{INLINE_SPACE}*([^\n]*)"))

    def match(self, fragment: str) -> str | None:
        found = self.pattern.search(fragment)
        if found is None:
            return None
        return found.group(1).strip()


@dataclass(frozen=True)
class ResultsMatcher:
    """Captures `<value> — <explanation>` after the results marker.

    Returns (result, explanation); explanation is "" when there is no em-dash
    segment on the line.
    """

    pattern: re.Pattern[str]

    @classmethod
    def for_marker(cls, marker: FieldMarker) -> ResultsMatcher:
        return cls(
            re.compile(
                _label_prefix(marker)
                + rf"{INLINE_SPACE}*([^{EM_DASH}\n]*)"
                + rf"(?:{EM_DASH}{INLINE_SPACE}*([^\n]*))?"
            )
        )

    def match(self, fragment: str) -> tuple[str, str] | None:
        found = self.pattern.search(fragment)
        if found is None:
            return None
        result = found.group(1).strip()
        explanation = (found.group(2) or "").strip()
        return result, explanation


@dataclass(frozen=True)
class NameMatcher:
    """Captures the test name and optional `(aka "<alias>")` from the heading line."""

    pattern: re.Pattern[str]

    @classmethod
    def for_keywords(cls, keywords: tuple[str, ...]) -> NameMatcher:
        alternatives = "|".join(re.escape(k) for k in keywords)
        return cls(
            re.compile(
                rf"^{INLINE_SPACE}*([^(\n]+)"
                rf'(?:\((?:{alternatives}){INLINE_SPACE}+"([^"\n]+)"\))?'
            )
        )

    def match(self, fragment: str) -> tuple[str, str | None] | None:
        found = self.pattern.match(fragment)
        if found is None:
            return None
        name = found.group(1).strip()
        alias = found.group(2).strip() if found.group(2) else None
        return name, alias or None


@dataclass(frozen=True)
class SummaryGrammar:
    vocabulary: MarkerVocabulary
    heading: re.Pattern[str]
    final_tip: re.Pattern[str]
    name: NameMatcher
    importance: LineMatcher
    results: ResultsMatcher
    tip: LineMatcher
    verdict: LineMatcher


@lru_cache(maxsize=None)
def compile_grammar(vocabulary: MarkerVocabulary) -> SummaryGrammar:
    """Compile (once per vocabulary) every pattern the pipeline needs."""
    heading = vocabulary.heading
    return SummaryGrammar(
        vocabulary=vocabulary,
        # Label text is case-insensitive; the emoji glyph has no case.
        heading=re.compile(
            rf"#{{2}}\s+{re.escape(heading.glyph)}\s+\*\*{re.escape(heading.label)}\*\*:",
            re.IGNORECASE,
        ),
        final_tip=re.compile(rf'{re.escape(vocabulary.final_tip_glyph)}\s+"([^"]+)"'),
        name=NameMatcher.for_keywords(vocabulary.alias_keywords),
        importance=LineMatcher.for_marker(vocabulary.importance),
        results=ResultsMatcher.for_marker(vocabulary.results),
        tip=LineMatcher.for_marker(vocabulary.tip),
        verdict=LineMatcher.for_marker(vocabulary.verdict),
    )
