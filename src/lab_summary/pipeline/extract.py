from __future__ import annotations

import logging
from dataclasses import dataclass

from lab_summary.grammar.matchers import compile_grammar
from lab_summary.grammar.vocabulary import MarkerVocabulary

logger = logging.getLogger(__name__)


@dataclass
class ExtractedFields:
    name: str = ""
    alias: str | None = None
    importance: str = ""
    result: str = ""
    explanation: str = ""
    tip: str = ""
    verdict: str = ""
    has_results: bool = False

    @property
    def results_line(self) -> str:
        """The captured results line (value plus explanation), "" without one."""
        if not self.has_results:
            return ""
        return f"{self.result} {self.explanation}".strip()

    def found_fields(self) -> list[str]:
        """Names of the text fields that were actually present in the fragment."""
        found = [
            field_name
            for field_name in ("name", "importance", "explanation", "tip", "verdict")
            if getattr(self, field_name)
        ]
        if self.alias is not None:
            found.append("alias")
        if self.has_results:
            found.append("result")
        return found


def extract_fields(fragment: str, vocabulary: MarkerVocabulary) -> ExtractedFields:
    """Stage 2: Pull every labelled field out of one test fragment.

    Each matcher runs on the whole fragment independently; a field whose marker
    is missing keeps its default. When the results marker is absent the result
    is the vocabulary's no-reading placeholder.
    """
    grammar = compile_grammar(vocabulary)
    fields = ExtractedFields()

    name_match = grammar.name.match(fragment)
    if name_match:
        fields.name, fields.alias = name_match

    fields.importance = grammar.importance.match(fragment) or ""

    results_match = grammar.results.match(fragment)
    if results_match:
        result, explanation = results_match
        fields.result = result or vocabulary.unspecified_result
        fields.explanation = explanation
        fields.has_results = True
    else:
        fields.result = vocabulary.no_reading

    fields.tip = grammar.tip.match(fragment) or ""
    fields.verdict = grammar.verdict.match(fragment) or ""

    logger.debug(
        "extract: %r -> %s",
        fields.name,
        ", ".join(fields.found_fields()) or "no fields",
    )
    return fields
