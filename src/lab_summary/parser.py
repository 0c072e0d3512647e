"""Entry points that turn a summary narrative into a ParsedSummary.

These functions are pure: no I/O, no state kept between calls. Any string,
however malformed, yields a ParsedSummary. Only a non-string input or an
unknown language code raises.
"""

from __future__ import annotations

from lab_summary.grammar.vocabulary import HINDI, ENGLISH, MarkerVocabulary, get_vocabulary
from lab_summary.pipeline.assemble import assemble_summary, build_record
from lab_summary.pipeline.classify import classify_status
from lab_summary.pipeline.extract import extract_fields
from lab_summary.pipeline.split import split_sections
from lab_summary.schemas.summary import ParsedSummary, TestRecord


def parse_fragment(fragment: str, vocabulary: MarkerVocabulary) -> TestRecord:
    fields = extract_fields(fragment, vocabulary)
    status = classify_status(fragment, fields.results_line, vocabulary, fields.has_results)
    return build_record(fields, status)


def parse_with_vocabulary(text: str, vocabulary: MarkerVocabulary) -> ParsedSummary:
    if not isinstance(text, str):
        raise TypeError(f"summary text must be a str, got {type(text).__name__}")

    fragments, final_tip = split_sections(text, vocabulary)
    records = [parse_fragment(fragment, vocabulary) for fragment in fragments]
    return assemble_summary(records, final_tip)


def parse_summary(text: str, language: str = "en") -> ParsedSummary:
    """Parse a summary written in `language` ("en" or "hi")."""
    return parse_with_vocabulary(text, get_vocabulary(language))


def parse_english_summary(text: str) -> ParsedSummary:
    return parse_with_vocabulary(text, ENGLISH)


def parse_hindi_summary(text: str) -> ParsedSummary:
    return parse_with_vocabulary(text, HINDI)
