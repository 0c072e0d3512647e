"""Structured parsing of emoji-marked lab report summaries."""
from lab_summary.parser import parse_summary, parse_english_summary, parse_hindi_summary
from lab_summary.schemas.summary import ParsedSummary, TestRecord

__all__ = [
    "parse_summary", "parse_english_summary", "parse_hindi_summary",
    "ParsedSummary", "TestRecord",
]
