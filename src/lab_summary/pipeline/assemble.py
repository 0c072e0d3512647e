from __future__ import annotations

import logging

from lab_summary.pipeline.extract import ExtractedFields
from lab_summary.schemas.summary import ParsedSummary, Status, TestRecord

logger = logging.getLogger(__name__)


def build_record(fields: ExtractedFields, status: Status) -> TestRecord:
    return TestRecord(
        name=fields.name,
        alias=fields.alias,
        importance=fields.importance,
        result=fields.result,
        status=status,
        explanation=fields.explanation,
        tip=fields.tip,
        verdict=fields.verdict,
    )


def assemble_summary(records: list[TestRecord], final_tip: str) -> ParsedSummary:
    """Stage 4: Combine per-test records (in source order) with the final tip.

    Nothing is rejected here: every fragment has already produced one record,
    however sparse.
    """
    summary = ParsedSummary(tests=list(records), final_tip=final_tip)
    logger.debug(
        "assemble: %d tests, final tip %s",
        len(summary.tests),
        "set" if summary.final_tip else "empty",
    )
    return summary
