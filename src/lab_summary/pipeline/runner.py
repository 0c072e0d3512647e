from __future__ import annotations

import logging
import time
from pathlib import Path

from lab_summary.evaluation.metrics import field_coverage
from lab_summary.grammar.vocabulary import MarkerVocabulary, get_vocabulary
from lab_summary.pipeline.assemble import assemble_summary, build_record
from lab_summary.pipeline.classify import classify_status
from lab_summary.pipeline.extract import ExtractedFields, extract_fields
from lab_summary.pipeline.split import split_sections
from lab_summary.schemas.config import PipelineConfig
from lab_summary.schemas.pipeline import PipelineResult, StageResult
from lab_summary.schemas.summary import ParsedSummary, Status

logger = logging.getLogger(__name__)


def _split_stage(text: str, vocabulary: MarkerVocabulary) -> tuple[list[str], str, StageResult]:
    start = time.time()
    fragments, final_tip = split_sections(text, vocabulary)

    reasoning = (
        f"Found {len(fragments)} '{vocabulary.heading.label}' heading markers. "
        f"Final tip marker {vocabulary.final_tip_glyph} "
        f"{'found' if final_tip else 'not found'}."
    )
    logger.info("split: %d test sections", len(fragments))

    return fragments, final_tip, StageResult(
        stage_name="split",
        input_summary=f"Narrative text ({len(text)} chars, language={vocabulary.language})",
        output={"section_count": len(fragments), "final_tip": final_tip},
        reasoning=reasoning,
        timing_seconds=time.time() - start,
    )


def _extract_stage(
    fragments: list[str], vocabulary: MarkerVocabulary
) -> tuple[list[ExtractedFields], StageResult]:
    start = time.time()
    extracted = [extract_fields(fragment, vocabulary) for fragment in fragments]

    missing_results = sum(1 for fields in extracted if not fields.has_results)
    reasoning_parts = [
        f"{fields.name or '<unnamed>'}: {', '.join(fields.found_fields()) or 'no fields'}"
        for fields in extracted
    ]
    reasoning = (
        f"Extracted fields from {len(extracted)} sections, "
        f"{missing_results} without a results line. "
        f"Details: {'; '.join(reasoning_parts[:5])}"
    )
    logger.info(
        "extract: %d sections, %d without results", len(extracted), missing_results
    )

    return extracted, StageResult(
        stage_name="extract",
        input_summary=f"{len(fragments)} test sections",
        output={
            "section_count": len(extracted),
            "missing_results": missing_results,
            "fields_found": [fields.found_fields() for fields in extracted],
        },
        reasoning=reasoning,
        timing_seconds=time.time() - start,
    )


def _classify_stage(
    fragments: list[str], extracted: list[ExtractedFields], vocabulary: MarkerVocabulary
) -> tuple[list[Status], StageResult]:
    start = time.time()
    statuses: list[Status] = []
    for fragment, fields in zip(fragments, extracted):
        statuses.append(
            classify_status(fragment, fields.results_line, vocabulary, fields.has_results)
        )

    counts = {status: statuses.count(status) for status in ("low", "normal", "high")}
    reasoning = (
        f"Classified {len(statuses)} tests: "
        f"{counts['low']} low, {counts['normal']} normal, {counts['high']} high."
    )
    logger.info(
        "classify: %d low, %d normal, %d high",
        counts["low"],
        counts["normal"],
        counts["high"],
    )

    return statuses, StageResult(
        stage_name="classify",
        input_summary=f"{len(extracted)} extracted sections",
        output={"statuses": list(statuses), "counts": counts},
        reasoning=reasoning,
        timing_seconds=time.time() - start,
    )


def _assemble_stage(
    extracted: list[ExtractedFields],
    statuses: list[Status],
    final_tip: str,
    config: PipelineConfig,
) -> tuple[ParsedSummary, StageResult]:
    start = time.time()
    records = [build_record(fields, status) for fields, status in zip(extracted, statuses)]
    summary = assemble_summary(records, final_tip)

    coverage = field_coverage(summary)
    sparse = coverage < config.sparse_threshold
    reasoning = (
        f"Assembled {len(summary.tests)} test records. "
        f"Field coverage {coverage:.0%}"
        f"{' (sparse parse)' if sparse else ''}."
    )
    logger.info("assemble: %d records, coverage %.0f%%", len(summary.tests), coverage * 100)

    return summary, StageResult(
        stage_name="assemble",
        input_summary=f"{len(extracted)} sections with statuses",
        output={
            "test_count": len(summary.tests),
            "field_coverage": coverage,
            "sparse": sparse,
        },
        reasoning=reasoning,
        timing_seconds=time.time() - start,
    )


def run_text(text: str, config: PipelineConfig, source_path: str = "<text>") -> PipelineResult:
    """Run the four parsing stages on in-memory text, recording each stage."""
    pipeline_start = time.time()
    vocabulary = get_vocabulary(config.language)
    if not isinstance(text, str):
        raise TypeError(f"summary text must be a str, got {type(text).__name__}")

    stages = []

    logger.info("pipeline: [1/4] split")
    fragments, final_tip, split_result = _split_stage(text, vocabulary)
    stages.append(split_result)

    logger.info("pipeline: [2/4] extract")
    extracted, extract_result = _extract_stage(fragments, vocabulary)
    stages.append(extract_result)

    logger.info("pipeline: [3/4] classify")
    statuses, classify_result = _classify_stage(fragments, extracted, vocabulary)
    stages.append(classify_result)

    logger.info("pipeline: [4/4] assemble")
    summary, assemble_result = _assemble_stage(extracted, statuses, final_tip, config)
    stages.append(assemble_result)

    total_time = time.time() - pipeline_start
    logger.info(
        "pipeline: complete in %.2fs - %d tests, final tip %s",
        total_time,
        len(summary.tests),
        "set" if summary.final_tip else "empty",
    )

    return PipelineResult(
        source_path=source_path,
        language=vocabulary.language,
        stages=stages,
        summary=summary,
        total_time_seconds=total_time,
        success=True,
    )


def run_pipeline(source_path: str, config: PipelineConfig) -> PipelineResult:
    """Read a narrative file and parse it.

    A file that cannot be read or decoded gives success=False with the error;
    a file that reads but parses sparsely is still success=True.
    """
    pipeline_start = time.time()
    vocabulary = get_vocabulary(config.language)

    try:
        text = Path(source_path).read_text(encoding=config.encoding)
        logger.info("pipeline: loaded %s (%d chars)", source_path, len(text))
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("pipeline: failed - %s", exc)
        return PipelineResult(
            source_path=str(source_path),
            language=vocabulary.language,
            stages=[],
            summary=ParsedSummary(),
            total_time_seconds=time.time() - pipeline_start,
            success=False,
            error=str(exc),
        )

    return run_text(text, config, source_path=str(source_path))
