"""Evaluation harness for the lab summary parser."""

from __future__ import annotations
import logging
from pathlib import Path
from pydantic import ValidationError
from lab_summary.schemas.config import PipelineConfig
from lab_summary.schemas.summary import ParsedSummary
from lab_summary.evaluation.metrics import (
    field_coverage,
    field_level_metrics,
    report_level_metrics,
    summary_agreement,
)

logger = logging.getLogger(__name__)

NARRATIVE_SUFFIXES = ("*.md", "*.txt")
EXPECTED_SUFFIX = ".expected.json"


def find_narratives(directory: Path) -> list[Path]:
    return sorted(
        path
        for pattern in NARRATIVE_SUFFIXES
        for path in directory.glob(pattern)
    )


def evaluate(summary_dir: str, config: PipelineConfig, sample_size: int = 10) -> dict:
    """Evaluate the parser on a directory of narrative files.

    For each narrative (up to sample_size):
    - Parse it and record field coverage
    - If a `<stem>.expected.json` ParsedSummary sits next to it, score the
      parse against it with field_level_metrics and summary_agreement;
      an annotation that fails to load is logged and noted on the file entry

    Returns evaluation report as dict with:
    - report_metrics: aggregate report-level metrics
    - avg_name_f1 / avg_status_accuracy / avg_agreement: over annotated files
      only (None if none)
    - per_file: list of per-file results
    """
    from lab_summary.pipeline.runner import run_pipeline

    summary_dir_path = Path(summary_dir)
    if not summary_dir_path.exists():
        raise FileNotFoundError(f"Summary directory not found: {summary_dir}")

    files = find_narratives(summary_dir_path)[:sample_size]

    if not files:
        logger.warning("No narrative files found in %s", summary_dir)
        return {
            "report_metrics": report_level_metrics([]),
            "avg_name_f1": None,
            "avg_status_accuracy": None,
            "avg_agreement": None,
            "per_file": [],
            "sample_size": 0,
        }

    all_results = []
    f1_scores = []
    status_scores = []
    agreement_scores = []
    per_file = []

    for path in files:
        logger.info("Evaluating: %s", path.name)
        result = run_pipeline(str(path), config)
        all_results.append(result)

        entry = {
            "file": path.name,
            "success": result.success,
            "tests_parsed": len(result.summary.tests),
            "field_coverage": field_coverage(result.summary),
            "pipeline_time": result.total_time_seconds,
        }

        expected_path = path.with_name(path.stem + EXPECTED_SUFFIX)
        if expected_path.exists():
            try:
                expected = ParsedSummary.model_validate_json(
                    expected_path.read_text(encoding=config.encoding)
                )
            except (ValidationError, UnicodeDecodeError) as e:
                logger.error("Bad expected file %s: %s", expected_path.name, e)
                entry["expected_error"] = str(e)
            else:
                metrics = field_level_metrics(result.summary, expected)
                entry["metrics"] = metrics
                entry["agreement"] = summary_agreement(result.summary, expected)
                f1_scores.append(metrics["test_name"]["f1"])
                status_scores.append(metrics["status_accuracy"])
                agreement_scores.append(entry["agreement"])

        per_file.append(entry)
        logger.info(
            "  tests=%d, coverage=%.2f", entry["tests_parsed"], entry["field_coverage"]
        )

    return {
        "report_metrics": report_level_metrics(all_results),
        "avg_name_f1": sum(f1_scores) / len(f1_scores) if f1_scores else None,
        "avg_status_accuracy": (
            sum(status_scores) / len(status_scores) if status_scores else None
        ),
        "avg_agreement": (
            sum(agreement_scores) / len(agreement_scores) if agreement_scores else None
        ),
        "per_file": per_file,
        "sample_size": len(files),
    }
