"""Evaluation metrics for parsed lab summaries."""

from __future__ import annotations
import logging
from lab_summary.grammar.vocabulary import VOCABULARIES
from lab_summary.schemas.pipeline import PipelineResult
from lab_summary.schemas.summary import ParsedSummary, TestRecord

logger = logging.getLogger(__name__)

COVERAGE_FIELDS = ("name", "importance", "result", "tip", "verdict")


def _placeholders() -> set[str]:
    values: set[str] = set()
    for vocabulary in VOCABULARIES.values():
        values.add(vocabulary.no_reading)
        values.add(vocabulary.unspecified_result)
    return values


def _has_value(test: TestRecord, field_name: str, placeholders: set[str]) -> bool:
    value = getattr(test, field_name)
    if field_name == "result":
        return bool(value) and value not in placeholders
    return bool(value)


def field_coverage(summary: ParsedSummary) -> float:
    """Fraction of core fields (name, importance, result, tip, verdict) populated.

    Placeholder results do not count as populated. A summary with no tests has
    coverage 0.0, so callers can treat it as sparse.
    """
    if not summary.tests:
        return 0.0

    placeholders = _placeholders()
    populated = sum(
        1
        for test in summary.tests
        for field_name in COVERAGE_FIELDS
        if _has_value(test, field_name, placeholders)
    )
    return populated / (len(summary.tests) * len(COVERAGE_FIELDS))


def summary_agreement(summary1: ParsedSummary, summary2: ParsedSummary) -> float:
    """Field-by-field agreement between two parses, or a parse and its annotation.

    Tests are paired by name (case-insensitive); for each pair name, result and
    status are compared exactly. The final tip counts as one more field.

    Score = matching_fields / total_fields (0.0 to 1.0)
    Returns 1.0 if both summaries are empty.
    """
    tests1 = summary1.tests
    tests2 = summary2.tests

    if not tests1 and not tests2 and summary1.final_tip == summary2.final_tip:
        return 1.0

    lookup1 = {t.name.lower(): t for t in tests1}
    lookup2 = {t.name.lower(): t for t in tests2}

    matching = 0
    total = 1
    if summary1.final_tip == summary2.final_tip:
        matching += 1

    for name in set(lookup1) | set(lookup2):
        t1 = lookup1.get(name)
        t2 = lookup2.get(name)

        total += 3
        if t1 is None or t2 is None:
            continue

        matching += 1
        if t1.result.strip() == t2.result.strip():
            matching += 1
        if t1.status == t2.status:
            matching += 1

    return matching / total


def field_level_metrics(predicted: ParsedSummary, ground_truth: ParsedSummary) -> dict:
    """Compute test-name precision/recall/F1 plus status and result accuracy.

    Useful against hand-annotated summaries.
    """
    pred_tests = {t.name.lower(): t for t in predicted.tests}
    gt_tests = {t.name.lower(): t for t in ground_truth.tests}

    pred_names = set(pred_tests.keys())
    gt_names = set(gt_tests.keys())

    tp_names = len(pred_names & gt_names)
    fp_names = len(pred_names - gt_names)
    fn_names = len(gt_names - pred_names)

    precision = tp_names / (tp_names + fp_names) if (tp_names + fp_names) > 0 else 0.0
    recall = tp_names / (tp_names + fn_names) if (tp_names + fn_names) > 0 else 0.0
    f1 = (
        2 * precision * recall / (precision + recall)
        if (precision + recall) > 0
        else 0.0
    )

    status_matches = 0
    result_matches = 0
    matched_count = tp_names
    for name in pred_names & gt_names:
        if pred_tests[name].status == gt_tests[name].status:
            status_matches += 1
        if pred_tests[name].result.strip().lower() == gt_tests[name].result.strip().lower():
            result_matches += 1

    return {
        "test_name": {"precision": precision, "recall": recall, "f1": f1},
        "status_accuracy": status_matches / matched_count if matched_count > 0 else 0.0,
        "result_accuracy": result_matches / matched_count if matched_count > 0 else 0.0,
        "final_tip_match": predicted.final_tip == ground_truth.final_tip,
        "predicted_count": len(pred_tests),
        "ground_truth_count": len(gt_tests),
        "matched_count": matched_count,
    }


def report_level_metrics(results: list[PipelineResult]) -> dict:
    """Compute aggregate metrics across multiple pipeline results.

    Returns:
    - success_rate: fraction of files that were read and parsed
    - avg_tests_parsed: average number of test records per file
    - avg_field_coverage: average field_coverage of the parsed summaries
    - avg_pipeline_time: average total pipeline time in seconds
    - reports_with_tests: fraction of files with at least 1 test
    """
    if not results:
        return {
            "success_rate": 0.0,
            "avg_tests_parsed": 0.0,
            "avg_field_coverage": 0.0,
            "avg_pipeline_time": 0.0,
            "reports_with_tests": 0.0,
            "total_reports": 0,
        }

    n = len(results)
    successes = sum(1 for r in results if r.success)
    total_tests = sum(len(r.summary.tests) for r in results)
    total_coverage = sum(field_coverage(r.summary) for r in results)
    total_time = sum(r.total_time_seconds for r in results)
    with_tests = sum(1 for r in results if len(r.summary.tests) > 0)

    return {
        "success_rate": successes / n,
        "avg_tests_parsed": total_tests / n,
        "avg_field_coverage": total_coverage / n,
        "avg_pipeline_time": total_time / n,
        "reports_with_tests": with_tests / n,
        "total_reports": n,
    }
