"""Lab Summary Parsing CLI.

Usage:
    python -m lab_summary --input <path> [options]
    python -m lab_summary --batch <dir> [options]
    python -m lab_summary --evaluate <dir> [options]
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lab_summary",
        description="Parse emoji-marked lab report summaries into structured JSON",
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument(
        "--input",
        metavar="PATH",
        help="Path to a single summary narrative (.md/.txt)",
    )
    group.add_argument(
        "--batch", metavar="DIR", help="Directory of summary narratives to parse"
    )
    group.add_argument(
        "--evaluate",
        metavar="DIR",
        help="Score the parser on a directory of narratives (with optional .expected.json files)",
    )

    parser.add_argument(
        "--language",
        choices=["en", "hi"],
        default="en",
        help="Language the summaries were written in (default: en)",
    )
    parser.add_argument(
        "--output",
        metavar="PATH",
        default=None,
        help="Write JSON output to file (default: stdout)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print stage-by-stage reasoning to stderr",
    )
    parser.add_argument(
        "--format",
        choices=["json", "summary"],
        default="json",
        help="Output format: json (machine-readable) or summary (human-readable table)",
    )
    return parser


def format_summary(result) -> str:
    """Format PipelineResult as human-readable text table."""
    lines = []
    source_name = Path(result.source_path).name
    lines.append(f"Lab Summary -- {source_name}")
    lines.append("=" * (len(lines[0])))

    if not result.success:
        lines.append(f"Error: {result.error}")
        return "\n".join(lines)

    summary = result.summary
    lines.append(f"Language: {result.language}")
    lines.append("")
    lines.append("Tests:")

    col_widths = [24, 24, 8, 12]
    header = f"| {'Test':<{col_widths[0]}} | {'Result':<{col_widths[1]}} | {'Status':<{col_widths[2]}} | {'Alias':<{col_widths[3]}} |"
    separator = f"|{'-' * (col_widths[0] + 2)}|{'-' * (col_widths[1] + 2)}|{'-' * (col_widths[2] + 2)}|{'-' * (col_widths[3] + 2)}|"
    lines.append(header)
    lines.append(separator)

    for test in summary.tests:
        row = (
            f"| {test.name:<{col_widths[0]}} "
            f"| {test.result:<{col_widths[1]}} "
            f"| {test.status.upper():<{col_widths[2]}} "
            f"| {(test.alias or ''):<{col_widths[3]}} |"
        )
        lines.append(row)

    lines.append("")
    if summary.final_tip:
        lines.append(f"Final tip: {summary.final_tip}")
    flagged = sum(1 for t in summary.tests if t.status != "normal")
    lines.append(
        f"Pipeline: {len(result.stages)} stages completed in {result.total_time_seconds:.3f}s"
    )
    lines.append(f"Flagged: {flagged} of {len(summary.tests)} outside normal")

    return "\n".join(lines)


def process_single(source_path: str, args, config):
    """Parse a single narrative file and return its PipelineResult."""
    from lab_summary.pipeline.runner import run_pipeline

    result = run_pipeline(source_path, config)

    if args.verbose:
        for stage in result.stages:
            print(f"[{stage.stage_name}] {stage.reasoning}", file=sys.stderr)

    return result


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=log_level, format="%(levelname)s: %(message)s", stream=sys.stderr
    )

    from lab_summary.schemas.config import PipelineConfig
    from lab_summary.evaluation.evaluate import evaluate, find_narratives

    config = PipelineConfig(language=args.language)

    results = []

    if args.evaluate:
        try:
            report = evaluate(args.evaluate, config)
        except FileNotFoundError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 2
        output_text = json.dumps(report, indent=2, default=str, ensure_ascii=False)
        if args.output:
            Path(args.output).write_text(output_text, encoding="utf-8")
        else:
            print(output_text)
        return 0

    if args.input:
        input_path = Path(args.input)
        if not input_path.exists():
            print(f"Error: input file not found: {args.input}", file=sys.stderr)
            return 2

        result = process_single(str(input_path), args, config)
        results = [result]

    elif args.batch:
        batch_dir = Path(args.batch)
        if not batch_dir.is_dir():
            print(f"Error: batch directory not found: {args.batch}", file=sys.stderr)
            return 2

        files = find_narratives(batch_dir)
        if not files:
            print(f"Error: no summary files found in {args.batch}", file=sys.stderr)
            return 2

        for path in files:
            results.append(process_single(str(path), args, config))

    if args.format == "summary":
        output_text = "\n\n".join(format_summary(r) for r in results)
    else:
        if len(results) == 1:
            output_data = results[0].model_dump()
        else:
            output_data = [r.model_dump() for r in results]
        output_text = json.dumps(output_data, indent=2, default=str, ensure_ascii=False)

    if args.output:
        Path(args.output).write_text(output_text, encoding="utf-8")
    else:
        print(output_text)

    # Exit code based on success
    if any(not r.success for r in results):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
