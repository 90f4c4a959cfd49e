"""
Command-line interface for batch quality checks and analytics.

Usage:
    python -m complaint_pipeline.cli.batch_cli process --input <file_path> [options]
    python -m complaint_pipeline.cli.batch_cli analyze --input <file_path> [options]
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from ..analytics import build_dashboard
from ..batch.pipeline import QualityPipeline
from ..batch.readers import CSVRowReader, JSONRowReader, RowSource, load_column_mapping
from ..config import Settings, get_settings
from ..core.models import QualityReport
from ..core.rules import NormalizationRuleLoader
from ..observability.logger import get_logger
from ..utils.dates import parse_date_string

logger = get_logger(__name__)


def to_jsonable(value: Any) -> Any:
    """Convert models and containers of models into JSON-ready values."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return value


def create_reader(args, settings: Settings) -> RowSource:
    """
    Build the row source for the input file.

    Args:
        args: Command-line arguments
        settings: Environment settings

    Returns:
        Row source for the requested format
    """
    mapping_path = args.column_mapping or settings.column_mapping_path
    column_mapping = load_column_mapping(mapping_path) if mapping_path else None

    if args.format == "json":
        return JSONRowReader(args.input, column_mapping=column_mapping)
    return CSVRowReader(args.input, column_mapping=column_mapping)


def run_pipeline(args, settings: Settings) -> QualityReport:
    """
    Read the input and run the quality pipeline.

    Args:
        args: Command-line arguments
        settings: Environment settings

    Returns:
        QualityReport for the input rows
    """
    rules_path = args.normalization_rules or settings.normalization_rules_path
    registry = NormalizationRuleLoader(rules_path).load() if rules_path else None

    rows = create_reader(args, settings).fetch_rows(args.sheet)
    logger.info(f"Read {len(rows)} rows from {args.input}")

    pipeline = QualityPipeline(registry=registry)
    return pipeline.process(rows, now=args.now)


def process_command(args, settings: Settings) -> dict[str, Any]:
    """
    Execute the quality-check command.

    Returns:
        Summary and (optionally truncated) issue list
    """
    report = run_pipeline(args, settings)
    issues = report.issues
    if args.issues_limit is not None:
        issues = issues[: args.issues_limit]

    return {
        "summary": to_jsonable(report.summary),
        "issues": to_jsonable(issues),
        "issues_total": len(report.issues),
    }


def analyze_command(args, settings: Settings) -> dict[str, Any]:
    """
    Execute the analytics command.

    Returns:
        Summary plus every calculator output
    """
    report = run_pipeline(args, settings)
    years = args.years.split(",") if args.years else settings.summary_years
    dashboard = build_dashboard(report.processed, now=args.now, years=years)
    return {"summary": to_jsonable(report.summary), **to_jsonable(dashboard)}


def _reference_time(text: str):
    try:
        return parse_date_string(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date: {text!r}") from e


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Complaint data-quality pipeline and analytics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Quality summary and the first 20 issues of a CSV export
  python -m complaint_pipeline.cli.batch_cli process --input data/complaints.csv --issues-limit 20

  # Apply custom normalization rules
  python -m complaint_pipeline.cli.batch_cli process --input data/complaints.csv \\
      --normalization-rules config/normalization_rules.yaml

  # All analytics for a JSON export, as of a fixed date
  python -m complaint_pipeline.cli.batch_cli analyze --input data/complaints.json \\
      --format json --now 2025-03-31
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--input", required=True, help="Path to input file (or directory of per-sheet CSVs)")
    common.add_argument(
        "--format",
        default="csv",
        choices=["csv", "json"],
        help="Input file format (default: csv)",
    )
    common.add_argument("--sheet", default="Sheet1", help="Sheet name (default: Sheet1)")
    common.add_argument(
        "--normalization-rules",
        default=None,
        help="Path to normalization rules YAML file (default: NORMALIZATION_RULES_PATH)",
    )
    common.add_argument(
        "--column-mapping",
        default=None,
        help="Path to column mapping YAML file (default: COLUMN_MAPPING_PATH)",
    )
    common.add_argument(
        "--now",
        type=_reference_time,
        default=None,
        help="Reference date for date checks and windows (default: current time)",
    )

    process_parser = subparsers.add_parser("process", parents=[common], help="Run quality checks")
    process_parser.add_argument(
        "--issues-limit",
        type=int,
        default=None,
        help="Maximum number of issues to print",
    )

    analyze_parser = subparsers.add_parser("analyze", parents=[common], help="Run quality checks and analytics")
    analyze_parser.add_argument(
        "--years",
        default=None,
        help="Comma-separated years for the year summary (default: SUMMARY_YEARS)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    input_path = Path(args.input)
    if not input_path.exists():
        logger.error(f"Input file not found: {args.input}")
        return 1

    commands = {"process": process_command, "analyze": analyze_command}

    try:
        settings = get_settings()
        result = commands[args.command](args, settings)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Error during {args.command}: {e}", exc_info=True)
        return 1

    json.dump(result, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
