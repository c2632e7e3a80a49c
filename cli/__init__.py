"""CLI package for SheetSense.

Provides the ``sheetsense`` command (also runnable as ``python -m cli``):

    sheetsense analyze data.xlsx [--config settings.yaml] [--output DIR]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from core.orchestrator import AnalysisOrchestrator
from level1_ingestion.loader import DatasetLoadError
from level2_classification.types import SemanticType
from level4_reporting.report_generator import REPORT_FORMATS, ReportGenerationError
from level4_reporting.report_schema import AnalysisReport
from settings.validator import SettingsValidationError, load_settings
from utils import (
    APP_NAME,
    APP_VERSION,
    EXIT_INVALID_SETTINGS,
    EXIT_NO_DATA,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    PathValidationError,
    get_logger,
    setup_logging,
)

__all__ = [
    "EXIT_INVALID_SETTINGS",
    "EXIT_NO_DATA",
    "EXIT_RUNTIME_ERROR",
    "EXIT_SUCCESS",
    "format_console_summary",
    "main",
    "parse_args",
    "run_analysis",
    # Re-export for unit-test patching
    "AnalysisOrchestrator",
]

logger = get_logger(__name__)

_FORMAT_CHOICES = {"json": ("json",), "markdown": ("markdown",), "both": REPORT_FORMATS}


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="sheetsense",
        description=f"{APP_NAME} - infer column types and a default chart from a spreadsheet",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser(
        "analyze", help="Classify columns and project a chart for a dataset file"
    )
    analyze_parser.add_argument("dataset", type=str, help="Path to .xlsx, .xls, .csv or .json file")
    analyze_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML/JSON settings (optional; defaults apply if omitted)",
    )
    analyze_parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Directory for written reports (optional; prints a summary only if omitted)",
    )
    analyze_parser.add_argument(
        "--format",
        choices=sorted(_FORMAT_CHOICES),
        default="both",
        help="Report formats to write with --output (default: both)",
    )
    analyze_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def format_console_summary(report: AnalysisReport) -> str:
    """Render a short plain-text summary of a finished analysis."""
    summary = report.summary
    counts = ", ".join(
        f"{t.value}={summary.count_by_type[t]}" for t in SemanticType if summary.count_by_type[t]
    )
    lines = [
        f"✓ Analysed {report.source}",
        f"  Rows: {summary.total_rows:,}  Columns: {summary.total_columns} ({counts or 'none'})",
        "",
        "  Columns:",
    ]
    width = max((len(column.name) for column in report.schema), default=0)
    for column in report.schema:
        lines.append(f"    {column.name.ljust(width)}  {column.type.value}")

    lines.append("")
    if report.chart is None:
        lines.append("  Chart: no numeric column found, nothing to chart")
    else:
        lines.append(
            f"  Chart: {report.chart.y_label} by {report.chart.x_label} "
            f"({len(report.chart.data)} points)"
        )
    return "\n".join(lines)


def run_analysis(
    dataset_path: str,
    config_path: Optional[str] = None,
    output_path: Optional[str] = None,
    report_format: str = "both",
) -> int:
    """Run one analysis and print its summary.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        settings = load_settings(config_path)
    except SettingsValidationError as e:
        print(f"✗ Invalid settings:\n{e}", file=sys.stderr)
        return EXIT_INVALID_SETTINGS

    try:
        orchestrator = AnalysisOrchestrator(
            settings,
            output_path=Path(output_path) if output_path else None,
            formats=_FORMAT_CHOICES[report_format],
        )
        report = orchestrator.analyze_file(dataset_path)
        print(format_console_summary(report))

        written = orchestrator.write_reports(report)
        for fmt, path in written.items():
            print(f"✓ {fmt} report written to {path}")
        return EXIT_SUCCESS

    except DatasetLoadError as e:
        print(f"✗ {e}", file=sys.stderr)
        return EXIT_NO_DATA
    except PathValidationError as e:
        print(f"✗ Invalid output path: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except ReportGenerationError as e:
        print(f"✗ {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except KeyboardInterrupt:
        print("\n✗ Analysis interrupted by user", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        print(f"✗ Runtime error: {type(e).__name__}: {e}", file=sys.stderr)
        logger.exception(f"Unexpected error during analysis: {type(e).__name__}")
        return EXIT_RUNTIME_ERROR


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    setup_logging(verbose=args.verbose)

    if args.command == "analyze":
        return run_analysis(
            args.dataset,
            config_path=args.config,
            output_path=args.output,
            report_format=args.format,
        )

    print(f"Unknown command: {args.command}", file=sys.stderr)
    return EXIT_RUNTIME_ERROR
