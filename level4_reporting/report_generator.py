"""Report generator for analysis runs.

This module writes an AnalysisReport to disk as JSON and as a
human-readable Markdown overview. It does not recompute anything; it only
renders what the report already holds.
"""

from pathlib import Path
from typing import Iterable

from level2_classification.types import SemanticType
from utils import FileHelperError, get_logger, safe_write_json, safe_write_text

from .report_schema import AnalysisReport

logger = get_logger(__name__)

REPORT_FORMATS = ("json", "markdown")


class ReportGenerationError(Exception):
    """Raised when report generation fails."""

    pass


def _escape_cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")


class ReportGenerator:
    """Writes analysis reports into ``<output_dir>/reports/<run_id>/``.

    Args:
        output_dir: Base directory for reports (should be pre-validated)
        run_id: Unique run identifier
    """

    def __init__(self, output_dir: Path, run_id: str):
        self.output_dir = Path(output_dir)
        self.run_id = run_id
        sanitized_run_id = "".join(c for c in run_id if c.isalnum() or c in "-_.")[:100]
        self.reports_dir = self.output_dir / "reports" / sanitized_run_id
        logger.debug(f"ReportGenerator initialized: {self.reports_dir}")

    def write_json(self, report: AnalysisReport, overwrite: bool = False) -> Path:
        """Write the full report as JSON.

        Raises:
            ReportGenerationError: If the file exists or can't be written
        """
        path = self.reports_dir / f"analysis_{self.run_id}.json"
        try:
            written = safe_write_json(report.to_dict(), path, overwrite=overwrite)
        except FileHelperError as e:
            raise ReportGenerationError(f"Failed to write JSON report: {e}") from e
        logger.info(f"Report generated: json -> {written}")
        return written

    def write_markdown(self, report: AnalysisReport, overwrite: bool = False) -> Path:
        """Write the Markdown overview.

        Raises:
            ReportGenerationError: If the file exists or can't be written
        """
        path = self.reports_dir / f"analysis_{self.run_id}.md"
        try:
            written = safe_write_text(self.format_markdown(report), path, overwrite=overwrite)
        except FileHelperError as e:
            raise ReportGenerationError(f"Failed to write Markdown report: {e}") from e
        logger.info(f"Report generated: markdown -> {written}")
        return written

    def generate(
        self, report: AnalysisReport, formats: Iterable[str] = REPORT_FORMATS, overwrite: bool = False
    ) -> dict[str, Path]:
        """Write the report in each requested format.

        Returns:
            Dictionary mapping format name to written path

        Raises:
            ReportGenerationError: If a format is unknown or a write fails
        """
        writers = {"json": self.write_json, "markdown": self.write_markdown}
        paths = {}
        for fmt in formats:
            if fmt not in writers:
                raise ReportGenerationError(
                    f"Unknown report format: {fmt}. Supported formats: {', '.join(REPORT_FORMATS)}"
                )
            paths[fmt] = writers[fmt](report, overwrite=overwrite)
        logger.info(f"Generated {len(paths)} reports in {self.reports_dir}")
        return paths

    def format_markdown(self, report: AnalysisReport) -> str:
        """Render the report as Markdown."""
        summary = report.summary
        lines = [
            "# Dataset Analysis Report",
            "",
            f"**Run ID:** `{report.run_id}`  ",
            f"**Source:** `{report.source}`  ",
            f"**Generated:** {report.timestamp}",
            "",
            "## Summary",
            "",
            f"- **Rows:** {summary.total_rows:,}",
            f"- **Columns:** {summary.total_columns}",
        ]
        for semantic_type in SemanticType:
            lines.append(f"- **{semantic_type.value.title()}:** {summary.count_by_type[semantic_type]}")

        lines += ["", "## Columns", "", "| Column | Type | Missing | Unique | Rule |", "|---|---|---|---|---|"]
        profiles = {profile.column_name: profile for profile in report.profile.columns}
        for result in report.classifications:
            profile = profiles.get(result.schema.name)
            rule = result.matched_rule.describe() if result.matched_rule else "fallback"
            missing = f"{profile.missing_percentage}%" if profile else "-"
            unique = str(profile.unique_count) if profile else "-"
            lines.append(
                f"| {_escape_cell(result.schema.name)} | {result.schema.type.value} "
                f"| {missing} | {unique} | {rule} |"
            )

        lines += ["", "## Chart", ""]
        if report.chart is None:
            lines.append("No numeric column found, nothing to chart.")
        else:
            lines += [
                f"- **X axis:** `{report.chart.x_label}`",
                f"- **Y axis:** `{report.chart.y_label}`",
                f"- **Points:** {len(report.chart.data)}",
            ]

        preview = report.preview
        if preview.columns and preview.rows:
            lines += ["", "## Preview", ""]
            lines.append("| " + " | ".join(_escape_cell(c.name) for c in preview.columns) + " |")
            lines.append("|" + "---|" * len(preview.columns))
            for row in preview.rows:
                lines.append("| " + " | ".join(_escape_cell(cell) for cell in row) + " |")
            if preview.note:
                lines += ["", f"*{preview.note}*"]

        return "\n".join(lines) + "\n"
