"""Analysis orchestrator for coordinating one pass over a dataset.

This module defines the AnalysisOrchestrator class which loads a dataset
and runs classification, projection and reporting in order, tracking the
run in an AnalysisSession.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Iterable, Optional, Sequence

from level1_ingestion.loader import DatasetLoadError, load_dataset
from level2_classification.classifier import classify_columns
from level3_projection.chart import project_chart
from level3_projection.formatting import build_preview
from level3_projection.summarizer import summarize
from level4_reporting.profiler import profile_dataset
from level4_reporting.report_generator import (
    REPORT_FORMATS,
    ReportGenerationError,
    ReportGenerator,
)
from level4_reporting.report_schema import AnalysisReport
from settings.schema import EngineSettings
from utils import PathValidationError, get_logger, validate_output_path
from utils.constants import EXIT_NO_DATA, EXIT_RUNTIME_ERROR, EXIT_SUCCESS
from utils.file_helpers import generate_run_id

from .session import AnalysisSession

logger = get_logger(__name__)


class AnalysisOrchestrator:
    """Orchestrates dataset analysis.

    Args:
        settings: Validated EngineSettings instance
        output_path: Optional directory for written reports
        formats: Report formats to write when output_path is set
    """

    def __init__(
        self,
        settings: Optional[EngineSettings] = None,
        output_path: Optional[Path] = None,
        formats: Iterable[str] = REPORT_FORMATS,
    ):
        """Initialize the orchestrator.

        Raises:
            PathValidationError: If output_path is unsafe
        """
        self.settings = settings or EngineSettings()
        if output_path:
            try:
                self.output_path = validate_output_path(output_path)
            except PathValidationError as e:
                logger.error(f"Invalid output path: {e}")
                raise
        else:
            self.output_path = None
        self.formats = tuple(formats)
        self.session = AnalysisSession()
        self.written_reports: dict[str, Path] = {}

        logger.info("AnalysisOrchestrator initialized")
        if self.output_path:
            logger.debug(f"Output path: {self.output_path}")

    def analyze_records(
        self,
        dataset: Sequence[Mapping[str, Any]],
        source: str = "<memory>",
        run_id: Optional[str] = None,
    ) -> AnalysisReport:
        """Classify, summarize, chart and profile an in-memory dataset.

        Never fails on cell contents; an empty dataset yields an empty schema
        and no chart.
        """
        run_id = run_id or generate_run_id()

        logger.info("=" * 60)
        logger.info("Classifying columns")
        logger.info("=" * 60)
        classifications = classify_columns(dataset, self.settings)
        schema = tuple(result.schema for result in classifications)
        logger.info(f"✓ {len(schema)} columns classified")

        logger.info("=" * 60)
        logger.info("Projecting summary and chart")
        logger.info("=" * 60)
        summary = summarize(dataset, schema)
        chart = project_chart(dataset, schema, self.settings)
        if chart is None:
            logger.info("✓ No chart: dataset has no numeric column")
        else:
            logger.info(f"✓ Chart: x='{chart.x_label}', y='{chart.y_label}', {len(chart.data)} points")

        profile = profile_dataset(dataset, schema)
        preview = build_preview(dataset, schema, self.settings)

        return AnalysisReport(
            run_id=run_id,
            source=source,
            classifications=classifications,
            summary=summary,
            chart=chart,
            profile=profile,
            preview=preview,
            settings=self.settings,
        )

    def analyze_file(self, dataset_path: str | Path) -> AnalysisReport:
        """Load a dataset file and analyse it, tracking the session state.

        Raises:
            DatasetLoadError: If the file can't be loaded or has no rows
        """
        self.session.begin(str(dataset_path))
        logger.info("=" * 60)
        logger.info(f"Loading dataset: {dataset_path}")
        logger.info("=" * 60)
        try:
            dataset = load_dataset(dataset_path)
        except DatasetLoadError as e:
            logger.error(f"✗ Dataset loading failed: {e}")
            self.session.fail(str(e))
            raise

        try:
            report = self.analyze_records(dataset, source=str(dataset_path))
        except Exception as e:
            self.session.fail(f"Analysis failed: {e}")
            raise
        self.session.complete(report)
        return report

    def write_reports(self, report: AnalysisReport) -> dict[str, Path]:
        """Write reports for a finished analysis when an output path is set.

        Raises:
            ReportGenerationError: If writing fails
        """
        if self.output_path is None:
            return {}
        generator = ReportGenerator(self.output_path, report.run_id)
        self.written_reports = generator.generate(report, self.formats)
        return self.written_reports

    def run(self, dataset_path: str | Path) -> int:
        """Run the full analysis for one file.

        Returns:
            Exit code (0 for success, non-zero for failure)
        """
        try:
            report = self.analyze_file(dataset_path)
        except DatasetLoadError:
            return EXIT_NO_DATA

        try:
            self.write_reports(report)
        except ReportGenerationError as e:
            logger.error(f"✗ Report generation failed: {e}")
            return EXIT_RUNTIME_ERROR

        logger.info("Analysis completed successfully")
        return EXIT_SUCCESS
