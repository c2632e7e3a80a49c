"""Tests for the analysis orchestrator."""

import pytest

from core.orchestrator import AnalysisOrchestrator
from core.session import SessionStatus
from level1_ingestion.loader import DatasetLoadError
from level2_classification.types import SemanticType
from settings.schema import ClassifierSettings, EngineSettings
from utils.constants import EXIT_NO_DATA, EXIT_SUCCESS


class TestAnalyzeRecords:
    def test_full_pass(self, sales_rows):
        report = AnalysisOrchestrator().analyze_records(sales_rows, run_id="r1")
        assert [c.type for c in report.schema] == [SemanticType.NUMBER, SemanticType.DATE]
        assert report.summary.total_rows == 2
        assert report.chart.x_label == "day"
        assert report.chart.y_label == "amount"
        assert report.preview.rows[0] == ("1,200", "1/5/2024")
        assert report.source == "<memory>"

    def test_empty_dataset(self):
        report = AnalysisOrchestrator().analyze_records([])
        assert report.schema == ()
        assert report.chart is None
        assert report.summary.total_rows == 0

    def test_settings_change_rule_order(self):
        rows = [{"bit": str(i % 2)} for i in range(10)]
        boolean_first = EngineSettings(
            classifier=ClassifierSettings(rule_order=("boolean", "number", "date", "category"))
        )
        assert AnalysisOrchestrator().analyze_records(rows).schema[0].type == SemanticType.NUMBER
        report = AnalysisOrchestrator(boolean_first).analyze_records(rows)
        assert report.schema[0].type == SemanticType.BOOLEAN


class TestAnalyzeFile:
    def test_ready_after_load(self, csv_file):
        orchestrator = AnalysisOrchestrator()
        report = orchestrator.analyze_file(csv_file)
        assert orchestrator.session.status == SessionStatus.READY
        assert orchestrator.session.report is report
        assert report.summary.total_rows == 3
        assert report.schema[0].type == SemanticType.NUMBER
        assert report.schema[1].type == SemanticType.DATE

    def test_error_after_failed_load(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("a,b\n", encoding="utf-8")
        orchestrator = AnalysisOrchestrator()
        with pytest.raises(DatasetLoadError):
            orchestrator.analyze_file(path)
        assert orchestrator.session.status == SessionStatus.ERROR
        assert orchestrator.session.error == "No rows found in the first sheet."

    def test_reload_after_error(self, tmp_path, csv_file):
        orchestrator = AnalysisOrchestrator()
        with pytest.raises(DatasetLoadError):
            orchestrator.analyze_file(tmp_path / "missing.csv")
        orchestrator.analyze_file(csv_file)
        assert orchestrator.session.is_ready
        assert orchestrator.session.error is None


class TestRun:
    def test_writes_reports(self, csv_file, tmp_path):
        output = tmp_path / "out"
        orchestrator = AnalysisOrchestrator(output_path=output)
        assert orchestrator.run(csv_file) == EXIT_SUCCESS
        assert set(orchestrator.written_reports) == {"json", "markdown"}
        for path in orchestrator.written_reports.values():
            assert path.exists()
            assert output in path.parents

    def test_no_output_path_writes_nothing(self, csv_file):
        orchestrator = AnalysisOrchestrator()
        assert orchestrator.run(csv_file) == EXIT_SUCCESS
        assert orchestrator.written_reports == {}

    def test_missing_file(self, tmp_path):
        orchestrator = AnalysisOrchestrator()
        assert orchestrator.run(tmp_path / "missing.csv") == EXIT_NO_DATA
        assert orchestrator.session.status == SessionStatus.ERROR
