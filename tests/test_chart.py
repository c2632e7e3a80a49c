"""Tests for the default chart projection."""

import pytest

from level2_classification.classifier import classify
from level2_classification.types import ColumnSchema, SemanticType
from level3_projection.chart import ChartPoint, project_chart, select_axes
from settings.schema import DateLabelStyle, DisplaySettings, EngineSettings


class TestProjectChart:
    def test_amount_by_day(self, sales_rows):
        chart = project_chart(sales_rows, classify(sales_rows))

        assert chart.x_label == "day"
        assert chart.y_label == "amount"
        assert chart.data == (
            ChartPoint(x="1/5/2024", y=1200.0),
            ChartPoint(x="1/6/2024", y=980.0),
        )

    def test_iso_date_labels(self, sales_rows):
        settings = EngineSettings(display=DisplaySettings(date_label_style=DateLabelStyle.ISO))
        chart = project_chart(sales_rows, classify(sales_rows), settings)
        assert [point.x for point in chart.data] == ["2024-01-05", "2024-01-06"]

    def test_no_numeric_column(self, status_rows):
        assert project_chart(status_rows, classify(status_rows)) is None

    def test_empty_dataset(self):
        assert project_chart([], ()) is None

    def test_one_point_per_row_in_order(self, mixed_rows):
        chart = project_chart(mixed_rows, classify(mixed_rows))
        assert len(chart.data) == len(mixed_rows)
        assert [point.y for point in chart.data] == [row["units"] for row in mixed_rows]
        assert [point.x for point in chart.data] == [row["region"] for row in mixed_rows]

    def test_blank_x_gets_row_label(self):
        rows = [
            {"region": "north", "units": 1},
            {"region": "", "units": 2},
            {"units": 3},
        ]
        schema = (
            ColumnSchema("region", SemanticType.CATEGORY),
            ColumnSchema("units", SemanticType.NUMBER),
        )
        chart = project_chart(rows, schema)
        assert [point.x for point in chart.data] == ["north", "Row 2", "Row 3"]

    def test_non_numeric_y_is_zero(self):
        rows = [{"label": "a", "value": "12"}, {"label": "b", "value": "n/a"}, {"label": "c"}]
        schema = (
            ColumnSchema("label", SemanticType.TEXT),
            ColumnSchema("value", SemanticType.NUMBER),
        )
        chart = project_chart(rows, schema)
        assert [point.y for point in chart.data] == [12.0, 0, 0]

    def test_falls_back_to_first_column(self):
        rows = [{"a": 1, "b": 10}, {"a": 2, "b": 20}]
        schema = classify(rows)
        chart = project_chart(rows, schema)
        assert chart.x_label == "a"
        assert chart.y_label == "a"
        assert [point.x for point in chart.data] == [1, 2]

    def test_zero_and_false_x_get_row_labels(self):
        rows = [{"label": 0, "value": 5}, {"label": False, "value": 6}, {"label": 0.0, "value": 7}]
        schema = (
            ColumnSchema("label", SemanticType.TEXT),
            ColumnSchema("value", SemanticType.NUMBER),
        )
        chart = project_chart(rows, schema)
        assert [point.x for point in chart.data] == ["Row 1", "Row 2", "Row 3"]

    def test_true_x_is_rendered(self):
        rows = [{"label": True, "value": 5}]
        schema = (
            ColumnSchema("label", SemanticType.TEXT),
            ColumnSchema("value", SemanticType.NUMBER),
        )
        assert project_chart(rows, schema).data[0].x == "true"

    @pytest.mark.parametrize(
        "rows",
        [
            [{"status": "open"}, {"status": "closed"}],
            [{"n": "1"}, {"n": "2"}],
            [{"blank": ""}],
        ],
    )
    def test_none_only_without_number_column(self, rows):
        schema = classify(rows)
        has_number = any(column.type == SemanticType.NUMBER for column in schema)
        assert (project_chart(rows, schema) is None) == (not has_number)


class TestSelectAxes:
    def test_first_dimension_and_number(self):
        schema = (
            ColumnSchema("id", SemanticType.NUMBER),
            ColumnSchema("flag", SemanticType.BOOLEAN),
            ColumnSchema("name", SemanticType.TEXT),
            ColumnSchema("when", SemanticType.DATE),
        )
        assert select_axes([{}], schema) == ("name", "id")
