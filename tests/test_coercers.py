"""Tests for single-value coercers."""

import datetime as dt
import math

import numpy as np
import pytest

from level2_classification.coercers import (
    display_string,
    is_boolean_like,
    is_date_like,
    is_numeric,
    parse_date_string,
    serial_to_timestamp,
    to_boolean_label,
    to_date_label,
    to_number,
)
from settings.schema import DateLabelStyle, SerialDateSettings


class TestIsNumeric:
    @pytest.mark.parametrize(
        "value", [3, 2.5, -1, np.int64(4), "42", " 42 ", "1,200", "-5.5", "1e3", "1,234.56"]
    )
    def test_numeric(self, value):
        assert is_numeric(value) is True

    @pytest.mark.parametrize(
        "value",
        [None, "", "   ", True, False, "abc", "12abc", float("nan"), float("inf"), "inf", "nan", "1_000", {}],
    )
    def test_not_numeric(self, value):
        assert is_numeric(value) is False


class TestIsBooleanLike:
    @pytest.mark.parametrize(
        "value", [True, False, 0, 1, 1.0, "true", "FALSE", "Yes", "no", " y ", "N", "0", "1"]
    )
    def test_boolean_like(self, value):
        assert is_boolean_like(value) is True

    @pytest.mark.parametrize("value", [2, -1, 0.5, "maybe", "", None, "truth"])
    def test_not_boolean_like(self, value):
        assert is_boolean_like(value) is False


class TestIsDateLike:
    @pytest.mark.parametrize(
        "value",
        ["2024-01-05", "Jan 5, 2024", dt.date(2024, 1, 5), dt.datetime(2024, 1, 5, 9, 30), 45000, 25000, 59999.5],
    )
    def test_date_like(self, value):
        assert is_date_like(value) is True

    @pytest.mark.parametrize("value", [None, "", "open", "hello world", True, 24999.9, 60000, 12])
    def test_not_date_like(self, value):
        assert is_date_like(value) is False

    @pytest.mark.parametrize("text", ["Jan", "3rd"])
    def test_strings_without_a_year_are_not_dates(self, text):
        assert parse_date_string(text) is None
        assert is_date_like(text) is False
        assert to_date_label(text) == text

    def test_custom_serial_window(self):
        window = SerialDateSettings(serial_min=40000, serial_max=50000)
        assert is_date_like(45000, window) is True
        assert is_date_like(30000, window) is False


class TestToNumber:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (5, 5),
            (2.5, 2.5),
            ("1,200", 1200.0),
            (" 980 ", 980.0),
            ("-3.5", -3.5),
            ("abc", 0),
            ("", 0),
            (None, 0),
            (True, 0),
            ({}, 0),
            ([1], 0),
            (float("nan"), 0),
            (float("inf"), 0),
            ("Infinity", 0),
        ],
    )
    def test_conversion(self, value, expected):
        result = to_number(value)
        assert result == expected
        assert math.isfinite(result)

    def test_numpy_scalars_become_python_numbers(self):
        assert type(to_number(np.float64(2.5))) is float
        assert type(to_number(np.int64(3))) is int


class TestToDateLabel:
    def test_iso_string(self):
        assert to_date_label("2024-01-05") == "1/5/2024"

    def test_iso_style(self):
        assert to_date_label("2024-01-05", DateLabelStyle.ISO) == "2024-01-05"

    def test_datetime(self):
        assert to_date_label(dt.datetime(2024, 3, 9, 15, 30)) == "3/9/2024"

    def test_serial(self):
        assert to_date_label(45000) == "3/15/2023"
        assert to_date_label(45000.5) == "3/15/2023"

    def test_serial_conversion_epoch(self):
        assert serial_to_timestamp(1).strftime("%Y-%m-%d") == "1899-12-31"

    def test_unparseable_falls_back_to_string(self):
        assert to_date_label("unknown") == "unknown"
        assert to_date_label(1200.0) == "1200"
        assert to_date_label(True) == "true"
        assert to_date_label(None) == ""


class TestToBooleanLabel:
    @pytest.mark.parametrize("value", ["yes", "TRUE", " y ", "1", True, 1, 1.0])
    def test_true(self, value):
        assert to_boolean_label(value) == "TRUE"

    @pytest.mark.parametrize("value", ["no", "false", "n", "0", False, 0, "maybe", None, ""])
    def test_false(self, value):
        assert to_boolean_label(value) == "FALSE"


class TestDisplayString:
    @pytest.mark.parametrize(
        "value, expected",
        [(3.0, "3"), (2.5, "2.5"), (7, "7"), ("x", "x"), (None, ""), ("", ""), (False, "false")],
    )
    def test_display(self, value, expected):
        assert display_string(value) == expected
