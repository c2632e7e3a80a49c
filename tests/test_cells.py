"""Tests for raw cell kinds."""

import datetime as dt

import numpy as np
import pandas as pd
import pytest

from level1_ingestion.cells import CellKind, as_timestamp, cell_kind, is_blank


class TestCellKind:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, CellKind.ABSENT),
            (float("nan"), CellKind.ABSENT),
            (np.float64("nan"), CellKind.ABSENT),
            (pd.NaT, CellKind.ABSENT),
            ("", CellKind.EMPTY),
            (" ", CellKind.STRING),
            ("open", CellKind.STRING),
            (True, CellKind.BOOLEAN),
            (np.bool_(False), CellKind.BOOLEAN),
            (0, CellKind.NUMBER),
            (2.5, CellKind.NUMBER),
            (np.int64(7), CellKind.NUMBER),
            (float("inf"), CellKind.NUMBER),
            (dt.date(2024, 1, 5), CellKind.DATE),
            (dt.datetime(2024, 1, 5, 12, 0), CellKind.DATE),
            (pd.Timestamp("2024-01-05"), CellKind.DATE),
            (np.datetime64("2024-01-05"), CellKind.DATE),
            ({"nested": 1}, CellKind.STRING),
            ([1, 2], CellKind.STRING),
        ],
    )
    def test_kinds(self, value, expected):
        assert cell_kind(value) == expected

    def test_booleans_are_not_numbers(self):
        # bool subclasses int; the kind must still be BOOLEAN
        assert cell_kind(1) == CellKind.NUMBER
        assert cell_kind(True) == CellKind.BOOLEAN

    def test_blank(self):
        assert is_blank(None)
        assert is_blank("")
        assert is_blank(float("nan"))
        assert not is_blank(" ")
        assert not is_blank(0)
        assert not is_blank(False)


class TestAsTimestamp:
    def test_converts_date(self):
        assert as_timestamp(dt.date(2024, 1, 5)) == pd.Timestamp("2024-01-05")

    def test_keeps_timestamp(self):
        ts = pd.Timestamp("2023-03-15 10:30")
        assert as_timestamp(ts) == ts
