"""Shared fixtures for SheetSense tests."""

import pytest


@pytest.fixture
def sales_rows():
    """Two rows with a comma-grouped amount and ISO dates."""
    return [
        {"amount": "1,200", "day": "2024-01-05"},
        {"amount": "980", "day": "2024-01-06"},
    ]


@pytest.fixture
def status_rows():
    """Thirty rows alternating between two status values."""
    return [{"status": "open" if i % 2 == 0 else "closed"} for i in range(30)]


@pytest.fixture
def flag_rows():
    return [{"flag": "yes" if i % 3 else "no"} for i in range(12)]


@pytest.fixture
def mixed_rows():
    """A numeric, a category and an all-blank column."""
    regions = ["north", "south", "east", "west"]
    return [
        {"region": regions[i % 4], "units": i * 10, "notes": ""}
        for i in range(20)
    ]


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "sales.csv"
    path.write_text(
        "amount,day,region,comment\n"
        '"1,200",2024-01-05,north,\n'
        "980,2024-01-06,south,late delivery\n"
        "450,2024-01-07,north,\n",
        encoding="utf-8",
    )
    return path
