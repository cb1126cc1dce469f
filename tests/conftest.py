"""Shared pytest fixtures for all tests."""

import pytest

from datavizpro.core.logging import configure_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    """Bind logging to the current test's stderr at a quiet level.

    The CLI reconfigures logging against the runner's streams, so each
    test starts from a fresh configuration.
    """
    configure_logging(log_level="WARNING", show_timestamps=False, color=False)
    yield


@pytest.fixture
def correlated_rows():
    """y = 2x, perfectly correlated."""
    return [{"x": 1, "y": 2}, {"x": 2, "y": 4}, {"x": 3, "y": 6}]


@pytest.fixture
def people_rows():
    """String and numeric-string columns."""
    return [{"name": "Alice", "age": "30"}, {"name": "Bob", "age": "25"}]


@pytest.fixture
def sales_rows():
    """Date, categorical, numeric and boolean columns with one blank cell."""
    return [
        {"date": "2024-01-01", "region": "North", "revenue": "100", "units": "10", "active": "yes"},
        {"date": "2024-01-02", "region": "South", "revenue": "200", "units": "20", "active": "no"},
        {"date": "2024-01-03", "region": "North", "revenue": "150", "units": "15", "active": "yes"},
        {"date": "2024-01-04", "region": "East", "revenue": "", "units": "12", "active": "no"},
    ]


@pytest.fixture
def sales_columns():
    return ["date", "region", "revenue", "units", "active"]
