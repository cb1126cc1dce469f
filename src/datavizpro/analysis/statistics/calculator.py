"""Descriptive statistics for numeric columns."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

import numpy as np

from datavizpro.analysis.inputs import check_column_types, check_rows
from datavizpro.analysis.statistics.models import ColumnStatistics
from datavizpro.analysis.typing.values import parse_number
from datavizpro.core.models.base import ColumnType, Row


def numeric_values(rows: Sequence[Row], column_name: str) -> list[float]:
    """Collect the values of a column that parse as finite numbers."""
    values = []
    for row in rows:
        number = parse_number(row.get(column_name))
        if number is not None:
            values.append(number)
    return values


def _mean(data: np.ndarray) -> float:
    with np.errstate(over="ignore"):
        mean = float(data.mean())
    if not math.isfinite(mean):
        # The running sum overflowed; average the pre-divided values instead
        mean = float((data / len(data)).sum())
    return min(max(mean, float(data[0])), float(data[-1]))


def _median(data: np.ndarray) -> float:
    """Median of sorted data; halves before adding so it stays in [min, max]."""
    mid = len(data) // 2
    if len(data) % 2:
        return float(data[mid])
    return float(data[mid - 1] / 2 + data[mid] / 2)


def summarize(values: Sequence[float]) -> ColumnStatistics:
    """Compute min, max, mean and median of a list of numbers.

    Args:
        values: Finite numbers, in any order

    Returns:
        ColumnStatistics (all None for an empty list)
    """
    if not values:
        return ColumnStatistics()

    data = np.sort(np.asarray(values, dtype=float))
    return ColumnStatistics(
        min=float(data[0]),
        max=float(data[-1]),
        mean=_mean(data),
        median=_median(data),
        count=len(data),
    )


def compute_statistics(
    rows: Sequence[Row],
    column_types: Mapping[str, ColumnType],
) -> dict[str, ColumnStatistics]:
    """Compute statistics for every numeric column.

    Values that do not parse are dropped; they never fail the column.

    Args:
        rows: Parsed records
        column_types: Output of type inference

    Returns:
        Mapping of numeric column name to ColumnStatistics
    """
    check_rows(rows)
    check_column_types(column_types)

    return {
        name: summarize(numeric_values(rows, name))
        for name, column_type in column_types.items()
        if column_type is ColumnType.NUMERIC
    }
