"""Statistical profiling module.

Computes min, max, mean and median for numeric columns.
"""

from datavizpro.analysis.statistics.calculator import (
    compute_statistics,
    numeric_values,
    summarize,
)
from datavizpro.analysis.statistics.models import ColumnStatistics

__all__ = [
    "compute_statistics",
    "numeric_values",
    "summarize",
    "ColumnStatistics",
]
