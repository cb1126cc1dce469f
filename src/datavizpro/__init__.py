"""DataVizPro dataset profiling engine.

Infers column types, computes descriptive statistics, detects pairwise
correlations and ranks chart types for a tabular dataset.

Example:
    from datavizpro import analyze

    report = analyze(
        [{"x": 1, "y": 2}, {"x": 2, "y": 4}, {"x": 3, "y": 6}],
        ["x", "y"],
    )
    report.column_types
    report.chart_recommendations[0].chart_type
"""

__version__ = "0.1.0"

from datavizpro.analysis import AnalysisReport, analyze
from datavizpro.core.config import AnalysisConfig
from datavizpro.core.models.base import ColumnType, InvalidDatasetError, Result

__all__ = [
    "analyze",
    "AnalysisReport",
    "AnalysisConfig",
    "ColumnType",
    "InvalidDatasetError",
    "Result",
    "__version__",
]
