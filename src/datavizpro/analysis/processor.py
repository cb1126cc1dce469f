"""Analysis processor - runs all stages over one dataset.

Stages run strictly forward:
    type inference -> statistics, correlations -> chart recommendations
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from datavizpro.analysis.charts import recommend_charts
from datavizpro.analysis.correlation import detect_correlations
from datavizpro.analysis.inputs import check_column_names, check_rows
from datavizpro.analysis.models import AnalysisReport
from datavizpro.analysis.statistics import compute_statistics
from datavizpro.analysis.typing import infer_types
from datavizpro.core.config import AnalysisConfig
from datavizpro.core.logging import get_logger
from datavizpro.core.models.base import Row

logger = get_logger(__name__)


def analyze(
    rows: Sequence[Row],
    column_names: Sequence[str],
    config: AnalysisConfig | None = None,
) -> AnalysisReport:
    """Profile a dataset and recommend charts for it.

    Pure: inputs are never mutated and equal inputs give equal reports.
    Cell content never makes this fail; only a structurally invalid
    argument does.

    Args:
        rows: Parsed records (mappings of column name to scalar)
        column_names: Authoritative, ordered column names
        config: Analysis configuration (defaults apply when None)

    Returns:
        AnalysisReport

    Raises:
        InvalidDatasetError: rows or column_names is not list-shaped
    """
    check_rows(rows)
    check_column_names(column_names)
    config = config or AnalysisConfig()

    logger.debug("analysis_started", rows=len(rows), columns=len(column_names))

    column_types = infer_types(rows, column_names, config)
    logger.debug("types_inferred", types=dict(Counter(t.value for t in column_types.values())))

    statistics = compute_statistics(rows, column_types)
    correlations = detect_correlations(rows, column_types, config)
    logger.debug("correlations_detected", count=len(correlations))

    chart_recommendations = recommend_charts(column_types, statistics, correlations, config)

    logger.debug(
        "analysis_completed",
        numeric_columns=len(statistics),
        correlations=len(correlations),
        recommendations=len(chart_recommendations),
    )

    return AnalysisReport(
        column_types=column_types,
        statistics=statistics,
        correlations=correlations,
        chart_recommendations=chart_recommendations,
    )
