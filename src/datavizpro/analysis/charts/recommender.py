"""Chart recommendation from column types, statistics and correlations.

Rules, appended in this order before a stable sort by priority:
1. numeric column             -> histogram, boxplot
2. categorical column         -> pie, bar
3. (date, numeric) pair       -> line
4. (numeric, categorical) pair -> grouped bar
5. correlation above the scatter threshold -> scatter
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from datavizpro.analysis.charts.models import ChartRecommendation
from datavizpro.analysis.correlation.models import Correlation
from datavizpro.analysis.inputs import check_column_types
from datavizpro.analysis.statistics.models import ColumnStatistics
from datavizpro.core.config import AnalysisConfig
from datavizpro.core.models.base import ChartType, ColumnType


def _range_suffix(stats: ColumnStatistics | None) -> str:
    if stats is None or stats.min is None or stats.max is None:
        return ""
    return f" (range {stats.min:g} to {stats.max:g})"


def _single_column_charts(
    numeric: list[str],
    categorical: list[str],
    statistics: Mapping[str, ColumnStatistics],
    config: AnalysisConfig,
) -> list[ChartRecommendation]:
    charts = []
    for column in numeric:
        charts.append(
            ChartRecommendation(
                chart_type=ChartType.HISTOGRAM,
                columns=[column],
                reason=f"Distribution of values in {column}{_range_suffix(statistics.get(column))}",
                priority=config.chart_priority(ChartType.HISTOGRAM),
            )
        )
        charts.append(
            ChartRecommendation(
                chart_type=ChartType.BOXPLOT,
                columns=[column],
                reason=f"Spread, median and outliers of {column}",
                priority=config.chart_priority(ChartType.BOXPLOT),
            )
        )

    for column in categorical:
        charts.append(
            ChartRecommendation(
                chart_type=ChartType.PIE,
                columns=[column],
                reason=f"Share of each category in {column}",
                priority=config.chart_priority(ChartType.PIE),
            )
        )
        charts.append(
            ChartRecommendation(
                chart_type=ChartType.BAR,
                columns=[column],
                reason=f"Number of records per category in {column}",
                priority=config.chart_priority(ChartType.BAR),
            )
        )
    return charts


def _pair_charts(
    numeric: list[str],
    categorical: list[str],
    dates: list[str],
    config: AnalysisConfig,
) -> list[ChartRecommendation]:
    charts = []
    for date_column in dates:
        for column in numeric:
            charts.append(
                ChartRecommendation(
                    chart_type=ChartType.LINE,
                    columns=[date_column, column],
                    reason=f"Tracks {column} over time along {date_column}",
                    priority=config.chart_priority(ChartType.LINE),
                )
            )

    for column in numeric:
        for category in categorical:
            charts.append(
                ChartRecommendation(
                    chart_type=ChartType.GROUPED_BAR,
                    columns=[category, column],
                    reason=f"Compares {column} across the categories of {category}",
                    priority=config.chart_priority(ChartType.GROUPED_BAR),
                )
            )
    return charts


def _scatter_charts(
    correlations: Sequence[Correlation],
    config: AnalysisConfig,
) -> list[ChartRecommendation]:
    charts = []
    for corr in correlations:
        if corr.abs_coefficient < config.scatter_min_coefficient:
            continue
        charts.append(
            ChartRecommendation(
                chart_type=ChartType.SCATTER,
                columns=[corr.column_a, corr.column_b],
                reason=(
                    f"{corr.strength.value.capitalize()} {corr.direction.value} correlation "
                    f"({corr.coefficient:.2f}) between {corr.column_a} and {corr.column_b}"
                ),
                priority=config.scatter_base_priority
                + corr.abs_coefficient * config.scatter_coefficient_weight,
            )
        )
    return charts


def recommend_charts(
    column_types: Mapping[str, ColumnType],
    statistics: Mapping[str, ColumnStatistics],
    correlations: Sequence[Correlation],
    config: AnalysisConfig | None = None,
) -> list[ChartRecommendation]:
    """Rank chart types likely to reveal structure in the data.

    Never fails; fewer signal sources just yield fewer recommendations.

    Args:
        column_types: Output of type inference
        statistics: Output of the statistics stage, used in reasons
        correlations: Output of the correlation stage
        config: Analysis configuration (defaults apply when None)

    Returns:
        Recommendations sorted by priority descending, ties in emission order
    """
    check_column_types(column_types)
    config = config or AnalysisConfig()

    numeric = [name for name, t in column_types.items() if t is ColumnType.NUMERIC]
    categorical = [name for name, t in column_types.items() if t.is_categorical]
    dates = [name for name, t in column_types.items() if t is ColumnType.DATE]

    charts = _single_column_charts(numeric, categorical, statistics, config)
    charts.extend(_pair_charts(numeric, categorical, dates, config))
    charts.extend(_scatter_charts(correlations, config))

    return sorted(charts, key=lambda c: c.priority, reverse=True)
