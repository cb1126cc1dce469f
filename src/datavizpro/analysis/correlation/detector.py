"""Pairwise correlation detection between numeric columns."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from datavizpro.analysis.correlation.algorithms import (
    classify_direction,
    classify_strength,
    pearson_coefficient,
)
from datavizpro.analysis.correlation.models import Correlation
from datavizpro.analysis.inputs import check_column_types, check_rows
from datavizpro.analysis.typing.values import parse_number
from datavizpro.core.config import AnalysisConfig
from datavizpro.core.logging import get_logger
from datavizpro.core.models.base import ColumnType, Row

logger = get_logger(__name__)


def paired_values(
    rows: Sequence[Row],
    column_a: str,
    column_b: str,
) -> tuple[list[float], list[float]]:
    """Collect row-wise pairs where both cells parse as numbers.

    A row missing either value is left out of this pair only.
    """
    xs: list[float] = []
    ys: list[float] = []
    for row in rows:
        x = parse_number(row.get(column_a))
        if x is None:
            continue
        y = parse_number(row.get(column_b))
        if y is None:
            continue
        xs.append(x)
        ys.append(y)
    return xs, ys


def detect_correlations(
    rows: Sequence[Row],
    column_types: Mapping[str, ColumnType],
    config: AnalysisConfig | None = None,
) -> list[Correlation]:
    """Compute Pearson correlation for every pair of numeric columns.

    Pairs with fewer than ``min_paired_observations`` observations are
    skipped. Zero-variance pairs are kept with coefficient 0.

    Args:
        rows: Parsed records
        column_types: Output of type inference; its order drives pair order
        config: Analysis configuration (defaults apply when None)

    Returns:
        Correlations sorted by |coefficient| descending, ties in pair order
    """
    check_rows(rows)
    check_column_types(column_types)
    config = config or AnalysisConfig()

    numeric_columns = [name for name, t in column_types.items() if t is ColumnType.NUMERIC]
    correlations = []

    for i, col1 in enumerate(numeric_columns):
        for col2 in numeric_columns[i + 1 :]:  # Only upper triangle
            xs, ys = paired_values(rows, col1, col2)
            if len(xs) < config.min_paired_observations:
                continue

            r = pearson_coefficient(xs, ys)
            if not math.isfinite(r):
                logger.debug("correlation_skipped", columns=[col1, col2], reason="non_finite")
                continue
            correlations.append(
                Correlation(
                    column_a=col1,
                    column_b=col2,
                    coefficient=r,
                    strength=classify_strength(
                        r, config.strong_threshold, config.moderate_threshold
                    ),
                    direction=classify_direction(r),
                    sample_size=len(xs),
                )
            )

    # sorted() is stable, so equal strengths keep pair order
    return sorted(correlations, key=lambda c: c.abs_coefficient, reverse=True)
