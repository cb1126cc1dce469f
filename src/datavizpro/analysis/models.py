"""Analysis report model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from datavizpro.analysis.charts.models import ChartRecommendation
from datavizpro.analysis.correlation.models import Correlation
from datavizpro.analysis.statistics.models import ColumnStatistics
from datavizpro.core.models.base import ColumnType


class AnalysisReport(BaseModel):
    """Complete result of one analysis run.

    Tied only to the dataset snapshot that produced it: no ID, no timestamp.
    """

    model_config = ConfigDict(frozen=True)

    column_types: dict[str, ColumnType] = Field(default_factory=dict)
    statistics: dict[str, ColumnStatistics] = Field(default_factory=dict)
    correlations: list[Correlation] = Field(default_factory=list)
    chart_recommendations: list[ChartRecommendation] = Field(default_factory=list)

    def columns_of_type(self, column_type: ColumnType) -> list[str]:
        """Column names with the given type, in dataset order."""
        return [name for name, t in self.column_types.items() if t is column_type]

    def top_recommendations(self, n: int) -> list[ChartRecommendation]:
        """The n highest-priority chart recommendations."""
        return self.chart_recommendations[: max(n, 0)]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return self.model_dump(mode="json")
