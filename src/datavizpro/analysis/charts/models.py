"""Chart Recommendation Pydantic Models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from datavizpro.core.models.base import ChartType


class ChartRecommendation(BaseModel):
    """A suggested visualization for the presentation layer."""

    model_config = ConfigDict(frozen=True)

    chart_type: ChartType
    columns: list[str] = Field(min_length=1, max_length=2)
    reason: str
    priority: float  # correlation-driven scatter plots may exceed 1.0
