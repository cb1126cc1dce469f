"""Correlation Analysis Pydantic Models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from datavizpro.core.models.base import CorrelationDirection, CorrelationStrength


class Correlation(BaseModel):
    """Pearson correlation between two numeric columns.

    column_a precedes column_b in the dataset's column order.
    """

    model_config = ConfigDict(frozen=True)

    column_a: str
    column_b: str
    coefficient: float = Field(ge=-1.0, le=1.0)
    strength: CorrelationStrength
    direction: CorrelationDirection
    sample_size: int  # paired observations used

    @property
    def abs_coefficient(self) -> float:
        return abs(self.coefficient)

    @property
    def columns(self) -> tuple[str, str]:
        return (self.column_a, self.column_b)
