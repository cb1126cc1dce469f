"""Configuration management.

Two layers:
- AnalysisConfig: explicit, immutable thresholds passed into ``analyze``.
  The engine never reads ambient configuration on its own.
- Settings: pydantic-settings for environment-driven defaults, read only
  by the command line front end.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from datavizpro.core.models.base import ChartType, ColumnType

# Types that have a value test. STRING is the fallback and UNKNOWN means no evidence.
TYPED_COLUMN_TYPES = (ColumnType.BOOLEAN, ColumnType.DATE, ColumnType.NUMERIC)

DEFAULT_CHART_PRIORITIES: dict[ChartType, float] = {
    ChartType.HISTOGRAM: 0.8,
    ChartType.BOXPLOT: 0.7,
    ChartType.PIE: 0.6,
    ChartType.BAR: 0.7,
    ChartType.LINE: 0.9,
    ChartType.GROUPED_BAR: 0.8,
}


class AnalysisConfig(BaseModel):
    """Thresholds and priorities for one analysis run."""

    model_config = ConfigDict(frozen=True)

    # Type inference
    type_priority: tuple[ColumnType, ...] = Field(
        default=TYPED_COLUMN_TYPES,
        description="Typed rules in the order they win when several still hold",
    )
    patterns_path: Path | None = Field(
        default=None,
        description="Override for the bundled value pattern YAML",
    )

    # Correlation
    strong_threshold: float = Field(default=0.7, ge=0.0, le=1.0)
    moderate_threshold: float = Field(default=0.5, ge=0.0, le=1.0)
    min_paired_observations: int = Field(default=2, ge=2)

    # Chart recommendation
    chart_priorities: dict[ChartType, float] = Field(
        default_factory=lambda: dict(DEFAULT_CHART_PRIORITIES),
    )
    scatter_min_coefficient: float = Field(default=0.5, ge=0.0, le=1.0)
    scatter_base_priority: float = 0.9
    scatter_coefficient_weight: float = 0.1

    @field_validator("type_priority")
    @classmethod
    def _check_type_priority(cls, value: tuple[ColumnType, ...]) -> tuple[ColumnType, ...]:
        if len(set(value)) != len(value):
            raise ValueError("type_priority must not contain duplicates")
        invalid = [t.value for t in value if t not in TYPED_COLUMN_TYPES]
        if invalid:
            raise ValueError(f"type_priority only accepts boolean, date, numeric; got {invalid}")
        return value

    @field_validator("chart_priorities")
    @classmethod
    def _fill_chart_priorities(cls, value: dict[ChartType, float]) -> dict[ChartType, float]:
        # Partial overrides keep the defaults for the remaining chart types
        return {**DEFAULT_CHART_PRIORITIES, **value}

    @model_validator(mode="after")
    def _check_thresholds(self) -> AnalysisConfig:
        if self.moderate_threshold > self.strong_threshold:
            raise ValueError("moderate_threshold must not exceed strong_threshold")
        return self

    def chart_priority(self, chart_type: ChartType) -> float:
        """Base priority for a non-correlation chart type."""
        return self.chart_priorities[chart_type]


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: DATAVIZPRO_
    """

    model_config = SettingsConfigDict(
        env_prefix="DATAVIZPRO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="console")  # 'json' or 'console'

    # Ingestion
    sample_rows: int = Field(
        default=0,
        ge=0,
        description="Number of leading rows to analyze (0 = all)",
    )

    # Analysis overrides
    patterns_path: Path | None = Field(default=None)
    strong_threshold: float = Field(default=0.7)
    moderate_threshold: float = Field(default=0.5)
    scatter_min_coefficient: float = Field(default=0.5)

    def to_analysis_config(self) -> AnalysisConfig:
        """Build the explicit engine configuration from these settings."""
        return AnalysisConfig(
            patterns_path=self.patterns_path,
            strong_threshold=self.strong_threshold,
            moderate_threshold=self.moderate_threshold,
            scatter_min_coefficient=self.scatter_min_coefficient,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
