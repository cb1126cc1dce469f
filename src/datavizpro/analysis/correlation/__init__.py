"""Correlation analysis module.

Pearson correlation between every pair of numeric columns, classified
by strength (weak, moderate, strong) and direction.
"""

# Algorithms (pure computation)
from datavizpro.analysis.correlation.algorithms import (
    classify_direction,
    classify_strength,
    pearson_coefficient,
)

# Detector (main entry point)
from datavizpro.analysis.correlation.detector import detect_correlations, paired_values

# Pydantic Models
from datavizpro.analysis.correlation.models import Correlation

__all__ = [
    # Main entry point
    "detect_correlations",
    "paired_values",
    # Algorithms
    "pearson_coefficient",
    "classify_strength",
    "classify_direction",
    # Models
    "Correlation",
]
