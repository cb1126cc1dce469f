"""Dataset profiling and chart recommendation.

Main entry point:
- analyze: type inference, statistics, correlations and chart ranking
"""

from datavizpro.analysis.models import AnalysisReport
from datavizpro.analysis.processor import analyze

__all__ = [
    "analyze",
    "AnalysisReport",
]
