"""Chart recommendation module."""

from datavizpro.analysis.charts.models import ChartRecommendation
from datavizpro.analysis.charts.recommender import recommend_charts

__all__ = [
    "recommend_charts",
    "ChartRecommendation",
]
