"""Pure correlation algorithms.

These functions operate on numpy arrays and plain floats.
No records, no Pydantic models - just math.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from datavizpro.core.models.base import CorrelationDirection, CorrelationStrength


def _rescale(values: np.ndarray) -> np.ndarray:
    # r is scale-invariant; dividing by the peak keeps squares in range
    peak = float(np.abs(values).max()) if len(values) else 0.0
    return values / peak if peak > 0 else values


def pearson_coefficient(xs: Sequence[float], ys: Sequence[float]) -> float:
    """Pearson correlation coefficient on mean-centred data.

    r = Σ(dx·dy) / sqrt(Σdx² · Σdy²), with dx = x − mean(x)

    Each variable is first divided by its largest magnitude, so finite
    inputs near the float range do not overflow. Returns 0.0 when either
    variable has zero variance and NaN when the result is not finite;
    otherwise the result is clamped to [-1, 1].

    Args:
        xs: First variable
        ys: Second variable, same length as xs

    Returns:
        Correlation coefficient
    """
    x = _rescale(np.asarray(xs, dtype=float))
    y = _rescale(np.asarray(ys, dtype=float))
    if len(x) == 0:
        return 0.0

    dx = x - x.mean()
    dy = y - y.mean()

    numerator = float((dx * dy).sum())
    denominator = math.sqrt(float((dx * dx).sum()) * float((dy * dy).sum()))

    if denominator == 0:
        return 0.0

    r = numerator / denominator
    if not math.isfinite(r):
        return math.nan
    return max(-1.0, min(1.0, r))


def classify_strength(
    r: float,
    strong_threshold: float = 0.7,
    moderate_threshold: float = 0.5,
) -> CorrelationStrength:
    """Classify correlation strength by absolute value."""
    abs_r = abs(r)
    if abs_r >= strong_threshold:
        return CorrelationStrength.STRONG
    elif abs_r >= moderate_threshold:
        return CorrelationStrength.MODERATE
    return CorrelationStrength.WEAK


def classify_direction(r: float) -> CorrelationDirection:
    """Zero counts as positive."""
    return CorrelationDirection.POSITIVE if r >= 0 else CorrelationDirection.NEGATIVE
