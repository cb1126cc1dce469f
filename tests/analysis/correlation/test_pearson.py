"""Tests for correlation algorithms and detection."""

import math

import pytest

from datavizpro.analysis.correlation import (
    classify_direction,
    classify_strength,
    detect_correlations,
    paired_values,
    pearson_coefficient,
)
from datavizpro.core.config import AnalysisConfig
from datavizpro.core.models.base import (
    ColumnType,
    CorrelationDirection,
    CorrelationStrength,
    InvalidDatasetError,
)

NUMERIC = ColumnType.NUMERIC


class TestPearsonCoefficient:
    """Tests for the pure coefficient computation."""

    def test_perfect_positive(self):
        assert pearson_coefficient([1, 2, 3], [2, 4, 6]) == pytest.approx(1.0)

    def test_perfect_negative(self):
        assert pearson_coefficient([1, 2, 3, 4], [8, 6, 4, 2]) == pytest.approx(-1.0)

    def test_moderate(self):
        assert pearson_coefficient([1, 2, 3, 4, 5], [3, 1, 2, 5, 4]) == pytest.approx(0.6)

    def test_weak(self):
        assert pearson_coefficient([1, 2, 3, 4, 5], [3, 1, 5, 2, 4]) == pytest.approx(0.3)

    def test_zero_variance_is_zero(self):
        assert pearson_coefficient([5, 5, 5], [1, 2, 3]) == 0.0
        assert pearson_coefficient([1, 2, 3], [4, 4, 4]) == 0.0

    def test_two_points(self):
        assert pearson_coefficient([1, 2], [10, 5]) == pytest.approx(-1.0)

    def test_bounded(self):
        r = pearson_coefficient([0.1, 0.2, 0.3], [0.3, 0.6, 0.9])
        assert -1.0 <= r <= 1.0

    def test_large_magnitudes(self):
        """Finite values near 1e200 give the same r as their scaled-down copies."""
        xs = [1e200, 2e200, 3e200]
        ys = [3e200, 1e200, 2e200]
        assert pearson_coefficient(xs, ys) == pytest.approx(-0.5)
        scaled = pearson_coefficient([1, 2, 3], [3, 1, 2])
        assert pearson_coefficient(xs, ys) == pytest.approx(scaled)

    def test_near_float_max(self):
        r = pearson_coefficient([1.7e308, -1.7e308, 1.0e308], [1.0, -1.0, 0.5])
        assert -1.0 <= r <= 1.0

    def test_empty(self):
        assert pearson_coefficient([], []) == 0.0


class TestClassification:
    """Tests for strength and direction labels."""

    @pytest.mark.parametrize(
        ("r", "expected"),
        [
            (0.7, CorrelationStrength.STRONG),
            (-0.95, CorrelationStrength.STRONG),
            (0.5, CorrelationStrength.MODERATE),
            (-0.69, CorrelationStrength.MODERATE),
            (0.49, CorrelationStrength.WEAK),
            (0.0, CorrelationStrength.WEAK),
        ],
    )
    def test_strength(self, r, expected):
        assert classify_strength(r) is expected

    def test_custom_thresholds(self):
        assert classify_strength(0.75, strong_threshold=0.8, moderate_threshold=0.6) is (
            CorrelationStrength.MODERATE
        )

    def test_direction(self):
        assert classify_direction(0.0) is CorrelationDirection.POSITIVE
        assert classify_direction(0.3) is CorrelationDirection.POSITIVE
        assert classify_direction(-0.3) is CorrelationDirection.NEGATIVE


class TestPairedValues:
    """Tests for row-wise pairing."""

    def test_rows_missing_either_value_excluded(self):
        rows = [
            {"a": "1", "b": "10"},
            {"a": "2", "b": None},
            {"a": "x", "b": "30"},
            {"b": "40"},
            {"a": "5", "b": "50"},
        ]
        assert paired_values(rows, "a", "b") == ([1.0, 5.0], [10.0, 50.0])


class TestDetectCorrelations:
    """Tests for detect_correlations."""

    def test_perfect_correlation(self, correlated_rows):
        correlations = detect_correlations(correlated_rows, {"x": NUMERIC, "y": NUMERIC})

        assert len(correlations) == 1
        corr = correlations[0]
        assert (corr.column_a, corr.column_b) == ("x", "y")
        assert corr.coefficient == pytest.approx(1.0)
        assert corr.strength is CorrelationStrength.STRONG
        assert corr.direction is CorrelationDirection.POSITIVE
        assert corr.sample_size == 3

    def test_zero_variance_pair_is_emitted(self):
        rows = [{"x": 5, "y": 1}, {"x": 5, "y": 2}, {"x": 5, "y": 3}]
        correlations = detect_correlations(rows, {"x": NUMERIC, "y": NUMERIC})

        assert len(correlations) == 1
        assert correlations[0].coefficient == 0
        assert correlations[0].strength is CorrelationStrength.WEAK
        assert correlations[0].direction is CorrelationDirection.POSITIVE

    def test_insufficient_pairs_skipped(self):
        rows = [{"a": "10"}, {"a": "20"}, {"b": "30"}, {"b": "40"}, {"a": "1", "b": "2"}]
        assert detect_correlations(rows, {"a": NUMERIC, "b": NUMERIC}) == []

    def test_non_numeric_columns_ignored(self, sales_rows):
        types = {
            "date": ColumnType.DATE,
            "region": ColumnType.STRING,
            "revenue": NUMERIC,
            "units": NUMERIC,
            "active": ColumnType.BOOLEAN,
        }
        correlations = detect_correlations(sales_rows, types)
        assert [(c.column_a, c.column_b) for c in correlations] == [("revenue", "units")]
        assert correlations[0].sample_size == 3

    def test_sorted_by_absolute_coefficient(self):
        rows = [
            {"a": 1, "b": 3, "c": 5},
            {"a": 2, "b": 1, "c": 4},
            {"a": 3, "b": 2, "c": 3},
            {"a": 4, "b": 5, "c": 2},
            {"a": 5, "b": 4, "c": 1},
        ]
        correlations = detect_correlations(rows, {"a": NUMERIC, "b": NUMERIC, "c": NUMERIC})

        magnitudes = [abs(c.coefficient) for c in correlations]
        assert magnitudes == sorted(magnitudes, reverse=True)
        first = correlations[0]
        assert (first.column_a, first.column_b) == ("a", "c")
        assert first.direction is CorrelationDirection.NEGATIVE

    def test_ties_keep_pair_order(self):
        rows = [{"x": 1, "y": 2, "z": 3}, {"x": 2, "y": 4, "z": 6}, {"x": 3, "y": 6, "z": 9}]
        correlations = detect_correlations(rows, {"x": NUMERIC, "y": NUMERIC, "z": NUMERIC})
        assert [(c.column_a, c.column_b) for c in correlations] == [
            ("x", "y"),
            ("x", "z"),
            ("y", "z"),
        ]

    def test_no_self_or_mirrored_pairs(self):
        rows = [{"a": i, "b": i * i, "c": 10 - i, "d": i % 3} for i in range(10)]
        types = {name: NUMERIC for name in "abcd"}
        correlations = detect_correlations(rows, types)

        pairs = [frozenset((c.column_a, c.column_b)) for c in correlations]
        assert len(pairs) == len(set(pairs)) == 6
        assert all(c.column_a != c.column_b for c in correlations)
        assert all(-1.0 <= c.coefficient <= 1.0 for c in correlations)

    def test_min_paired_observations_config(self, correlated_rows):
        config = AnalysisConfig(min_paired_observations=4)
        assert detect_correlations(correlated_rows, {"x": NUMERIC, "y": NUMERIC}, config) == []

    def test_large_magnitude_pair(self):
        rows = [{"x": 1e200, "y": 3e200}, {"x": 2e200, "y": 1e200}, {"x": 3e200, "y": 2e200}]

        (corr,) = detect_correlations(rows, {"x": NUMERIC, "y": NUMERIC})

        assert corr.coefficient == pytest.approx(-0.5)
        assert corr.direction is CorrelationDirection.NEGATIVE

    def test_non_finite_coefficient_skipped(self, correlated_rows, monkeypatch):
        monkeypatch.setattr(
            "datavizpro.analysis.correlation.detector.pearson_coefficient",
            lambda xs, ys: math.nan,
        )
        assert detect_correlations(correlated_rows, {"x": NUMERIC, "y": NUMERIC}) == []

    def test_invalid_rows(self):
        with pytest.raises(InvalidDatasetError):
            detect_correlations({"x": [1, 2]}, {"x": NUMERIC})
