"""Tests for cohort percentage comparisons."""

import pytest

from propcompare.engine.comparator import (
    cohort_metrics,
    comparison_metric,
    dimension_differences,
    percentage_difference,
)
from propcompare.models.comparison import ScoringDimension


class TestPercentageDifference:
    def test_above_average(self):
        """Cohort mean $350K, property at $420K → +20%."""
        assert percentage_difference(420000.0, [280000.0, 420000.0]) == pytest.approx(20.0)

    def test_below_average(self):
        assert percentage_difference(280000.0, [280000.0, 420000.0]) == pytest.approx(-20.0)

    def test_singleton_is_zero(self):
        assert percentage_difference(5.0, [5.0]) == 0.0

    def test_zero_mean_is_zero(self):
        assert percentage_difference(0.0, [0.0, 0.0]) == 0.0

    def test_identical_values_is_zero(self):
        assert percentage_difference(100.0, [100.0, 100.0]) == 0.0


class TestComparisonMetric:
    def test_higher_is_better(self):
        metric = comparison_metric(100.0, [100.0, 200.0, 300.0])
        assert metric.rank == 1
        assert metric.percentile == 33
        assert metric.is_worst
        assert not metric.is_best
        assert metric.difference == -100.0
        assert metric.percentage_difference == pytest.approx(-50.0)

    def test_lower_is_better(self):
        metric = comparison_metric(100.0, [100.0, 200.0, 300.0], higher_is_better=False)
        assert metric.is_best
        assert not metric.is_worst

    def test_cohort_metrics_skips_absent(self):
        metrics = cohort_metrics([None, 10.0, 30.0])
        assert metrics[0] is None
        assert metrics[1].percentage_difference == pytest.approx(-50.0)
        assert metrics[2].is_best


class TestDimensionDifferences:
    def test_per_dimension(self):
        metrics = [
            {ScoringDimension.PRICE: 100.0, ScoringDimension.SIZE: 0.0},
            {ScoringDimension.PRICE: 0.0, ScoringDimension.SIZE: 100.0},
        ]
        diffs = dimension_differences(metrics)
        assert diffs[0] == {ScoringDimension.PRICE: 100.0, ScoringDimension.SIZE: -100.0}
        assert diffs[1] == {ScoringDimension.PRICE: -100.0, ScoringDimension.SIZE: 100.0}

    def test_dimension_present_once_is_zero(self):
        metrics = [{ScoringDimension.INVESTMENT: 100.0}, {}]
        assert dimension_differences(metrics) == [{ScoringDimension.INVESTMENT: 0.0}, {}]
