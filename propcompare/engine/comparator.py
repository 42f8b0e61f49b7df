"""Cohort comparison: how far each property sits from the cohort average.

percentage_difference = 100 * (value - mean) / mean, signed (positive = above).
Falls back to 0 when the mean is 0 or fewer than two values are present.
"""

from propcompare.models.comparison import ComparisonMetric, ScoringDimension


def _mean(values: list[float]) -> float:
    return sum(values) / len(values)


def percentage_difference(value: float, cohort_values: list[float]) -> float:
    if len(cohort_values) < 2:
        return 0.0
    mean = _mean(cohort_values)
    if mean == 0:
        return 0.0
    return 100.0 * (value - mean) / mean


def comparison_metric(
    value: float,
    cohort_values: list[float],
    higher_is_better: bool = True,
) -> ComparisonMetric:
    """Full comparison of one value against the cohort.

    rank is the ascending position of the value; is_best/is_worst respect the
    direction of the underlying attribute (lowest price is best).
    """
    ordered = sorted(cohort_values)
    rank = ordered.index(value) + 1
    lo, hi = ordered[0], ordered[-1]
    best, worst = (hi, lo) if higher_is_better else (lo, hi)
    mean = _mean(cohort_values)
    return ComparisonMetric(
        value=value,
        rank=rank,
        percentile=round(rank / len(cohort_values) * 100),
        is_best=value == best,
        is_worst=value == worst,
        difference=value - mean,
        percentage_difference=percentage_difference(value, cohort_values),
    )


def cohort_metrics(
    values: list[float | None], higher_is_better: bool = True
) -> list[ComparisonMetric | None]:
    """comparison_metric for every present value; absent values stay None."""
    present = [v for v in values if v is not None]
    return [
        None if v is None else comparison_metric(v, present, higher_is_better)
        for v in values
    ]


def dimension_differences(
    metrics: list[dict[ScoringDimension, float]],
) -> list[dict[ScoringDimension, float]]:
    """Per-property percentage difference of every dimension score vs the cohort."""
    differences: list[dict[ScoringDimension, float]] = [{} for _ in metrics]
    for dimension in ScoringDimension:
        present = [m[dimension] for m in metrics if dimension in m]
        for i, m in enumerate(metrics):
            if dimension in m:
                differences[i][dimension] = percentage_difference(m[dimension], present)
    return differences
