"""Cohort-relative dimension normalization.

Each scoring dimension is a registry entry: the raw feature it reads, whether
lower or higher is better, and its default weight. Scores are min-max scaled
against the cohort, so a "good price" only means good versus the other
properties being compared.

    lower better:  100 * (max - x) / (max - min)
    higher better: 100 * (x - min) / (max - min)

When every present value is identical the dimension does not differentiate
and all present properties score 100.
"""

from dataclasses import dataclass

from propcompare.engine import extractor as fx
from propcompare.models.comparison import FeatureSet, ScoringDimension


@dataclass(frozen=True)
class NormalizationRule:
    feature: str
    higher_is_better: bool
    default_weight: float
    description: str = ""


NORMALIZATION_RULES: dict[ScoringDimension, NormalizationRule] = {
    ScoringDimension.PRICE: NormalizationRule(
        fx.PRICE, False, 0.15, "Asking price"),
    ScoringDimension.VALUE: NormalizationRule(
        fx.VALUE_RATIO, True, 0.15, "Living area per dollar"),
    ScoringDimension.AFFORDABILITY: NormalizationRule(
        fx.MONTHLY_COST, False, 0.10, "Monthly carrying cost"),
    ScoringDimension.LOCATION: NormalizationRule(
        fx.LOCATION_QUALITY, True, 0.20, "Location rating and walkability"),
    ScoringDimension.NEIGHBORHOOD: NormalizationRule(
        fx.NEIGHBORHOOD_QUALITY, True, 0.10, "Schools and safety"),
    ScoringDimension.ACCESSIBILITY: NormalizationRule(
        fx.ACCESSIBILITY_QUALITY, True, 0.05, "Transit and bike access"),
    ScoringDimension.SIZE: NormalizationRule(
        fx.LIVING_AREA, True, 0.10, "Living area"),
    ScoringDimension.CONDITION: NormalizationRule(
        fx.CONDITION_POINTS, True, 0.10, "Condition rating and building age"),
    ScoringDimension.FEATURE: NormalizationRule(
        fx.FEATURE_POINTS, True, 0.05, "Features and amenities"),
    ScoringDimension.INVESTMENT: NormalizationRule(
        fx.INVESTMENT_YIELD, True, 0.10, "ROI and cap rate"),
    ScoringDimension.CASH_FLOW: NormalizationRule(
        fx.CASH_FLOW, True, 0.10, "Monthly cash flow"),
    ScoringDimension.APPRECIATION: NormalizationRule(
        fx.APPRECIATION, True, 0.10, "Historical appreciation"),
}


def min_max_scale(
    values: list[float | None], higher_is_better: bool
) -> list[float | None]:
    """Scale present values to 0-100 against the present min/max."""
    present = [v for v in values if v is not None]
    if not present:
        return [None] * len(values)

    lo, hi = min(present), max(present)
    if hi == lo:
        return [None if v is None else 100.0 for v in values]

    span = hi - lo
    scaled: list[float | None] = []
    for v in values:
        if v is None:
            scaled.append(None)
            continue
        ratio = (v - lo) / span if higher_is_better else (hi - v) / span
        scaled.append(max(0.0, min(100.0, 100.0 * ratio)))
    return scaled


def normalize(
    cohort: list[FeatureSet],
    dimension: ScoringDimension,
    rules: dict[ScoringDimension, NormalizationRule] = NORMALIZATION_RULES,
) -> list[float | None]:
    """Score one dimension for every property in the cohort.

    Properties missing the dimension's feature are left out of the min/max
    and come back as None.
    """
    rule = rules[dimension]
    raw = [features.get(rule.feature) for features in cohort]
    return min_max_scale(raw, rule.higher_is_better)


def normalize_all(
    cohort: list[FeatureSet],
    rules: dict[ScoringDimension, NormalizationRule] = NORMALIZATION_RULES,
) -> list[dict[ScoringDimension, float]]:
    """Per-property metric maps over every registered dimension."""
    metrics: list[dict[ScoringDimension, float]] = [{} for _ in cohort]
    for dimension in rules:
        for i, score in enumerate(normalize(cohort, dimension, rules)):
            if score is not None:
                metrics[i][dimension] = score
    return metrics
