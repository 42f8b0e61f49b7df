"""Weighted aggregation of dimension scores into one overall score.

score = sum(weight_d * metric_d) / sum(weight_d over dimensions present)

Weights are renormalized per property, so a property missing an optional
input (no ROI, say) is scored on the dimensions it does have rather than
being dragged toward zero.
"""

import math

from propcompare.engine.errors import InvalidCriteriaError
from propcompare.engine.normalizer import NORMALIZATION_RULES, NormalizationRule
from propcompare.models.comparison import ComparisonCriteria, ScoringDimension

# Criterion groups surfaced by the comparison UI, on top of one key per dimension.
CRITERION_DIMENSIONS: dict[str, tuple[ScoringDimension, ...]] = {
    **{d.value: (d,) for d in ScoringDimension},
    "amenities": (ScoringDimension.FEATURE,),
    "features": (ScoringDimension.FEATURE,),
    "yearBuilt": (ScoringDimension.CONDITION,),
    "financial": (
        ScoringDimension.INVESTMENT,
        ScoringDimension.CASH_FLOW,
        ScoringDimension.APPRECIATION,
    ),
    "propertyType": (),  # informational only, no scoring dimension
}


def _check_weight(key: str, weight: float | None) -> None:
    if weight is None:
        return
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise InvalidCriteriaError(f"Weight for {key!r} must be a number")
    if math.isnan(weight) or weight < 0 or weight > 1:
        raise InvalidCriteriaError(f"Weight for {key!r} must be between 0 and 1, got {weight}")


def resolve_weights(
    criteria: ComparisonCriteria | None,
    rules: dict[ScoringDimension, NormalizationRule] = NORMALIZATION_RULES,
) -> dict[ScoringDimension, float]:
    """Turn criteria into per-dimension weights for the enabled dimensions.

    No explicit weights: every enabled dimension gets weight 1.0, counted once
    even when several enabled keys cover it. If any enabled criterion carries
    a weight, that weight is split across the dimensions it covers and
    enabled dimensions left without one fall back to their default weight.
    """
    if criteria is None:
        criteria = ComparisonCriteria.all_enabled()

    for key, criterion in criteria.criteria.items():
        if key not in CRITERION_DIMENSIONS:
            raise InvalidCriteriaError(f"Unknown comparison criterion {key!r}")
        _check_weight(key, criterion.weight)

    enabled = {k: c for k, c in criteria.criteria.items() if c.enabled}
    dimensions = {d for key in enabled for d in CRITERION_DIMENSIONS[key]}
    if not dimensions:
        raise InvalidCriteriaError("At least one scoring dimension must be enabled")

    weights: dict[ScoringDimension, float] = {}
    if any(c.weight is not None for c in enabled.values()):
        for key, criterion in enabled.items():
            dims = CRITERION_DIMENSIONS[key]
            if criterion.weight is None or not dims:
                continue
            for d in dims:
                weights[d] = weights.get(d, 0.0) + float(criterion.weight) / len(dims)
        for d in dimensions - weights.keys():
            weights[d] = rules[d].default_weight
    else:
        weights = {d: 1.0 for d in dimensions}

    if sum(weights.values()) <= 0:
        raise InvalidCriteriaError("Total criteria weight must be greater than zero")

    return {d: weights[d] for d in ScoringDimension if d in weights}


def aggregate(
    metrics: dict[ScoringDimension, float],
    weights: dict[ScoringDimension, float],
) -> float:
    """Weighted mean of the enabled dimensions present for one property, unrounded."""
    total_weight = 0.0
    total = 0.0
    for dimension, weight in weights.items():
        score = metrics.get(dimension)
        if score is None:
            continue
        total += weight * score
        total_weight += weight
    if total_weight == 0:
        return 0.0
    return total / total_weight


def overall_score(score: float) -> int:
    """Final 0-100 integer score, round-half-to-even."""
    return max(0, min(100, round(score)))
