"""Strength / weakness phrases from cohort-relative dimension scores.

A dimension is a strength when it is among the property's top N dimensions
by deviation from the cohort average, scores at least the strength floor and
sits above average by at least the minimum deviation. Weaknesses mirror that
from the bottom. The deviation threshold keeps homogeneous cohorts (where
every score is 100) from producing a strength for every property.
"""

from propcompare.models.comparison import ScoringDimension

STRENGTH_TEMPLATES: dict[ScoringDimension, str] = {
    ScoringDimension.PRICE: "Below-average price for the comparison set",
    ScoringDimension.VALUE: "More living space per dollar than comparable properties",
    ScoringDimension.AFFORDABILITY: "Lower monthly carrying cost",
    ScoringDimension.LOCATION: "Highly rated location",
    ScoringDimension.NEIGHBORHOOD: "Strong schools and safety in the neighborhood",
    ScoringDimension.ACCESSIBILITY: "Good transit and bike access",
    ScoringDimension.SIZE: "Larger than comparable properties",
    ScoringDimension.CONDITION: "Better condition than comparable properties",
    ScoringDimension.FEATURE: "More features and amenities",
    ScoringDimension.INVESTMENT: "Above-average investment yield",
    ScoringDimension.CASH_FLOW: "Stronger monthly cash flow",
    ScoringDimension.APPRECIATION: "Above-average historical appreciation",
}

WEAKNESS_TEMPLATES: dict[ScoringDimension, str] = {
    ScoringDimension.PRICE: "Above-average price for the comparison set",
    ScoringDimension.VALUE: "Less living space per dollar than comparable properties",
    ScoringDimension.AFFORDABILITY: "Higher monthly carrying cost",
    ScoringDimension.LOCATION: "Lower rated location",
    ScoringDimension.NEIGHBORHOOD: "Weaker schools or safety in the neighborhood",
    ScoringDimension.ACCESSIBILITY: "Limited transit and bike access",
    ScoringDimension.SIZE: "Smaller than comparable properties",
    ScoringDimension.CONDITION: "Worse condition than comparable properties",
    ScoringDimension.FEATURE: "Fewer features and amenities",
    ScoringDimension.INVESTMENT: "Below-average investment yield",
    ScoringDimension.CASH_FLOW: "Weaker monthly cash flow",
    ScoringDimension.APPRECIATION: "Below-average historical appreciation",
}

_ORDER = {d: i for i, d in enumerate(ScoringDimension)}


def generate_insights(
    metrics: dict[ScoringDimension, float],
    comparisons: dict[ScoringDimension, float],
    top_n: int = 3,
    strength_min_score: float = 60.0,
    weakness_max_score: float = 50.0,
    min_deviation_pct: float = 5.0,
    strength_templates: dict[ScoringDimension, str] = STRENGTH_TEMPLATES,
    weakness_templates: dict[ScoringDimension, str] = WEAKNESS_TEMPLATES,
) -> tuple[list[str], list[str]]:
    """Returns (strengths, weaknesses), most pronounced first."""
    dims = [d for d in metrics if d in comparisons]

    above = sorted(dims, key=lambda d: (-comparisons[d], _ORDER[d]))[:top_n]
    below = sorted(dims, key=lambda d: (comparisons[d], _ORDER[d]))[:top_n]

    strengths = [
        strength_templates[d]
        for d in above
        if metrics[d] >= strength_min_score and comparisons[d] >= min_deviation_pct
    ]
    weaknesses = [
        weakness_templates[d]
        for d in below
        if metrics[d] < weakness_max_score and comparisons[d] <= -min_deviation_pct
    ]
    return strengths, weaknesses
