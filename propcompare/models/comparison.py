"""Comparison engine data types."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from propcompare.models.property import PropertyAttributes


class ScoringDimension(Enum):
    PRICE = "price"
    VALUE = "value"
    AFFORDABILITY = "affordability"
    LOCATION = "location"
    NEIGHBORHOOD = "neighborhood"
    ACCESSIBILITY = "accessibility"
    SIZE = "size"
    CONDITION = "condition"
    FEATURE = "feature"
    INVESTMENT = "investment"
    CASH_FLOW = "cashFlow"
    APPRECIATION = "appreciation"


# Flat bag of comparable numeric features. Absent inputs are missing keys.
FeatureSet = dict[str, float]


@dataclass(frozen=True)
class Criterion:
    enabled: bool = True
    weight: float | None = None  # 0-1


@dataclass(frozen=True)
class ComparisonCriteria:
    """Criterion key -> setting. Keys are dimension names or criterion groups."""

    criteria: dict[str, Criterion] = field(default_factory=dict)

    @classmethod
    def all_enabled(cls) -> "ComparisonCriteria":
        return cls({d.value: Criterion() for d in ScoringDimension})

    @classmethod
    def only(cls, *keys: str) -> "ComparisonCriteria":
        return cls({key: Criterion() for key in keys})


@dataclass(frozen=True)
class ScoringOptions:
    """Tunables for a single comparison run."""

    min_cohort_size: int = 2
    max_cohort_size: int = 10

    # Insight thresholds
    insight_top_n: int = 3
    strength_min_score: float = 60.0
    weakness_max_score: float = 50.0
    insight_min_deviation_pct: float = 5.0

    # Financing assumptions for the affordability estimate
    down_payment_pct: Decimal = Decimal("0.20")
    mortgage_rate: Decimal = Decimal("0.07")
    loan_term_years: int = 30

    # Fixed year used for age-based condition scoring
    reference_year: int = 2026


@dataclass(frozen=True)
class ComparisonMetric:
    value: float
    rank: int  # ascending position within the cohort
    percentile: int
    is_best: bool
    is_worst: bool
    difference: float  # value - cohort mean
    percentage_difference: float


@dataclass(frozen=True)
class ComparisonProperty:
    property: PropertyAttributes
    metrics: dict[ScoringDimension, float]
    score: float  # unrounded weighted mean
    rank: int
    price_comparison: ComparisonMetric
    size_comparison: ComparisonMetric
    location_comparison: ComparisonMetric | None = None  # None when no location inputs
    feature_comparison: ComparisonMetric | None = None


@dataclass(frozen=True)
class ComparisonResult:
    property_id: str
    total_score: int
    rank: int
    criteria_scores: dict[ScoringDimension, int] = field(default_factory=dict)
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ComparisonReport:
    results: list[ComparisonResult]
    properties: list[ComparisonProperty]
    summary: str
    winner_id: str
    loser_id: str
