"""Attribute extraction.

Pure function: PropertyAttributes in, flat FeatureSet out. No I/O.
Optional inputs that are missing stay absent so the normalizer can skip them
instead of scoring them as zero.
"""

import math
from decimal import Decimal, ROUND_HALF_UP

from propcompare.engine.errors import InvalidAttributeError
from propcompare.models.comparison import FeatureSet
from propcompare.models.property import PropertyAttributes, PropertyCondition

TWO_PLACES = Decimal("0.01")
MIN_PLAUSIBLE_YEAR = 1700
MAX_YEARS_AHEAD = 5  # pre-construction listings
MAX_PRICE = 1e12

# Feature keys
PRICE = "price"
PRICE_PER_SQFT = "price_per_sqft"
LIVING_AREA = "living_area"
BEDROOMS = "bedrooms"
BATHROOMS = "bathrooms"
YEAR_BUILT = "year_built"
VALUE_RATIO = "value_ratio"
MONTHLY_COST = "monthly_cost"
LOCATION_QUALITY = "location_quality"
NEIGHBORHOOD_QUALITY = "neighborhood_quality"
ACCESSIBILITY_QUALITY = "accessibility_quality"
CONDITION_POINTS = "condition_points"
FEATURE_POINTS = "feature_points"
INVESTMENT_YIELD = "investment_yield"
CASH_FLOW = "cash_flow"
APPRECIATION = "appreciation"

CONDITION_POINTS_TABLE: dict[PropertyCondition, float] = {
    PropertyCondition.EXCELLENT: 100.0,
    PropertyCondition.GOOD: 80.0,
    PropertyCondition.FAIR: 60.0,
    PropertyCondition.POOR: 40.0,
    PropertyCondition.NEEDS_WORK: 20.0,
}

HIGH_VALUE_FEATURES = ("pool", "garage", "fireplace", "hardwood floors", "updated kitchen")
FEATURE_POINTS_EACH = 2
AMENITY_POINTS_EACH = 3
HIGH_VALUE_BONUS = 10

DOWNTOWN_BONUS = 10.0
PREMIUM_NEIGHBORHOOD_KEYWORDS = ("historic", "prestigious")
PREMIUM_NEIGHBORHOOD_BONUS = 10.0


def monthly_payment(principal: Decimal, annual_rate: Decimal, term_years: int) -> Decimal:
    """Fixed monthly mortgage payment."""
    if principal <= 0:
        return Decimal("0")
    if annual_rate <= 0:
        return (principal / (term_years * 12)).quantize(TWO_PLACES, ROUND_HALF_UP)

    r = annual_rate / 12
    n = term_years * 12
    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** n
    payment = principal * (r * factor) / (factor - 1)
    return payment.quantize(TWO_PLACES, ROUND_HALF_UP)


def _mean(values: list[float]) -> float | None:
    if not values:
        return None
    return sum(values) / len(values)


def _finite(prop: PropertyAttributes, field: str, value) -> float | None:
    if value is None:
        return None
    number = float(value)
    if not math.isfinite(number):
        raise InvalidAttributeError(prop.id, field, "must be a finite number")
    return number


def _age_points(year_built: int, reference_year: int) -> float:
    """Newer buildings score higher; 0-100."""
    age = max(0, reference_year - year_built)
    if age <= 5:
        return 100.0
    if age <= 15:
        return 85.0
    if age <= 30:
        return 70.0
    if age <= 50:
        return 55.0
    if age <= 75:
        return 40.0
    return 25.0


def _safety_points(crime_rate: float) -> float:
    """Score 0-100 from property crime per 100K (inverse).

    National average ~ 2000/100K property crime.
    """
    if crime_rate < 1000:
        return 100.0
    if crime_rate < 1500:
        return 85.0
    if crime_rate < 2000:
        return 70.0
    if crime_rate < 2500:
        return 55.0
    if crime_rate < 3000:
        return 40.0
    if crime_rate < 3500:
        return 25.0
    return 10.0


def _feature_points(features: tuple[str, ...], amenities: tuple[str, ...]) -> float:
    points = len(features) * FEATURE_POINTS_EACH + len(amenities) * AMENITY_POINTS_EACH
    lowered = [f.lower() for f in features]
    for hv in HIGH_VALUE_FEATURES:
        if any(hv in f for f in lowered):
            points += HIGH_VALUE_BONUS
    return float(points)


def validate(prop: PropertyAttributes, reference_year: int) -> None:
    """Required-field checks. Raises InvalidAttributeError."""
    price = _finite(prop, "price", prop.price)
    if price is None or price <= 0:
        raise InvalidAttributeError(prop.id, "price", "must be greater than zero")
    if price > MAX_PRICE:
        raise InvalidAttributeError(prop.id, "price", f"must not exceed {MAX_PRICE:,.0f}")
    area = _finite(prop, "living_area", prop.living_area)
    if area is None or area <= 0:
        raise InvalidAttributeError(prop.id, "living_area", "must be greater than zero")
    if prop.bedrooms < 0:
        raise InvalidAttributeError(prop.id, "bedrooms", "must not be negative")
    if _finite(prop, "bathrooms", prop.bathrooms) < 0:
        raise InvalidAttributeError(prop.id, "bathrooms", "must not be negative")
    if prop.year_built is not None and not (
        MIN_PLAUSIBLE_YEAR <= prop.year_built <= reference_year + MAX_YEARS_AHEAD
    ):
        raise InvalidAttributeError(
            prop.id, "year_built", f"{prop.year_built} is not a plausible year"
        )


def extract(
    prop: PropertyAttributes,
    reference_year: int = 2026,
    down_payment_pct: Decimal = Decimal("0.20"),
    mortgage_rate: Decimal = Decimal("0.07"),
    loan_term_years: int = 30,
) -> FeatureSet:
    """Flatten one property into comparable numeric features."""
    validate(prop, reference_year)

    fin = prop.financial
    loc = prop.location
    price = float(prop.price)
    area = float(prop.living_area)

    features: FeatureSet = {
        PRICE: price,
        LIVING_AREA: area,
        BEDROOMS: float(prop.bedrooms),
        BATHROOMS: float(prop.bathrooms),
        VALUE_RATIO: area / price,
        FEATURE_POINTS: _feature_points(prop.features, prop.amenities),
    }

    ppsf = _finite(prop, "price_per_sqft", fin.price_per_sqft)
    features[PRICE_PER_SQFT] = ppsf if ppsf is not None else price / area

    if prop.year_built is not None:
        features[YEAR_BUILT] = float(prop.year_built)

    # Affordability: supplied carrying cost, else the financed purchase price
    monthly_cost = _finite(prop, "total_monthly_cost", fin.total_monthly_cost)
    if monthly_cost is None:
        principal = Decimal(prop.price) * (1 - down_payment_pct)
        monthly_cost = float(monthly_payment(principal, mortgage_rate, loan_term_years))
    features[MONTHLY_COST] = monthly_cost

    location = _mean([
        float(v) for v in (loc.location_rating, loc.walk_score) if v is not None
    ])
    if location is not None:
        if "downtown" in loc.neighborhood.lower():
            location += DOWNTOWN_BONUS
        features[LOCATION_QUALITY] = min(100.0, location)

    neighborhood_parts = []
    school = _finite(prop, "school_rating", loc.school_rating)
    if school is not None:
        neighborhood_parts.append(school * 10)
    crime = _finite(prop, "crime_rate", loc.crime_rate)
    if crime is not None:
        neighborhood_parts.append(_safety_points(crime))
    neighborhood = _mean(neighborhood_parts)
    if neighborhood is not None:
        name = loc.neighborhood.lower()
        if any(k in name for k in PREMIUM_NEIGHBORHOOD_KEYWORDS):
            neighborhood += PREMIUM_NEIGHBORHOOD_BONUS
        features[NEIGHBORHOOD_QUALITY] = min(100.0, neighborhood)

    accessibility = _mean([
        float(v) for v in (loc.transit_score, loc.bike_score) if v is not None
    ])
    if accessibility is not None:
        features[ACCESSIBILITY_QUALITY] = accessibility

    condition_parts = []
    if prop.condition is not None:
        condition_parts.append(CONDITION_POINTS_TABLE[prop.condition])
    if prop.year_built is not None:
        condition_parts.append(_age_points(prop.year_built, reference_year))
    condition = _mean(condition_parts)
    if condition is not None:
        features[CONDITION_POINTS] = condition

    yields = [
        y for y in (
            _finite(prop, "roi", fin.roi),
            _finite(prop, "cap_rate", fin.cap_rate),
        )
        if y is not None
    ]
    investment = _mean(yields)
    if investment is not None:
        features[INVESTMENT_YIELD] = investment

    cash_flow = _finite(prop, "projected_cash_flow", fin.projected_cash_flow)
    rent = _finite(prop, "rental_income", fin.rental_income)
    if cash_flow is None and rent is not None:
        cash_flow = rent - monthly_cost
    if cash_flow is not None:
        features[CASH_FLOW] = cash_flow

    appreciation = _finite(prop, "historical_appreciation", fin.historical_appreciation)
    if appreciation is not None:
        features[APPRECIATION] = appreciation

    return features
