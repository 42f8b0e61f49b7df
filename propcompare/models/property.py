from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class PropertyType(Enum):
    SINGLE_FAMILY = "single_family"
    CONDO = "condo"
    TOWNHOUSE = "townhouse"
    MULTI_FAMILY = "multi_family"
    COMMERCIAL = "commercial"
    LAND = "land"
    MOBILE = "mobile"
    OTHER = "other"


class PropertyCondition(Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    NEEDS_WORK = "needs_work"


@dataclass(frozen=True)
class Location:
    city: str
    state: str
    neighborhood: str = ""
    zip_code: str = ""
    school_district: str | None = None

    # Geo-quality inputs
    location_rating: int | None = None  # 0-100 caller-supplied desirability
    walk_score: int | None = None  # 0-100
    transit_score: int | None = None  # 0-100
    bike_score: int | None = None  # 0-100
    school_rating: Decimal | None = None  # 1-10
    crime_rate: Decimal | None = None  # property crime per 100K


@dataclass(frozen=True)
class PropertyFinancial:
    price_per_sqft: Decimal | None = None
    total_monthly_cost: Decimal | None = None
    rental_income: Decimal | None = None  # monthly
    roi: Decimal | None = None  # percent, e.g. 8.5
    cap_rate: Decimal | None = None  # percent, e.g. 6.0
    projected_cash_flow: Decimal | None = None  # monthly
    historical_appreciation: Decimal | None = None  # percent per year


@dataclass(frozen=True)
class PropertyAttributes:
    id: str
    price: Decimal
    living_area: int  # sqft
    location: Location
    bedrooms: int = 0
    bathrooms: Decimal = Decimal("0")
    year_built: int | None = None
    property_type: PropertyType = PropertyType.SINGLE_FAMILY
    condition: PropertyCondition | None = None
    features: tuple[str, ...] = ()
    amenities: tuple[str, ...] = ()
    financial: PropertyFinancial = field(default_factory=PropertyFinancial)
