"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, Field


# ---- Request schemas ----

class LocationRequest(BaseModel):
    city: str
    state: str
    neighborhood: str = ""
    zip_code: str = ""
    school_district: str | None = None
    location_rating: int | None = None
    walk_score: int | None = None
    transit_score: int | None = None
    bike_score: int | None = None
    school_rating: Decimal | None = None
    crime_rate: Decimal | None = None


class FinancialRequest(BaseModel):
    price_per_sqft: Decimal | None = None
    total_monthly_cost: Decimal | None = None
    rental_income: Decimal | None = None
    roi: Decimal | None = None
    cap_rate: Decimal | None = None
    projected_cash_flow: Decimal | None = None
    historical_appreciation: Decimal | None = None


class PropertyRequest(BaseModel):
    id: str
    price: Decimal
    living_area: int = Field(..., description="Living area in sqft")
    location: LocationRequest
    bedrooms: int = 0
    bathrooms: Decimal = Decimal("0")
    year_built: int | None = None
    property_type: str = "single_family"
    condition: str | None = None
    features: list[str] = []
    amenities: list[str] = []
    financial: FinancialRequest = FinancialRequest()


class CriterionRequest(BaseModel):
    enabled: bool = True
    weight: float | None = Field(None, description="Relative weight, 0-1")


class ComparisonRequest(BaseModel):
    properties: list[PropertyRequest]
    # Either a plain on/off flag or {enabled, weight} per criterion key
    criteria: dict[str, bool | CriterionRequest] | None = None


# ---- Response schemas ----

class ComparisonMetricResponse(BaseModel):
    value: float
    rank: int
    percentile: int
    is_best: bool
    is_worst: bool
    difference: float
    percentage_difference: float


class ComparisonResultResponse(BaseModel):
    property_id: str
    total_score: int
    rank: int
    criteria_scores: dict[str, int]
    strengths: list[str] = []
    weaknesses: list[str] = []


class PropertyScoreResponse(BaseModel):
    property_id: str
    rank: int
    score: float
    metrics: dict[str, float]
    price_comparison: ComparisonMetricResponse
    size_comparison: ComparisonMetricResponse
    location_comparison: ComparisonMetricResponse | None = None
    feature_comparison: ComparisonMetricResponse | None = None


class ComparisonResponse(BaseModel):
    results: list[ComparisonResultResponse]
    properties: list[PropertyScoreResponse]
    summary: str
    winner_id: str
    loser_id: str


class CriterionInfoResponse(BaseModel):
    key: str
    dimensions: list[str]
    default_weight: float = Field(
        ..., description="Weight applied when no criterion carries an explicit weight"
    )
    fallback_weight: float = Field(
        ..., description="Weight applied when left unweighted next to weighted criteria"
    )
    description: str = ""
