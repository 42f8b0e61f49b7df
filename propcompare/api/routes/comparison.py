"""Property comparison routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from propcompare.api.deps import get_scoring_options
from propcompare.api.schemas import (
    ComparisonMetricResponse,
    ComparisonRequest,
    ComparisonResponse,
    ComparisonResultResponse,
    CriterionInfoResponse,
    PropertyRequest,
    PropertyScoreResponse,
)
from propcompare.engine.aggregator import CRITERION_DIMENSIONS, resolve_weights
from propcompare.engine.comparison import build_comparison_report
from propcompare.engine.errors import ComparisonError, InvalidAttributeError
from propcompare.engine.normalizer import NORMALIZATION_RULES
from propcompare.models.comparison import (
    ComparisonCriteria,
    ComparisonMetric,
    ComparisonReport,
    Criterion,
    ScoringOptions,
)
from propcompare.models.property import (
    Location,
    PropertyAttributes,
    PropertyCondition,
    PropertyFinancial,
    PropertyType,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/comparison", tags=["comparison"])


def _to_attributes(req: PropertyRequest) -> PropertyAttributes:
    """Convert a request property into the engine's input record."""
    try:
        property_type = PropertyType(req.property_type)
    except ValueError:
        raise InvalidAttributeError(req.id, "property_type", f"has unknown value {req.property_type!r}")
    condition = None
    if req.condition is not None:
        try:
            condition = PropertyCondition(req.condition)
        except ValueError:
            raise InvalidAttributeError(req.id, "condition", f"has unknown value {req.condition!r}")

    loc = req.location
    fin = req.financial
    return PropertyAttributes(
        id=req.id,
        price=req.price,
        living_area=req.living_area,
        bedrooms=req.bedrooms,
        bathrooms=req.bathrooms,
        year_built=req.year_built,
        property_type=property_type,
        condition=condition,
        features=tuple(req.features),
        amenities=tuple(req.amenities),
        location=Location(
            city=loc.city,
            state=loc.state,
            neighborhood=loc.neighborhood,
            zip_code=loc.zip_code,
            school_district=loc.school_district,
            location_rating=loc.location_rating,
            walk_score=loc.walk_score,
            transit_score=loc.transit_score,
            bike_score=loc.bike_score,
            school_rating=loc.school_rating,
            crime_rate=loc.crime_rate,
        ),
        financial=PropertyFinancial(
            price_per_sqft=fin.price_per_sqft,
            total_monthly_cost=fin.total_monthly_cost,
            rental_income=fin.rental_income,
            roi=fin.roi,
            cap_rate=fin.cap_rate,
            projected_cash_flow=fin.projected_cash_flow,
            historical_appreciation=fin.historical_appreciation,
        ),
    )


def _to_criteria(req: ComparisonRequest) -> ComparisonCriteria | None:
    if req.criteria is None:
        return None
    criteria = {}
    for key, value in req.criteria.items():
        if isinstance(value, bool):
            criteria[key] = Criterion(enabled=value)
        else:
            criteria[key] = Criterion(enabled=value.enabled, weight=value.weight)
    return ComparisonCriteria(criteria)


def _metric_response(metric: ComparisonMetric | None) -> ComparisonMetricResponse | None:
    if metric is None:
        return None
    return ComparisonMetricResponse(
        value=metric.value,
        rank=metric.rank,
        percentile=metric.percentile,
        is_best=metric.is_best,
        is_worst=metric.is_worst,
        difference=metric.difference,
        percentage_difference=metric.percentage_difference,
    )


def _report_to_response(report: ComparisonReport) -> ComparisonResponse:
    results = [
        ComparisonResultResponse(
            property_id=r.property_id,
            total_score=r.total_score,
            rank=r.rank,
            criteria_scores={d.value: s for d, s in r.criteria_scores.items()},
            strengths=r.strengths,
            weaknesses=r.weaknesses,
        )
        for r in report.results
    ]
    properties = [
        PropertyScoreResponse(
            property_id=p.property.id,
            rank=p.rank,
            score=p.score,
            metrics={d.value: s for d, s in p.metrics.items()},
            price_comparison=_metric_response(p.price_comparison),
            size_comparison=_metric_response(p.size_comparison),
            location_comparison=_metric_response(p.location_comparison),
            feature_comparison=_metric_response(p.feature_comparison),
        )
        for p in report.properties
    ]
    return ComparisonResponse(
        results=results,
        properties=properties,
        summary=report.summary,
        winner_id=report.winner_id,
        loser_id=report.loser_id,
    )


@router.post("/score", response_model=ComparisonResponse)
async def score_comparison(
    req: ComparisonRequest,
    options: ScoringOptions = Depends(get_scoring_options),
):
    """Score, rank and summarize a cohort of 2-10 properties."""
    try:
        properties = [_to_attributes(p) for p in req.properties]
        report = build_comparison_report(properties, _to_criteria(req), options)
    except ComparisonError as e:
        logger.warning("Comparison rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    return _report_to_response(report)


@router.get("/criteria/defaults", response_model=list[CriterionInfoResponse])
async def default_criteria():
    """Criterion keys accepted by /score with their dimensions and weights."""
    equal_weights = resolve_weights(None)
    return [
        CriterionInfoResponse(
            key=key,
            dimensions=[d.value for d in dims],
            default_weight=sum(equal_weights[d] for d in dims),
            fallback_weight=sum(NORMALIZATION_RULES[d].default_weight for d in dims),
            description="; ".join(NORMALIZATION_RULES[d].description for d in dims),
        )
        for key, dims in CRITERION_DIMENSIONS.items()
    ]
