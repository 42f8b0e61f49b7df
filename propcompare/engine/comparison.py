"""Property comparison pipeline: the engine entry point.

Pure function: cohort + criteria in, ranked results out. No I/O, no state
kept between calls.

    extract -> normalize -> aggregate -> rank
                  \\-> compare -> insights

The whole cohort is validated before anything is scored: dropping one bad
property would shift the cohort min/max and change every other score.
"""

import logging

from propcompare.engine.aggregator import aggregate, overall_score, resolve_weights
from propcompare.engine.comparator import cohort_metrics, dimension_differences
from propcompare.engine.errors import InvalidAttributeError, InvalidCohortSizeError
from propcompare.engine.extractor import FEATURE_POINTS, LOCATION_QUALITY, extract
from propcompare.engine.insights import generate_insights
from propcompare.engine.normalizer import normalize_all
from propcompare.engine.ranker import rank_cohort
from propcompare.engine.summary import head_to_head, summarize_cohort
from propcompare.models.comparison import (
    ComparisonCriteria,
    ComparisonProperty,
    ComparisonReport,
    ComparisonResult,
    ScoringDimension,
    ScoringOptions,
)
from propcompare.models.property import PropertyAttributes

logger = logging.getLogger(__name__)


def _check_cohort(properties: list[PropertyAttributes], options: ScoringOptions) -> None:
    size = len(properties)
    if not options.min_cohort_size <= size <= options.max_cohort_size:
        raise InvalidCohortSizeError(size, options.min_cohort_size, options.max_cohort_size)

    seen: set[str] = set()
    for prop in properties:
        if prop.id in seen:
            raise InvalidAttributeError(prop.id, "id", "appears more than once in the cohort")
        seen.add(prop.id)


def _score_cohort(
    properties: list[PropertyAttributes],
    criteria: ComparisonCriteria | None,
    options: ScoringOptions,
) -> tuple[list[ComparisonResult], list[ComparisonProperty]]:
    _check_cohort(properties, options)
    weights = resolve_weights(criteria)

    feature_sets = [
        extract(
            prop,
            reference_year=options.reference_year,
            down_payment_pct=options.down_payment_pct,
            mortgage_rate=options.mortgage_rate,
            loan_term_years=options.loan_term_years,
        )
        for prop in properties
    ]
    logger.debug(
        "Scoring cohort of %d properties over %s",
        len(properties), [d.value for d in weights],
    )

    metrics = normalize_all(feature_sets)
    ids = [prop.id for prop in properties]
    scores = {pid: aggregate(m, weights) for pid, m in zip(ids, metrics)}
    ranks = rank_cohort(
        scores,
        {pid: m[ScoringDimension.PRICE] for pid, m in zip(ids, metrics)
         if ScoringDimension.PRICE in m},
    )

    price_cmp = cohort_metrics([float(p.price) for p in properties], higher_is_better=False)
    size_cmp = cohort_metrics([float(p.living_area) for p in properties])
    location_cmp = cohort_metrics([fs.get(LOCATION_QUALITY) for fs in feature_sets])
    feature_cmp = cohort_metrics([fs.get(FEATURE_POINTS) for fs in feature_sets])
    differences = dimension_differences(metrics)

    results: list[ComparisonResult] = []
    detail: list[ComparisonProperty] = []
    for i, prop in enumerate(properties):
        enabled = {d: metrics[i][d] for d in weights if d in metrics[i]}
        strengths, weaknesses = generate_insights(
            enabled,
            differences[i],
            top_n=options.insight_top_n,
            strength_min_score=options.strength_min_score,
            weakness_max_score=options.weakness_max_score,
            min_deviation_pct=options.insight_min_deviation_pct,
        )
        results.append(ComparisonResult(
            property_id=prop.id,
            total_score=overall_score(scores[prop.id]),
            rank=ranks[prop.id],
            criteria_scores={d: overall_score(s) for d, s in enabled.items()},
            strengths=strengths,
            weaknesses=weaknesses,
        ))
        detail.append(ComparisonProperty(
            property=prop,
            metrics=metrics[i],
            score=scores[prop.id],
            rank=ranks[prop.id],
            price_comparison=price_cmp[i],
            size_comparison=size_cmp[i],
            location_comparison=location_cmp[i],
            feature_comparison=feature_cmp[i],
        ))

    results.sort(key=lambda r: r.rank)
    detail.sort(key=lambda p: p.rank)
    return results, detail


def compare_properties(
    properties: list[PropertyAttributes],
    criteria: ComparisonCriteria | None = None,
    options: ScoringOptions | None = None,
) -> list[ComparisonResult]:
    """Score and rank a cohort of 2-10 properties.

    Returns one ComparisonResult per property, ordered by rank. Raises
    InvalidCohortSizeError, InvalidCriteriaError or InvalidAttributeError
    without producing partial results.
    """
    results, _ = _score_cohort(properties, criteria, options or ScoringOptions())
    return results


def build_comparison_report(
    properties: list[PropertyAttributes],
    criteria: ComparisonCriteria | None = None,
    options: ScoringOptions | None = None,
) -> ComparisonReport:
    """compare_properties plus per-property metric detail and a cohort summary."""
    results, detail = _score_cohort(properties, criteria, options or ScoringOptions())
    winner_id, loser_id = head_to_head(detail)
    return ComparisonReport(
        results=results,
        properties=detail,
        summary=summarize_cohort(detail),
        winner_id=winner_id,
        loser_id=loser_id,
    )
