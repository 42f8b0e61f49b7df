"""One-line narrative for a ranked cohort."""

from propcompare.models.comparison import ComparisonProperty


def head_to_head(properties: list[ComparisonProperty]) -> tuple[str, str]:
    """(winner_id, loser_id) by rank."""
    ordered = sorted(properties, key=lambda p: p.rank)
    return ordered[0].property.id, ordered[-1].property.id


def summarize_cohort(properties: list[ComparisonProperty]) -> str:
    if not properties:
        return "No properties to compare."

    winner = min(properties, key=lambda p: p.rank)
    prices = [p.property.price for p in properties]
    areas = [p.property.living_area for p in properties]

    return (
        f"Comparing {len(properties)} properties. "
        f"Winner: {winner.property.id} (Score: {round(winner.score)}/100). "
        f"Price range: ${min(prices):,.0f} - ${max(prices):,.0f}. "
        f"Size range: {min(areas):,} - {max(areas):,} sq ft."
    )
