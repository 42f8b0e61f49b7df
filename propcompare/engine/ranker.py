"""Cohort ranking.

Dense, unique ranks 1..N so "#N of M" is never ambiguous. Ordering:
  1. overall score, descending (unrounded, to avoid spurious ties)
  2. price score, descending (absent sorts last)
  3. property id, ascending
"""


def rank_cohort(
    overall_scores: dict[str, float],
    price_scores: dict[str, float] | None = None,
) -> dict[str, int]:
    price_scores = price_scores or {}

    def sort_key(property_id: str) -> tuple:
        price = price_scores.get(property_id)
        return (
            -overall_scores[property_id],
            -price if price is not None else float("inf"),
            property_id,
        )

    ordered = sorted(overall_scores, key=sort_key)
    return {property_id: i + 1 for i, property_id in enumerate(ordered)}
