"""FastAPI dependency injection."""

from propcompare.config import settings
from propcompare.models.comparison import ScoringOptions


def get_scoring_options() -> ScoringOptions:
    return settings.scoring_options()
