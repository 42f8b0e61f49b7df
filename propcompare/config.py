from decimal import Decimal

from pydantic_settings import BaseSettings

from propcompare.models.comparison import ScoringOptions


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Cohort bounds
    min_cohort_size: int = 2
    max_cohort_size: int = 10

    # Insights
    insight_top_n: int = 3
    strength_min_score: float = 60.0
    weakness_max_score: float = 50.0
    insight_min_deviation_pct: float = 5.0

    # Affordability financing assumptions
    down_payment_pct: Decimal = Decimal("0.20")
    mortgage_rate: Decimal = Decimal("0.07")
    loan_term_years: int = 30

    # Condition scoring ages buildings against this year, not the wall clock
    reference_year: int = 2026

    # App
    debug: bool = False
    log_level: str = "INFO"

    def scoring_options(self) -> ScoringOptions:
        return ScoringOptions(
            min_cohort_size=self.min_cohort_size,
            max_cohort_size=self.max_cohort_size,
            insight_top_n=self.insight_top_n,
            strength_min_score=self.strength_min_score,
            weakness_max_score=self.weakness_max_score,
            insight_min_deviation_pct=self.insight_min_deviation_pct,
            down_payment_pct=self.down_payment_pct,
            mortgage_rate=self.mortgage_rate,
            loan_term_years=self.loan_term_years,
            reference_year=self.reference_year,
        )


settings = Settings()
