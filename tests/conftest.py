"""Shared fixtures for engine and API tests.

Baseline property: $350K, 1,500 sqft, 3bd/2ba in Austin, TX.
"""

from decimal import Decimal

import pytest

from propcompare.models.property import (
    Location,
    PropertyAttributes,
    PropertyCondition,
    PropertyFinancial,
)


@pytest.fixture
def make_property():
    """Factory for properties that differ from the baseline only where asked."""

    def _make(
        property_id: str,
        price: str | int = "350000",
        living_area: int = 1500,
        location: Location | None = None,
        financial: PropertyFinancial | None = None,
        **kwargs,
    ) -> PropertyAttributes:
        kwargs.setdefault("bedrooms", 3)
        kwargs.setdefault("bathrooms", Decimal("2"))
        return PropertyAttributes(
            id=property_id,
            price=Decimal(str(price)),
            living_area=living_area,
            location=location or Location(city="Austin", state="TX"),
            financial=financial or PropertyFinancial(),
            **kwargs,
        )

    return _make


@pytest.fixture
def varied_cohort(make_property) -> list[PropertyAttributes]:
    """Three properties that differ on most dimensions."""
    return [
        make_property(
            "downtown-condo",
            price="420000",
            living_area=1100,
            year_built=2018,
            condition=PropertyCondition.EXCELLENT,
            features=("Hardwood Floors", "Updated Kitchen"),
            amenities=("Gym", "Rooftop Deck", "Concierge"),
            location=Location(
                city="Austin", state="TX", neighborhood="Downtown",
                location_rating=90, walk_score=95, transit_score=80, bike_score=85,
                school_rating=Decimal("6"), crime_rate=Decimal("2600"),
            ),
            financial=PropertyFinancial(
                total_monthly_cost=Decimal("3100"), rental_income=Decimal("3300"),
                roi=Decimal("5.5"), cap_rate=Decimal("4.8"),
                historical_appreciation=Decimal("4.2"),
            ),
        ),
        make_property(
            "suburban-house",
            price="380000",
            living_area=2200,
            year_built=1998,
            condition=PropertyCondition.GOOD,
            features=("Garage", "Pool", "Fireplace"),
            amenities=("Playground",),
            location=Location(
                city="Round Rock", state="TX", neighborhood="Historic Brushy Creek",
                location_rating=70, walk_score=35, transit_score=20, bike_score=40,
                school_rating=Decimal("9"), crime_rate=Decimal("900"),
            ),
            financial=PropertyFinancial(
                total_monthly_cost=Decimal("2700"), rental_income=Decimal("3000"),
                roi=Decimal("7.0"), cap_rate=Decimal("5.6"),
                historical_appreciation=Decimal("3.1"),
            ),
        ),
        make_property(
            "fixer-upper",
            price="260000",
            living_area=1600,
            year_built=1948,
            condition=PropertyCondition.NEEDS_WORK,
            features=(),
            amenities=(),
            location=Location(
                city="Pflugerville", state="TX",
                location_rating=55, walk_score=40, transit_score=10,
                school_rating=Decimal("5"), crime_rate=Decimal("2100"),
            ),
            financial=PropertyFinancial(
                rental_income=Decimal("2200"),
                historical_appreciation=Decimal("2.5"),
            ),
        ),
    ]
