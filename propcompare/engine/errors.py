"""Comparison engine error types.

All derive from ValueError so callers can treat them as bad input.
"""


class ComparisonError(ValueError):
    """Base class for rejected comparison requests."""


class InvalidCohortSizeError(ComparisonError):
    def __init__(self, size: int, min_size: int, max_size: int):
        self.size = size
        self.min_size = min_size
        self.max_size = max_size
        super().__init__(
            f"Cohort must contain between {min_size} and {max_size} properties, got {size}"
        )


class InvalidAttributeError(ComparisonError):
    def __init__(self, property_id: str, field: str, reason: str):
        self.property_id = property_id
        self.field = field
        super().__init__(f"Property {property_id!r}: {field} {reason}")


class InvalidCriteriaError(ComparisonError):
    pass
