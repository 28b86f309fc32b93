"""Credit utilization rating policy."""

from decimal import Decimal

_RATING_BANDS = (
    (Decimal("30"), "Excellent"),
    (Decimal("50"), "Good"),
    (Decimal("70"), "Fair"),
)


def rate_credit_utilization(utilization_rate: Decimal) -> str:
    """Return a rating for a utilization percentage."""
    for upper_bound, rating in _RATING_BANDS:
        if utilization_rate < upper_bound:
            return rating
    return "Consider paying down"


__all__ = ["rate_credit_utilization"]
