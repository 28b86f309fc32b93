"""Domain policies package."""

from .credit import rate_credit_utilization
from .net_worth import compute_net_worth

__all__ = ["compute_net_worth", "rate_credit_utilization"]
