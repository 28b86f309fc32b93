"""Domain package for business rules and core models."""

from .errors import FinanceTrackerError, MalformedImportError
from .models import FinanceData, NetWorthSnapshot, Settings
from .services import (
    apply_mutation,
    compute_totals,
    find_due_transactions,
    maybe_append_snapshot,
)

__all__ = [
    "FinanceTrackerError",
    "MalformedImportError",
    "FinanceData",
    "NetWorthSnapshot",
    "Settings",
    "apply_mutation",
    "compute_totals",
    "find_due_transactions",
    "maybe_append_snapshot",
]
