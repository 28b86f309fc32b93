"""Domain services package."""

from .aggregation import (
    compute_asset_category_breakdown,
    compute_cashflow_summary,
    compute_confirmed_totals,
    compute_credit_utilization,
    compute_totals,
)
from .history import (
    append_snapshot,
    build_snapshot,
    filter_history,
    maybe_append_snapshot,
    should_append_snapshot,
)
from .mutations import apply_mutation
from .scheduler import describe_due_status, find_due_transactions
from .settlement import (
    cancel_transaction,
    confirm_transaction,
    find_linked_account,
    settle_account,
)
from .validation import validate_asset_value, validate_credit_card

__all__ = [
    "compute_asset_category_breakdown",
    "compute_cashflow_summary",
    "compute_confirmed_totals",
    "compute_credit_utilization",
    "compute_totals",
    "append_snapshot",
    "build_snapshot",
    "filter_history",
    "maybe_append_snapshot",
    "should_append_snapshot",
    "apply_mutation",
    "describe_due_status",
    "find_due_transactions",
    "cancel_transaction",
    "confirm_transaction",
    "find_linked_account",
    "settle_account",
    "validate_asset_value",
    "validate_credit_card",
]
