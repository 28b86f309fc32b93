"""Use case to compute recurring cash flow and transaction totals."""

from finance_tracker.application.use_cases.finance_store import FinanceStore
from finance_tracker.domain.models import CashflowView
from finance_tracker.domain.services.aggregation import (
    compute_cashflow_summary,
    compute_confirmed_totals,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger


class GetCashflowUseCase:
    """Compute monthly recurring cash flow from the transactions."""

    def __init__(self, store: FinanceStore, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: State container holding the finance data.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> CashflowView:
        """Return recurring cash flow and estimated/confirmed totals."""
        transactions = self._store.data.transactions
        summary = compute_cashflow_summary(transactions)
        totals = compute_confirmed_totals(transactions)
        self._logger.info(
            f"Cashflow computed: income={summary.monthly_income}, "
            f"expenses={summary.monthly_expenses}, net={summary.net}"
        )
        return CashflowView(summary=summary, totals=totals)


__all__ = ["GetCashflowUseCase", "CashflowView"]
