"""Use case to compute net worth from the tracked accounts."""

from finance_tracker.application.use_cases.finance_store import FinanceStore
from finance_tracker.domain.models import NetWorthSummary
from finance_tracker.domain.services.aggregation import compute_totals
from finance_tracker.infrastructure.logging.logger import get_app_logger


class GetNetWorthSummaryUseCase:
    """Compute totals and net worth for the current finance data."""

    def __init__(self, store: FinanceStore, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: State container holding the finance data.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> NetWorthSummary:
        """Return the net worth summary.

        Returns:
            NetWorthSummary: Totals, currency label and inclusion policy.
        """
        data = self._store.data
        totals = compute_totals(data, logger=self._logger)
        self._logger.info(
            f"Net worth computed: assets={totals.total_assets}, "
            f"liabilities={totals.total_liabilities}, "
            f"credit_debt={totals.total_credit_debt}, "
            f"net_worth={totals.net_worth}"
        )
        return NetWorthSummary(
            totals=totals,
            currency_code=data.settings.currency,
            include_credit_in_net_worth=(
                data.settings.include_credit_in_net_worth
            ),
        )


__all__ = ["GetNetWorthSummaryUseCase", "NetWorthSummary"]
