"""Use case to compute credit card utilization."""

from finance_tracker.application.use_cases.finance_store import FinanceStore
from finance_tracker.domain.models import CreditUtilization
from finance_tracker.domain.services.aggregation import (
    compute_credit_utilization,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger


class GetCreditUtilizationUseCase:
    """Compute overall and per-card credit utilization."""

    def __init__(self, store: FinanceStore, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> CreditUtilization:
        utilization = compute_credit_utilization(self._store.data.credit_cards)
        self._logger.info(
            f"Credit utilization computed: "
            f"{utilization.utilization_rate:.1f}% ({utilization.rating})"
        )
        return utilization


__all__ = ["GetCreditUtilizationUseCase", "CreditUtilization"]
