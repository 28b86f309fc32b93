"""Use case to list recurring transactions awaiting confirmation."""

from datetime import datetime

from finance_tracker.application.ports.clock import ClockPort
from finance_tracker.application.use_cases.finance_store import FinanceStore
from finance_tracker.domain.models import DueTransaction
from finance_tracker.domain.services.scheduler import find_due_transactions
from finance_tracker.infrastructure.logging.logger import get_app_logger


class GetDueTransactionsUseCase:
    """Find recurring transactions due or overdue relative to today."""

    def __init__(
        self,
        store: FinanceStore,
        clock: ClockPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: State container holding the finance data.
            clock: Port providing the current time.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._clock = clock
        self._logger = logger or get_app_logger()

    def execute(self, today: datetime | None = None) -> list[DueTransaction]:
        """Return the due list.

        Args:
            today: Optional reference time; the clock is used when omitted.

        Returns:
            list[DueTransaction]: Due and overdue recurring transactions.
        """
        reference = today or self._clock.now()
        due = find_due_transactions(
            self._store.data.transactions,
            reference,
            logger=self._logger,
        )
        overdue = sum(1 for item in due if item.is_overdue)
        self._logger.info(
            f"Found {len(due)} due transactions ({overdue} overdue)"
        )
        return due


__all__ = ["GetDueTransactionsUseCase", "DueTransaction"]
