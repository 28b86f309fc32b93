"""Use case to read the net worth history for a timeframe."""

from finance_tracker.application.ports.clock import ClockPort
from finance_tracker.application.use_cases.finance_store import FinanceStore
from finance_tracker.domain.models import NetWorthSnapshot
from finance_tracker.domain.services.history import filter_history


class GetNetWorthHistoryUseCase:
    """Return snapshots for a timeframe under the current settings."""

    def __init__(self, store: FinanceStore, clock: ClockPort) -> None:
        self._store = store
        self._clock = clock

    def execute(self, timeframe: str = "1M") -> list[NetWorthSnapshot]:
        """Return the snapshots of the last day, month or year.

        Args:
            timeframe: One of ``1D``, ``1M`` or ``1Y``.

        Returns:
            list[NetWorthSnapshot]: Snapshots with re-derived net worth.
        """
        data = self._store.data
        return filter_history(
            data.net_worth_history,
            timeframe,
            self._clock.now(),
            data.settings,
        )


__all__ = ["GetNetWorthHistoryUseCase"]
