"""Port for loading and saving the finance data aggregate."""

from typing import Protocol

from finance_tracker.domain.models import FinanceData


class FinanceRepositoryPort(Protocol):
    """Port exposing wholesale persistence of finance data.

    Implementations read and write the whole aggregate as one unit.
    """

    def load(self) -> FinanceData | None:
        """Return the stored finance data, or None when nothing is stored."""

    def save(self, data: FinanceData) -> None:
        """Replace the stored finance data."""


__all__ = ["FinanceRepositoryPort"]
