"""Use cases to export and import the finance data document."""

from dataclasses import dataclass

from finance_tracker.application.ports.clock import ClockPort
from finance_tracker.application.ports.notifications import (
    Notification,
    NotificationKind,
    NotificationPort,
)
from finance_tracker.application.use_cases.finance_store import FinanceStore
from finance_tracker.domain.errors import MalformedImportError
from finance_tracker.domain.models import FinanceData
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.infrastructure.serialization import (
    decode_finance_data,
    encode_finance_data,
)

EXPORT_INDENT = 2


@dataclass(frozen=True)
class ExportResult:
    """Exported document.

    Attributes:
        filename: Suggested file name, e.g. ``finance-data-2024-05-01.json``.
        content: Pretty-printed JSON text.
    """

    filename: str
    content: str


class ExportFinanceDataUseCase:
    """Serialize the current finance data for download."""

    def __init__(
        self,
        store: FinanceStore,
        clock: ClockPort,
        notifier: NotificationPort | None = None,
    ) -> None:
        self._store = store
        self._clock = clock
        self._notifier = notifier

    def execute(self) -> ExportResult:
        """Return the pretty-printed document and its dated file name."""
        today = self._clock.now().date()
        result = ExportResult(
            filename=f"finance-data-{today.isoformat()}.json",
            content=encode_finance_data(
                self._store.data,
                indent=EXPORT_INDENT,
            ),
        )
        if self._notifier is not None:
            self._notifier.notify(
                Notification(
                    kind=NotificationKind.EXPORTED,
                    title="Data exported",
                    description=f"Saved as {result.filename}.",
                )
            )
        return result


class ImportFinanceDataUseCase:
    """Replace the finance data with an imported document."""

    def __init__(
        self,
        store: FinanceStore,
        notifier: NotificationPort | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: State container to replace the data in.
            notifier: Optional port receiving the failure notification.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._notifier = notifier
        self._logger = logger or get_app_logger()

    def execute(self, raw: str | bytes) -> FinanceData:
        """Import a JSON document.

        Args:
            raw: JSON text of a finance data document.

        Returns:
            FinanceData: The imported data, now current in the store.

        Raises:
            MalformedImportError: If the document is invalid; the store is
                left untouched.
        """
        try:
            imported = decode_finance_data(raw)
        except MalformedImportError as exc:
            self._logger.error(f"Import failed: {exc}")
            if self._notifier is not None:
                self._notifier.notify(
                    Notification(
                        kind=NotificationKind.FAILED,
                        title="Import failed",
                        description="Invalid data format.",
                    )
                )
            raise
        self._logger.info(
            f"Imported {len(imported.assets)} assets, "
            f"{len(imported.liabilities)} liabilities, "
            f"{len(imported.credit_cards)} credit cards, "
            f"{len(imported.transactions)} transactions"
        )
        return self._store.replace_data(imported)


__all__ = [
    "ExportResult",
    "ExportFinanceDataUseCase",
    "ImportFinanceDataUseCase",
]
