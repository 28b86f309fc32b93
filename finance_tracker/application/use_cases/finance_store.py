"""State container running commands through the mutation pipeline.

Each dispatch applies a command to the current finance data, appends a net
worth snapshot when tracked accounts changed, saves the new data and sends
a notification. The container is created explicitly and passed to the use
cases that need it.
"""

from collections.abc import Callable
from decimal import Decimal

from finance_tracker.application.ports.clock import ClockPort
from finance_tracker.application.ports.finance_repository import (
    FinanceRepositoryPort,
)
from finance_tracker.application.ports.notifications import (
    Notification,
    NotificationKind,
    NotificationPort,
)
from finance_tracker.domain.models import AccountType, FinanceData
from finance_tracker.domain.services.history import maybe_append_snapshot
from finance_tracker.domain.services.mutations import (
    AddEntity,
    CancelTransaction,
    Command,
    ConfirmTransaction,
    DeleteEntity,
    EntityKind,
    ReplaceData,
    ResetData,
    UpdateEntity,
    UpdateSettings,
    apply_mutation,
    new_id,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger


class FinanceStore:
    """Hold the finance data and apply commands to it."""

    def __init__(
        self,
        repository: FinanceRepositoryPort,
        clock: ClockPort,
        notifier: NotificationPort | None = None,
        logger=None,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        """Initialize the store from the repository.

        Args:
            repository: Port used to load and save the finance data.
            clock: Port providing the current time.
            notifier: Optional port receiving outcome notifications.
            logger: Optional logger compatible with logging.Logger-like API.
            id_factory: Factory for identifiers of new entities.
        """
        self._repository = repository
        self._clock = clock
        self._notifier = notifier
        self._logger = logger or get_app_logger()
        self._id_factory = id_factory
        loaded = repository.load()
        if loaded is None:
            self._logger.info("No stored finance data, starting empty")
            loaded = FinanceData()
        self._data = loaded

    @property
    def data(self) -> FinanceData:
        """Return the current finance data."""
        return self._data

    def dispatch(self, command: Command) -> FinanceData:
        """Apply a command, record history, persist and notify.

        Args:
            command: Command to apply.

        Returns:
            FinanceData: The new current finance data.

        Raises:
            ValueError: If the command carries invalid fields.
        """
        now = self._clock.now()
        previous = self._data
        try:
            updated = apply_mutation(
                previous,
                command,
                now=now,
                id_factory=self._id_factory,
                logger=self._logger,
            )
        except ValueError as exc:
            self._notify(NotificationKind.FAILED, "Update failed", str(exc))
            raise
        if updated is previous:
            self._notify(
                NotificationKind.FAILED,
                "Nothing changed",
                _describe_missing(command),
            )
            return previous

        if not isinstance(command, (ReplaceData, ResetData)):
            updated = maybe_append_snapshot(
                previous,
                updated,
                now,
                logger=self._logger,
            )
        self._data = updated
        self._repository.save(updated)
        self._notify(*_describe_outcome(command, updated))
        return updated

    def add_asset(self, **values) -> FinanceData:
        return self.dispatch(AddEntity(EntityKind.ASSET, values))

    def update_asset(self, asset_id: str, **changes) -> FinanceData:
        return self.dispatch(UpdateEntity(EntityKind.ASSET, asset_id, changes))

    def delete_asset(self, asset_id: str) -> FinanceData:
        return self.dispatch(DeleteEntity(EntityKind.ASSET, asset_id))

    def add_liability(self, **values) -> FinanceData:
        return self.dispatch(AddEntity(EntityKind.LIABILITY, values))

    def update_liability(self, liability_id: str, **changes) -> FinanceData:
        return self.dispatch(
            UpdateEntity(EntityKind.LIABILITY, liability_id, changes)
        )

    def delete_liability(self, liability_id: str) -> FinanceData:
        return self.dispatch(DeleteEntity(EntityKind.LIABILITY, liability_id))

    def add_credit_card(self, **values) -> FinanceData:
        return self.dispatch(AddEntity(EntityKind.CREDIT_CARD, values))

    def update_credit_card(self, card_id: str, **changes) -> FinanceData:
        return self.dispatch(
            UpdateEntity(EntityKind.CREDIT_CARD, card_id, changes)
        )

    def delete_credit_card(self, card_id: str) -> FinanceData:
        return self.dispatch(DeleteEntity(EntityKind.CREDIT_CARD, card_id))

    def add_transaction(self, **values) -> FinanceData:
        return self.dispatch(AddEntity(EntityKind.TRANSACTION, values))

    def update_transaction(self, transaction_id: str, **changes) -> FinanceData:
        return self.dispatch(
            UpdateEntity(EntityKind.TRANSACTION, transaction_id, changes)
        )

    def delete_transaction(self, transaction_id: str) -> FinanceData:
        return self.dispatch(
            DeleteEntity(EntityKind.TRANSACTION, transaction_id)
        )

    def update_settings(self, **changes) -> FinanceData:
        return self.dispatch(UpdateSettings(changes))

    def confirm_transaction(
        self,
        transaction_id: str,
        amount: Decimal | None = None,
        account_id: str | None = None,
        account_type: AccountType | None = None,
    ) -> FinanceData:
        """Confirm a transaction with an actual amount and optional new link."""
        return self.dispatch(
            ConfirmTransaction(
                transaction_id=transaction_id,
                amount=amount,
                account_id=account_id,
                account_type=account_type,
            )
        )

    def quick_confirm(self, transaction_id: str) -> FinanceData:
        """Confirm a transaction at its estimated amount."""
        return self.dispatch(ConfirmTransaction(transaction_id=transaction_id))

    def cancel_transaction(self, transaction_id: str) -> FinanceData:
        """Delete a due transaction instead of confirming it."""
        return self.dispatch(CancelTransaction(transaction_id))

    def replace_data(self, data: FinanceData) -> FinanceData:
        return self.dispatch(ReplaceData(data))

    def reset(self) -> FinanceData:
        return self.dispatch(ResetData())

    def _notify(
        self,
        kind: NotificationKind,
        title: str,
        description: str | None = None,
    ) -> None:
        if self._notifier is None:
            return
        self._notifier.notify(
            Notification(kind=kind, title=title, description=description)
        )


def _describe_outcome(
    command: Command,
    updated: FinanceData,
) -> tuple[NotificationKind, str, str | None]:
    if isinstance(command, AddEntity):
        name = command.values.get("name", "")
        return (
            NotificationKind.ADDED,
            f"{command.kind.label} added",
            f"{name} has been added.",
        )
    if isinstance(command, UpdateEntity):
        return NotificationKind.UPDATED, f"{command.kind.label} updated", None
    if isinstance(command, DeleteEntity):
        return NotificationKind.DELETED, f"{command.kind.label} deleted", None
    if isinstance(command, UpdateSettings):
        return NotificationKind.UPDATED, "Settings updated", None
    if isinstance(command, ConfirmTransaction):
        transaction = updated.find_transaction(command.transaction_id)
        return (
            NotificationKind.CONFIRMED,
            "Transaction confirmed",
            f"{transaction.name} confirmed at "
            f"{transaction.last_confirmed_amount}.",
        )
    if isinstance(command, CancelTransaction):
        return NotificationKind.DELETED, "Transaction cancelled", None
    if isinstance(command, ReplaceData):
        return (
            NotificationKind.IMPORTED,
            "Data imported",
            "Your data has been restored.",
        )
    return (
        NotificationKind.RESET,
        "Data reset",
        "All data has been cleared.",
    )


def _describe_missing(command: Command) -> str:
    if isinstance(command, (UpdateEntity, DeleteEntity)):
        return f"{command.kind.label} {command.entity_id} not found."
    if isinstance(command, (ConfirmTransaction, CancelTransaction)):
        return f"Transaction {command.transaction_id} not found."
    return "The data is already up to date."


__all__ = ["FinanceStore"]
