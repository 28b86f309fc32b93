"""Pure reducer applying commands to the finance data aggregate.

Every command returns a new ``FinanceData``; the input is never modified.
"""

from collections.abc import Callable, Mapping
from dataclasses import MISSING, dataclass, field, fields, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum
from logging import Logger
from typing import Any, Union
from uuid import uuid4

from finance_tracker.domain.constants import SUPPORTED_CURRENCIES
from finance_tracker.domain.models import (
    AccountType,
    Asset,
    AssetCategory,
    CreditCard,
    FinanceData,
    Frequency,
    Liability,
    LiabilityCategory,
    Settings,
    Theme,
    Transaction,
    TransactionStatus,
    TransactionType,
)
from finance_tracker.domain.services.settlement import (
    cancel_transaction,
    confirm_transaction,
)
from finance_tracker.utils.decimal_utils import coerce_decimal


class EntityKind(str, Enum):
    """Collections of the aggregate that support add, update and delete."""

    ASSET = "asset"
    LIABILITY = "liability"
    CREDIT_CARD = "credit_card"
    TRANSACTION = "transaction"

    @property
    def collection(self) -> str:
        return _COLLECTIONS[self][0]

    @property
    def entity_class(self) -> type:
        return _COLLECTIONS[self][1]

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").capitalize()


_COLLECTIONS = {
    EntityKind.ASSET: ("assets", Asset),
    EntityKind.LIABILITY: ("liabilities", Liability),
    EntityKind.CREDIT_CARD: ("credit_cards", CreditCard),
    EntityKind.TRANSACTION: ("transactions", Transaction),
}

_PROTECTED_FIELDS = frozenset({"id", "created_at"})
_SETTLEMENT_FIELDS = frozenset({"last_confirmed_date", "last_confirmed_amount"})
_DECIMAL_FIELDS = frozenset(
    {
        "value",
        "interest_rate",
        "credit_limit",
        "outstanding_debt",
        "apr",
        "amount",
    }
)
_ENUM_FIELDS = {
    Asset: {"category": AssetCategory},
    Liability: {"category": LiabilityCategory},
    Transaction: {
        "type": TransactionType,
        "status": TransactionStatus,
        "frequency": Frequency,
        "account_type": AccountType,
    },
    Settings: {"theme": Theme},
}


@dataclass(frozen=True)
class AddEntity:
    kind: EntityKind
    values: Mapping[str, Any]


@dataclass(frozen=True)
class UpdateEntity:
    kind: EntityKind
    entity_id: str
    changes: Mapping[str, Any]


@dataclass(frozen=True)
class DeleteEntity:
    kind: EntityKind
    entity_id: str


@dataclass(frozen=True)
class UpdateSettings:
    changes: Mapping[str, Any]


@dataclass(frozen=True)
class ConfirmTransaction:
    """Confirm a transaction, optionally amending amount and account link.

    A missing amount confirms the estimated amount.
    """

    transaction_id: str
    amount: Decimal | None = None
    account_id: str | None = None
    account_type: AccountType | None = None


@dataclass(frozen=True)
class CancelTransaction:
    transaction_id: str


@dataclass(frozen=True)
class ReplaceData:
    """Replace the whole aggregate, as done by an import."""

    data: FinanceData


@dataclass(frozen=True)
class ResetData:
    data: FinanceData = field(default_factory=FinanceData)


Command = Union[
    AddEntity,
    UpdateEntity,
    DeleteEntity,
    UpdateSettings,
    ConfirmTransaction,
    CancelTransaction,
    ReplaceData,
    ResetData,
]


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return str(uuid4())


def apply_mutation(
    state: FinanceData,
    command: Command,
    *,
    now: datetime,
    id_factory: Callable[[], str] = new_id,
    logger: Logger | None = None,
) -> FinanceData:
    """Apply a command and return the resulting finance data.

    Args:
        state: Current finance data.
        command: Command to apply.
        now: Current timestamp, used for creation and confirmation dates.
        id_factory: Factory for identifiers of new entities.
        logger: Optional logger for no-op commands.

    Returns:
        FinanceData: New finance data.

    Raises:
        ValueError: If a command carries unknown, protected, missing or
            invalid field values.
        TypeError: If the command type is not supported.
    """
    if isinstance(command, AddEntity):
        return _add(state, command, now, id_factory)
    if isinstance(command, UpdateEntity):
        return _update(state, command, logger)
    if isinstance(command, DeleteEntity):
        return _delete(state, command, logger)
    if isinstance(command, UpdateSettings):
        _check_fields(Settings, command.changes, frozenset())
        currency = command.changes.get("currency")
        if currency is not None and currency not in SUPPORTED_CURRENCIES:
            raise ValueError(f"Unsupported currency: {currency}")
        return replace(
            state,
            settings=replace(
                state.settings,
                **_normalize(Settings, command.changes),
            ),
        )
    if isinstance(command, ConfirmTransaction):
        amount = command.amount
        return confirm_transaction(
            state,
            command.transaction_id,
            now,
            amount=None if amount is None else coerce_decimal(amount),
            account_id=command.account_id,
            account_type=(
                None
                if command.account_type is None
                else AccountType(command.account_type)
            ),
            logger=logger,
        )
    if isinstance(command, CancelTransaction):
        return cancel_transaction(state, command.transaction_id)
    if isinstance(command, (ReplaceData, ResetData)):
        return command.data
    raise TypeError(f"Unsupported command: {type(command).__name__}")


def _add(
    state: FinanceData,
    command: AddEntity,
    now: datetime,
    id_factory: Callable[[], str],
) -> FinanceData:
    kind = command.kind
    _check_fields(kind.entity_class, command.values, _PROTECTED_FIELDS)
    missing = sorted(_required_fields(kind.entity_class) - set(command.values))
    if missing:
        raise ValueError(
            f"Missing fields for {kind.entity_class.__name__}: "
            f"{', '.join(missing)}"
        )
    entity = kind.entity_class(
        id=id_factory(),
        created_at=now,
        **_normalize(kind.entity_class, command.values),
    )
    collection = getattr(state, kind.collection)
    return replace(state, **{kind.collection: collection + (entity,)})


def _update(
    state: FinanceData,
    command: UpdateEntity,
    logger: Logger | None,
) -> FinanceData:
    kind = command.kind
    forbidden = _PROTECTED_FIELDS
    if kind == EntityKind.TRANSACTION:
        forbidden = forbidden | _SETTLEMENT_FIELDS
    _check_fields(kind.entity_class, command.changes, forbidden)
    collection = getattr(state, kind.collection)
    if not any(item.id == command.entity_id for item in collection):
        _warn_missing(logger, kind, command.entity_id)
        return state
    changes = _normalize(kind.entity_class, command.changes)
    updated = tuple(
        replace(item, **changes)
        if item.id == command.entity_id
        else item
        for item in collection
    )
    return replace(state, **{kind.collection: updated})


def _delete(
    state: FinanceData,
    command: DeleteEntity,
    logger: Logger | None,
) -> FinanceData:
    kind = command.kind
    collection = getattr(state, kind.collection)
    remaining = tuple(
        item for item in collection if item.id != command.entity_id
    )
    if len(remaining) == len(collection):
        _warn_missing(logger, kind, command.entity_id)
        return state
    return replace(state, **{kind.collection: remaining})


def _check_fields(
    model: type,
    values: Mapping[str, Any],
    forbidden: frozenset[str],
) -> None:
    known = {f.name for f in fields(model)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(
            f"Unknown fields for {model.__name__}: {', '.join(unknown)}"
        )
    blocked = sorted(set(values) & forbidden)
    if blocked:
        raise ValueError(
            f"Fields cannot be set on {model.__name__}: {', '.join(blocked)}"
        )
    # Only fields defaulting to None are optional.
    nullable = {f.name for f in fields(model) if f.default is None}
    cleared = sorted(
        key for key, value in values.items()
        if value is None and key not in nullable
    )
    if cleared:
        raise ValueError(
            f"Fields cannot be empty on {model.__name__}: {', '.join(cleared)}"
        )


def _required_fields(model: type) -> set[str]:
    return {
        f.name
        for f in fields(model)
        if f.default is MISSING
        and f.default_factory is MISSING
        and f.name not in _PROTECTED_FIELDS
    }


def _normalize(model: type, values: Mapping[str, Any]) -> dict[str, Any]:
    """Coerce raw numbers to Decimal and raw strings to enum members."""
    enums = _ENUM_FIELDS.get(model, {})
    normalized = {}
    for key, value in values.items():
        if value is None:
            normalized[key] = value
        elif key in enums:
            normalized[key] = enums[key](value)
        elif key in _DECIMAL_FIELDS:
            normalized[key] = coerce_decimal(value)
        else:
            normalized[key] = value
    return normalized


def _warn_missing(
    logger: Logger | None,
    kind: EntityKind,
    entity_id: str,
) -> None:
    if logger is not None:
        logger.warning(f"{kind.label} {entity_id} not found")


__all__ = [
    "EntityKind",
    "AddEntity",
    "UpdateEntity",
    "DeleteEntity",
    "UpdateSettings",
    "ConfirmTransaction",
    "CancelTransaction",
    "ReplaceData",
    "ResetData",
    "Command",
    "new_id",
    "apply_mutation",
]
