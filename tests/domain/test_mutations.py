"""Tests for the finance data reducer."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from finance_tracker.domain.models import (
    AccountType,
    Asset,
    AssetCategory,
    FinanceData,
    Settings,
    Theme,
    TransactionStatus,
    TransactionType,
)
from finance_tracker.domain.services.mutations import (
    AddEntity,
    CancelTransaction,
    ConfirmTransaction,
    DeleteEntity,
    EntityKind,
    ReplaceData,
    ResetData,
    UpdateEntity,
    UpdateSettings,
    apply_mutation,
)

NOW = datetime(2024, 5, 15, 9, 30, tzinfo=timezone.utc)


def _apply(state: FinanceData, command, **kwargs) -> FinanceData:
    return apply_mutation(
        state,
        command,
        now=NOW,
        id_factory=lambda: "new-id",
        **kwargs,
    )


def _state_with_asset() -> FinanceData:
    return FinanceData(
        assets=(
            Asset(
                id="a1",
                name="Wallet",
                value=Decimal("50"),
                category=AssetCategory.CASH,
                created_at=NOW,
            ),
        ),
    )


def test_add_entity_assigns_id_and_creation_time() -> None:
    """Adding should create the entity with a fresh id and timestamp."""
    state = FinanceData()

    result = _apply(
        state,
        AddEntity(
            EntityKind.ASSET,
            {"name": "Stocks", "value": 1500, "category": "Stocks"},
        ),
    )

    asset = result.assets[0]
    assert asset.id == "new-id"
    assert asset.created_at == NOW
    assert asset.value == Decimal("1500")
    assert asset.category == AssetCategory.STOCKS
    assert state.assets == ()


def test_add_transaction_coerces_enums() -> None:
    """Raw strings should become enum members on new transactions."""
    result = _apply(
        FinanceData(),
        AddEntity(
            EntityKind.TRANSACTION,
            {
                "name": "Card bill",
                "amount": "120.50",
                "type": "expense",
                "category": "Bills",
                "recurring": True,
                "frequency": "monthly",
                "account_id": "c1",
                "account_type": "creditCard",
                "day_of_month": 3,
            },
        ),
    )

    transaction = result.transactions[0]
    assert transaction.amount == Decimal("120.50")
    assert transaction.type == TransactionType.EXPENSE
    assert transaction.account_type == AccountType.CREDIT_CARD
    assert transaction.status == TransactionStatus.ESTIMATED


def test_add_entity_rejects_missing_fields() -> None:
    """Required fields must be present when adding."""
    with pytest.raises(ValueError, match="Missing fields"):
        _apply(FinanceData(), AddEntity(EntityKind.ASSET, {"name": "X"}))


def test_add_entity_rejects_protected_fields() -> None:
    """Ids are assigned by the store and cannot be supplied."""
    with pytest.raises(ValueError, match="cannot be set"):
        _apply(
            FinanceData(),
            AddEntity(
                EntityKind.ASSET,
                {
                    "id": "mine",
                    "name": "X",
                    "value": 1,
                    "category": "Cash",
                },
            ),
        )


def test_update_entity_merges_changes() -> None:
    """Updating should merge the given fields only."""
    state = _state_with_asset()

    result = _apply(
        state,
        UpdateEntity(EntityKind.ASSET, "a1", {"value": "75.25"}),
    )

    assert result.assets[0].value == Decimal("75.25")
    assert result.assets[0].name == "Wallet"
    assert state.assets[0].value == Decimal("50")


def test_update_unknown_entity_is_noop() -> None:
    """Unknown ids should return the same state and log a warning."""
    logger = MagicMock()
    state = _state_with_asset()

    result = _apply(
        state,
        UpdateEntity(EntityKind.ASSET, "missing", {"value": 1}),
        logger=logger,
    )

    assert result is state
    logger.warning.assert_called_once()


def test_update_rejects_unknown_fields() -> None:
    """Fields the entity does not have should raise ValueError."""
    with pytest.raises(ValueError, match="Unknown fields"):
        _apply(
            _state_with_asset(),
            UpdateEntity(EntityKind.ASSET, "a1", {"colour": "red"}),
        )


def test_update_transaction_cannot_set_confirmation_fields() -> None:
    """Confirmation details are only written by confirmation."""
    with pytest.raises(ValueError):
        _apply(
            FinanceData(),
            UpdateEntity(
                EntityKind.TRANSACTION,
                "t1",
                {"last_confirmed_amount": 5},
            ),
        )


def test_delete_entity_removes_it() -> None:
    """Deleting should remove the entity by id."""
    state = _state_with_asset()

    result = _apply(state, DeleteEntity(EntityKind.ASSET, "a1"))

    assert result.assets == ()
    assert _apply(state, DeleteEntity(EntityKind.ASSET, "nope")) is state


def test_update_settings_merges_fields() -> None:
    """Settings updates should merge and coerce values."""
    result = _apply(
        FinanceData(),
        UpdateSettings({"currency": "EUR", "theme": "dark"}),
    )

    assert result.settings == Settings(currency="EUR", theme=Theme.DARK)


def test_confirm_and_cancel_commands() -> None:
    """Confirm and cancel commands should delegate to settlement."""
    state = _apply(
        FinanceData(),
        AddEntity(
            EntityKind.TRANSACTION,
            {
                "name": "Gym",
                "amount": 40,
                "type": "expense",
                "category": "Health",
                "recurring": True,
            },
        ),
    )

    confirmed = _apply(state, ConfirmTransaction("new-id", amount=42))
    cancelled = _apply(state, CancelTransaction("new-id"))

    transaction = confirmed.find_transaction("new-id")
    assert transaction.status == TransactionStatus.CONFIRMED
    assert transaction.last_confirmed_amount == Decimal("42")
    assert transaction.last_confirmed_date == NOW
    assert cancelled.transactions == ()


def test_replace_and_reset_data() -> None:
    """Replace should install the given data and reset should clear it."""
    replacement = _state_with_asset()

    assert _apply(FinanceData(), ReplaceData(replacement)) is replacement
    assert _apply(replacement, ResetData()) == FinanceData()


def test_unsupported_command_raises_type_error() -> None:
    """Unknown command objects should be rejected."""
    with pytest.raises(TypeError):
        _apply(FinanceData(), object())


def test_entity_kind_labels() -> None:
    """Entity kinds should expose display labels and collections."""
    assert EntityKind.CREDIT_CARD.label == "Credit card"
    assert EntityKind.CREDIT_CARD.collection == "credit_cards"


def test_update_settings_rejects_unsupported_currency() -> None:
    """Only supported currency codes can be selected."""
    with pytest.raises(ValueError, match="Unsupported currency"):
        _apply(FinanceData(), UpdateSettings({"currency": "XYZ"}))


def test_required_fields_cannot_be_cleared() -> None:
    """None should only be accepted for optional fields."""
    state = _state_with_asset()

    with pytest.raises(ValueError, match="cannot be empty"):
        _apply(state, UpdateEntity(EntityKind.ASSET, "a1", {"value": None}))
    with pytest.raises(ValueError, match="cannot be empty"):
        _apply(FinanceData(), UpdateSettings({"currency": None}))

    result = _apply(
        state,
        UpdateEntity(EntityKind.ASSET, "a1", {"description": None}),
    )
    assert result.assets[0].description is None
