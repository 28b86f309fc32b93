"""Tests for transaction settlement."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from finance_tracker.domain.models import (
    AccountType,
    Asset,
    AssetCategory,
    CreditCard,
    FinanceData,
    Liability,
    LiabilityCategory,
    Transaction,
    TransactionStatus,
    TransactionType,
)
from finance_tracker.domain.services.settlement import (
    cancel_transaction,
    confirm_transaction,
    find_linked_account,
    settle_account,
)

NOW = datetime(2024, 5, 15, 9, 30, tzinfo=timezone.utc)


def _transaction(
    type_: TransactionType,
    account_type: AccountType | None,
    account_id: str | None = "acc",
    amount: str = "200",
) -> Transaction:
    return Transaction(
        id="t1",
        name="Salary",
        amount=Decimal(amount),
        type=type_,
        category="Work",
        recurring=True,
        created_at=NOW,
        account_id=account_id if account_type else None,
        account_type=account_type,
        day_of_month=15,
    )


def _asset(value: str = "1000") -> Asset:
    return Asset(
        id="acc",
        name="Checking",
        value=Decimal(value),
        category=AssetCategory.CASH_AT_BANK,
        created_at=NOW,
    )


def _liability(value: str = "5000") -> Liability:
    return Liability(
        id="acc",
        name="Mortgage",
        value=Decimal(value),
        category=LiabilityCategory.MORTGAGE,
        created_at=NOW,
    )


def _card(debt: str = "100") -> CreditCard:
    return CreditCard(
        id="acc",
        name="Visa",
        credit_limit=Decimal("1000"),
        outstanding_debt=Decimal(debt),
        apr=Decimal("18"),
        payment_day=10,
        created_at=NOW,
    )


def test_income_increases_linked_asset() -> None:
    """Confirmed income should raise the linked asset value."""
    transaction = _transaction(TransactionType.INCOME, AccountType.ASSET)
    data = FinanceData(assets=(_asset("1000"),), transactions=(transaction,))

    result = settle_account(data, transaction, Decimal("200"))

    assert result.assets[0].value == Decimal("1200")


def test_expense_decreases_linked_asset() -> None:
    """Confirmed expenses should lower the linked asset value."""
    transaction = _transaction(TransactionType.EXPENSE, AccountType.ASSET)
    data = FinanceData(assets=(_asset("1000"),))

    result = settle_account(data, transaction, Decimal("250"))

    assert result.assets[0].value == Decimal("750")


@pytest.mark.parametrize(
    ("type_", "expected"),
    [
        (TransactionType.EXPENSE, Decimal("5200")),
        (TransactionType.INCOME, Decimal("4800")),
    ],
)
def test_liability_settlement_direction(
    type_: TransactionType,
    expected: Decimal,
) -> None:
    """Expenses should grow a liability and income should pay it down."""
    transaction = _transaction(type_, AccountType.LIABILITY)
    data = FinanceData(liabilities=(_liability("5000"),))

    result = settle_account(data, transaction, Decimal("200"))

    assert result.liabilities[0].value == expected


def test_card_expense_increases_debt() -> None:
    """Card expenses should add to the outstanding debt."""
    transaction = _transaction(TransactionType.EXPENSE, AccountType.CREDIT_CARD)
    data = FinanceData(credit_cards=(_card("100"),))

    result = settle_account(data, transaction, Decimal("150"))

    assert result.credit_cards[0].outstanding_debt == Decimal("250")


def test_card_payment_floors_debt_at_zero() -> None:
    """Paying more than the debt should leave zero debt, not negative."""
    transaction = _transaction(TransactionType.INCOME, AccountType.CREDIT_CARD)
    data = FinanceData(credit_cards=(_card("100"),))

    result = settle_account(data, transaction, Decimal("150"))

    assert result.credit_cards[0].outstanding_debt == Decimal("0")


def test_dangling_link_leaves_accounts_unchanged() -> None:
    """A link to a deleted account should settle without changes."""
    logger = MagicMock()
    transaction = _transaction(TransactionType.INCOME, AccountType.ASSET)
    data = FinanceData(transactions=(transaction,))

    result = settle_account(data, transaction, Decimal("200"), logger=logger)

    assert result is data
    logger.warning.assert_called_once()


def test_unlinked_transaction_is_not_settled() -> None:
    """Transactions without a link should not touch any account."""
    transaction = _transaction(TransactionType.INCOME, None)
    data = FinanceData(assets=(_asset(),))

    assert settle_account(data, transaction, Decimal("200")) is data


def test_find_linked_account_returns_none_for_missing_id() -> None:
    """Lookups by id should return None when nothing matches."""
    data = FinanceData(assets=(_asset(),))

    assert find_linked_account(data, "missing", AccountType.ASSET) is None
    assert find_linked_account(data, "acc", None) is None
    assert find_linked_account(data, "acc", AccountType.ASSET) == _asset()


def test_confirm_transaction_records_and_settles() -> None:
    """Confirming should set status, date and amount then settle."""
    transaction = _transaction(TransactionType.INCOME, AccountType.ASSET)
    data = FinanceData(assets=(_asset("1000"),), transactions=(transaction,))

    result = confirm_transaction(data, "t1", NOW, amount=Decimal("210"))

    confirmed = result.find_transaction("t1")
    assert confirmed.status == TransactionStatus.CONFIRMED
    assert confirmed.last_confirmed_date == NOW
    assert confirmed.last_confirmed_amount == Decimal("210")
    assert confirmed.amount == Decimal("200")
    assert result.assets[0].value == Decimal("1210")
    assert data.assets[0].value == Decimal("1000")


def test_confirm_transaction_defaults_to_estimated_amount() -> None:
    """Quick confirmation should use the estimated amount."""
    transaction = _transaction(TransactionType.INCOME, None)
    data = FinanceData(transactions=(transaction,))

    result = confirm_transaction(data, "t1", NOW)

    assert result.find_transaction("t1").last_confirmed_amount == Decimal(
        "200"
    )


def test_confirm_transaction_can_relink_account() -> None:
    """A new link given on confirmation should be stored and used."""
    transaction = _transaction(TransactionType.EXPENSE, None)
    data = FinanceData(credit_cards=(_card("0"),), transactions=(transaction,))

    result = confirm_transaction(
        data,
        "t1",
        NOW,
        account_id="acc",
        account_type=AccountType.CREDIT_CARD,
    )

    confirmed = result.find_transaction("t1")
    assert confirmed.account_id == "acc"
    assert confirmed.account_type == AccountType.CREDIT_CARD
    assert result.credit_cards[0].outstanding_debt == Decimal("200")


def test_confirm_transaction_requires_complete_link() -> None:
    """Giving only half of an account link should raise ValueError."""
    data = FinanceData(
        transactions=(_transaction(TransactionType.EXPENSE, None),)
    )

    with pytest.raises(ValueError):
        confirm_transaction(data, "t1", NOW, account_id="acc")


def test_confirm_unknown_transaction_is_noop() -> None:
    """Unknown transaction ids should leave data unchanged."""
    data = FinanceData()

    assert confirm_transaction(data, "missing", NOW) is data


def test_confirm_after_account_deleted_does_not_fail() -> None:
    """Settling a transaction whose account was deleted should not fail."""
    transaction = _transaction(TransactionType.INCOME, AccountType.ASSET)
    data = FinanceData(transactions=(transaction,))

    result = confirm_transaction(data, "t1", NOW)

    assert result.assets == ()
    assert result.find_transaction("t1").status == TransactionStatus.CONFIRMED


def test_cancel_transaction_removes_it() -> None:
    """Cancelling should delete the transaction."""
    data = FinanceData(
        transactions=(_transaction(TransactionType.EXPENSE, None),)
    )

    assert cancel_transaction(data, "t1").transactions == ()
    assert cancel_transaction(data, "missing") is data
