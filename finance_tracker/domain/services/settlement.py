"""Settlement of confirmed transactions onto linked accounts."""

from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from logging import Logger

from finance_tracker.domain.models import (
    AccountType,
    Asset,
    CreditCard,
    FinanceData,
    Liability,
    Transaction,
    TransactionStatus,
    TransactionType,
)


def find_linked_account(
    data: FinanceData,
    account_id: str | None,
    account_type: AccountType | None,
) -> Asset | Liability | CreditCard | None:
    """Resolve a transaction's account link.

    Links are weak references, so a deleted account resolves to None.
    """
    if account_id is None or account_type is None:
        return None
    if account_type == AccountType.ASSET:
        return data.find_asset(account_id)
    if account_type == AccountType.LIABILITY:
        return data.find_liability(account_id)
    return data.find_credit_card(account_id)


def settle_account(
    data: FinanceData,
    transaction: Transaction,
    amount: Decimal,
    *,
    logger: Logger | None = None,
) -> FinanceData:
    """Apply a confirmed amount to the account linked to a transaction.

    Income raises an asset and lowers a liability or card debt; expenses do
    the opposite. Card debt never drops below zero.

    Args:
        data: Current finance data.
        transaction: Transaction whose link is used.
        amount: Confirmed amount.
        logger: Optional logger for unresolved links.

    Returns:
        FinanceData: Data with the linked account updated, or unchanged
        when the transaction is unlinked or the account no longer exists.
    """
    if not transaction.is_linked:
        return data
    account = find_linked_account(
        data,
        transaction.account_id,
        transaction.account_type,
    )
    if account is None:
        if logger is not None:
            logger.warning(
                f"Linked {transaction.account_type.value} "
                f"{transaction.account_id} not found for transaction "
                f"{transaction.name}; skipping account update"
            )
        return data

    is_income = transaction.type == TransactionType.INCOME
    if isinstance(account, Asset):
        value = account.value + amount if is_income else account.value - amount
        updated = replace(account, value=value)
        return replace(
            data,
            assets=_replace_by_id(data.assets, updated),
        )
    if isinstance(account, Liability):
        value = account.value - amount if is_income else account.value + amount
        updated = replace(account, value=value)
        return replace(
            data,
            liabilities=_replace_by_id(data.liabilities, updated),
        )
    debt = (
        account.outstanding_debt - amount
        if is_income
        else account.outstanding_debt + amount
    )
    updated = replace(account, outstanding_debt=max(debt, Decimal("0")))
    return replace(
        data,
        credit_cards=_replace_by_id(data.credit_cards, updated),
    )


def confirm_transaction(
    data: FinanceData,
    transaction_id: str,
    now: datetime,
    *,
    amount: Decimal | None = None,
    account_id: str | None = None,
    account_type: AccountType | None = None,
    logger: Logger | None = None,
) -> FinanceData:
    """Confirm a transaction and settle it onto its linked account.

    Args:
        data: Current finance data.
        transaction_id: Transaction to confirm.
        now: Confirmation timestamp.
        amount: Actual amount; the estimate is used when omitted.
        account_id: New account link, given together with account_type.
        account_type: New account link kind.
        logger: Optional logger.

    Returns:
        FinanceData: Updated data; unchanged when the id is unknown.

    Raises:
        ValueError: If only one part of a new account link is given.
    """
    if (account_id is None) != (account_type is None):
        raise ValueError(
            "account_id and account_type must be given together"
        )
    transaction = data.find_transaction(transaction_id)
    if transaction is None:
        if logger is not None:
            logger.warning(f"Transaction {transaction_id} not found")
        return data

    confirmed_amount = transaction.amount if amount is None else amount
    changes = {
        "status": TransactionStatus.CONFIRMED,
        "last_confirmed_date": now,
        "last_confirmed_amount": confirmed_amount,
    }
    if account_id is not None:
        changes["account_id"] = account_id
        changes["account_type"] = account_type
    confirmed = replace(transaction, **changes)

    updated = replace(
        data,
        transactions=_replace_by_id(data.transactions, confirmed),
    )
    if logger is not None:
        logger.info(
            f"Transaction {confirmed.name} confirmed: {confirmed_amount}"
        )
    return settle_account(updated, confirmed, confirmed_amount, logger=logger)


def cancel_transaction(data: FinanceData, transaction_id: str) -> FinanceData:
    """Remove a transaction instead of confirming it.

    Unknown ids leave the data unchanged.
    """
    remaining = tuple(t for t in data.transactions if t.id != transaction_id)
    if len(remaining) == len(data.transactions):
        return data
    return replace(data, transactions=remaining)


def _replace_by_id(items: tuple, updated) -> tuple:
    return tuple(updated if item.id == updated.id else item for item in items)


__all__ = [
    "find_linked_account",
    "settle_account",
    "confirm_transaction",
    "cancel_transaction",
]
