"""Domain services computing totals from the finance data aggregate."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from finance_tracker.domain.models import (
    Asset,
    AssetCategoryAmount,
    AssetCategoryBreakdown,
    CardUtilization,
    CashflowSummary,
    ConfirmedTotals,
    CreditCard,
    CreditUtilization,
    FinanceData,
    FinanceTotals,
    Transaction,
    TransactionStatus,
    TransactionType,
)
from finance_tracker.domain.policies import (
    compute_net_worth,
    rate_credit_utilization,
)
from finance_tracker.domain.services.validation import (
    validate_asset_value,
    validate_credit_card,
)
from finance_tracker.utils.decimal_utils import sum_decimals

_HUNDRED = Decimal("100")


def compute_totals(
    data: FinanceData,
    *,
    logger: Logger | None = None,
) -> FinanceTotals:
    """Compute account totals and net worth.

    Args:
        data: Current finance data.
        logger: Optional logger; when given, suspicious values are reported.

    Returns:
        FinanceTotals: Totals and net worth under the settings policy.
    """
    if logger is not None:
        for asset in data.assets:
            validate_asset_value(asset.name, asset.value, logger)
        for card in data.credit_cards:
            validate_credit_card(card, logger)

    total_assets = sum_decimals(asset.value for asset in data.assets)
    total_liabilities = sum_decimals(
        liability.value for liability in data.liabilities
    )
    total_credit_limit = sum_decimals(
        card.credit_limit for card in data.credit_cards
    )
    total_credit_debt = sum_decimals(
        card.outstanding_debt for card in data.credit_cards
    )
    available_credit = total_credit_limit - total_credit_debt
    net_worth = compute_net_worth(
        total_assets,
        total_liabilities,
        total_credit_debt,
        available_credit,
        include_credit=data.settings.include_credit_in_net_worth,
    )
    return FinanceTotals(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        total_credit_limit=total_credit_limit,
        total_credit_debt=total_credit_debt,
        available_credit=available_credit,
        net_worth=net_worth,
    )


def compute_cashflow_summary(
    transactions: Iterable[Transaction],
) -> CashflowSummary:
    """Sum recurring income and expense estimates as a monthly cash flow."""
    recurring = [t for t in transactions if t.recurring]
    income = [t for t in recurring if t.type == TransactionType.INCOME]
    expenses = [t for t in recurring if t.type == TransactionType.EXPENSE]
    return CashflowSummary(
        monthly_income=sum_decimals(t.amount for t in income),
        monthly_expenses=sum_decimals(t.amount for t in expenses),
        income_sources=len(income),
        expense_sources=len(expenses),
    )


def compute_confirmed_totals(
    transactions: Iterable[Transaction],
) -> ConfirmedTotals:
    """Compute estimated and confirmed totals for income and expenses.

    Confirmed sums use the last confirmed amount, falling back to the
    estimate when no confirmed amount was recorded.
    """
    totals = {
        TransactionType.INCOME: [Decimal("0"), Decimal("0")],
        TransactionType.EXPENSE: [Decimal("0"), Decimal("0")],
    }
    for transaction in transactions:
        bucket = totals[transaction.type]
        bucket[0] += transaction.amount
        if transaction.status == TransactionStatus.CONFIRMED:
            bucket[1] += transaction.last_confirmed_amount or transaction.amount
    return ConfirmedTotals(
        total_income=totals[TransactionType.INCOME][0],
        total_expenses=totals[TransactionType.EXPENSE][0],
        confirmed_income=totals[TransactionType.INCOME][1],
        confirmed_expenses=totals[TransactionType.EXPENSE][1],
    )


def compute_asset_category_breakdown(
    assets: Iterable[Asset],
    *,
    currency_code: str,
) -> AssetCategoryBreakdown:
    """Aggregate asset values by category.

    Args:
        assets: Assets to aggregate.
        currency_code: Display currency for the breakdown.

    Returns:
        AssetCategoryBreakdown: Totals sorted by category name.
    """
    totals: dict[str, Decimal] = {}
    for asset in assets:
        category = asset.category.value
        totals[category] = totals.get(category, Decimal("0")) + asset.value

    categories = [
        AssetCategoryAmount(category=category, amount=amount)
        for category, amount in sorted(totals.items())
    ]
    return AssetCategoryBreakdown(
        currency_code=currency_code,
        categories=categories,
    )


def compute_credit_utilization(
    cards: Iterable[CreditCard],
) -> CreditUtilization:
    """Compute overall and per-card credit utilization percentages."""
    cards = list(cards)
    total_limit = sum_decimals(card.credit_limit for card in cards)
    total_debt = sum_decimals(card.outstanding_debt for card in cards)
    utilization_rate = (
        total_debt / total_limit * _HUNDRED if total_limit > 0 else Decimal("0")
    )
    per_card = [
        CardUtilization(
            card_id=card.id,
            name=card.name,
            available_credit=card.available_credit,
            utilization=(
                card.outstanding_debt / card.credit_limit * _HUNDRED
                if card.credit_limit > 0
                else None
            ),
        )
        for card in cards
    ]
    return CreditUtilization(
        total_credit_limit=total_limit,
        total_credit_debt=total_debt,
        available_credit=total_limit - total_debt,
        utilization_rate=utilization_rate,
        rating=rate_credit_utilization(utilization_rate),
        cards=per_card,
    )


__all__ = [
    "compute_totals",
    "compute_cashflow_summary",
    "compute_confirmed_totals",
    "compute_asset_category_breakdown",
    "compute_credit_utilization",
]
