"""Domain models for derived financial aggregates."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from finance_tracker.domain.models.entities import Transaction


@dataclass(frozen=True)
class FinanceTotals:
    """Aggregate totals derived from the tracked accounts.

    Attributes:
        total_assets: Sum of asset values.
        total_liabilities: Sum of liability values.
        total_credit_limit: Sum of credit card limits.
        total_credit_debt: Sum of credit card outstanding debts.
        available_credit: Credit limit minus credit debt.
        net_worth: Net worth under the configured inclusion policy.
    """

    total_assets: Decimal
    total_liabilities: Decimal
    total_credit_limit: Decimal
    total_credit_debt: Decimal
    available_credit: Decimal
    net_worth: Decimal


@dataclass(frozen=True)
class NetWorthSummary:
    """Totals ready for display in a given currency."""

    totals: FinanceTotals
    currency_code: str
    include_credit_in_net_worth: bool


@dataclass(frozen=True)
class CashflowSummary:
    """Monthly recurring income and expenses."""

    monthly_income: Decimal
    monthly_expenses: Decimal
    income_sources: int
    expense_sources: int

    @property
    def net(self) -> Decimal:
        """Return monthly_income minus monthly_expenses."""
        return self.monthly_income - self.monthly_expenses


@dataclass(frozen=True)
class ConfirmedTotals:
    """Estimated and confirmed totals per transaction type."""

    total_income: Decimal
    total_expenses: Decimal
    confirmed_income: Decimal
    confirmed_expenses: Decimal


@dataclass(frozen=True)
class CashflowView:
    """Recurring cash flow plus estimated and confirmed totals."""

    summary: CashflowSummary
    totals: ConfirmedTotals


@dataclass(frozen=True)
class AssetCategoryAmount:
    """Amount aggregated for a given asset category."""

    category: str
    amount: Decimal


@dataclass(frozen=True)
class AssetCategoryBreakdown:
    """Breakdown of asset amounts by category."""

    currency_code: str
    categories: list[AssetCategoryAmount]


@dataclass(frozen=True)
class CardUtilization:
    """Utilization of a single credit card."""

    card_id: str
    name: str
    available_credit: Decimal
    utilization: Decimal | None


@dataclass(frozen=True)
class CreditUtilization:
    """Utilization across all credit cards."""

    total_credit_limit: Decimal
    total_credit_debt: Decimal
    available_credit: Decimal
    utilization_rate: Decimal
    rating: str
    cards: list[CardUtilization]


@dataclass(frozen=True)
class DueTransaction:
    """Recurring transaction awaiting confirmation.

    Attributes:
        transaction: The recurring transaction.
        due_date: Occurrence the confirmation is expected for.
        days_until_due: Whole days until the due date, negative when overdue.
        label: Human readable status such as ``Due tomorrow``.
    """

    transaction: Transaction
    due_date: datetime
    days_until_due: int
    label: str

    @property
    def is_overdue(self) -> bool:
        return self.days_until_due < 0


__all__ = [
    "FinanceTotals",
    "NetWorthSummary",
    "CashflowSummary",
    "ConfirmedTotals",
    "CashflowView",
    "AssetCategoryAmount",
    "AssetCategoryBreakdown",
    "CardUtilization",
    "CreditUtilization",
    "DueTransaction",
]
