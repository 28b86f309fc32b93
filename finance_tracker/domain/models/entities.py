"""Domain models for tracked entities and the finance data aggregate."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum

from finance_tracker.domain.constants import DEFAULT_CURRENCY


class AssetCategory(str, Enum):
    """Supported asset categories."""

    STOCKS = "Stocks"
    CRYPTO = "Crypto"
    CASH = "Cash"
    CASH_AT_BANK = "Cash at Bank"
    SAVINGS = "Savings"
    PRECIOUS_METALS = "Precious Metals"
    REAL_ESTATE = "Real Estate"
    VEHICLES = "Vehicles"
    PENSION = "Pension"
    OTHER_INVESTMENTS = "Other Investments"


class LiabilityCategory(str, Enum):
    """Supported liability categories."""

    MORTGAGE = "Mortgage"
    STUDENT_LOAN = "Student Loan"
    CAR_LOAN = "Car Loan"
    PERSONAL_LOAN = "Personal Loan"
    MEDICAL_DEBT = "Medical Debt"
    TAX_DEBT = "Tax Debt"
    OTHER_DEBT = "Other Debt"


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class TransactionStatus(str, Enum):
    ESTIMATED = "estimated"
    CONFIRMED = "confirmed"


class Frequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class AccountType(str, Enum):
    """Kind of account a transaction can be linked to."""

    ASSET = "asset"
    LIABILITY = "liability"
    CREDIT_CARD = "creditCard"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class Asset:
    """Something the user owns.

    Attributes:
        id: Opaque identifier.
        name: Display name.
        value: Current value, normally non-negative.
        category: Asset category.
        created_at: Creation timestamp.
        description: Optional free text.
    """

    id: str
    name: str
    value: Decimal
    category: AssetCategory
    created_at: datetime
    description: str | None = None


@dataclass(frozen=True)
class Liability:
    """Something the user owes; a positive value is the amount owed."""

    id: str
    name: str
    value: Decimal
    category: LiabilityCategory
    created_at: datetime
    interest_rate: Decimal | None = None
    description: str | None = None


@dataclass(frozen=True)
class CreditCard:
    """Revolving credit line.

    Attributes:
        credit_limit: Maximum credit, non-negative.
        outstanding_debt: Current balance owed, never negative.
        apr: Annual percentage rate.
        payment_day: Calendar day of month the payment is due (1-31).
    """

    id: str
    name: str
    credit_limit: Decimal
    outstanding_debt: Decimal
    apr: Decimal
    payment_day: int
    created_at: datetime

    @property
    def available_credit(self) -> Decimal:
        """Return the credit limit minus the outstanding debt."""
        return self.credit_limit - self.outstanding_debt


@dataclass(frozen=True)
class Transaction:
    """Income or expense, optionally recurring and linked to an account.

    The amount is an estimated magnitude; its direction comes from ``type``.
    ``account_id`` is a weak reference and may no longer resolve.
    ``day_of_month`` is a calendar day for monthly recurrence and an ISO
    weekday (1 = Monday) for weekly recurrence.
    """

    id: str
    name: str
    amount: Decimal
    type: TransactionType
    category: str
    recurring: bool
    created_at: datetime
    status: TransactionStatus = TransactionStatus.ESTIMATED
    frequency: Frequency | None = None
    account_id: str | None = None
    account_type: AccountType | None = None
    day_of_month: int | None = None
    last_confirmed_date: datetime | None = None
    last_confirmed_amount: Decimal | None = None

    @property
    def is_linked(self) -> bool:
        """Return True when both parts of the account link are set."""
        return self.account_id is not None and self.account_type is not None


@dataclass(frozen=True)
class NetWorthSnapshot:
    """Immutable point-in-time record of aggregate metrics."""

    date: datetime
    net_worth: Decimal
    total_assets: Decimal
    total_liabilities: Decimal
    total_credit_debt: Decimal
    available_credit: Decimal


@dataclass(frozen=True)
class Settings:
    """User preferences.

    Attributes:
        currency: Currency code used as a display label only.
        theme: Display theme.
        include_credit_in_net_worth: Add available credit to net worth.
    """

    currency: str = DEFAULT_CURRENCY
    theme: Theme = Theme.LIGHT
    include_credit_in_net_worth: bool = False


@dataclass(frozen=True)
class FinanceData:
    """Root aggregate persisted as a single unit."""

    assets: tuple[Asset, ...] = ()
    liabilities: tuple[Liability, ...] = ()
    credit_cards: tuple[CreditCard, ...] = ()
    transactions: tuple[Transaction, ...] = ()
    settings: Settings = field(default_factory=Settings)
    net_worth_history: tuple[NetWorthSnapshot, ...] = ()

    def find_asset(self, asset_id: str) -> Asset | None:
        return next((a for a in self.assets if a.id == asset_id), None)

    def find_liability(self, liability_id: str) -> Liability | None:
        return next(
            (item for item in self.liabilities if item.id == liability_id),
            None,
        )

    def find_credit_card(self, card_id: str) -> CreditCard | None:
        return next((c for c in self.credit_cards if c.id == card_id), None)

    def find_transaction(self, transaction_id: str) -> Transaction | None:
        return next(
            (t for t in self.transactions if t.id == transaction_id),
            None,
        )


__all__ = [
    "AssetCategory",
    "LiabilityCategory",
    "TransactionType",
    "TransactionStatus",
    "Frequency",
    "AccountType",
    "Theme",
    "Asset",
    "Liability",
    "CreditCard",
    "Transaction",
    "NetWorthSnapshot",
    "Settings",
    "FinanceData",
]
