"""Domain models package."""

from .entities import (
    AccountType,
    Asset,
    AssetCategory,
    CreditCard,
    FinanceData,
    Frequency,
    Liability,
    LiabilityCategory,
    NetWorthSnapshot,
    Settings,
    Theme,
    Transaction,
    TransactionStatus,
    TransactionType,
)
from .finance import (
    AssetCategoryAmount,
    AssetCategoryBreakdown,
    CardUtilization,
    CashflowSummary,
    CashflowView,
    ConfirmedTotals,
    CreditUtilization,
    DueTransaction,
    FinanceTotals,
    NetWorthSummary,
)

__all__ = [
    "AccountType",
    "Asset",
    "AssetCategory",
    "CreditCard",
    "FinanceData",
    "Frequency",
    "Liability",
    "LiabilityCategory",
    "NetWorthSnapshot",
    "Settings",
    "Theme",
    "Transaction",
    "TransactionStatus",
    "TransactionType",
    "AssetCategoryAmount",
    "AssetCategoryBreakdown",
    "CardUtilization",
    "CashflowSummary",
    "CashflowView",
    "ConfirmedTotals",
    "CreditUtilization",
    "DueTransaction",
    "FinanceTotals",
    "NetWorthSummary",
]
