"""Application use cases package."""

from .finance_store import FinanceStore
from .get_asset_category_breakdown import GetAssetCategoryBreakdownUseCase
from .get_cashflow import GetCashflowUseCase
from .get_credit_utilization import GetCreditUtilizationUseCase
from .get_due_transactions import GetDueTransactionsUseCase
from .get_net_worth_history import GetNetWorthHistoryUseCase
from .get_net_worth_summary import GetNetWorthSummaryUseCase
from .import_export import (
    ExportFinanceDataUseCase,
    ExportResult,
    ImportFinanceDataUseCase,
)

__all__ = [
    "FinanceStore",
    "GetAssetCategoryBreakdownUseCase",
    "GetCashflowUseCase",
    "GetCreditUtilizationUseCase",
    "GetDueTransactionsUseCase",
    "GetNetWorthHistoryUseCase",
    "GetNetWorthSummaryUseCase",
    "ExportFinanceDataUseCase",
    "ExportResult",
    "ImportFinanceDataUseCase",
]
