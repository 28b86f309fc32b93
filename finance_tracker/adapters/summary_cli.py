"""CLI adapter printing net worth, cash flow and credit utilization."""

from finance_tracker.application.use_cases.get_cashflow import (
    GetCashflowUseCase,
)
from finance_tracker.application.use_cases.get_credit_utilization import (
    GetCreditUtilizationUseCase,
)
from finance_tracker.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
)
from finance_tracker.infrastructure.container import build_finance_store
from finance_tracker.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Print the financial summary of the stored data."""
    logger = get_app_logger()
    store = build_finance_store()

    summary = GetNetWorthSummaryUseCase(store, logger=logger).execute()
    cashflow = GetCashflowUseCase(store, logger=logger).execute()
    credit = GetCreditUtilizationUseCase(store, logger=logger).execute()

    totals = summary.totals
    currency = summary.currency_code
    print(f"Net worth: {totals.net_worth} {currency}")
    print(f"Assets: {totals.total_assets} {currency}")
    print(f"Liabilities: {totals.total_liabilities} {currency}")
    print(f"Credit card debt: {totals.total_credit_debt} {currency}")
    print(f"Available credit: {totals.available_credit} {currency}")
    print(
        f"Monthly cash flow: {cashflow.summary.net} {currency} "
        f"(income {cashflow.summary.monthly_income}, "
        f"expenses {cashflow.summary.monthly_expenses})"
    )
    print(
        f"Credit utilization: {credit.utilization_rate:.1f}% "
        f"({credit.rating})"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
