"""CLI adapter listing recurring transactions awaiting confirmation."""

from finance_tracker.application.use_cases.get_due_transactions import (
    GetDueTransactionsUseCase,
)
from finance_tracker.infrastructure.container import (
    build_clock,
    build_finance_store,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Print due and overdue recurring transactions."""
    logger = get_app_logger()
    store = build_finance_store()
    use_case = GetDueTransactionsUseCase(store, build_clock(), logger=logger)

    due = use_case.execute()
    if not due:
        print("No transactions due.")
        return

    currency = store.data.settings.currency
    for item in due:
        transaction = item.transaction
        print(
            f"{transaction.id}  {transaction.name}: "
            f"{transaction.amount} {currency} "
            f"({transaction.type.value}) - {item.label} "
            f"[{item.due_date.date().isoformat()}]"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
