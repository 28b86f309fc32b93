"""CLI adapter confirming or cancelling a due transaction."""

import argparse
from decimal import Decimal, InvalidOperation

from finance_tracker.domain.models import AccountType
from finance_tracker.infrastructure.container import build_finance_store
from finance_tracker.infrastructure.logging.logger import get_app_logger


def _parse_amount(value: str) -> Decimal:
    """Parse a positive decimal amount for argparse."""
    try:
        amount = Decimal(value)
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(
            f"Invalid amount '{value}'."
        ) from exc
    if not amount.is_finite() or amount < 0:
        raise argparse.ArgumentTypeError(
            f"Amount must be a non-negative number, got '{value}'."
        )
    return amount


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Confirm or cancel a recurring transaction.",
    )
    parser.add_argument("transaction_id", help="Transaction identifier.")
    parser.add_argument(
        "--amount",
        type=_parse_amount,
        default=None,
        help="Actual amount; the estimate is used when omitted.",
    )
    parser.add_argument(
        "--account-id",
        default=None,
        help="Account to settle the amount onto.",
    )
    parser.add_argument(
        "--account-type",
        choices=[item.value for item in AccountType],
        default=None,
        help="Kind of the account given with --account-id.",
    )
    parser.add_argument(
        "--cancel",
        action="store_true",
        help="Delete the transaction instead of confirming it.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Confirm or cancel the transaction named on the command line."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if (args.account_id is None) != (args.account_type is None):
        parser.error("--account-id and --account-type must be given together")

    logger = get_app_logger()
    store = build_finance_store()
    transaction = store.data.find_transaction(args.transaction_id)
    if transaction is None:
        logger.warning(f"Transaction {args.transaction_id} not found")
        print(f"Transaction {args.transaction_id} not found.")
        return

    if args.cancel:
        store.cancel_transaction(args.transaction_id)
        print(f"Cancelled {transaction.name}.")
        return

    account_type = (
        AccountType(args.account_type) if args.account_type else None
    )
    data = store.confirm_transaction(
        args.transaction_id,
        amount=args.amount,
        account_id=args.account_id,
        account_type=account_type,
    )
    confirmed = data.find_transaction(args.transaction_id)
    print(
        f"Confirmed {confirmed.name} at {confirmed.last_confirmed_amount} "
        f"{data.settings.currency}."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
