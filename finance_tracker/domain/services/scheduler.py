"""Due-date engine for recurring transactions.

A recurring transaction is due when its next unconfirmed occurrence falls
between ``OVERDUE_ROLLOFF_DAYS`` days ago and ``DUE_SOON_DAYS`` days ahead.
The next unconfirmed occurrence is the one in the current period when the
transaction was never confirmed, otherwise the one in the period right
after the last confirmation. Once that occurrence is more than
``OVERDUE_ROLLOFF_DAYS`` days overdue the current period's occurrence
replaces it, so every new period becomes due again. Periods are calendar
months for monthly recurrence, ISO weeks for weekly recurrence and
calendar days for daily recurrence.
"""

import calendar
import math
from datetime import datetime, timedelta
from logging import Logger

from finance_tracker.domain.constants import (
    DUE_SOON_DAYS,
    OVERDUE_ROLLOFF_DAYS,
)
from finance_tracker.domain.models import (
    DueTransaction,
    Frequency,
    Transaction,
)

_SECONDS_PER_DAY = 86_400


def find_due_transactions(
    transactions,
    today: datetime,
    *,
    logger: Logger | None = None,
) -> list[DueTransaction]:
    """Return recurring transactions awaiting confirmation.

    Args:
        transactions: Transactions to inspect.
        today: Current timestamp.
        logger: Optional logger for out-of-range day numbers.

    Returns:
        list[DueTransaction]: Due or overdue transactions, in input order.
    """
    due: list[DueTransaction] = []
    for transaction in transactions:
        if not transaction.recurring or not transaction.day_of_month:
            continue
        due_date = next_due_date(transaction, today, logger=logger)
        if due_date is None:
            continue
        days = days_until(due_date, today)
        if -OVERDUE_ROLLOFF_DAYS <= days <= DUE_SOON_DAYS:
            due.append(
                DueTransaction(
                    transaction=transaction,
                    due_date=due_date,
                    days_until_due=days,
                    label=describe_due_status(days),
                )
            )
    return due


def next_due_date(
    transaction: Transaction,
    today: datetime,
    *,
    logger: Logger | None = None,
) -> datetime | None:
    """Return the next unconfirmed occurrence of a recurring transaction.

    Args:
        transaction: Recurring transaction with ``day_of_month`` set.
        today: Current timestamp.
        logger: Optional logger.

    Returns:
        datetime | None: Midnight of the due day in ``today``'s timezone,
        or None when the transaction is already confirmed for the current
        period.
    """
    frequency = transaction.frequency or Frequency.MONTHLY
    current = _period_start(today, frequency)
    last_confirmed = transaction.last_confirmed_date
    if last_confirmed is None:
        anchor = current
    else:
        if today.tzinfo is not None:
            last_confirmed = last_confirmed.astimezone(today.tzinfo)
        last_period = _period_start(last_confirmed, frequency)
        if last_period >= current:
            return None
        anchor = _next_period(last_period, frequency)
    day = _clamp_day(transaction, frequency, logger)
    due_date = _occurrence(anchor, day, frequency)
    if days_until(due_date, today) < -OVERDUE_ROLLOFF_DAYS:
        # The first missed occurrence rolled off; the current one is next.
        due_date = _occurrence(current, day, frequency)
    return due_date


def days_until(due_date: datetime, today: datetime) -> int:
    """Return whole days until ``due_date``, rounded up."""
    return math.ceil((due_date - today).total_seconds() / _SECONDS_PER_DAY)


def describe_due_status(days_until_due: int) -> str:
    """Return a display label for a number of days until due."""
    if days_until_due < 0:
        return "Overdue"
    if days_until_due == 0:
        return "Due today"
    if days_until_due == 1:
        return "Due tomorrow"
    return f"Due in {days_until_due} days"


def _clamp_day(
    transaction: Transaction,
    frequency: Frequency,
    logger: Logger | None,
) -> int:
    upper = 7 if frequency == Frequency.WEEKLY else 31
    day = transaction.day_of_month or 1
    clamped = min(max(day, 1), upper)
    if clamped != day and logger is not None:
        logger.warning(
            f"Day {day} out of range for {frequency.value} transaction "
            f"{transaction.name}; using {clamped}"
        )
    return clamped


def _period_start(value: datetime, frequency: Frequency) -> datetime:
    midnight = value.replace(hour=0, minute=0, second=0, microsecond=0)
    if frequency == Frequency.DAILY:
        return midnight
    if frequency == Frequency.WEEKLY:
        return midnight - timedelta(days=midnight.weekday())
    return midnight.replace(day=1)


def _next_period(start: datetime, frequency: Frequency) -> datetime:
    if frequency == Frequency.DAILY:
        return start + timedelta(days=1)
    if frequency == Frequency.WEEKLY:
        return start + timedelta(weeks=1)
    if start.month == 12:
        return start.replace(year=start.year + 1, month=1)
    return start.replace(month=start.month + 1)


def _occurrence(start: datetime, day: int, frequency: Frequency) -> datetime:
    if frequency == Frequency.DAILY:
        return start
    if frequency == Frequency.WEEKLY:
        return start + timedelta(days=day - 1)
    last_day = calendar.monthrange(start.year, start.month)[1]
    return start.replace(day=min(day, last_day))


__all__ = [
    "find_due_transactions",
    "next_due_date",
    "days_until",
    "describe_due_status",
]
