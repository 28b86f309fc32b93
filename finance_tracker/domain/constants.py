"""Domain constants for the finance tracker."""

from datetime import timedelta
from decimal import Decimal

SUPPORTED_CURRENCIES = {
    "USD": "US Dollar",
    "EUR": "Euro",
    "GBP": "British Pound",
    "JPY": "Japanese Yen",
    "CAD": "Canadian Dollar",
    "AUD": "Australian Dollar",
    "CHF": "Swiss Franc",
    "CNY": "Chinese Yuan",
    "INR": "Indian Rupee",
}

DEFAULT_CURRENCY = "USD"

# Snapshots closer than this to the previous net worth are coalesced.
SNAPSHOT_NET_WORTH_TOLERANCE = Decimal("0.01")
SNAPSHOT_MAX_INTERVAL = timedelta(milliseconds=3_600_000)

DUE_SOON_DAYS = 7
OVERDUE_ROLLOFF_DAYS = 30

HISTORY_TIMEFRAMES = ("1D", "1M", "1Y")


__all__ = [
    "SUPPORTED_CURRENCIES",
    "DEFAULT_CURRENCY",
    "SNAPSHOT_NET_WORTH_TOLERANCE",
    "SNAPSHOT_MAX_INTERVAL",
    "DUE_SOON_DAYS",
    "OVERDUE_ROLLOFF_DAYS",
    "HISTORY_TIMEFRAMES",
]
