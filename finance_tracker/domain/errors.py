"""Domain errors."""


class FinanceTrackerError(Exception):
    """Base class for finance tracker errors."""


class MalformedImportError(FinanceTrackerError):
    """Raised when imported data is not valid finance data JSON."""


__all__ = ["FinanceTrackerError", "MalformedImportError"]
