"""Personal finance tracker: net worth, cash flow and recurring transactions."""

__version__ = "0.1.0"
