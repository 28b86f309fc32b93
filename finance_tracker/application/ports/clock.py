"""Port for reading the current time."""

from datetime import datetime
from typing import Protocol


class ClockPort(Protocol):
    """Port exposing the current timestamp."""

    def now(self) -> datetime:
        """Return the current timezone-aware timestamp."""


__all__ = ["ClockPort"]
