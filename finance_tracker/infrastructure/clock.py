"""Clock adapters."""

from datetime import datetime

from finance_tracker.application.ports.clock import ClockPort


class SystemClock(ClockPort):
    """Clock returning the local time as an aware datetime."""

    def now(self) -> datetime:
        return datetime.now().astimezone()


class FixedClock(ClockPort):
    """Clock frozen at a given instant, for scripted runs and tests."""

    def __init__(self, instant: datetime) -> None:
        """Initialize the clock.

        Raises:
            ValueError: If the instant has no timezone.
        """
        self._instant = _require_aware(instant)

    def now(self) -> datetime:
        return self._instant

    def advance_to(self, instant: datetime) -> None:
        self._instant = _require_aware(instant)


def _require_aware(instant: datetime) -> datetime:
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise ValueError(f"Clock instant must be timezone-aware: {instant}")
    return instant


__all__ = ["SystemClock", "FixedClock"]
