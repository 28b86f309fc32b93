"""Net worth history tracking.

Snapshots are appended after changes to assets, liabilities or credit
cards. A candidate is kept only when it differs from the last snapshot by
more than the tolerance, or when the last snapshot is older than the
maximum interval. Stored snapshots are never edited or removed.
"""

import calendar
from dataclasses import replace
from datetime import datetime, timedelta
from logging import Logger

from finance_tracker.domain.constants import (
    HISTORY_TIMEFRAMES,
    SNAPSHOT_MAX_INTERVAL,
    SNAPSHOT_NET_WORTH_TOLERANCE,
)
from finance_tracker.domain.models import (
    FinanceData,
    NetWorthSnapshot,
    Settings,
)
from finance_tracker.domain.policies import compute_net_worth
from finance_tracker.domain.services.aggregation import compute_totals


def build_snapshot(data: FinanceData, now: datetime) -> NetWorthSnapshot:
    """Build a snapshot of the current totals at ``now``."""
    totals = compute_totals(data)
    return NetWorthSnapshot(
        date=now,
        net_worth=totals.net_worth,
        total_assets=totals.total_assets,
        total_liabilities=totals.total_liabilities,
        total_credit_debt=totals.total_credit_debt,
        available_credit=totals.available_credit,
    )


def should_append_snapshot(
    candidate: NetWorthSnapshot,
    last: NetWorthSnapshot | None,
) -> bool:
    """Return True when the candidate should be added to the history.

    Args:
        candidate: Freshly computed snapshot.
        last: Most recent stored snapshot, if any.

    Returns:
        bool: True when there is no history yet, the net worth moved by
        more than the tolerance, or more than the maximum interval elapsed.
    """
    if last is None:
        return True
    if abs(candidate.net_worth - last.net_worth) > SNAPSHOT_NET_WORTH_TOLERANCE:
        return True
    return candidate.date - last.date > SNAPSHOT_MAX_INTERVAL


def accounts_changed(old: FinanceData, new: FinanceData) -> bool:
    """Return True when assets, liabilities or credit cards differ."""
    return (
        old.assets != new.assets
        or old.liabilities != new.liabilities
        or old.credit_cards != new.credit_cards
    )


def append_snapshot(
    data: FinanceData,
    now: datetime,
    *,
    logger: Logger | None = None,
) -> FinanceData:
    """Append a snapshot of ``data`` at ``now`` when the rules allow it.

    Args:
        data: Fully updated finance data.
        now: Snapshot timestamp.
        logger: Optional logger for skipped candidates.

    Returns:
        FinanceData: ``data`` itself or a copy with the snapshot appended.
    """
    history = data.net_worth_history
    last = history[-1] if history else None
    if last is not None and now < last.date:
        if logger is not None:
            logger.warning(
                f"Skipping net worth snapshot at {now.isoformat()}: "
                f"earlier than last snapshot {last.date.isoformat()}"
            )
        return data

    candidate = build_snapshot(data, now)
    if not should_append_snapshot(candidate, last):
        return data
    if logger is not None:
        logger.info(f"Net worth snapshot recorded: {candidate.net_worth}")
    return replace(data, net_worth_history=history + (candidate,))


def maybe_append_snapshot(
    old: FinanceData,
    new: FinanceData,
    now: datetime,
    *,
    logger: Logger | None = None,
) -> FinanceData:
    """Append a snapshot when a mutation changed any tracked account.

    Args:
        old: Finance data before the mutation.
        new: Finance data after the mutation.
        now: Current timestamp.
        logger: Optional logger.

    Returns:
        FinanceData: ``new``, possibly with one more history entry.
    """
    if not accounts_changed(old, new):
        return new
    return append_snapshot(new, now, logger=logger)


def filter_history(
    history: tuple[NetWorthSnapshot, ...] | list[NetWorthSnapshot],
    timeframe: str,
    now: datetime,
    settings: Settings,
) -> list[NetWorthSnapshot]:
    """Return snapshots inside a timeframe, re-derived for current settings.

    Net worth of each snapshot is recomputed from its stored components so
    the series follows the current credit inclusion policy.

    Args:
        history: Stored snapshots in chronological order.
        timeframe: One of ``1D``, ``1M`` or ``1Y``.
        now: Reference timestamp.
        settings: Current settings.

    Returns:
        list[NetWorthSnapshot]: Snapshots dated at or after the cutoff.

    Raises:
        ValueError: If the timeframe is unknown.
    """
    cutoff = timeframe_cutoff(timeframe, now)
    return [
        replace(
            snapshot,
            net_worth=compute_net_worth(
                snapshot.total_assets,
                snapshot.total_liabilities,
                snapshot.total_credit_debt,
                snapshot.available_credit,
                include_credit=settings.include_credit_in_net_worth,
            ),
        )
        for snapshot in history
        if snapshot.date >= cutoff
    ]


def timeframe_cutoff(timeframe: str, now: datetime) -> datetime:
    """Return the earliest timestamp included in a timeframe."""
    if timeframe not in HISTORY_TIMEFRAMES:
        raise ValueError(
            f"Unknown timeframe '{timeframe}'. "
            f"Expected one of {', '.join(HISTORY_TIMEFRAMES)}."
        )
    if timeframe == "1D":
        return now - timedelta(days=1)
    if timeframe == "1M":
        if now.month > 1:
            return _with_clamped_day(now, now.year, now.month - 1)
        return _with_clamped_day(now, now.year - 1, 12)
    return _with_clamped_day(now, now.year - 1, now.month)


def _with_clamped_day(value: datetime, year: int, month: int) -> datetime:
    last_day = calendar.monthrange(year, month)[1]
    return value.replace(year=year, month=month, day=min(value.day, last_day))


__all__ = [
    "build_snapshot",
    "should_append_snapshot",
    "accounts_changed",
    "append_snapshot",
    "maybe_append_snapshot",
    "filter_history",
    "timeframe_cutoff",
]
