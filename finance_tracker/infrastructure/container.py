"""Composition root for wiring infrastructure adapters."""

from finance_tracker.application.ports.clock import ClockPort
from finance_tracker.application.ports.finance_repository import (
    FinanceRepositoryPort,
)
from finance_tracker.application.ports.notifications import NotificationPort
from finance_tracker.application.use_cases.finance_store import FinanceStore
from finance_tracker.infrastructure.clock import SystemClock
from finance_tracker.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from finance_tracker.infrastructure.json_file_repository import (
    JsonFileFinanceRepository,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.infrastructure.notifications import LoggingNotifier
from finance_tracker.infrastructure.settings import TrackerSettings
from finance_tracker.infrastructure.sqlalchemy_repository import (
    SqlAlchemyFinanceRepository,
)


def build_finance_repository(
    settings: TrackerSettings | None = None,
) -> FinanceRepositoryPort:
    """Return the configured finance data repository."""
    resolved = settings or TrackerSettings.from_env()
    logger = get_app_logger()
    if resolved.backend == "sqlalchemy":
        return SqlAlchemyFinanceRepository(
            SqlAlchemyDatabaseEngineAdapter(resolved.db_url),
            logger=logger,
        )
    return JsonFileFinanceRepository(resolved.data_file, logger=logger)


def build_clock() -> ClockPort:
    """Return the system clock."""
    return SystemClock()


def build_notifier() -> NotificationPort:
    """Return the notifier writing to the usage log."""
    return LoggingNotifier()


def build_finance_store(
    settings: TrackerSettings | None = None,
) -> FinanceStore:
    """Return a store loaded from the configured repository."""
    return FinanceStore(
        repository=build_finance_repository(settings),
        clock=build_clock(),
        notifier=build_notifier(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_finance_repository",
    "build_clock",
    "build_notifier",
    "build_finance_store",
]
