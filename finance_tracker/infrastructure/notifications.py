"""Notification adapters."""

from finance_tracker.application.ports.notifications import (
    Notification,
    NotificationKind,
    NotificationPort,
)
from finance_tracker.infrastructure.logging.logger import get_usage_logger


class LoggingNotifier(NotificationPort):
    """Record user-facing notifications in the usage log."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_usage_logger()

    def notify(self, notification: Notification) -> None:
        message = notification.title
        if notification.description:
            message = f"{message}: {notification.description}"
        if notification.kind == NotificationKind.FAILED:
            self._logger.warning(message)
        else:
            self._logger.info(message)


__all__ = ["LoggingNotifier"]
