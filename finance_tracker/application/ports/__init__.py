"""Application ports package."""

from .clock import ClockPort
from .database import DatabaseEnginePort
from .finance_repository import FinanceRepositoryPort
from .notifications import Notification, NotificationKind, NotificationPort

__all__ = [
    "ClockPort",
    "DatabaseEnginePort",
    "FinanceRepositoryPort",
    "Notification",
    "NotificationKind",
    "NotificationPort",
]
