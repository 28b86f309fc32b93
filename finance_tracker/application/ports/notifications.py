"""Port for reporting operation outcomes to the user."""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class NotificationKind(str, Enum):
    ADDED = "added"
    UPDATED = "updated"
    DELETED = "deleted"
    CONFIRMED = "confirmed"
    IMPORTED = "imported"
    EXPORTED = "exported"
    RESET = "reset"
    FAILED = "failed"


@dataclass(frozen=True)
class Notification:
    """Outcome message shown to the user.

    Attributes:
        kind: Outcome category.
        title: Short headline, e.g. ``Asset added``.
        description: Optional detail line.
    """

    kind: NotificationKind
    title: str
    description: str | None = None


class NotificationPort(Protocol):
    """Port receiving outcome notifications.

    Notifications are informational and never affect control flow.
    """

    def notify(self, notification: Notification) -> None:
        """Deliver a notification."""


__all__ = ["NotificationKind", "Notification", "NotificationPort"]
