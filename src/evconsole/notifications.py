"""User-facing notifications emitted after each mutation outcome."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Protocol

from pydantic import BaseModel, ConfigDict

_logger = logging.getLogger(__name__)


class MutationKind(StrEnum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class NotificationVariant(StrEnum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


class Notification(BaseModel):
    """A toast-style message: fixed title and description per outcome."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str
    description: str
    variant: NotificationVariant = NotificationVariant.DEFAULT


_SUCCESS_MESSAGES: dict[MutationKind, Notification] = {
    MutationKind.CREATE: Notification(
        title="Station Created",
        description="A new charging station has been added successfully.",
    ),
    MutationKind.UPDATE: Notification(
        title="Station Updated",
        description="The charging station has been updated successfully.",
    ),
    MutationKind.DELETE: Notification(
        title="Station Deleted",
        description="The charging station has been removed successfully.",
    ),
}

_FAILURE_MESSAGES: dict[MutationKind, Notification] = {
    kind: Notification(
        title="Error",
        description=f"Failed to {kind.value} station. Please try again.",
        variant=NotificationVariant.DESTRUCTIVE,
    )
    for kind in MutationKind
}


def success_notification(kind: MutationKind) -> Notification:
    return _SUCCESS_MESSAGES[kind]


def failure_notification(kind: MutationKind) -> Notification:
    return _FAILURE_MESSAGES[kind]


class Notifier(Protocol):
    """Sink for user-facing notifications (a toast area in a UI)."""

    def notify(self, notification: Notification) -> None:
        ...


class LoggingNotifier:
    """Default notifier: writes notifications to the ``evconsole`` log."""

    def notify(self, notification: Notification) -> None:
        if notification.variant == NotificationVariant.DESTRUCTIVE:
            _logger.warning("%s: %s", notification.title, notification.description)
        else:
            _logger.info("%s: %s", notification.title, notification.description)
