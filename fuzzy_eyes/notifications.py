"""Notification delivery and the user-action channel.

A gateway delivers break alerts and reports what the user did with them
(``UserAction.OPENED`` / ``UserAction.DISMISSED``) to its subscribers. The
scheduler only talks to the abstract :class:`NotificationGateway`. The tray
gateway below delivers OS banners through pystray; the on-screen toast lives
in :mod:`fuzzy_eyes.toast`.
"""
from __future__ import annotations
import enum
import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

ALERT_ID = "timer-notification"
ALERT_TITLE = "Time for a break!"
ALERT_BODY = "Click to start your {seconds}-second timer"


def alert_body(seconds: int) -> str:
    return ALERT_BODY.format(seconds=seconds)


class UserAction(enum.Enum):
    OPENED = "opened"
    DISMISSED = "dismissed"


class NotificationError(Exception):
    """Base class for notification failures."""


class DeliveryError(NotificationError):
    """The alert could not be delivered."""


class PermissionDenied(DeliveryError):
    """Notifications are not allowed (or not supported) on this host."""


class NotificationGateway:
    """Base gateway: subclasses implement ``notify``/``clear_pending``."""

    def __init__(self):
        self._listeners: list[Callable[[UserAction], Any]] = []

    def notify(self, alert_id: str, title: str, body: str) -> None:
        raise NotImplementedError

    def clear_pending(self, alert_id: str) -> None:
        raise NotImplementedError

    def check_permission(self) -> bool:
        return True

    # ── action channel ──
    def subscribe(self, listener: Callable[[UserAction], Any]) -> None:
        if not callable(listener):
            raise ValueError("Listener must be callable")
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[[UserAction], Any]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, action: UserAction) -> None:
        logger.debug("User action: %s", action.value)
        for listener in list(self._listeners):
            try:
                listener(action)
            except Exception:
                logger.exception("Error in notification action listener")


class TrayNotificationGateway(NotificationGateway):
    """OS notification banners through a ``pystray.Icon``.

    pystray banners have no click callback, so actions come in through the
    tray menu via :meth:`report_action`, which runs on the tray thread and
    hands the event to the Tk thread.
    """

    def __init__(self, root, icon: Optional[Any] = None):
        super().__init__()
        self.root = root
        self.icon = icon
        self._pending: Optional[str] = None

    def attach(self, icon: Any) -> None:
        self.icon = icon

    def check_permission(self) -> bool:
        return bool(self.icon is not None and getattr(self.icon, "HAS_NOTIFICATION", False))

    def notify(self, alert_id: str, title: str, body: str) -> None:
        if not self.check_permission():
            raise PermissionDenied("tray backend cannot show notifications")
        try:
            self.icon.notify(body, title)
        except Exception as e:
            raise DeliveryError(f"tray notification failed: {e}") from e
        self._pending = alert_id

    def clear_pending(self, alert_id: str) -> None:
        if self._pending != alert_id:
            return
        self._pending = None
        try:
            self.icon.remove_notification()
        except Exception as e:
            logger.debug("remove_notification failed: %s", e)

    def report_action(self, action: UserAction) -> None:
        self.root.after(0, self.emit, action)
