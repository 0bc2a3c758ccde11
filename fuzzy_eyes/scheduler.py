"""Repeating break-reminder wake-up.

The scheduler owns exactly one wake-up, installed on the event loop with
``root.after``. Arming always cancels the previous wake-up before installing
the next one, and every wake-up carries the generation it was armed in so a
callback that was already queued when it got cancelled cannot fire an alert.
"""
from __future__ import annotations
import enum
import logging
from typing import Any, Callable, Optional

from fuzzy_eyes.notifications import (
    ALERT_ID, ALERT_TITLE, DeliveryError, NotificationGateway, PermissionDenied, alert_body,
)

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 1200   # seconds
DEFAULT_COUNTDOWN = 20    # seconds, quoted in the alert body


class ScheduleState(enum.Enum):
    IDLE = "idle"
    ARMED = "armed"


class ReminderScheduler:

    def __init__(self, root: Any, gateway: NotificationGateway,
                 interval: int = DEFAULT_INTERVAL, countdown_seconds: int = DEFAULT_COUNTDOWN):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.root = root
        self.gateway = gateway
        self.interval = interval
        self.countdown_seconds = countdown_seconds
        self.state = ScheduleState.IDLE
        self.fired = 0
        self.on_state_change: list[Callable[[ScheduleState], Any]] = []
        self._after_id: Optional[str] = None
        self._generation = 0

    @property
    def is_armed(self) -> bool:
        return self.state is ScheduleState.ARMED

    # ━━━ Arm / disarm ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    def start(self) -> None:
        """Arm (or re-arm) the repeating wake-up; a fresh full interval starts now."""
        self._cancel_wakeup()
        self._install_wakeup()
        was = self.state
        self.state = ScheduleState.ARMED
        logger.info("Reminder armed: every %ss", self.interval)
        if was is not ScheduleState.ARMED:
            self._state_changed()

    def stop(self) -> None:
        """Cancel the wake-up. Stopping an idle scheduler does nothing."""
        if self.state is ScheduleState.IDLE:
            return
        self._cancel_wakeup()
        self.state = ScheduleState.IDLE
        logger.info("Reminder stopped")
        self._state_changed()

    def toggle(self) -> ScheduleState:
        if self.is_armed:
            self.stop()
        else:
            self.start()
        return self.state

    def _install_wakeup(self) -> None:
        gen = self._generation
        self._after_id = self.root.after(self.interval * 1000, self._wake, gen)

    def _cancel_wakeup(self) -> None:
        self._generation += 1
        if self._after_id is not None:
            self.root.after_cancel(self._after_id)
            self._after_id = None

    def _wake(self, gen: int) -> None:
        if gen != self._generation or self.state is not ScheduleState.ARMED:
            return
        # Next wake-up goes in first so a failing fire can't break the chain
        self._install_wakeup()
        logger.debug("Wake-up fired")
        self.fire_alert()

    def _state_changed(self) -> None:
        for cb in list(self.on_state_change):
            try:
                cb(self.state)
            except Exception:
                logger.exception("Error in scheduler state listener")

    # ━━━ Alerts ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    def fire_alert(self) -> bool:
        """Replace any outstanding alert with a new one. Returns True if delivered."""
        self.fired += 1
        try:
            self.gateway.clear_pending(ALERT_ID)
        except Exception:
            logger.exception("Could not clear previous alert")
        try:
            self.gateway.notify(ALERT_ID, ALERT_TITLE, alert_body(self.countdown_seconds))
        except PermissionDenied as e:
            logger.warning("Notification not allowed: %s", e)
            return False
        except DeliveryError as e:
            logger.warning("Notification not delivered: %s", e)
            return False
        except Exception:
            logger.exception("Notification gateway failed")
            return False
        logger.info("Break reminder sent")
        return True

    def send_now(self) -> bool:
        """Manual "send test notification": fire immediately, schedule untouched."""
        logger.info("Sending manual notification")
        return self.fire_alert()
