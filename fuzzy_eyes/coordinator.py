"""Wires reminder alerts to the countdown and the countdown back to the schedule."""
from __future__ import annotations
import logging

from fuzzy_eyes.countdown import CountdownSession
from fuzzy_eyes.notifications import ALERT_ID, NotificationGateway, UserAction
from fuzzy_eyes.scheduler import ReminderScheduler

logger = logging.getLogger(__name__)

REARM = "rearm"
WAIT = "wait"


class Coordinator:
    """
    Reacts to what the user does with a break alert.

    * OPENED: start the countdown (unless one is running); when it completes
      the reminder interval restarts from zero.
    * DISMISSED: no countdown. With the ``rearm`` policy the interval restarts
      now, with ``wait`` the next reminder comes at the next scheduled tick.
    """

    def __init__(self, scheduler: ReminderScheduler, session: CountdownSession,
                 gateway: NotificationGateway, dismiss_policy: str = REARM):
        if dismiss_policy not in (REARM, WAIT):
            raise ValueError(f"unknown dismiss policy: {dismiss_policy!r}")
        self.scheduler = scheduler
        self.session = session
        self.gateway = gateway
        self.dismiss_policy = dismiss_policy
        gateway.subscribe(self.handle_action)

    def handle_action(self, action: UserAction) -> None:
        if action is UserAction.OPENED:
            self.open_alert()
        elif action is UserAction.DISMISSED:
            self.dismiss_alert()

    def open_alert(self) -> bool:
        self._clear_alert()
        if self.session.is_running:
            logger.debug("Alert opened while a countdown is running, ignoring")
            return False
        logger.info("Alert opened, starting countdown")
        return self.session.start(on_complete=self._countdown_finished)

    def dismiss_alert(self) -> None:
        self._clear_alert()
        if self.dismiss_policy == REARM:
            logger.info("Alert dismissed, restarting reminder interval")
            self.scheduler.start()
        else:
            logger.info("Alert dismissed, keeping current schedule")

    def _countdown_finished(self) -> None:
        self.session.reset()
        self.scheduler.start()

    def skip_countdown(self) -> None:
        """User bailed out of a running countdown: no cue, fresh interval."""
        if not self.session.is_running:
            return
        self.session.cancel()
        self.scheduler.start()

    # ── manual controls ──
    def toggle(self) -> bool:
        """Start/Stop button. Returns True if the scheduler is now armed."""
        self.scheduler.toggle()
        return self.scheduler.is_armed

    def send_now(self) -> bool:
        return self.scheduler.send_now()

    def shutdown(self) -> None:
        logger.info("Shutting down")
        self.gateway.unsubscribe(self.handle_action)
        self.scheduler.stop()
        self.session.cancel()
        self._clear_alert()

    def _clear_alert(self) -> None:
        try:
            self.gateway.clear_pending(ALERT_ID)
        except Exception:
            logger.exception("Could not clear alert")
