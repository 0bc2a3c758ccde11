"""System tray / menu bar icon."""
from __future__ import annotations
import logging
import threading
from typing import Any, Callable, Optional

import pystray

from fuzzy_eyes.icons import create_eye_icon
from fuzzy_eyes.notifications import TrayNotificationGateway, UserAction

logger = logging.getLogger(__name__)


class TrayIcon:
    """pystray icon on its own thread; every menu action is handed to the Tk thread."""

    def __init__(self, root, coordinator, on_open: Callable[[], Any],
                 on_quit: Callable[[], Any],
                 gateway: Optional[TrayNotificationGateway] = None):
        self.root = root
        self.coordinator = coordinator
        self.on_open = on_open
        self.on_quit = on_quit
        self.gateway = gateway
        self.icon: Optional[pystray.Icon] = None

    @property
    def armed(self) -> bool:
        return self.coordinator.scheduler.is_armed

    def _later(self, fn: Callable, *args) -> Callable:
        return lambda icon, item: self.root.after(0, fn, *args)

    def _report(self, action: UserAction) -> None:
        if self.gateway is not None:
            self.gateway.report_action(action)
        else:
            self.root.after(0, self.coordinator.handle_action, action)

    def _menu(self) -> pystray.Menu:
        return pystray.Menu(
            pystray.MenuItem("Open FuzzyEyes", self._later(self.on_open), default=True),
            pystray.Menu.SEPARATOR,
            pystray.MenuItem("Start break timer",
                             lambda icon, item: self._report(UserAction.OPENED)),
            pystray.MenuItem("Dismiss reminder",
                             lambda icon, item: self._report(UserAction.DISMISSED)),
            pystray.MenuItem("Send Test Notification", self._later(self.coordinator.send_now)),
            pystray.MenuItem(
                lambda item: "Stop Timer" if self.armed else "Start Timer",
                self._later(self.coordinator.toggle)),
            pystray.Menu.SEPARATOR,
            pystray.MenuItem("Quit", self._later(self.on_quit)),
        )

    def start(self) -> None:
        self.icon = pystray.Icon("fuzzy_eyes", create_eye_icon(64, paused=not self.armed),
                                 "FuzzyEyes", self._menu())
        if self.gateway is not None:
            self.gateway.attach(self.icon)
        threading.Thread(target=self.icon.run, daemon=True).start()

    def refresh(self, *_: Any) -> None:
        """Update icon and title to reflect armed/stopped."""
        if self.icon is None:
            return
        try:
            self.icon.icon = create_eye_icon(64, paused=not self.armed)
            self.icon.title = "FuzzyEyes" if self.armed else "FuzzyEyes (stopped)"
            self.icon.update_menu()
        except Exception as e:
            logger.debug("Tray refresh failed: %s", e)

    def stop(self) -> None:
        if self.icon is not None:
            self.icon.stop()
            self.icon = None
