"""
FuzzyEyes: 20-20-20 break reminder.

Every 20 minutes a reminder pops up. Click it and a full-screen 20-second
countdown reminds you to look at something 20 feet away; when it finishes
a sound plays and the next 20 minutes start.

Usage:
    python -m fuzzy_eyes
    python -m fuzzy_eyes --test          (10-second reminder interval)
    python -m fuzzy_eyes --write-config  (dump effective settings and exit)
"""
from __future__ import annotations
import logging
import tkinter as tk
from typing import Any, Callable, Optional

from fuzzy_eyes import __version__, theme
from fuzzy_eyes.coordinator import Coordinator
from fuzzy_eyes.countdown import CountdownSession
from fuzzy_eyes.notifications import NotificationGateway, TrayNotificationGateway
from fuzzy_eyes.overlay import CountdownOverlay
from fuzzy_eyes.scheduler import ReminderScheduler, ScheduleState
from fuzzy_eyes.sound import SystemAudioCue
from fuzzy_eyes.toast import ToastNotificationGateway

try:
    from fuzzy_eyes.tray import TrayIcon
    HAS_TRAY = True
except ImportError:
    HAS_TRAY = False

logger = logging.getLogger(__name__)


def _fmt_interval(seconds: int) -> str:
    if seconds % 60 == 0:
        return f"{seconds // 60} min"
    return f"{seconds} s"


def bind_close(root: tk.Misc, use_tray: bool) -> None:
    """Window close hides to the tray when there is one, else minimises."""
    # Only the tray's Open item can bring back a withdrawn window
    root.protocol("WM_DELETE_WINDOW", root.withdraw if use_tray else root.iconify)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
class FuzzyEyesApp:

    def __init__(self, config: dict[str, Any]):
        self.config = config
        self.root = tk.Tk()
        self.root.title("FuzzyEyes")
        self.root.configure(bg=theme.C_BG)
        self.root.resizable(False, False)

        use_tray = HAS_TRAY and config.get("show_tray", True)
        self.use_tray = use_tray
        bind_close(self.root, use_tray)
        self.gateway = self._make_gateway(use_tray)

        self.scheduler = ReminderScheduler(
            self.root, self.gateway,
            interval=config["reminder_interval"],
            countdown_seconds=config["countdown_duration"])
        self.overlay = CountdownOverlay(self.root)
        self.session = CountdownSession(
            self.root, surface=self.overlay,
            audio=SystemAudioCue.from_config(config),
            duration=config["countdown_duration"])
        self.coordinator = Coordinator(
            self.scheduler, self.session, self.gateway,
            dismiss_policy=config["dismiss_policy"])
        self.overlay.on_escape = self.coordinator.skip_countdown

        self._status_var = tk.StringVar()
        self._perm_var = tk.StringVar()
        self._toggle_btn: Optional[tk.Button] = None
        self._perm_label: Optional[tk.Label] = None
        self._build_window()

        self.tray = None
        if use_tray:
            gw = self.gateway if isinstance(self.gateway, TrayNotificationGateway) else None
            self.tray = TrayIcon(self.root, self.coordinator, on_open=self.show_window,
                                 on_quit=self.quit, gateway=gw)
            self.scheduler.on_state_change.append(self.tray.refresh)
            self.tray.start()
        else:
            self.root.bind_all("<Control-q>", lambda e: self.quit())
            self.root.bind_all("<Control-Q>", lambda e: self.quit())
        self.scheduler.on_state_change.append(self._update_status)

    def _make_gateway(self, use_tray: bool) -> NotificationGateway:
        backend = self.config.get("notification_backend", "toast")
        if backend == "tray":
            if use_tray:
                return TrayNotificationGateway(self.root)
            logger.warning("Tray notifications need the tray icon; using on-screen toasts")
        return ToastNotificationGateway(self.root, timeout=self.config.get("toast_timeout", 30))

    # ━━━ Control window ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    def _btn(self, p: tk.Misc, text: str, bg: str, cmd: Callable, bold: bool = False) -> tk.Button:
        wt = "bold" if bold else "normal"
        b = tk.Button(p, text=text, font=(theme.FONT, 10, wt), bg=bg, fg=theme.C_TEXT,
                      relief="flat", padx=18, pady=5, cursor="hand2", command=cmd)
        b.pack(fill="x", padx=16, pady=4)
        return b

    def _build_window(self) -> None:
        tk.Label(self.root, text="FuzzyEyes running in background", font=(theme.FONT, 11, "bold"),
                 fg=theme.C_ACCENT, bg=theme.C_BG).pack(padx=16, pady=(14, 2))
        tk.Label(self.root, textvariable=self._status_var, font=(theme.FONT, 9),
                 fg=theme.C_TEXT_DIM, bg=theme.C_BG).pack(pady=(0, 8))
        self._btn(self.root, "Send Test Notification", theme.C_BTN_SEC, self.coordinator.send_now)
        self._btn(self.root, "Check Permissions", theme.C_BTN_SEC, self.check_permissions)
        self._toggle_btn = self._btn(self.root, "", theme.C_BTN_PRI, self.coordinator.toggle, bold=True)
        self._perm_label = tk.Label(self.root, textvariable=self._perm_var, font=(theme.FONT, 9),
                                    fg=theme.C_TEXT_MUT, bg=theme.C_BG)
        self._perm_label.pack(pady=(4, 12))
        self._update_status()

    def _update_status(self, state: Optional[ScheduleState] = None) -> None:
        if self.scheduler.is_armed:
            self._status_var.set(f"Reminder every {_fmt_interval(self.scheduler.interval)}")
            text = "Stop Timer"
        else:
            self._status_var.set("Reminders stopped")
            text = "Start Timer"
        if self._toggle_btn is not None:
            try:
                self._toggle_btn.configure(text=text)
            except tk.TclError:
                pass

    def check_permissions(self) -> bool:
        ok = self.gateway.check_permission()
        logger.info("Notification permission: %s", "granted" if ok else "not available")
        self._perm_var.set("Notifications allowed" if ok else "Notifications not available")
        if self._perm_label is not None:
            self._perm_label.configure(fg=theme.C_OK if ok else theme.C_ERR)
        return ok

    def show_window(self) -> None:
        self.root.deiconify()
        self.root.lift()
        self.root.focus_force()

    # ━━━ Lifecycle ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
    def _print_banner(self) -> None:
        try:
            print()
            print("  +-----------------------------------------------+")
            print(f"  |  FuzzyEyes {__version__:<35s}|")
            print("  +-----------------------------------------------+")
            print(f"  |  Every {_fmt_interval(self.scheduler.interval):<8s} break reminder                |")
            print(f"  |  Countdown  {self.session.duration:>3d} s                             |")
            print(f"  |  On dismiss {self.coordinator.dismiss_policy:<34s}|")
            print("  +-----------------------------------------------+")
            if not HAS_TRAY:
                print("\n  [!] No tray icon (pystray not available). Ctrl+Q quits.")
            elif not self.use_tray:
                print("\n  [!] Tray icon disabled. Ctrl+Q quits.")
            print()
        except (UnicodeEncodeError, OSError):
            pass  # consoles that can't print

    def run(self) -> None:
        self._print_banner()
        self.scheduler.start()
        self.root.mainloop()

    def quit(self) -> None:
        self.coordinator.shutdown()
        if self.tray is not None:
            self.tray.stop()
        self.root.after(0, self.root.quit)
