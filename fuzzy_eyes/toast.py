"""On-screen break alert drawn with tkinter, for hosts without OS banners."""
from __future__ import annotations
import logging
import tkinter as tk
from typing import Optional

from fuzzy_eyes import theme
from fuzzy_eyes.notifications import DeliveryError, NotificationGateway, UserAction

logger = logging.getLogger(__name__)


class ToastNotificationGateway(NotificationGateway):
    """Always-on-top popup in the top-right corner.

    Clicking the toast (or "Start Timer") reports OPENED; the close button or
    the timeout reports DISMISSED. Replacing or clearing a toast reports
    nothing.
    """

    WIDTH, HEIGHT, MARGIN = 300, 104, 18

    def __init__(self, root: tk.Misc, timeout: int = 30):
        super().__init__()
        self.root = root
        self.timeout = timeout
        self._toast: Optional[tk.Toplevel] = None
        self._toast_id: Optional[str] = None
        self._timeout_id: Optional[str] = None

    def notify(self, alert_id: str, title: str, body: str) -> None:
        self.clear_pending(alert_id)
        try:
            t, close = self._make_window(alert_id, title, body)
        except tk.TclError as e:
            raise DeliveryError(f"could not show toast: {e}") from e

        def opened(e=None):
            self._answer(alert_id, UserAction.OPENED)

        def dismissed(e=None):
            self._answer(alert_id, UserAction.DISMISSED)
            return "break"

        # Toplevel bindings reach every child through its bindtags
        t.bind("<Button-1>", opened)
        close.bind("<Button-1>", dismissed)

        self._toast = t
        self._toast_id = alert_id
        self._timeout_id = self.root.after(self.timeout * 1000, dismissed)

    def _make_window(self, alert_id: str, title: str, body: str) -> tuple[tk.Toplevel, tk.Label]:
        """Build the toast; returns the window and its close label."""
        t = tk.Toplevel(self.root)
        try:
            t.overrideredirect(True);  t.attributes("-topmost", True)
            try:
                t.attributes("-alpha", 0.95)
            except tk.TclError:
                pass
            t.configure(bg=theme.C_CARD, cursor="hand2")
            sw = t.winfo_screenwidth()
            t.geometry(f"{self.WIDTH}x{self.HEIGHT}+{sw - self.WIDTH - self.MARGIN}+{self.MARGIN}")

            f = tk.Frame(t, bg=theme.C_CARD, padx=14, pady=10)
            f.pack(fill="both", expand=True)
            top = tk.Frame(f, bg=theme.C_CARD)
            top.pack(fill="x")
            tk.Label(top, text=title, font=(theme.FONT, 13, "bold"),
                     fg=theme.C_ACCENT, bg=theme.C_CARD).pack(side="left")
            close = tk.Label(top, text="✕", font=(theme.FONT, 11),
                             fg=theme.C_TEXT_MUT, bg=theme.C_CARD, cursor="hand2")
            close.pack(side="right")
            tk.Label(f, text=body, font=(theme.FONT, 10), fg=theme.C_TEXT_DIM,
                     bg=theme.C_CARD).pack(anchor="w", pady=(4, 6))
            tk.Button(f, text="Start Timer", font=(theme.FONT, 9, "bold"),
                      bg=theme.C_BTN_PRI, fg=theme.C_TEXT, relief="flat", padx=12,
                      cursor="hand2",
                      command=lambda: self._answer(alert_id, UserAction.OPENED)
                      ).pack(anchor="w")
        except tk.TclError:
            try:
                t.destroy()
            except tk.TclError:
                pass
            raise
        return t, close

    def clear_pending(self, alert_id: str) -> None:
        if self._toast_id == alert_id:
            self._close()

    def _answer(self, alert_id: str, action: UserAction) -> None:
        if self._toast_id != alert_id:
            return
        self._close()
        self.emit(action)

    def _close(self) -> None:
        if self._timeout_id is not None:
            try:
                self.root.after_cancel(self._timeout_id)
            except tk.TclError:
                pass
            self._timeout_id = None
        if self._toast is not None:
            try:
                self._toast.destroy()
            except tk.TclError:
                pass
        self._toast = None
        self._toast_id = None
