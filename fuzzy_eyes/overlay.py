"""Full-screen countdown surface."""
from __future__ import annotations
import tkinter as tk
from typing import Callable, Optional

from fuzzy_eyes import theme


class CountdownOverlay:
    """Black full-screen window with the seconds left in large white digits.

    ``on_escape`` (if set) is called when the user presses Escape.
    """

    def __init__(self, root: tk.Misc, on_escape: Optional[Callable[[], None]] = None):
        self.root = root
        self.on_escape = on_escape
        self.window: Optional[tk.Toplevel] = None
        self._var: Optional[tk.StringVar] = None

    @property
    def visible(self) -> bool:
        return self.window is not None

    def show(self, remaining: int) -> None:
        if self.window is not None:
            self.update(remaining)
            return
        ov = tk.Toplevel(self.root)
        ov.configure(bg=theme.C_CD_BG)
        sw, sh = ov.winfo_screenwidth(), ov.winfo_screenheight()
        ov.geometry(f"{sw}x{sh}+0+0")
        ov.overrideredirect(True)
        ov.attributes("-topmost", True)

        cf = tk.Frame(ov, bg=theme.C_CD_BG)
        cf.place(relx=0.5, rely=0.5, anchor="center")
        self._var = tk.StringVar(value=str(remaining))
        tk.Label(cf, textvariable=self._var, font=(theme.FONT, 120, "bold"),
                 fg=theme.C_CD_FG, bg=theme.C_CD_BG).pack(padx=20, pady=20)
        tk.Label(cf, text="Look at something 20 feet away", font=(theme.FONT, 18),
                 fg=theme.C_TEXT_DIM, bg=theme.C_CD_BG).pack()

        ov.bind("<Escape>", self._escape)
        ov.lift()
        ov.focus_force()
        self.window = ov

    def update(self, remaining: int) -> None:
        if self._var is not None:
            self._var.set(str(remaining))

    def hide(self) -> None:
        if self.window is not None:
            try:
                self.window.destroy()
            except tk.TclError:
                pass
        self.window = None
        self._var = None

    def _escape(self, event=None) -> None:
        if self.on_escape:
            self.on_escape()
