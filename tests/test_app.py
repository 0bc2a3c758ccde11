"""Tests for the control window's close behaviour (no window is opened)."""
import importlib
import sys

import pytest

pytest.importorskip("tkinter")


class FakeWindow:
    def __init__(self):
        self.protocols = {}
        self.state = "normal"

    def protocol(self, name, func):
        self.protocols[name] = func

    def withdraw(self):
        self.state = "withdrawn"

    def iconify(self):
        self.state = "iconic"

    def close(self):
        self.protocols["WM_DELETE_WINDOW"]()


@pytest.fixture
def app_module(monkeypatch):
    # Load the app as it starts on a machine without pystray
    monkeypatch.setitem(sys.modules, "pystray", None)
    monkeypatch.delitem(sys.modules, "fuzzy_eyes.tray", raising=False)
    monkeypatch.delitem(sys.modules, "fuzzy_eyes.app", raising=False)
    return importlib.import_module("fuzzy_eyes.app")


def test_no_pystray_means_no_tray(app_module):
    assert app_module.HAS_TRAY is False


def test_close_hides_to_tray(app_module):
    win = FakeWindow()
    app_module.bind_close(win, use_tray=True)
    win.close()
    assert win.state == "withdrawn"


def test_close_without_tray_minimises(app_module):
    win = FakeWindow()
    app_module.bind_close(win, use_tray=False)
    win.close()
    assert win.state == "iconic"


def test_fmt_interval(app_module):
    assert app_module._fmt_interval(1200) == "20 min"
    assert app_module._fmt_interval(10) == "10 s"
