"""Command line entry point."""
from __future__ import annotations
import argparse
import sys
from typing import Any, Optional

from fuzzy_eyes import __version__
from fuzzy_eyes.config import (
    CONFIG_FILE, DISMISS_POLICIES, NOTIFICATION_BACKENDS, load_config, save_config, validate_config,
)
from fuzzy_eyes.log import setup_logging


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="fuzzy-eyes", description="FuzzyEyes break reminder")
    p.add_argument("--test", action="store_true", help="Use a 10-second reminder interval")
    p.add_argument("--config", metavar="PATH", default=None,
                   help=f"Settings file (default: {CONFIG_FILE})")
    p.add_argument("--interval", type=int, metavar="S", help="Seconds between reminders")
    p.add_argument("--duration", type=int, metavar="S", help="Countdown length in seconds")
    p.add_argument("--dismiss-policy", choices=DISMISS_POLICIES,
                   help="rearm: dismissing restarts the interval, wait: keep the schedule")
    p.add_argument("--backend", choices=NOTIFICATION_BACKENDS, help="How reminders are shown")
    p.add_argument("--no-tray", action="store_true", help="Run without the tray icon")
    p.add_argument("--write-config", action="store_true",
                   help="Write the effective settings to the config file and exit")
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def resolve_config(args: argparse.Namespace) -> dict[str, Any]:
    """Config file and --test first, then command-line overrides."""
    cfg = load_config(args.config, test_mode=args.test)
    overrides = {
        "reminder_interval": args.interval,
        "countdown_duration": args.duration,
        "dismiss_policy": args.dismiss_policy,
        "notification_backend": args.backend,
    }
    for key, val in overrides.items():
        if val is not None:
            cfg[key] = val
    if args.no_tray:
        cfg["show_tray"] = False
    if args.verbose:
        cfg["log_level"] = "DEBUG"
    return validate_config(cfg)


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = resolve_config(args)
    setup_logging(cfg.get("log_level", "INFO"))

    if args.write_config:
        path = args.config or CONFIG_FILE
        if not save_config(cfg, path):
            return 1
        print(f"  Wrote {path}")
        return 0

    try:
        import tkinter as tk
    except ImportError:
        print("Error: tkinter is required.", file=sys.stderr)
        print("  sudo apt install python3-tk  (or use the python.org installer)", file=sys.stderr)
        return 1
    from fuzzy_eyes.app import FuzzyEyesApp

    try:
        app = FuzzyEyesApp(cfg)
    except tk.TclError as e:
        print(f"  [X] Cannot open a window: {e}", file=sys.stderr)
        return 1
    app.run()
    return 0
