"""Settings: a plain dict of defaults, overridden by a JSON file in the home dir."""
from __future__ import annotations
import json
import logging
import os
from typing import Any, Optional

logger = logging.getLogger(__name__)

CONFIG_FILE = os.path.join(os.path.expanduser("~"), "fuzzy_eyes_config.json")

TEST_REMINDER_INTERVAL = 10   # seconds, used by --test

DISMISS_POLICIES = ("rearm", "wait")
NOTIFICATION_BACKENDS = ("toast", "tray")

DEFAULT_CONFIG: dict[str, Any] = {
    "reminder_interval": 1200,        # Seconds between break reminders (20 min)
    "countdown_duration": 20,         # Seconds the break countdown runs
    "dismiss_policy": "rearm",        # "rearm": restart interval on dismiss, "wait": keep schedule
    "notification_backend": "toast",  # "toast": on-screen popup, "tray": OS banner via tray icon
    "toast_timeout": 30,              # Seconds before an unanswered toast counts as dismissed
    "sound_enabled": True,            # Play a cue when the countdown completes
    "custom_sound_enabled": False,
    "custom_sound_path": "",
    "show_tray": True,                # Tray / menu bar icon
    "log_level": "INFO",
}

# key, minimum, default
_NUMERIC_LIMITS = [
    ("reminder_interval", 1, 1200),
    ("countdown_duration", 1, 20),
    ("toast_timeout", 5, 30),
]

_CHOICES = [
    ("dismiss_policy", DISMISS_POLICIES, "rearm"),
    ("notification_backend", NOTIFICATION_BACKENDS, "toast"),
]


def load_config(path: Optional[str] = None, test_mode: bool = False) -> dict[str, Any]:
    """Load config from file, falling back to defaults for missing/invalid values."""
    path = path or CONFIG_FILE
    cfg = json.loads(json.dumps(DEFAULT_CONFIG))
    if os.path.exists(path):
        try:
            with open(path, encoding="utf-8") as f:
                user_cfg = json.load(f)
            if isinstance(user_cfg, dict):
                cfg.update(user_cfg)
            else:
                logger.warning("Config %s is not a JSON object. Using defaults.", path)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Config load error: %s. Using defaults.", e)

    if test_mode:
        cfg["reminder_interval"] = TEST_REMINDER_INTERVAL

    return validate_config(cfg)


def validate_config(cfg: dict[str, Any]) -> dict[str, Any]:
    """Replace out-of-range or mistyped values with their defaults, in place."""
    for key, min_val, default in _NUMERIC_LIMITS:
        val = cfg.get(key)
        # bool is an int subclass; "true" is not a duration
        if isinstance(val, bool) or not isinstance(val, (int, float)) or val < min_val:
            if key in cfg:
                logger.warning("Invalid %s=%r, using %r", key, val, default)
            cfg[key] = default
        else:
            cfg[key] = int(val)

    for key, allowed, default in _CHOICES:
        if cfg.get(key) not in allowed:
            logger.warning("Invalid %s=%r (expected one of %s), using %r",
                           key, cfg.get(key), ", ".join(allowed), default)
            cfg[key] = default

    for key in ("sound_enabled", "custom_sound_enabled", "show_tray"):
        cfg[key] = bool(cfg.get(key, DEFAULT_CONFIG[key]))
    if not isinstance(cfg.get("custom_sound_path"), str):
        cfg["custom_sound_path"] = ""
    return cfg


def save_config(cfg: dict[str, Any], path: Optional[str] = None) -> bool:
    """Save config to file."""
    path = path or CONFIG_FILE
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(cfg, f, indent=2)
        return True
    except OSError as e:
        logger.warning("Config save error: %s", e)
        return False
