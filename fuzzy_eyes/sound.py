"""Completion sound. Playback is fire-and-forget and never raises."""
from __future__ import annotations
import logging
import os
import subprocess
from typing import Optional

from fuzzy_eyes.theme import IS_MAC, IS_WIN

logger = logging.getLogger(__name__)

MAC_SOUNDS = {"chime": "Blow", "complete": "Submarine", "warning": "Basso"}
WIN_SOUNDS = {"chime": "SystemAsterisk", "complete": "SystemExclamation", "warning": "SystemHand"}
LINUX_PLAYERS = [
    ["paplay", "/usr/share/sounds/freedesktop/stereo/complete.oga"],
    ["paplay", "/usr/share/sounds/freedesktop/stereo/message.oga"],
    ["aplay", "-q", "/usr/share/sounds/sound-icons/prompt.wav"],
]


def _spawn(cmd: list[str]) -> bool:
    try:
        subprocess.Popen(cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        return True
    except (FileNotFoundError, OSError):
        return False


def _play_file(path: str) -> bool:
    if IS_WIN:
        import winsound
        winsound.PlaySound(path, winsound.SND_FILENAME | winsound.SND_ASYNC)
        return True
    if IS_MAC:
        return _spawn(["afplay", path])
    # Try common Linux audio players in order of likelihood
    for cmd in (["mpv", "--no-terminal", "--no-video", path],
                ["ffplay", "-nodisp", "-autoexit", "-loglevel", "quiet", path],
                ["paplay", path],
                ["aplay", "-q", path]):
        if _spawn(cmd):
            return True
    return False


def play_sound(sound_type: str = "complete", custom_path: Optional[str] = None) -> bool:
    """Play a custom sound file if given, else the system sound. Returns True if started."""
    if custom_path and os.path.exists(custom_path):
        try:
            if _play_file(custom_path):
                return True
        except Exception as e:
            logger.debug("Custom sound failed: %s", e)  # fall through to default

    try:
        if IS_WIN:
            import winsound
            winsound.PlaySound(WIN_SOUNDS.get(sound_type, "SystemAsterisk"),
                               winsound.SND_ALIAS | winsound.SND_ASYNC)
            return True
        if IS_MAC:
            name = MAC_SOUNDS.get(sound_type, "Blow")
            return _spawn(["afplay", f"/System/Library/Sounds/{name}.aiff"])
        for cmd in LINUX_PLAYERS:
            if os.path.exists(cmd[-1]) and _spawn(cmd):
                return True
    except Exception as e:
        logger.debug("System sound failed: %s", e)
    return False


class SystemAudioCue:
    """Audio collaborator for the countdown."""

    def __init__(self, enabled: bool = True, custom_path: Optional[str] = None):
        self.enabled = enabled
        self.custom_path = custom_path or None

    @classmethod
    def from_config(cls, cfg: dict) -> "SystemAudioCue":
        custom = cfg.get("custom_sound_path") if cfg.get("custom_sound_enabled") else None
        return cls(enabled=cfg.get("sound_enabled", True), custom_path=custom)

    def play_completion(self) -> None:
        if not self.enabled:
            return
        if not play_sound("complete", self.custom_path):
            logger.debug("No completion sound available")
