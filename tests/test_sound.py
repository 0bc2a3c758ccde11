"""Tests for the completion cue (nothing is actually played)."""
from fuzzy_eyes import sound
from fuzzy_eyes.sound import SystemAudioCue


def test_disabled_cue_plays_nothing(monkeypatch):
    calls = []
    monkeypatch.setattr(sound, "play_sound", lambda *a: calls.append(a) or True)
    SystemAudioCue(enabled=False).play_completion()
    assert calls == []


def test_enabled_cue_plays_completion_sound(monkeypatch):
    calls = []
    monkeypatch.setattr(sound, "play_sound", lambda *a: calls.append(a) or True)
    SystemAudioCue(custom_path="/tmp/ding.wav").play_completion()
    assert calls == [("complete", "/tmp/ding.wav")]


def test_missing_sound_is_not_an_error(monkeypatch):
    monkeypatch.setattr(sound, "play_sound", lambda *a: False)
    SystemAudioCue().play_completion()


def test_from_config_ignores_path_unless_enabled():
    cue = SystemAudioCue.from_config({"sound_enabled": True, "custom_sound_enabled": False,
                                      "custom_sound_path": "/x.wav"})
    assert cue.custom_path is None
    cue = SystemAudioCue.from_config({"sound_enabled": False, "custom_sound_enabled": True,
                                      "custom_sound_path": "/x.wav"})
    assert cue.custom_path == "/x.wav"
    assert cue.enabled is False


def test_play_sound_survives_missing_players(monkeypatch):
    def no_player(*a, **kw):
        raise FileNotFoundError("not installed")
    monkeypatch.setattr(sound.subprocess, "Popen", no_player)
    monkeypatch.setattr(sound, "IS_WIN", False)
    monkeypatch.setattr(sound, "IS_MAC", True)
    assert sound.play_sound("complete") is False
