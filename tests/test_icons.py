"""Tests for the tray icon drawing."""
import os

import pytest

from fuzzy_eyes.icons import ICON_SIZES, create_eye_icon, generate_icon


@pytest.mark.parametrize("size", ICON_SIZES)
@pytest.mark.parametrize("paused", [False, True])
def test_icon_sizes(size, paused):
    img = create_eye_icon(size, paused=paused)
    assert img.size == (size, size)
    assert img.mode == "RGBA"


def test_paused_icon_differs():
    assert create_eye_icon(64).tobytes() != create_eye_icon(64, paused=True).tobytes()


def test_corners_are_transparent():
    img = create_eye_icon(64)
    assert img.getpixel((0, 0))[3] == 0


def test_generate_icon_writes_files(tmp_path):
    paths = generate_icon(str(tmp_path))
    assert [os.path.basename(p) for p in paths] == ["icon.ico", "icon.png"]
    for p in paths:
        assert os.path.getsize(p) > 0
