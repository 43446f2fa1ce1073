import logging

import pygame
import pytest

from falling_blocks.visualization.audio import Audio


def test_unavailable_mixer_is_logged_and_silent(monkeypatch, caplog):
    def _no_device(*args, **kwargs):
        raise pygame.error("no audio device")

    monkeypatch.setattr(pygame.mixer, "init", _no_device)
    audio = Audio()
    with caplog.at_level(logging.WARNING):
        audio.open()
    assert "Audio unavailable" in caplog.text
    assert not audio.enabled
    audio.play_clear()
    audio.start_music()
    audio.close()


def test_missing_assets_are_logged_and_silent(tmp_path, monkeypatch, caplog):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    audio = Audio(str(tmp_path))
    with caplog.at_level(logging.WARNING):
        audio.open()
    if not audio.enabled:
        pytest.skip("dummy audio driver not available")
    try:
        assert "Failed to load line clear sound" in caplog.text
        assert "Failed to load music" in caplog.text
        assert audio.clear_sound is None
        assert not audio.music_loaded
        audio.play_clear()
        audio.start_music()
    finally:
        audio.close()
    assert pygame.mixer.get_init() is None


def test_disabled_audio_never_opens_the_mixer(monkeypatch):
    def _fail(*args, **kwargs):
        raise AssertionError("mixer should not be touched")

    monkeypatch.setattr(pygame.mixer, "init", _fail)
    audio = Audio(enabled=False)
    audio.open()
    audio.play_clear()
    audio.start_music()
    audio.close()


def test_close_without_initialized_mixer_is_safe():
    audio = Audio()
    audio.close()
