from __future__ import annotations

import logging
import os
from typing import Optional

import pygame

logger = logging.getLogger(__name__)

CLEAR_SOUND_FILE = "clear.wav"
MUSIC_FILE = "music.mp3"


class Audio:
    """Line-clear effect and looping music; silent when assets are missing."""

    def __init__(self, assets_dir: str = ".", enabled: bool = True) -> None:
        self.assets_dir = assets_dir
        self.enabled = enabled
        self.clear_sound: Optional[pygame.mixer.Sound] = None
        self.music_loaded = False

    def open(self) -> None:
        if not self.enabled:
            return
        try:
            pygame.mixer.init(44100, -16, 2, 2048)
        except pygame.error as exc:
            logger.warning("Audio unavailable: %s", exc)
            self.enabled = False
            return
        try:
            self.clear_sound = pygame.mixer.Sound(os.path.join(self.assets_dir, CLEAR_SOUND_FILE))
        except (pygame.error, FileNotFoundError) as exc:
            logger.warning("Failed to load line clear sound: %s", exc)
        try:
            pygame.mixer.music.load(os.path.join(self.assets_dir, MUSIC_FILE))
            self.music_loaded = True
        except (pygame.error, FileNotFoundError) as exc:
            logger.warning("Failed to load music: %s", exc)

    def play_clear(self) -> None:
        if self.enabled and self.clear_sound is not None:
            self.clear_sound.play()

    def start_music(self) -> None:
        if self.enabled and self.music_loaded:
            pygame.mixer.music.play(-1)

    def close(self) -> None:
        if not self.enabled or pygame.mixer.get_init() is None:
            return
        pygame.mixer.music.stop()
        self.clear_sound = None
        pygame.mixer.quit()
