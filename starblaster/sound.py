"""
Audio hand-off.

The simulation only names events; this module maps those names onto
`pygame.mixer.Sound` objects loaded from `<SOUND_DIR>/<name>.wav` when such
files exist. A missing mixer, missing files or playback errors all leave the
game running silently.
"""
from __future__ import annotations
import os
from typing import Dict, Iterable

import pygame

from . import settings
from .log import get_logger

logger = get_logger(__name__)

CUES = ("shoot", "explosion", "powerup", "hit", "laser", "missile", "shield")


class SoundManager:
    def __init__(self, enabled: bool = True, sound_dir: str = settings.SOUND_DIR):
        self.enabled = enabled
        self.sound_dir = sound_dir
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        self._init_mixer()
        if self.enabled:
            for name in CUES:
                snd = self._load(name)
                if snd is not None:
                    self.sounds[name] = snd

    def _init_mixer(self):
        if not self.enabled:
            return
        try:
            pygame.mixer.pre_init(frequency=22050, size=-16, channels=1, buffer=512)
            pygame.mixer.init()
        except Exception as exc:
            logger.warning("Audio unavailable, continuing without sound: %s", exc)
            self.enabled = False

    def _load(self, name: str):
        path = os.path.join(self.sound_dir, f"{name}.wav")
        if not os.path.exists(path):
            logger.debug("No sound file for cue %r", name)
            return None
        try:
            return pygame.mixer.Sound(path)
        except Exception as exc:
            logger.warning("Could not load %s: %s", path, exc)
            return None

    def play(self, name: str):
        if not self.enabled:
            return
        snd = self.sounds.get(name)
        if snd is not None:
            try:
                snd.play()
            except Exception as exc:
                logger.debug("Playback of %r failed: %s", name, exc)

    def play_all(self, names: Iterable[str]):
        for name in names:
            self.play(name)
