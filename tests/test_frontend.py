#!/usr/bin/env python3
"""
Input snapshots and the audio hand-off. No window is opened.
"""
import importlib
import sys
import unittest
from collections import defaultdict
from unittest import mock

import pygame

from starblaster.controls import Controls
from starblaster.sound import SoundManager


class TestControls(unittest.TestCase):

    def test_from_mapping_both_key_styles(self):
        arrows = Controls.from_mapping({"ArrowLeft": True, "ArrowUp": True, " ": True})
        letters = Controls.from_mapping({"a": True, "W": True, " ": True})
        self.assertEqual(arrows, letters)
        self.assertTrue(arrows.left and arrows.up and arrows.fire)
        self.assertFalse(arrows.right or arrows.down)

    def test_from_mapping_weapon_digits(self):
        self.assertEqual(Controls.from_mapping({"2": True}).selected_weapon(), "laser")
        self.assertEqual(Controls.from_mapping({"3": True}).selected_weapon(), "missile")
        self.assertEqual(Controls.from_mapping({"1": True}).selected_weapon(), "bullet")
        self.assertIsNone(Controls.from_mapping({}).selected_weapon())

    def test_from_pressed(self):
        keys = defaultdict(bool)
        keys[pygame.K_d] = True
        keys[pygame.K_DOWN] = True
        keys[pygame.K_SPACE] = True
        keys[pygame.K_3] = True
        controls = Controls.from_pressed(keys)
        self.assertEqual(controls, Controls(right=True, down=True, fire=True, weapon_3=True))


class TestSoundManager(unittest.TestCase):
    """Audio must never stop the game."""

    def test_disabled_is_silent(self):
        sound = SoundManager(enabled=False)
        sound.play("explosion")
        sound.play_all(["shoot", "game_over"])
        self.assertEqual(sound.sounds, {})

    def test_mixer_failure_disables_audio(self):
        with mock.patch("pygame.mixer.init", side_effect=pygame.error("no audio device")):
            sound = SoundManager(enabled=True)
        self.assertFalse(sound.enabled)
        sound.play("hit")

    def test_missing_files_and_unknown_cues_are_ignored(self):
        with mock.patch("pygame.mixer.init"), mock.patch("pygame.mixer.pre_init"):
            sound = SoundManager(enabled=True, sound_dir="/nonexistent/starblaster-sounds")
        self.assertTrue(sound.enabled)
        self.assertEqual(sound.sounds, {})
        sound.play_all(["shoot", "boss_spawn"])

    def test_playback_error_swallowed(self):
        sound = SoundManager(enabled=False)
        sound.enabled = True
        broken = mock.Mock()
        broken.play.side_effect = pygame.error("device lost")
        sound.sounds["hit"] = broken
        sound.play("hit")
        broken.play.assert_called_once_with()


class TestHeadlessCore(unittest.TestCase):

    def test_simulation_runs_without_pygame(self):
        with mock.patch.dict(sys.modules):
            for name in [n for n in sys.modules if n == "starblaster" or n.startswith("starblaster.")]:
                del sys.modules[name]
            sys.modules["pygame"] = None
            game_module = importlib.import_module("starblaster.game")
            controls_module = importlib.import_module("starblaster.controls")
            game = game_module.Game(seed=2, particles=False)
            game.start_game()
            events = game.tick(controls_module.Controls.from_mapping({" ": True}), 1000)
        self.assertIn("shoot", events)


if __name__ == '__main__':
    unittest.main(verbosity=2)
