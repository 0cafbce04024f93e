#!/usr/bin/env python3
"""
Boss state machine, firing patterns and defeat.
"""
import math
import unittest

from starblaster import settings
from starblaster.boss import PHASE_ENTERING, PHASE_FIGHTING

from tests.helpers import quiet_state


class TestBossMovement(unittest.TestCase):

    def test_enters_then_fights(self):
        state = quiet_state()
        boss = state.spawn_boss()
        self.assertEqual(boss.phase, PHASE_ENTERING)
        for _ in range(249):
            boss.update(state)
        self.assertEqual(boss.phase, PHASE_ENTERING)
        boss.update(state)
        self.assertEqual(boss.y, settings.BOSS_TARGET_Y)
        self.assertEqual(boss.phase, PHASE_FIGHTING)

    def test_no_shots_while_entering(self):
        state = quiet_state()
        boss = state.spawn_boss()
        for _ in range(200):
            boss.update(state)
        self.assertEqual(state.enemy_bullets, [])

    def test_pattern_cycles_every_120_frames(self):
        state = quiet_state()
        boss = state.spawn_boss()
        boss.phase = PHASE_FIGHTING
        for _ in range(121):
            boss.update(state)
        self.assertEqual(boss.move_pattern, 1)
        for _ in range(121):
            boss.update(state)
        self.assertEqual(boss.move_pattern, 2)
        for _ in range(121):
            boss.update(state)
        self.assertEqual(boss.move_pattern, 0)

    def test_x_clamped(self):
        state = quiet_state()
        boss = state.spawn_boss()
        boss.phase = PHASE_FIGHTING
        boss.x = -500
        boss.update(state)
        self.assertEqual(boss.x, boss.width / 2)

    def test_shoots_every_31_frames(self):
        state = quiet_state()
        boss = state.spawn_boss()
        boss.phase = PHASE_FIGHTING
        boss.y = settings.BOSS_TARGET_Y
        for _ in range(30):
            boss.update(state)
        self.assertEqual(state.enemy_bullets, [])
        boss.update(state)
        self.assertEqual(len(state.enemy_bullets), 5)


class TestBossFirePatterns(unittest.TestCase):
    """Pattern chosen by remaining health in tens."""

    def test_wide_fan_at_high_health(self):
        state = quiet_state()
        boss = state.spawn_boss()
        boss.health = 40
        boss.shoot(state)
        self.assertEqual(len(state.enemy_bullets), 5)
        first = state.enemy_bullets[0]
        self.assertAlmostEqual(first.vx, math.cos(math.pi / 4) * 4)

    def test_three_shot_fan_mid_health(self):
        state = quiet_state()
        boss = state.spawn_boss()
        boss.health = 39
        boss.shoot(state)
        xs = [b.x - boss.x for b in state.enemy_bullets]
        self.assertEqual(xs, [-30, 0, 30])
        boss.health = 20
        boss.shoot(state)
        self.assertEqual(len(state.enemy_bullets), 6)

    def test_aimed_spread_low_health(self):
        state = quiet_state()
        boss = state.spawn_boss()
        boss.y = settings.BOSS_TARGET_Y
        boss.health = 19
        boss.shoot(state)
        self.assertEqual(len(state.enemy_bullets), 3)
        middle = state.enemy_bullets[1]
        aim = math.atan2(state.player.y - boss.y, state.player.x - boss.x)
        self.assertAlmostEqual(math.atan2(middle.vy, middle.vx), aim)
        self.assertAlmostEqual(math.hypot(middle.vx, middle.vy), 5)


class TestBossDefeat(unittest.TestCase):

    def test_hit_until_destroyed(self):
        """Drive health from 50 to 0; the last hit clears the boss and advances the stage."""
        state = quiet_state()
        state.enemies_killed = 30
        boss = state.spawn_boss()
        for _ in range(49):
            self.assertFalse(boss.hit(state))
        self.assertIs(state.boss, boss)
        self.assertEqual(state.stage, 1)

        self.assertTrue(boss.hit(state))
        self.assertIsNone(state.boss)
        self.assertEqual(state.stage, 2)
        self.assertEqual(len(state.power_ups), 3)
        self.assertEqual(state.score, settings.BOSS_SCORE)
        self.assertEqual(state.enemies_killed, 0)
        self.assertFalse(state.boss_spawned)
        self.assertIn("boss_defeated", state.events)

    def test_hit_particles(self):
        state = quiet_state(particles=True)
        boss = state.spawn_boss()
        boss.hit(state)
        self.assertEqual(len(state.particles), 3)
        boss.health = 1
        boss.hit(state)
        self.assertEqual(len(state.particles), 53)


if __name__ == '__main__':
    unittest.main(verbosity=2)
