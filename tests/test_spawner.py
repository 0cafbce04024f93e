#!/usr/bin/env python3
"""
Spawner: enemy cadence, stage tables and boss arrival.
"""
import unittest

from starblaster import settings, spawner
from starblaster.boss import Boss
from starblaster.enemies import EnemyKind

from tests.helpers import quiet_state


class TestSpawnRate(unittest.TestCase):

    def test_rate_shrinks_with_score(self):
        self.assertEqual(spawner.spawn_rate(0), 120)
        self.assertEqual(spawner.spawn_rate(999), 120)
        self.assertEqual(spawner.spawn_rate(1000), 110)
        self.assertEqual(spawner.spawn_rate(5500), 70)

    def test_rate_floor(self):
        self.assertEqual(spawner.spawn_rate(9000), 30)
        self.assertEqual(spawner.spawn_rate(1000000), 30)

    def test_rate_monotonic(self):
        rates = [spawner.spawn_rate(s) for s in range(0, 20000, 250)]
        self.assertEqual(rates, sorted(rates, reverse=True))


class TestStageTables(unittest.TestCase):

    def test_stage_one(self):
        self.assertIs(spawner.pick_kind(1, 0.79), EnemyKind.BASIC)
        self.assertIs(spawner.pick_kind(1, 0.8), EnemyKind.STRONG)

    def test_stage_two(self):
        self.assertIs(spawner.pick_kind(2, 0.49), EnemyKind.BASIC)
        self.assertIs(spawner.pick_kind(2, 0.6), EnemyKind.STRONG)
        self.assertIs(spawner.pick_kind(2, 0.8), EnemyKind.ROTATING)
        self.assertIs(spawner.pick_kind(2, 0.95), EnemyKind.SPLITTER)

    def test_stage_three_and_up(self):
        for stage in (3, 7):
            self.assertIs(spawner.pick_kind(stage, 0.1), EnemyKind.BASIC)
            self.assertIs(spawner.pick_kind(stage, 0.5), EnemyKind.STRONG)
            self.assertIs(spawner.pick_kind(stage, 0.7), EnemyKind.ROTATING)
            self.assertIs(spawner.pick_kind(stage, 0.85), EnemyKind.SPLITTER)
            self.assertIs(spawner.pick_kind(stage, 0.95), EnemyKind.SNIPER)

    def test_snipers_only_from_stage_three(self):
        for roll in (i / 100 for i in range(100)):
            self.assertIsNot(spawner.pick_kind(2, roll), EnemyKind.SNIPER)
            self.assertIn(spawner.pick_kind(1, roll), (EnemyKind.BASIC, EnemyKind.STRONG))


class TestEnemySpawning(unittest.TestCase):

    def test_spawns_after_rate_frames(self):
        state = quiet_state()
        for _ in range(120):
            spawner.spawn(state)
        self.assertEqual(state.enemies, [])
        spawner.spawn(state)
        self.assertEqual(len(state.enemies), 1)
        self.assertEqual(state.enemy_spawn_timer, 0)
        enemy = state.enemies[0]
        self.assertEqual(enemy.y, settings.ENEMY_SPAWN_Y)
        self.assertGreaterEqual(enemy.x, 30)
        self.assertLess(enemy.x, settings.WIDTH - 30)

    def test_spawned_ids_are_unique(self):
        state = quiet_state()
        for _ in range(121 * 5):
            spawner.spawn(state)
        ids = [e.eid for e in state.enemies]
        self.assertEqual(len(ids), 5)
        self.assertEqual(len(set(ids)), 5)


class TestBossArrival(unittest.TestCase):

    def test_boss_after_thirty_kills(self):
        """30 kills and no boss: exactly one boss, and enemy spawns stop while it lives."""
        state = quiet_state()
        state.enemies_killed = 30
        spawner.spawn(state)
        self.assertIsInstance(state.boss, Boss)
        self.assertTrue(state.boss_spawned)
        self.assertIn("boss_spawn", state.events)
        boss = state.boss

        for _ in range(1000):
            spawner.spawn(state)
        self.assertIs(state.boss, boss)
        self.assertEqual(state.enemies, [])
        self.assertEqual(state.events.count("boss_spawn"), 1)

    def test_no_boss_below_threshold(self):
        state = quiet_state()
        state.enemies_killed = 29
        spawner.spawn(state)
        self.assertIsNone(state.boss)

    def test_no_second_boss_in_same_stage(self):
        state = quiet_state()
        state.enemies_killed = 45
        state.boss_spawned = True
        for _ in range(121):
            spawner.spawn(state)
        self.assertIsNone(state.boss)
        self.assertEqual(len(state.enemies), 1)

    def test_spawns_resume_after_boss_defeat(self):
        state = quiet_state()
        state.enemies_killed = 30
        spawner.spawn(state)
        state.boss.health = 1
        state.boss.hit(state)
        for _ in range(121):
            spawner.spawn(state)
        self.assertIsNone(state.boss)
        self.assertEqual(len(state.enemies), 1)


if __name__ == '__main__':
    unittest.main(verbosity=2)
