"""
The simulation context.

`GameState` is the one mutable aggregate every component reads and writes.
It is passed explicitly into each update call; nothing in the package keeps
module-level game state.
"""
from __future__ import annotations
import random
from typing import Dict, List, Optional, Tuple

from . import settings
from .boss import Boss
from .enemies import Enemy, EnemyKind
from .entities import (BackgroundObject, Bullet, Color, Laser, Missile, Particle, ParticleKind, Player,
                       PowerUp, Star, WeaponType)


def rank_for(total_score: int) -> str:
    for threshold, name in settings.RANKS:
        if total_score >= threshold:
            return name
    return settings.DEFAULT_RANK


class GameState:
    def __init__(self, seed: Optional[int] = None, particles: bool = settings.ENABLE_PARTICLES):
        self.rng = random.Random(seed)
        self.particles_enabled = particles
        self.player = Player()
        self.reset()

    def reset(self):
        self.score = 0
        self.total_score = 0
        self.lives = settings.PLAYER_START_LIVES
        self.power = 1
        self.shield = 0
        self.shield_max = settings.SHIELD_MAX
        self.stage = 1
        self.combo = 0
        self.combo_timer = 0
        self.score_multiplier = 1
        self.weapon_type = WeaponType.BULLET
        self.enemies_killed = 0
        self.boss_spawned = False
        self.boss: Optional[Boss] = None
        self.laser: Optional[Laser] = None
        self.bullets: List[Bullet] = []
        self.enemy_bullets: List[Bullet] = []
        self.enemies: List[Enemy] = []
        self.power_ups: List[PowerUp] = []
        self.particles: List[Particle] = []
        self.missiles: List[Missile] = []
        self.stars: List[Star] = [Star(self.rng) for _ in range(settings.STAR_COUNT)]
        self.background_objects: List[BackgroundObject] = []
        self.enemy_spawn_timer = 0
        self.last_shot_ms: Optional[float] = None
        self.now_ms = 0.0
        self.screen_shake = 0
        self.game_over = False
        self.events: List[str] = []
        self._next_id = 0
        self.player.reset()

    # ============================
    # HELPERS
    # ============================
    def next_id(self) -> int:
        self._next_id += 1
        return self._next_id

    def emit(self, name: str):
        self.events.append(name)

    def drain_events(self) -> List[str]:
        events, self.events = self.events, []
        return events

    def add_enemy(self, x: float, y: float, kind: EnemyKind) -> Enemy:
        enemy = Enemy(self.next_id(), x, y, kind, self)
        self.enemies.append(enemy)
        return enemy

    def spawn_boss(self) -> Boss:
        self.boss = Boss(self.next_id())
        self.boss_spawned = True
        return self.boss

    def find_target(self, eid: Optional[int]):
        """Resolve a target handle to a live enemy or the boss, or None if it is gone."""
        if eid is None:
            return None
        if self.boss is not None and self.boss.eid == eid:
            return self.boss if self.boss.alive else None
        for enemy in self.enemies:
            if enemy.eid == eid:
                return enemy if enemy.alive else None
        return None

    def spawn_particles(self, count: int, x: float, y: float, color: Color, kind: ParticleKind,
                        spread: Optional[Tuple[float, float]] = None):
        if not self.particles_enabled:
            return
        for _ in range(count):
            px, py = x, y
            if spread is not None:
                px += (self.rng.random() - 0.5) * spread[0]
                py += (self.rng.random() - 0.5) * spread[1]
            self.particles.append(Particle(px, py, color, kind, self.rng))

    def tick_combo(self):
        if self.combo_timer > 0:
            self.combo_timer -= 1
            if self.combo_timer == 0:
                self.combo = 0
                self.score_multiplier = 1

    @property
    def rank(self) -> str:
        return rank_for(self.total_score)

    def hud(self) -> Dict[str, object]:
        return {
            "score": self.score,
            "lives": self.lives,
            "power": self.power,
            "combo": self.combo,
            "multiplier": self.score_multiplier,
            "stage": self.stage,
            "rank": self.rank,
            "shield": self.shield,
            "shield_max": self.shield_max,
            "weapon": self.weapon_type.value,
        }
