"""
Regular enemies.

Enemy kinds are a closed enum; everything that differs between kinds lives in
the `PROFILES` table (size, stats, allowed movement patterns, shot cadence,
volley) instead of in subclasses.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, Tuple

from . import settings
from .entities import Bullet, ParticleKind, PowerUp

if TYPE_CHECKING:
    from .state import GameState


class EnemyKind(Enum):
    BASIC = "basic"
    STRONG = "strong"
    ROTATING = "rotating"
    SPLITTER = "splitter"
    SNIPER = "sniper"


class MovePattern(Enum):
    STRAIGHT = "straight"
    ZIGZAG = "zigzag"
    CIRCULAR = "circular"
    HOVER = "hover"


class Volley(Enum):
    AIMED = "aimed"      # one shot at the player, speed 3
    SNIPER = "sniper"    # one shot at the player, speed 6
    CROSS = "cross"      # four shots rotated by the orbit angle


@dataclass(frozen=True)
class EnemyProfile:
    width: int
    height: int
    health: int
    speed: float
    score: int
    patterns: Tuple[MovePattern, ...]
    shoot_delay: int
    volley: Volley


PROFILES: Dict[EnemyKind, EnemyProfile] = {
    EnemyKind.BASIC: EnemyProfile(30, 30, 1, 2, 100, (MovePattern.STRAIGHT, MovePattern.ZIGZAG), 120, Volley.AIMED),
    EnemyKind.STRONG: EnemyProfile(50, 40, 3, 1.5, 300, (MovePattern.STRAIGHT, MovePattern.ZIGZAG), 80, Volley.AIMED),
    EnemyKind.ROTATING: EnemyProfile(40, 40, 2, 1.5, 200, (MovePattern.CIRCULAR,), 80, Volley.CROSS),
    EnemyKind.SPLITTER: EnemyProfile(45, 45, 2, 1.8, 250, (MovePattern.STRAIGHT,), 80, Volley.AIMED),
    EnemyKind.SNIPER: EnemyProfile(35, 35, 1, 1, 150, (MovePattern.HOVER,), 60, Volley.SNIPER),
}

ORBIT_RADIUS = 50
HOVER_DROP = 150
SPLIT_MIN_Y = 50
SPLIT_OFFSET = 30
SPLIT_CHILD_SPEED = 3


class Enemy:
    def __init__(self, eid: int, x: float, y: float, kind: EnemyKind, state: GameState):
        profile = PROFILES[kind]
        self.eid = eid
        self.x = x
        self.y = y
        self.kind = kind
        self.width = profile.width
        self.height = profile.height
        self.health = profile.health
        self.speed = profile.speed
        self.score = profile.score
        if len(profile.patterns) == 1:
            self.pattern = profile.patterns[0]
        else:
            self.pattern = profile.patterns[0] if state.rng.random() < 0.5 else profile.patterns[1]
        self.shoot_timer = 0
        self.zigzag_phase = 0.0
        self.angle = 0.0
        self.center_x = x
        self.target_y = y + HOVER_DROP
        self.alive = True

    @property
    def profile(self) -> EnemyProfile:
        return PROFILES[self.kind]

    @property
    def color(self):
        return settings.ENEMY_COLORS[self.kind.value]

    def update(self, state: GameState):
        MOVES[self.pattern](self, state)
        self.shoot_timer += 1
        if self.shoot_timer > self.profile.shoot_delay:
            self.shoot(state)
            self.shoot_timer = 0

    def shoot(self, state: GameState):
        volley = self.profile.volley
        player = state.player
        if volley is Volley.CROSS:
            for i in range(4):
                angle = math.pi / 2 * i + self.angle
                state.enemy_bullets.append(Bullet(self.x, self.y, math.cos(angle) * 3, math.sin(angle) * 3, True))
            return
        speed = 6 if volley is Volley.SNIPER else 3
        # No lead: aim at where the player is right now
        angle = math.atan2(player.y - self.y, player.x - self.x)
        state.enemy_bullets.append(Bullet(self.x, self.y + self.height / 2,
                                          math.cos(angle) * speed, math.sin(angle) * speed, True))

    def hit(self, state: GameState) -> bool:
        """Apply one point of damage. Returns True when this hit destroyed the enemy."""
        self.health -= 1
        if self.health > 0:
            return False

        self.alive = False
        points = self.score * state.score_multiplier
        state.score += points
        state.total_score += points
        state.enemies_killed += 1

        if state.combo > 0 and state.combo % settings.COMBO_STEP == 0:
            state.score_multiplier = min(settings.MAX_MULTIPLIER, state.score_multiplier + 1)

        if self.kind is EnemyKind.SPLITTER and self.y > SPLIT_MIN_Y:
            self.split(state)

        state.spawn_particles(15, self.x, self.y, self.color, ParticleKind.EXPLOSION,
                              spread=(self.width, self.height))
        state.spawn_particles(8, self.x, self.y, settings.COLOR_AMBER, ParticleKind.EXPLOSION)

        if state.rng.random() < settings.POWERUP_DROP_CHANCE:
            state.power_ups.append(PowerUp(self.x, self.y, state.rng))

        state.combo += 1
        state.combo_timer = settings.COMBO_FRAMES
        state.emit("explosion")
        return True

    def split(self, state: GameState):
        for i in range(3):
            angle = math.tau / 3 * i
            child = state.add_enemy(self.x + math.cos(angle) * SPLIT_OFFSET,
                                    self.y + math.sin(angle) * SPLIT_OFFSET,
                                    EnemyKind.BASIC)
            child.speed = SPLIT_CHILD_SPEED

    def is_off_screen(self) -> bool:
        return self.y > settings.HEIGHT + self.height


# ============================
# MOVEMENT PATTERNS
# ============================
def _move_straight(enemy: Enemy, state: GameState):
    enemy.y += enemy.speed


def _move_zigzag(enemy: Enemy, state: GameState):
    enemy.y += enemy.speed
    enemy.x += math.sin(enemy.zigzag_phase) * 2
    enemy.zigzag_phase += 0.1


def _move_circular(enemy: Enemy, state: GameState):
    enemy.y += enemy.speed * 0.5
    enemy.angle += 0.05
    enemy.x = enemy.center_x + math.cos(enemy.angle) * ORBIT_RADIUS
    enemy.center_x = max(ORBIT_RADIUS, min(settings.WIDTH - ORBIT_RADIUS, enemy.center_x))


def _move_hover(enemy: Enemy, state: GameState):
    if enemy.y < enemy.target_y:
        enemy.y += enemy.speed * 2
    else:
        # Wall-clock driven sway, shared by every sniper on screen
        enemy.x += math.sin(state.now_ms * 0.002) * enemy.speed


MOVES: Dict[MovePattern, Callable[[Enemy, "GameState"], None]] = {
    MovePattern.STRAIGHT: _move_straight,
    MovePattern.ZIGZAG: _move_zigzag,
    MovePattern.CIRCULAR: _move_circular,
    MovePattern.HOVER: _move_hover,
}
