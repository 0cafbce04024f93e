from __future__ import annotations
import math
from typing import TYPE_CHECKING

from . import settings
from .entities import Bullet, ParticleKind, PowerUp
from .log import get_logger

if TYPE_CHECKING:
    from .state import GameState

logger = get_logger(__name__)

PHASE_ENTERING = "entering"
PHASE_FIGHTING = "fighting"


class Boss:
    """Stage boss: flies in from above, then cycles three sway patterns while firing fans."""
    def __init__(self, eid: int):
        self.eid = eid
        self.x = settings.WIDTH / 2
        self.y = float(settings.BOSS_START_Y)
        self.width, self.height = settings.BOSS_SIZE
        self.health = settings.BOSS_HEALTH
        self.max_health = settings.BOSS_HEALTH
        self.speed = settings.BOSS_SPEED
        self.phase = PHASE_ENTERING
        self.shoot_timer = 0
        self.move_timer = 0
        self.move_pattern = 0
        self.target_y = settings.BOSS_TARGET_Y

    @property
    def alive(self) -> bool:
        return self.health > 0

    def update(self, state: GameState):
        if self.phase == PHASE_ENTERING:
            self.y += self.speed
            if self.y >= self.target_y:
                self.phase = PHASE_FIGHTING
            return

        self.move_timer += 1
        if self.move_timer > settings.BOSS_PATTERN_FRAMES:
            self.move_pattern = (self.move_pattern + 1) % 3
            self.move_timer = 0

        t = self.move_timer
        center = settings.WIDTH / 2
        if self.move_pattern == 0:
            self.x += math.sin(t * 0.02) * 3
        elif self.move_pattern == 1:
            self.x = center + math.sin(t * 0.03) * 200
        else:
            self.x = center + math.cos(t * 0.02) * 150
            self.y = self.target_y + math.sin(t * 0.02) * 50

        half_w = self.width / 2
        self.x = max(half_w, min(settings.WIDTH - half_w, self.x))

        self.shoot_timer += 1
        if self.shoot_timer > settings.BOSS_SHOOT_FRAMES:
            self.shoot(state)
            self.shoot_timer = 0

    def shoot(self, state: GameState):
        tier = self.health // 10
        muzzle_y = self.y + self.height / 2
        if tier >= 4:
            for i in range(5):
                angle = math.pi / 4 + i * math.pi / 8
                state.enemy_bullets.append(Bullet(self.x, muzzle_y, math.cos(angle) * 4, math.sin(angle) * 4, True))
        elif tier >= 2:
            for i in range(3):
                angle = math.pi / 2 + (i - 1) * 0.3
                state.enemy_bullets.append(Bullet(self.x + (i - 1) * 30, muzzle_y,
                                                  math.cos(angle) * 3, math.sin(angle) * 3, True))
        else:
            player = state.player
            angle = math.atan2(player.y - self.y, player.x - self.x)
            for i in (-1, 0, 1):
                a = angle + i * 0.2
                state.enemy_bullets.append(Bullet(self.x, muzzle_y, math.cos(a) * 5, math.sin(a) * 5, True))

    def hit(self, state: GameState) -> bool:
        """Apply one point of damage. Returns True when the boss is destroyed."""
        self.health -= 1
        if self.health > 0:
            state.spawn_particles(3, self.x, self.y, settings.COLOR_AMBER, ParticleKind.EXPLOSION,
                                  spread=(self.width, self.height))
            return False

        state.score += settings.BOSS_SCORE
        state.stage += 1
        state.enemies_killed = 0
        state.boss_spawned = False
        if state.boss is self:
            state.boss = None

        state.spawn_particles(50, self.x, self.y, settings.COLOR_BOSS, ParticleKind.EXPLOSION,
                              spread=(self.width, self.height))
        for _ in range(settings.BOSS_POWERUP_DROPS):
            x = self.x + (state.rng.random() - 0.5) * self.width
            state.power_ups.append(PowerUp(x, self.y, state.rng))

        state.emit("explosion")
        state.emit("boss_defeated")
        logger.info("Boss defeated, advancing to stage %d", state.stage)
        return True
