"""
Entity types that are not enemies: player, projectiles, pickups, particles and
background decoration.

Every entity stores its *centre* in `x`/`y` and its full extents in
`width`/`height`. Per-frame behaviour takes the shared `GameState` as an
explicit context argument.
"""
from __future__ import annotations
import colorsys
import math
import random
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

from . import settings
from .controls import Controls

if TYPE_CHECKING:
    from .state import GameState

Color = Tuple[int, int, int]


class WeaponType(Enum):
    BULLET = "bullet"
    LASER = "laser"
    MISSILE = "missile"


class PowerUpKind(Enum):
    POWER = "power"
    SHIELD = "shield"


class ParticleKind(Enum):
    NORMAL = "normal"
    EXPLOSION = "explosion"
    TRAIL = "trail"
    SHIELD = "shield"
    MISSILE_TRAIL = "missile_trail"


# ============================
# PROJECTILES
# ============================
class Bullet:
    def __init__(self, x: float, y: float, vx: float, vy: float, is_enemy: bool = False):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.is_enemy = is_enemy
        self.width, self.height = settings.ENEMY_BULLET_SIZE if is_enemy else settings.PLAYER_BULLET_SIZE
        self.alive = True

    def update(self):
        self.x += self.vx
        self.y += self.vy

    def is_off_screen(self) -> bool:
        return (self.y < -self.height or self.y > settings.HEIGHT + self.height
                or self.x < -self.width or self.x > settings.WIDTH + self.width)


class Laser:
    """Continuous beam from the ship to the top of the screen. Lives while fire is held."""
    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y
        self.width = settings.LASER_WIDTH
        self.height = settings.HEIGHT

    def update(self, state: GameState, controls: Controls):
        self.x = state.player.x
        if not controls.fire:
            state.laser = None


class Missile:
    """Homing missile.

    The target is held as an entity id and looked up again every frame, so a
    target destroyed by something else simply triggers a new search.
    """
    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y
        self.vx = 0.0
        self.vy = float(settings.MISSILE_LAUNCH_VY)
        self.width, self.height = settings.MISSILE_SIZE
        self.speed = settings.MISSILE_SPEED
        self.target_id: Optional[int] = None
        self.alive = True

    def update(self, state: GameState):
        target = state.find_target(self.target_id)
        if target is None:
            target = self.find_target(state)
            self.target_id = target.eid if target is not None else None

        if target is not None:
            dx = target.x - self.x
            dy = target.y - self.y
            distance = math.hypot(dx, dy)
            if distance > 0:
                self.vx = dx / distance * self.speed
                self.vy = dy / distance * self.speed
        else:
            self.vy = -self.speed

        self.x += self.vx
        self.y += self.vy
        state.spawn_particles(1, self.x, self.y + self.height / 2,
                              settings.COLOR_MISSILE_TRAIL, ParticleKind.MISSILE_TRAIL)

    def find_target(self, state: GameState):
        closest = None
        closest_distance = math.inf
        for enemy in state.enemies:
            if not enemy.alive:
                continue
            distance = math.hypot(enemy.x - self.x, enemy.y - self.y)
            if distance < closest_distance:
                closest_distance = distance
                closest = enemy
        boss = state.boss
        if boss is not None and math.hypot(boss.x - self.x, boss.y - self.y) < closest_distance:
            closest = boss
        return closest

    def is_off_screen(self) -> bool:
        return (self.y < -self.height or self.y > settings.HEIGHT + self.height
                or self.x < -self.width or self.x > settings.WIDTH + self.width)


# ============================
# PICKUPS & EFFECTS
# ============================
class PowerUp:
    def __init__(self, x: float, y: float, rng: random.Random, kind: Optional[PowerUpKind] = None):
        self.x = x
        self.y = y
        self.width, self.height = settings.POWERUP_SIZE
        self.speed = settings.POWERUP_SPEED
        self.pulse_phase = 0.0
        if kind is None:
            kind = PowerUpKind.POWER if rng.random() < 0.7 else PowerUpKind.SHIELD
        self.kind = kind
        self.alive = True

    def update(self):
        self.y += self.speed
        self.pulse_phase += 0.1

    def is_off_screen(self) -> bool:
        return self.y > settings.HEIGHT + self.height


class Particle:
    def __init__(self, x: float, y: float, color: Color, kind: ParticleKind, rng: random.Random):
        self.x = x
        self.y = y
        self.color = color
        self.kind = kind
        self.rotation = 0.0
        self.rotation_speed = 0.0
        r = rng.random
        if kind is ParticleKind.EXPLOSION:
            self.vx = (r() - 0.5) * 12
            self.vy = (r() - 0.5) * 12
            self.size = r() * 6 + 2
            self.life = 40
            self.rotation = r() * math.tau
            self.rotation_speed = (r() - 0.5) * 0.4
        elif kind is ParticleKind.TRAIL:
            self.vx = (r() - 0.5) * 2
            self.vy = 3.0
            self.size = r() * 3 + 1
            self.life = 20
        elif kind is ParticleKind.MISSILE_TRAIL:
            self.vx = (r() - 0.5) * 1
            self.vy = 2.0
            self.size = r() * 4 + 2
            self.life = 15
        elif kind is ParticleKind.SHIELD:
            angle = r() * math.tau
            self.vx = math.cos(angle) * 8
            self.vy = math.sin(angle) * 8
            self.size = 3.0
            self.life = 25
        else:
            self.vx = (r() - 0.5) * 6
            self.vy = (r() - 0.5) * 6
            self.size = 4.0
            self.life = 30
        self.max_life = self.life

    def update(self):
        self.x += self.vx
        self.y += self.vy
        self.vx *= 0.95
        self.vy *= 0.95
        self.life -= 1
        if self.kind is ParticleKind.EXPLOSION:
            self.rotation += self.rotation_speed
            self.size *= 0.98

    @property
    def alpha(self) -> float:
        return max(0.0, self.life / self.max_life)

    def is_dead(self) -> bool:
        return self.life <= 0


# ============================
# BACKGROUND
# ============================
class Star:
    def __init__(self, rng: random.Random):
        self.rng = rng
        self.x = rng.random() * settings.WIDTH
        self.y = rng.random() * settings.HEIGHT
        self.size = rng.random() * 2 + 0.5
        self.speed = self.size * 0.5
        self.brightness = rng.random() * 0.5 + 0.5

    def update(self):
        self.y += self.speed
        if self.y > settings.HEIGHT:
            self.y = -10
            self.x = self.rng.random() * settings.WIDTH


def _hsl(rng: random.Random, lightness: float) -> Color:
    r, g, b = colorsys.hls_to_rgb(rng.random(), lightness, 0.5)
    return int(r * 255), int(g * 255), int(b * 255)


class BackgroundObject:
    """A slowly drifting planet or space station behind the action."""
    def __init__(self, rng: random.Random):
        self.kind = "planet" if rng.random() < 0.7 else "station"
        self.x = rng.random() * settings.WIDTH
        self.y = -200.0
        self.speed = 0.5 + rng.random() * 0.5
        self.rotation = 0.0
        self.rotation_speed = 0.0
        self.lights: List[Tuple[float, float, float]] = []
        if self.kind == "planet":
            self.radius = 50 + rng.random() * 100
            self.width = self.height = self.radius * 2
            self.color1 = _hsl(rng, 0.3)
            self.color2 = _hsl(rng, 0.2)
            self.rotation = rng.random() * math.tau
            self.rotation_speed = (rng.random() - 0.5) * 0.01
        else:
            self.width = 80 + rng.random() * 60
            self.height = 100 + rng.random() * 80
            self.radius = 0.0
            for _ in range(10):
                self.lights.append((rng.random() * self.width - self.width / 2,
                                    rng.random() * self.height - self.height / 2,
                                    rng.random() * math.tau))

    def update(self):
        self.y += self.speed
        if self.kind == "planet":
            self.rotation += self.rotation_speed

    def is_off_screen(self) -> bool:
        extent = self.radius if self.kind == "planet" else self.height / 2
        return self.y - extent > settings.HEIGHT


# ============================
# PLAYER
# ============================
class Player:
    def __init__(self):
        self.width, self.height = settings.PLAYER_SIZE
        self.speed = settings.PLAYER_SPEED
        self.reset()

    def reset(self):
        self.x = settings.WIDTH / 2
        self.y = settings.HEIGHT - settings.PLAYER_BOTTOM_OFFSET
        self.invulnerable = False
        self.invulnerable_time = 0

    @property
    def nose_y(self) -> float:
        return self.y - self.height / 2

    def update(self, state: GameState, controls: Controls, now_ms: float):
        # Movement, each axis clamped on its own
        half_w, half_h = self.width / 2, self.height / 2
        if controls.left:
            self.x = max(half_w, self.x - self.speed)
        if controls.right:
            self.x = min(settings.WIDTH - half_w, self.x + self.speed)
        if controls.up:
            self.y = max(half_h, self.y - self.speed)
        if controls.down:
            self.y = min(settings.HEIGHT - half_h, self.y + self.speed)

        if self.invulnerable:
            self.invulnerable_time -= 1
            if self.invulnerable_time <= 0:
                self.invulnerable = False

        if controls.fire:
            self.handle_weapon_fire(state, now_ms)

        selected = controls.selected_weapon()
        if selected is not None:
            state.weapon_type = WeaponType(selected)

        for _ in range(3):
            state.spawn_particles(1, self.x + (state.rng.random() - 0.5) * 10, self.y + half_h,
                                  settings.COLOR_TRAIL, ParticleKind.TRAIL)

    def _cooled_down(self, state: GameState, now_ms: float, cooldown_ms: int) -> bool:
        return state.last_shot_ms is None or now_ms - state.last_shot_ms > cooldown_ms

    def handle_weapon_fire(self, state: GameState, now_ms: float):
        weapon = state.weapon_type
        if weapon is WeaponType.BULLET and self._cooled_down(state, now_ms, settings.BULLET_CD_MS):
            self.shoot(state)
            state.last_shot_ms = now_ms
        elif weapon is WeaponType.LASER:
            self.fire_laser(state)
        elif weapon is WeaponType.MISSILE and self._cooled_down(state, now_ms, settings.MISSILE_CD_MS):
            self.fire_missile(state)
            state.last_shot_ms = now_ms

    def shoot(self, state: GameState):
        vy = -settings.PLAYER_BULLET_SPEED
        y = self.nose_y
        streams = [(0, 0)]
        if state.power >= 2:
            streams += [(-15, -1), (15, 1)]
        if state.power >= 3:
            streams += [(-25, -2), (25, 2)]
        for offset, drift in streams:
            state.bullets.append(Bullet(self.x + offset, y, drift, vy))
        state.emit("shoot")

    def fire_laser(self, state: GameState):
        if state.laser is None:
            state.laser = Laser(self.x, self.nose_y)
            state.emit("laser")

    def fire_missile(self, state: GameState):
        state.missiles.append(Missile(self.x, self.nose_y))
        state.emit("missile")

    def hit(self, state: GameState):
        if self.invulnerable:
            return
        if state.shield > 0:
            state.shield -= 1
            state.emit("shield")
            state.spawn_particles(10, self.x, self.y, settings.COLOR_SHIELD, ParticleKind.SHIELD)
            return

        state.lives = max(0, state.lives - 1)
        state.power = max(1, state.power - 1)
        self.invulnerable = True
        self.invulnerable_time = settings.PLAYER_INVULN_FRAMES
        state.spawn_particles(20, self.x, self.y, settings.COLOR_PLAYER, ParticleKind.NORMAL)
        state.emit("hit")
        state.screen_shake = settings.SCREEN_SHAKE_FRAMES
        if state.lives <= 0:
            state.game_over = True
