"""
Collision resolution between entity collections.

Hit tests compare centre distance against half the summed extents on each axis.
Hits only mark entities (`alive = False`); each collection is rebuilt from its
survivors after the pass, so nothing is removed while being iterated.
"""
from __future__ import annotations
from typing import TYPE_CHECKING

from . import settings
from .entities import ParticleKind, PowerUpKind

if TYPE_CHECKING:
    from .state import GameState

MISSILE_BLAST_PARTICLES = 20


def overlaps(a, b) -> bool:
    return (abs(a.x - b.x) < (a.width + b.width) / 2
            and abs(a.y - b.y) < (a.height + b.height) / 2)


def overlaps_x(a, b) -> bool:
    return abs(a.x - b.x) < (a.width + b.width) / 2


def compact(state: GameState):
    state.enemies = [e for e in state.enemies if e.alive]
    state.bullets = [b for b in state.bullets if b.alive]
    state.enemy_bullets = [b for b in state.enemy_bullets if b.alive]
    state.missiles = [m for m in state.missiles if m.alive]
    state.power_ups = [p for p in state.power_ups if p.alive]


def _hit_boss(state: GameState):
    boss = state.boss
    if boss is not None:
        boss.hit(state)


# ============================
# PASSES
# ============================
def laser_pass(state: GameState):
    laser = state.laser
    if laser is None:
        return
    for enemy in list(state.enemies):
        if enemy.alive and overlaps_x(laser, enemy):
            enemy.hit(state)
    if state.boss is not None and overlaps_x(laser, state.boss):
        _hit_boss(state)


def missile_pass(state: GameState):
    targets = list(state.enemies)
    for missile in state.missiles:
        for enemy in targets:
            if enemy.alive and overlaps(missile, enemy):
                missile.alive = False
                enemy.hit(state)
                break
        if missile.alive and state.boss is not None and overlaps(missile, state.boss):
            missile.alive = False
            _hit_boss(state)
        if not missile.alive:
            state.spawn_particles(MISSILE_BLAST_PARTICLES, missile.x, missile.y,
                                  settings.COLOR_MISSILE_TRAIL, ParticleKind.EXPLOSION)


def bullet_pass(state: GameState):
    targets = list(state.enemies)
    for bullet in state.bullets:
        for enemy in targets:
            if enemy.alive and overlaps(bullet, enemy):
                bullet.alive = False
                enemy.hit(state)
                break
        if bullet.alive and state.boss is not None and overlaps(bullet, state.boss):
            bullet.alive = False
            _hit_boss(state)


def enemy_bullet_pass(state: GameState):
    player = state.player
    for bullet in state.enemy_bullets:
        if not player.invulnerable and overlaps(bullet, player):
            bullet.alive = False
            player.hit(state)


def enemy_body_pass(state: GameState):
    player = state.player
    for enemy in state.enemies:
        if enemy.alive and not player.invulnerable and overlaps(enemy, player):
            enemy.alive = False
            player.hit(state)


def boss_body_pass(state: GameState):
    player = state.player
    if state.boss is not None and not player.invulnerable and overlaps(state.boss, player):
        player.hit(state)


def power_up_pass(state: GameState):
    player = state.player
    for power_up in state.power_ups:
        if not overlaps(power_up, player):
            continue
        power_up.alive = False
        if power_up.kind is PowerUpKind.SHIELD:
            state.shield = min(state.shield_max, state.shield + 1)
            state.emit("shield")
        else:
            state.power = min(settings.MAX_POWER, state.power + 1)
            state.emit("powerup")
        state.score += settings.POWERUP_SCORE


PASSES = (
    laser_pass,
    missile_pass,
    bullet_pass,
    enemy_bullet_pass,
    enemy_body_pass,
    boss_body_pass,
    power_up_pass,
)


def resolve(state: GameState):
    """Run every pass in order, compacting collections after each one."""
    for run_pass in PASSES:
        run_pass(state)
        compact(state)
