"""
Frame orchestrator.

One call to `Game.tick()` advances the simulation by exactly one frame in a
fixed order: player input, entity updates, spawner, collisions, cleanup. The
emitted events for that frame are returned for the presentation layer.
"""
from __future__ import annotations
from typing import List, Optional

from . import collisions, settings, spawner
from .controls import IDLE, Controls
from .entities import BackgroundObject, Player
from .log import get_logger
from .state import GameState

logger = get_logger(__name__)


class Game:
    def __init__(self, seed: Optional[int] = None, particles: bool = settings.ENABLE_PARTICLES):
        self.state = GameState(seed=seed, particles=particles)
        self.running = False
        self.frame = 0

    @property
    def player(self) -> Player:
        return self.state.player

    @property
    def final_score(self) -> Optional[int]:
        if self.state.game_over:
            return self.state.score
        return None

    def start_game(self):
        self.state.reset()
        self.running = True
        self.frame = 0
        logger.info("Game started")

    def tick(self, controls: Controls = IDLE, now_ms: float = 0.0) -> List[str]:
        """Advance one frame. Does nothing once the game is over or before it started."""
        if not self.running:
            return []
        state = self.state
        state.now_ms = now_ms
        self.frame += 1

        self.update_entities(controls, now_ms)
        spawner.spawn(state)
        collisions.resolve(state)
        self.cleanup()

        if state.game_over:
            self.running = False
            state.emit("game_over")
            logger.info("Game over after %d frames, final score %d (stage %d, rank %s)",
                        self.frame, state.score, state.stage, state.rank)
        return state.drain_events()

    # ============================
    # UPDATE
    # ============================
    def update_entities(self, controls: Controls, now_ms: float):
        state = self.state
        state.player.update(state, controls, now_ms)

        if state.boss is not None:
            state.boss.update(state)
        if state.laser is not None:
            state.laser.update(state, controls)

        for missile in state.missiles:
            missile.update(state)
        for bullet in state.bullets:
            bullet.update()
        for enemy in state.enemies:
            enemy.update(state)
        for bullet in state.enemy_bullets:
            bullet.update()
        for power_up in state.power_ups:
            power_up.update()
        for particle in state.particles:
            particle.update()

        state.tick_combo()
        if state.screen_shake > 0:
            state.screen_shake -= 1

        for obj in state.background_objects:
            obj.update()
        for star in state.stars:
            star.update()
        if state.rng.random() < settings.BACKGROUND_OBJECT_CHANCE:
            state.background_objects.append(BackgroundObject(state.rng))

    def cleanup(self):
        """Drop everything that left the screen or ran out of life this frame."""
        state = self.state
        state.missiles = [m for m in state.missiles if not m.is_off_screen()]
        state.bullets = [b for b in state.bullets if not b.is_off_screen()]
        state.enemies = [e for e in state.enemies if e.alive and not e.is_off_screen()]
        state.enemy_bullets = [b for b in state.enemy_bullets if not b.is_off_screen()]
        state.power_ups = [p for p in state.power_ups if not p.is_off_screen()]
        state.particles = [p for p in state.particles if not p.is_dead()]
        state.background_objects = [o for o in state.background_objects if not o.is_off_screen()]
