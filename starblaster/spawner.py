"""Decides when to bring in new enemies and when the stage boss arrives."""
from __future__ import annotations
from typing import TYPE_CHECKING, Sequence, Tuple

from . import settings
from .enemies import EnemyKind
from .log import get_logger

if TYPE_CHECKING:
    from .state import GameState

logger = get_logger(__name__)

# (kind, cumulative upper bound) evaluated against a uniform draw in [0, 1)
STAGE_TABLES: Sequence[Tuple[int, Sequence[Tuple[EnemyKind, float]]]] = (
    (3, ((EnemyKind.BASIC, 0.4), (EnemyKind.STRONG, 0.6), (EnemyKind.ROTATING, 0.75),
         (EnemyKind.SPLITTER, 0.9), (EnemyKind.SNIPER, 1.0))),
    (2, ((EnemyKind.BASIC, 0.5), (EnemyKind.STRONG, 0.75), (EnemyKind.ROTATING, 0.9),
         (EnemyKind.SPLITTER, 1.0))),
    (1, ((EnemyKind.BASIC, 0.8), (EnemyKind.STRONG, 1.0))),
)


def spawn_rate(score: int) -> int:
    """Frames between enemy spawns; shrinks as the score climbs."""
    return max(settings.SPAWN_RATE_MIN,
               settings.SPAWN_RATE_BASE - (score // 1000) * settings.SPAWN_RATE_STEP)


def pick_kind(stage: int, roll: float) -> EnemyKind:
    for min_stage, table in STAGE_TABLES:
        if stage >= min_stage:
            for kind, bound in table:
                if roll < bound:
                    return kind
            return table[-1][0]
    return EnemyKind.BASIC


def spawn(state: GameState):
    """Run once per frame, after entity updates and before collisions."""
    if (state.enemies_killed >= settings.BOSS_KILL_THRESHOLD
            and not state.boss_spawned and state.boss is None):
        state.spawn_boss()
        state.emit("boss_spawn")
        logger.info("Boss incoming on stage %d", state.stage)
        return

    if state.boss is not None:
        return

    state.enemy_spawn_timer += 1
    if state.enemy_spawn_timer > spawn_rate(state.score):
        margin = settings.ENEMY_SPAWN_MARGIN
        x = state.rng.random() * (settings.WIDTH - 2 * margin) + margin
        kind = pick_kind(state.stage, state.rng.random())
        state.add_enemy(x, settings.ENEMY_SPAWN_Y, kind)
        state.enemy_spawn_timer = 0
