"""Shared fixtures for the test suite."""
from starblaster.entities import Bullet
from starblaster.state import GameState


def quiet_state(seed: int = 1234, particles: bool = False) -> GameState:
    """A fresh state with a fixed seed; particles off unless a test counts them."""
    return GameState(seed=seed, particles=particles)


def player_bullet_at(x: float, y: float) -> Bullet:
    return Bullet(x, y, 0, 0)


def enemy_bullet_at(x: float, y: float) -> Bullet:
    return Bullet(x, y, 0, 0, is_enemy=True)
