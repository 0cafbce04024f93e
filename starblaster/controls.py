"""
Input snapshot consumed by the simulation once per frame.

The core never looks at pygame events or key state directly; the front end
samples the keyboard into a `Controls` value and passes it to `Game.tick`.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class Controls:
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    fire: bool = False
    weapon_1: bool = False
    weapon_2: bool = False
    weapon_3: bool = False

    @classmethod
    def from_pressed(cls, keys) -> "Controls":
        """Build a snapshot from `pygame.key.get_pressed()` (arrows or WASD)."""
        # Imported here so the simulation core loads without pygame
        import pygame

        return cls(
            left=bool(keys[pygame.K_LEFT] or keys[pygame.K_a]),
            right=bool(keys[pygame.K_RIGHT] or keys[pygame.K_d]),
            up=bool(keys[pygame.K_UP] or keys[pygame.K_w]),
            down=bool(keys[pygame.K_DOWN] or keys[pygame.K_s]),
            fire=bool(keys[pygame.K_SPACE]),
            weapon_1=bool(keys[pygame.K_1]),
            weapon_2=bool(keys[pygame.K_2]),
            weapon_3=bool(keys[pygame.K_3]),
        )

    @classmethod
    def from_mapping(cls, keys: Mapping[str, bool]) -> "Controls":
        """Build a snapshot from logical key names, e.g. {"ArrowLeft": True, " ": True}."""
        def any_of(*names: str) -> bool:
            return any(keys.get(n, False) for n in names)

        return cls(
            left=any_of("ArrowLeft", "a", "A"),
            right=any_of("ArrowRight", "d", "D"),
            up=any_of("ArrowUp", "w", "W"),
            down=any_of("ArrowDown", "s", "S"),
            fire=any_of(" "),
            weapon_1=any_of("1"),
            weapon_2=any_of("2"),
            weapon_3=any_of("3"),
        )

    def selected_weapon(self) -> Optional[str]:
        if self.weapon_1:
            return "bullet"
        if self.weapon_2:
            return "laser"
        if self.weapon_3:
            return "missile"
        return None


IDLE = Controls()
