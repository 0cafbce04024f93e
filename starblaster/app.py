"""
pygame front end: window, clock, keyboard sampling, sound cues and drawing.

All game rules live in `starblaster.game`; this module only reads the state
to draw it and feeds the simulation one `Controls` snapshot per frame.
"""
from __future__ import annotations
import math
import random
from typing import Optional

import pygame

from . import settings
from .controls import Controls
from .enemies import EnemyKind
from .entities import ParticleKind, PowerUpKind
from .game import Game
from .log import get_logger, setup_logging
from .sound import SoundManager
from .state import GameState

logger = get_logger(__name__)

SCENE_MENU = "MENU"
SCENE_PLAYING = "PLAYING"
SCENE_PAUSED = "PAUSED"
SCENE_GAME_OVER = "GAME_OVER"


class App:
    def __init__(self, seed: Optional[int] = None):
        pygame.init()
        pygame.display.set_caption(settings.TITLE)
        self.screen = pygame.display.set_mode((settings.WIDTH, settings.HEIGHT))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(None, 22)
        self.hudfont = pygame.font.SysFont(None, 28)
        self.bigfont = pygame.font.SysFont(None, 48)
        self.sound = SoundManager(settings.ENABLE_SOUND)
        self.game = Game(seed=seed)
        self.scene = SCENE_MENU
        self.grid_offset = 0

    def start(self):
        self.game.start_game()
        self.scene = SCENE_PLAYING

    # ============================
    # MAIN LOOP
    # ============================
    def run(self):
        running = True
        while running:
            self.clock.tick(settings.FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = self.handle_key(event.key)

            if self.scene == SCENE_PLAYING:
                controls = Controls.from_pressed(pygame.key.get_pressed())
                events = self.game.tick(controls, pygame.time.get_ticks())
                self.sound.play_all(events)
                if not self.game.running:
                    self.scene = SCENE_GAME_OVER

            self.draw()
        pygame.quit()

    def handle_key(self, key: int) -> bool:
        if key == pygame.K_ESCAPE:
            if self.scene == SCENE_PLAYING:
                self.scene = SCENE_PAUSED
            elif self.scene in (SCENE_PAUSED, SCENE_MENU, SCENE_GAME_OVER):
                return False
        elif key in (pygame.K_RETURN, pygame.K_SPACE):
            if self.scene in (SCENE_MENU, SCENE_GAME_OVER):
                self.start()
            elif self.scene == SCENE_PAUSED and key == pygame.K_RETURN:
                self.scene = SCENE_PLAYING
        elif key == pygame.K_p:
            if self.scene == SCENE_PLAYING:
                self.scene = SCENE_PAUSED
            elif self.scene == SCENE_PAUSED:
                self.scene = SCENE_PLAYING
        elif key == pygame.K_m and self.scene == SCENE_MENU:
            self.sound.enabled = not self.sound.enabled
            logger.info("Sound %s", "on" if self.sound.enabled else "off")
        return True

    # ============================
    # RENDERING
    # ============================
    def draw(self):
        state = self.game.state
        self.screen.fill(settings.COLOR_BG)
        ox = oy = 0
        if state.screen_shake > 0 and self.scene == SCENE_PLAYING:
            ox = random.randint(-state.screen_shake // 2, state.screen_shake // 2)
            oy = random.randint(-state.screen_shake // 2, state.screen_shake // 2)
        if self.scene != SCENE_MENU:
            self.draw_world(state, ox, oy)
            self.draw_hud(state)
        if self.scene == SCENE_MENU:
            self.draw_menu()
        elif self.scene == SCENE_PAUSED:
            self.draw_overlay("Paused", "Press P or Enter to continue")
        elif self.scene == SCENE_GAME_OVER:
            self.draw_overlay("Game Over", f"Score: {self.game.final_score}  -  Space to retry")
        pygame.display.flip()

    def draw_world(self, state: GameState, ox: int, oy: int):
        surf = self.screen
        for obj in state.background_objects:
            if obj.kind == "planet":
                pygame.draw.circle(surf, obj.color2, (int(obj.x) + ox, int(obj.y) + oy), int(obj.radius))
                pygame.draw.circle(surf, obj.color1, (int(obj.x - obj.radius / 3) + ox, int(obj.y - obj.radius / 3) + oy),
                                   int(obj.radius / 2))
            else:
                rect = pygame.Rect(0, 0, int(obj.width), int(obj.height))
                rect.center = (int(obj.x) + ox, int(obj.y) + oy)
                pygame.draw.rect(surf, (44, 62, 80), rect)
                for lx, ly, _ in obj.lights:
                    pygame.draw.rect(surf, (255, 255, 100), (int(obj.x + lx) - 2 + ox, int(obj.y + ly) - 2 + oy, 4, 4))
        for star in state.stars:
            shade = int(255 * star.brightness)
            size = max(1, int(star.size))
            pygame.draw.rect(surf, (shade, shade, shade), (int(star.x), int(star.y), size, size))

        self.grid_offset = (self.grid_offset + 1) % 50
        for y in range(-50 + self.grid_offset, settings.HEIGHT + 50, 50):
            pygame.draw.line(surf, settings.COLOR_GRID, (0, y), (settings.WIDTH, y))

        self.draw_player(state, ox, oy)
        for b in state.bullets:
            pygame.draw.rect(surf, settings.COLOR_BULLET_PLAYER, self._rect(b, ox, oy))
        for m in state.missiles:
            pygame.draw.rect(surf, settings.COLOR_MISSILE, self._rect(m, ox, oy))
        if state.laser is not None:
            laser = state.laser
            pygame.draw.rect(surf, settings.COLOR_LASER, (int(laser.x - laser.width / 2) + ox, oy, laser.width, int(laser.y)))
            pygame.draw.rect(surf, (255, 255, 255), (int(laser.x) - 2 + ox, oy, 4, int(laser.y)))
        for e in state.enemies:
            self.draw_enemy(e, ox, oy)
        if state.boss is not None:
            self.draw_boss(state.boss, ox, oy)
        for b in state.enemy_bullets:
            pygame.draw.circle(surf, settings.COLOR_BULLET_ENEMY, (int(b.x) + ox, int(b.y) + oy), b.width // 2)
        for p in state.power_ups:
            scale = 1 + math.sin(p.pulse_phase) * 0.2
            color = settings.COLOR_POWERUP_SHIELD if p.kind is PowerUpKind.SHIELD else settings.COLOR_POWERUP_POWER
            pygame.draw.circle(surf, color, (int(p.x) + ox, int(p.y) + oy), int(p.width / 2 * scale))
            label = self.font.render("S" if p.kind is PowerUpKind.SHIELD else "P", True, settings.COLOR_UI)
            surf.blit(label, (int(p.x) - label.get_width() // 2 + ox, int(p.y) - label.get_height() // 2 + oy))
        for p in state.particles:
            size = max(1, int(p.size * p.alpha)) if p.kind is ParticleKind.EXPLOSION else max(1, int(p.size))
            pygame.draw.rect(surf, p.color, (int(p.x - size / 2) + ox, int(p.y - size / 2) + oy, size, size))

    def _rect(self, e, ox: int, oy: int) -> pygame.Rect:
        rect = pygame.Rect(0, 0, int(e.width), int(e.height))
        rect.center = (int(e.x) + ox, int(e.y) + oy)
        return rect

    def draw_player(self, state: GameState, ox: int, oy: int):
        p = state.player
        if p.invulnerable and (p.invulnerable_time // 5) % 2 == 0:
            return
        x, y = p.x + ox, p.y + oy
        hw, hh = p.width / 2, p.height / 2
        pygame.draw.polygon(self.screen, settings.COLOR_PLAYER,
                            [(x, y - hh), (x - hw, y + hh), (x, y + hh * 2 / 3), (x + hw, y + hh)])
        if state.shield > 0:
            pygame.draw.circle(self.screen, settings.COLOR_SHIELD, (int(x), int(y)), int(p.width), 3)

    def draw_enemy(self, e, ox: int, oy: int):
        rect = self._rect(e, ox, oy)
        if e.kind in (EnemyKind.SPLITTER, EnemyKind.ROTATING):
            pygame.draw.circle(self.screen, e.color, rect.center, rect.width // 2)
        elif e.kind in (EnemyKind.STRONG, EnemyKind.SNIPER):
            pygame.draw.polygon(self.screen, e.color, [rect.midbottom, rect.topleft, rect.topright])
        else:
            pygame.draw.rect(self.screen, e.color, rect)

    def draw_boss(self, boss, ox: int, oy: int):
        rect = self._rect(boss, ox, oy)
        pygame.draw.rect(self.screen, settings.COLOR_BOSS, rect, border_radius=12)
        pygame.draw.rect(self.screen, settings.COLOR_BOSS_DARK, rect.inflate(-40, -40))
        bar = pygame.Rect(10, 10, settings.WIDTH - 20, 20)
        pygame.draw.rect(self.screen, (60, 60, 60), bar)
        pygame.draw.rect(self.screen, settings.COLOR_BULLET_ENEMY,
                         (bar.x, bar.y, int(bar.width * boss.health / boss.max_health), bar.height))
        pygame.draw.rect(self.screen, settings.COLOR_UI, bar, 1)

    def draw_hud(self, state: GameState):
        hud = state.hud()
        pad = 20
        self._text(f"Score: {hud['score']}   Lives: {hud['lives']}   Power: {hud['power']}",
                   (pad, 36), settings.COLOR_UI, self.hudfont)
        if hud["stage"] > 1:
            self._text(f"STAGE {hud['stage']}", (pad, 60), settings.COLOR_STAGE)
        self._text(f"RANK: {hud['rank']}", (pad, 84), settings.COLOR_RANK)
        if hud["combo"] > 1:
            self._text(f"COMBO x{hud['combo']}", (settings.WIDTH - 160, 60), settings.COLOR_COMBO, self.hudfont)
        if hud["multiplier"] > 1:
            self._text(f"x{hud['multiplier']} MULTIPLIER", (settings.WIDTH - 160, 90), settings.COLOR_MULTIPLIER)
        shield = "#" * hud["shield"] + "-" * (hud["shield_max"] - hud["shield"])
        self._text(f"Shield: {shield}", (pad, settings.HEIGHT - 44), settings.COLOR_UI)
        self._text(f"Weapon: {hud['weapon'].upper()} (1-3 to switch)", (pad, settings.HEIGHT - 24), settings.COLOR_UI)

    def _text(self, s: str, pos, color, font=None):
        font = font or self.font
        self.screen.blit(font.render(s, True, color), pos)

    def draw_menu(self):
        title = self.bigfont.render(settings.TITLE, True, settings.COLOR_UI)
        self.screen.blit(title, (settings.WIDTH // 2 - title.get_width() // 2, 140))
        tips = [
            "Press Space or Enter to Start",
            "Arrows/WASD - Move    Space - Fire",
            "1 Bullet   2 Laser   3 Missile",
            "P - Pause    Esc - Quit    M - Toggle Sound",
        ]
        for i, t in enumerate(tips):
            s = self.font.render(t, True, settings.COLOR_UI)
            self.screen.blit(s, (settings.WIDTH // 2 - s.get_width() // 2, 240 + i * 28))

    def draw_overlay(self, title: str, hint: str):
        overlay = pygame.Surface((settings.WIDTH, settings.HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))
        self.screen.blit(overlay, (0, 0))
        p = self.bigfont.render(title, True, settings.COLOR_UI)
        self.screen.blit(p, (settings.WIDTH // 2 - p.get_width() // 2, settings.HEIGHT // 2 - 60))
        t = self.font.render(hint, True, settings.COLOR_UI)
        self.screen.blit(t, (settings.WIDTH // 2 - t.get_width() // 2, settings.HEIGHT // 2))


def main():
    setup_logging()
    App().run()
