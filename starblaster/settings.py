"""
Settings, tunables and feature flags for Star Blaster.

Everything here is a plain module-level constant; edit the values to tune the
game. Colors are RGB tuples.
"""
from __future__ import annotations
import logging
import os

# ============================
# SETTINGS & CONSTANTS
# ============================
WIDTH, HEIGHT = 800, 600
FPS = 60
TITLE = "Star Blaster"
SOUND_DIR = os.path.join(os.path.dirname(__file__), "sounds")

# Feature flags
ENABLE_SOUND = True
ENABLE_PARTICLES = True
LOG_LEVEL = logging.INFO

# Colors
COLOR_BG = (10, 10, 26)          # #0a0a1a
COLOR_GRID = (22, 33, 62)
COLOR_UI = (255, 255, 255)
COLOR_PLAYER = (52, 152, 219)
COLOR_TRAIL = (0, 204, 255)
COLOR_SHIELD = (0, 255, 255)
COLOR_BULLET_PLAYER = (241, 196, 15)
COLOR_BULLET_ENEMY = (231, 76, 60)
COLOR_LASER = (255, 0, 255)
COLOR_MISSILE = (255, 51, 0)
COLOR_MISSILE_TRAIL = (255, 102, 0)
COLOR_AMBER = (255, 170, 0)
COLOR_BOSS = (142, 68, 173)
COLOR_BOSS_DARK = (102, 45, 145)
COLOR_POWERUP_POWER = (46, 204, 113)
COLOR_POWERUP_SHIELD = (0, 204, 255)
COLOR_COMBO = (241, 196, 15)
COLOR_MULTIPLIER = (231, 76, 60)
COLOR_STAGE = (52, 152, 219)
COLOR_RANK = (46, 204, 113)

ENEMY_COLORS = {
    "basic": (231, 76, 60),
    "strong": (155, 89, 182),
    "rotating": (243, 156, 18),
    "splitter": (26, 188, 156),
    "sniper": (230, 126, 34),
}

# Player
PLAYER_START_LIVES = 3
PLAYER_SIZE = (40, 50)
PLAYER_SPEED = 5
PLAYER_BOTTOM_OFFSET = 100
PLAYER_INVULN_FRAMES = 120
MAX_POWER = 3
SHIELD_MAX = 3

# Weapons (cooldowns are wall-clock milliseconds)
BULLET_CD_MS = 150
MISSILE_CD_MS = 500
PLAYER_BULLET_SPEED = 10
PLAYER_BULLET_SIZE = (4, 20)
ENEMY_BULLET_SIZE = (6, 12)
LASER_WIDTH = 20
MISSILE_SIZE = (8, 20)
MISSILE_SPEED = 8
MISSILE_LAUNCH_VY = -5

# Score & combo (frame counts)
COMBO_FRAMES = 60
COMBO_STEP = 5
MAX_MULTIPLIER = 8
POWERUP_SCORE = 500
POWERUP_DROP_CHANCE = 0.1
POWERUP_SIZE = (20, 20)
POWERUP_SPEED = 2
RANKS = ((50000, "ACE"), (20000, "VETERAN"), (5000, "PILOT"))
DEFAULT_RANK = "ROOKIE"

# Spawning
ENEMY_SPAWN_Y = -30
ENEMY_SPAWN_MARGIN = 30
SPAWN_RATE_BASE = 120
SPAWN_RATE_MIN = 30
SPAWN_RATE_STEP = 10
BOSS_KILL_THRESHOLD = 30

# Boss
BOSS_SIZE = (120, 100)
BOSS_HEALTH = 50
BOSS_SPEED = 1
BOSS_START_Y = -100
BOSS_TARGET_Y = 150
BOSS_PATTERN_FRAMES = 120
BOSS_SHOOT_FRAMES = 30
BOSS_SCORE = 5000
BOSS_POWERUP_DROPS = 3

# Background decoration
STAR_COUNT = 100
BACKGROUND_OBJECT_CHANCE = 0.005
SCREEN_SHAKE_FRAMES = 20
