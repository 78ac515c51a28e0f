"""
Constants for the game.
"""

from __future__ import annotations

from mini_arcade_core.utils import find_assets_root

try:
    ASSETS_ROOT = find_assets_root(__file__)
except FileNotFoundError:
    ASSETS_ROOT = None

FPS = 60
MOBILE_FPS = 30
WINDOW_SIZE = (320, 288)

# Player
PLAYER_X = 30
PLAYER_SIZE = (20, 30)
PLAYER_SPEED = 3
SHOT_COOLDOWN_MS = 200

# Bullets
BULLET_SIZE = (6, 3)
BULLET_SPEED = 5

# Enemies
ENEMY_SIZE = (30, 30)
ENEMY_BASE_SPEED = 2.0
ENEMY_SPEED_PER_LEVEL = 0.5
SPAWN_RATE = {"desktop": (0.02, 0.01), "mobile": (0.015, 0.007)}

# Ultimate
ULTIMATE_DURATION_MS = 1000
ULTIMATE_START_RATIO = 0.8  # of player height
ULTIMATE_END_RATIO = 0.5  # of play-area height
CHARGE_PER_KILL = 10
CHARGE_MAX = 100

# Scoring
SCORE_ENEMY_ESCAPED = 10
SCORE_ENEMY_KILLED = 50
SCORE_PER_LEVEL = 500

# Colors
BACKGROUND_COLOR = (0x8B, 0x9A, 0x46)
TEXT_COLOR = (0x2C, 0x3E, 0x50)
PLAYER_COLOR = (0xE7, 0x4C, 0x3C)
BULLET_COLOR = (255, 255, 255)
ENEMY_COLOR = (0x34, 0x98, 0xDB)
CHARGE_COLOR = (0x34, 0x98, 0xDB)
CHARGE_READY_COLOR = (0xF3, 0x9C, 0x12)
BAR_BORDER_COLOR = (0xEC, 0xF0, 0xF1)
LASER_GLOW_COLOR = (255, 0, 0, 102)
LASER_BODY_COLOR = (255, 255, 255, 230)
LASER_CORE_COLOR = (255, 255, 255, 255)

# Volumes
HIT_VOLUME = 0.5
ULTIMATE_VOLUME = 0.7
RADIO_VOLUME = 0.7
