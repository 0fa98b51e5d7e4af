"""Layout, color, and rendering constants."""
from __future__ import annotations

SCREEN_W = 900
SCREEN_H = 760
STATUS_H = 40
VIEW_H = SCREEN_H - STATUS_H
FPS = 60

# Grid defaults (overridden by CLI flags)
DEFAULT_LAYERS = 6
DEFAULT_SCALE = 40.0
DEFAULT_SKEW = 1.0

SCALE_STEP = 1.1
MIN_SCALE = 8.0
MAX_SCALE = 160.0
RANDOM_RADIUS = 3

COLOR_BG = (20, 20, 30)
COLOR_OUTLINE = (50, 50, 65)
COLOR_TEXT = (200, 200, 200)
COLOR_STATUS_BG = (30, 30, 40)

# Fill per layer, cycled
LAYER_COLORS: list[tuple[int, int, int]] = [
    (70, 130, 60),
    (60, 110, 140),
    (120, 90, 150),
    (150, 120, 60),
    (140, 70, 70),
    (70, 120, 120),
]

COLOR_HOVER = (240, 220, 120)
COLOR_NEIGHBOR = (200, 160, 80)
COLOR_CORNER_MARK = (255, 255, 255)
COLOR_RANDOM = (230, 90, 200)
