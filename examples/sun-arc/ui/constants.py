"""Layout constants and color definitions."""

# Timing
FPS = 60
REFRESH_INTERVAL = 5.0  # seconds between host refreshes; longer than the 4s longest replay
DAY_LENGTH = 120.0  # seconds of demo time per daylight interval

# Layout dimensions
ARC_W = 295
ARC_H = 108
MARKER_SIZE = 18
MARGIN_X = 40
MARGIN_Y = 60
STATUS_H = 36

SCREEN_W = ARC_W + 2 * MARGIN_X
SCREEN_H = ARC_H + 2 * MARGIN_Y + STATUS_H

# Colors
DAY_BG = (235, 225, 200)
NIGHT_BG = (20, 20, 40)
DAY_INK = (60, 50, 40)
NIGHT_INK = (200, 200, 220)
STATUS_BG = (35, 35, 50)
TEXT_DIM = (140, 140, 160)
TRAIL = (180, 150, 90)
