"""Layout constants and color definitions."""

FPS = 60

# Layout dimensions
LANE_H = 100
LABEL_W = 180
CURVE_W = 120
TRACK_W = 440
STATUS_H = 36

# Lane name -> description easing
LANES: list[tuple[str, str]] = [
    ("linear", "linear"),
    ("circle", "circle"),
    ("sigmoid", "sigmoid"),
    ("easeOutElastic", "easeOutElastic"),
    ("css ease", "cubic-bezier 0.25 0.1 0.25 1"),
]

SCREEN_W = LABEL_W + CURVE_W + TRACK_W
SCREEN_H = LANE_H * len(LANES) + STATUS_H

# Durations (ms)
DEFAULT_LENGTH_MS = 800
LENGTH_STEP_MS = 200
MIN_LENGTH_MS = 200
MAX_LENGTH_MS = 3000

# Orb
ORB_RADIUS = 10
TRACK_PAD = 20

# Colors
BG_COLOR = (20, 20, 30)
LANE_BG = (30, 30, 45)
LANE_BORDER = (50, 50, 70)
CURVE_BG = (15, 15, 25)
TRACK_BG = (25, 25, 40)
TRACK_RAIL = (60, 60, 80)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)

LANE_COLORS: list[tuple[int, int, int]] = [
    (0, 220, 220),
    (255, 160, 40),
    (60, 220, 80),
    (220, 80, 220),
    (240, 220, 90),
]
