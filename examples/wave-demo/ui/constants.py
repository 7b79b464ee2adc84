"""Window and color constants."""

# Timing
FPS = 60

# Window
SCREEN_W = 960
SCREEN_H = 540

# Colors
BG_COLOR = (245, 244, 238)
DOT_COLOR = (20, 20, 30)
HUD_COLOR = (90, 90, 110)
