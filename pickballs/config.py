"""Application configuration and constants."""

# UI Constants
WINDOW_TITLE = "Pick Balls"
WINDOW_WIDTH = 1100
WINDOW_HEIGHT = 600
PANEL_WIDTH = 300

# Camera
CAMERA_POSITION = [8.0, 18.0, 8.0]
CAMERA_TARGET = [0.0, 0.0, 0.0]
CAMERA_UP = [0.0, 1.0, 0.0]
CAMERA_FOV = 45.0
CAMERA_NEAR = 0.1
CAMERA_FAR = 100.0

# Ball placement
BALL_COUNT = 10
OUTER_RADIUS = 8.0
BALL_MIN_RADIUS = 0.5
BALL_MAX_RADIUS = 1.5
BALL_RESOLUTION = 32
RANDOM_SEED = None  # None picks a fresh scene on every start

# Lighting
LIGHT_COLOR = [1.0, 1.0, 1.0]
LIGHT_INTENSITY = 100000
LIGHT_FALLOFF = 1000.0
AMBIENT_COLOR = [0x60 / 255, 0x60 / 255, 0x60 / 255]
AMBIENT_INTENSITY = 30000

# Colors
BACKGROUND_COLOR = [1, 1, 1, 1]
STATUS_INFO_COLOR = [0.3, 0.6, 0.9]
STATUS_OK_COLOR = [0.2, 0.8, 0.3]
STATUS_WARN_COLOR = [0.9, 0.5, 0.2]
