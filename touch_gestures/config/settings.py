"""
Configuration settings for touch gesture recognition.
"""

class GestureConfig:
    """Configuration constants for touch gesture recognition."""

    # Distance configurations (in surface units)
    SWIPE_THRESHOLD = 50
    TAP_MAX_DISTANCE = 10

    # Timing configurations (in milliseconds)
    TAP_MAX_DURATION = 300
    DOUBLE_TAP_TIMEOUT = 300

    # Pinch detection (scale delta since the last reported scale)
    PINCH_THRESHOLD = 0.1
    PINCH_FINGERS = 2

    # Photo viewer zoom
    MIN_ZOOM = 0.5
    MAX_ZOOM = 3.0
    DOUBLE_TAP_ZOOM = 2.0
    ZOOM_STEP = 1.5

    # Screen breakpoints (width in pixels)
    TABLET_MIN_WIDTH = 768
    DESKTOP_MIN_WIDTH = 1024

    # Fallback resolution when the device reports none
    DEFAULT_SCREEN_WIDTH = 1920
    DEFAULT_SCREEN_HEIGHT = 1080
