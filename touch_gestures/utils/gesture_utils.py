"""
Shared geometry and timing helpers for gesture recognition.
"""

import math
import time
from dataclasses import dataclass
from typing import Dict

from ..config.settings import GestureConfig


@dataclass(frozen=True)
class ContactPoint:
    """Position and capture time (ms) of a single finger contact."""

    x: float
    y: float
    timestamp: float

    def __repr__(self):
        return f"ContactPoint({self.x:.1f}, {self.y:.1f} @ {self.timestamp:.0f}ms)"

    def distance_to(self, other: 'ContactPoint') -> float:
        """Calculate Euclidean distance to another point."""
        return GeometryUtils.calculate_distance(self.x, self.y, other.x, other.y)


class GeometryUtils:
    """Utility class for geometric calculations."""

    @staticmethod
    def calculate_distance(x1: float, y1: float, x2: float, y2: float) -> float:
        """Calculate Euclidean distance between two positions."""
        return math.sqrt((x1 - x2) ** 2 + (y1 - y2) ** 2)

    @staticmethod
    def swipe_direction(dx: float, dy: float) -> str:
        """Dominant cardinal direction of a displacement. Ties go vertical."""
        if abs(dx) > abs(dy):
            return "right" if dx > 0 else "left"
        return "down" if dy > 0 else "up"


class ScreenClassifier:
    """Classifies a display by its dimensions."""

    @staticmethod
    def screen_size(width: int) -> str:
        if width < GestureConfig.TABLET_MIN_WIDTH:
            return 'mobile'
        if width < GestureConfig.DESKTOP_MIN_WIDTH:
            return 'tablet'
        return 'desktop'

    @staticmethod
    def orientation(width: int, height: int) -> str:
        return 'portrait' if height > width else 'landscape'

    @staticmethod
    def describe(width: int, height: int) -> Dict[str, object]:
        """Return screen class flags in the shape the viewer expects."""
        size = ScreenClassifier.screen_size(width)
        return {
            'screen_size': size,
            'orientation': ScreenClassifier.orientation(width, height),
            'is_mobile': size == 'mobile',
            'is_tablet': size == 'tablet',
            'is_desktop': size == 'desktop',
        }


def now_ms() -> float:
    """Wall clock in milliseconds."""
    return time.time() * 1000
