"""
Utilities package for gesture recognition.

This package provides shared geometry and screen helpers used by the
recognizer, the device layer and the viewer.
"""

from .gesture_utils import (
    ContactPoint,
    GeometryUtils,
    ScreenClassifier,
    now_ms
)

__all__ = [
    'ContactPoint',
    'GeometryUtils',
    'ScreenClassifier',
    'now_ms'
]
