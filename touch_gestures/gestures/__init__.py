"""
Gesture recognition and gesture-driven views.

This module provides the state machine that classifies contact events
into taps, double taps, swipes and pinches, and the photo viewer that
consumes them.
"""

from .recognizer import GestureRecognizer, GestureHandlers, Idle, SingleActive, PinchActive, PinchEnding
from .photo_viewer import PhotoViewer, Photo

__all__ = [
    'GestureRecognizer',
    'GestureHandlers',
    'Idle',
    'SingleActive',
    'PinchActive',
    'PinchEnding',
    'PhotoViewer',
    'Photo'
]
