"""
Touch Gestures Package
Tap, double-tap, swipe and pinch recognition for touch surfaces.
"""

from .core.surface import TouchSurface, TouchEvent, Contact
from .gestures.recognizer import GestureRecognizer, GestureHandlers
from .gestures.photo_viewer import PhotoViewer, Photo

__version__ = "1.0.0"
__all__ = [
    "TouchSurface",
    "TouchEvent",
    "Contact",
    "GestureRecognizer",
    "GestureHandlers",
    "PhotoViewer",
    "Photo",
]
