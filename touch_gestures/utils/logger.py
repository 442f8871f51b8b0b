"""
Logging utilities for recognized gestures.
"""

import datetime
import logging
from typing import Optional

from ..gestures.recognizer import GestureHandlers

logger = logging.getLogger(__name__)

GESTURE_MARKERS = {
    'tap': '👆 TAP',
    'double_tap': '👆👆 DOUBLE TAP',
    'swipe_left': '👋 SWIPE left',
    'swipe_right': '👋 SWIPE right',
    'swipe_up': '👋 SWIPE up',
    'swipe_down': '👋 SWIPE down',
    'pinch_start': '🔍 PINCH START',
    'pinch': '🔍 PINCH',
    'pinch_end': '🔍 PINCH END',
}


class GestureLogger:
    """Prints recognized gestures and optionally mirrors them to a debug file."""

    def __init__(self, debug_file: Optional[str] = None):
        self.debug_file = None
        self.count = 0
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                print(f"Warning: Could not open debug file: {e}")

    def log_gesture(self, gesture: str, scale: Optional[float] = None):
        """Log a detected gesture."""
        timestamp = datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]
        marker = GESTURE_MARKERS.get(gesture, gesture.upper())
        self.count += 1

        if scale is not None:
            print(f"[{timestamp}] {marker} x{scale:.2f}")
        else:
            print(f"[{timestamp}] {marker}")

        if self.debug_file:
            try:
                self.debug_file.write(f"[{timestamp}] {gesture} scale={scale}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Debug file write failed: {e}")

    def handlers(self) -> GestureHandlers:
        """Handler set that logs every gesture the recognizer reports."""
        return GestureHandlers(
            on_swipe_left=lambda: self.log_gesture('swipe_left'),
            on_swipe_right=lambda: self.log_gesture('swipe_right'),
            on_swipe_up=lambda: self.log_gesture('swipe_up'),
            on_swipe_down=lambda: self.log_gesture('swipe_down'),
            on_pinch_start=lambda: self.log_gesture('pinch_start'),
            on_pinch=lambda scale: self.log_gesture('pinch', scale),
            on_pinch_end=lambda: self.log_gesture('pinch_end'),
            on_tap=lambda: self.log_gesture('tap'),
            on_double_tap=lambda: self.log_gesture('double_tap'),
        )

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
