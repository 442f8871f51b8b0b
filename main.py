#!/usr/bin/env python3
"""
Touch Gestures - Main Entry Point
Prints taps, double taps, swipes and pinches from the first touchscreen found.
"""

import logging
import time
from touch_gestures.core.listener import TouchListener
from touch_gestures.gestures.recognizer import GestureRecognizer
from touch_gestures.utils.logger import GestureLogger

def main():
    """Main entry point for the gesture listener."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    gesture_logger = GestureLogger()
    listener = TouchListener()
    recognizer = GestureRecognizer(gesture_logger.handlers())

    if not listener.start():
        return

    try:
        with recognizer.attached(listener.surface):
            while listener.running:
                time.sleep(0.1)
    except KeyboardInterrupt:
        print("\n👋 Stopping...")
    finally:
        listener.stop()
        gesture_logger.close()

if __name__ == "__main__":
    main()
