"""
Device management for touchscreen discovery and initialization.
"""

import evdev
from evdev import ecodes
import logging
from typing import Optional

from ..config.settings import GestureConfig
from ..utils.gesture_utils import ScreenClassifier

logger = logging.getLogger(__name__)

class DeviceManager:
    """Finds a multitouch input device and reports its screen geometry."""

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.device = None
        self.screen_width = GestureConfig.DEFAULT_SCREEN_WIDTH
        self.screen_height = GestureConfig.DEFAULT_SCREEN_HEIGHT

    def find_device(self):
        """Open the configured device, or the first one with multitouch slots."""
        paths = [self.path] if self.path else evdev.list_devices()

        for path in paths:
            try:
                device = evdev.InputDevice(path)
            except OSError as e:
                logger.warning(f"Cannot open {path}: {e}")
                continue

            if self.configure(device):
                return device
            device.close()

        logger.error("No touchscreen device found")
        return None

    def configure(self, device) -> bool:
        """Adopt ``device`` if it reports multitouch slots."""
        abs_caps = device.capabilities().get(ecodes.EV_ABS, [])
        abs_info = {code: info for code, info in abs_caps}

        if ecodes.ABS_MT_SLOT not in abs_info:
            return False

        if ecodes.ABS_MT_POSITION_X in abs_info:
            self.screen_width = abs_info[ecodes.ABS_MT_POSITION_X].max + 1
        if ecodes.ABS_MT_POSITION_Y in abs_info:
            self.screen_height = abs_info[ecodes.ABS_MT_POSITION_Y].max + 1

        self.device = device
        logger.info(f"Found touchscreen: {device.name}")
        logger.info(f"Screen resolution: {self.screen_width}x{self.screen_height}")
        return True

    def get_device_info(self):
        """Get device and screen information."""
        info = {
            'device': self.device,
            'screen_width': self.screen_width,
            'screen_height': self.screen_height,
            'center_x': self.screen_width // 2,
            'center_y': self.screen_height // 2
        }
        info.update(ScreenClassifier.describe(self.screen_width, self.screen_height))
        return info
