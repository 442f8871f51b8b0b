"""
Feeds pygame finger and mouse events into a TouchSurface.
"""

from typing import Optional, Tuple

import pygame

from .surface import TouchSurface

MOUSE_CONTACT = 'mouse'


class PygameTouchAdapter:
    """Translates pygame input events into surface contact events.

    Finger events carry coordinates normalised to 0..1 and are scaled to
    ``size``. The left mouse button stands in for a single finger.
    """

    def __init__(self, surface: TouchSurface, size: Tuple[int, int]):
        self.surface = surface
        self.width, self.height = size
        self.mouse_down = False

    def handle_event(self, event, timestamp: Optional[float] = None) -> bool:
        """Dispatch ``event`` on the surface. Returns True if it was consumed."""
        if timestamp is None:
            timestamp = float(pygame.time.get_ticks())

        if event.type == pygame.FINGERDOWN:
            self.surface.press(event.finger_id, *self._scale(event), timestamp)
            return True
        if event.type == pygame.FINGERMOTION:
            self.surface.move({event.finger_id: self._scale(event)}, timestamp)
            return True
        if event.type == pygame.FINGERUP:
            self.surface.release(event.finger_id, *self._scale(event), timestamp)
            return True

        # SDL also synthesises mouse events from touches; those are skipped.
        if getattr(event, 'touch', False):
            return False

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.mouse_down = True
            self.surface.press(MOUSE_CONTACT, *event.pos, timestamp)
            return True
        if event.type == pygame.MOUSEMOTION and self.mouse_down:
            self.surface.move({MOUSE_CONTACT: event.pos}, timestamp)
            return True
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1 and self.mouse_down:
            self.mouse_down = False
            self.surface.release(MOUSE_CONTACT, *event.pos, timestamp)
            return True

        return False

    def _scale(self, event) -> Tuple[float, float]:
        return event.x * self.width, event.y * self.height
