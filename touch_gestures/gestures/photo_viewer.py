"""
Full-screen photo viewer driven by touch gestures and keys.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..config.settings import GestureConfig
from .recognizer import GestureHandlers

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Photo:
    id: str
    url: str
    caption: Optional[str] = None
    uploaded_by: Optional[str] = None


class PhotoViewer:
    """Tracks the open photo and zoom level of a gallery modal."""

    def __init__(self, photos: List[Photo],
                 on_photo_select: Optional[Callable[[Photo], None]] = None,
                 screen_size: str = 'desktop'):
        self.photos = list(photos)
        self.screen_size = screen_size
        self.on_photo_select = on_photo_select
        self.config = GestureConfig()

        self.selected: Optional[Photo] = None
        self.current_index = 0
        self.scale = 1.0

    @property
    def is_open(self) -> bool:
        return self.selected is not None

    def open(self, index: int):
        self.selected = self.photos[index]
        self.current_index = index
        self._reset_view()
        if self.on_photo_select:
            self.on_photo_select(self.selected)

    def close(self):
        self.selected = None
        self._reset_view()

    def navigate(self, direction: str):
        """Show the next or previous photo, wrapping at either end."""
        if not self.photos:
            return

        if direction == 'next':
            index = (self.current_index + 1) % len(self.photos)
        else:
            index = len(self.photos) - 1 if self.current_index == 0 else self.current_index - 1

        self.current_index = index
        self.selected = self.photos[index]
        self._reset_view()
        logger.debug(f"Showing photo {index + 1}/{len(self.photos)}")

    def zoom(self, zoom_in: bool):
        """Step the zoom by one notch."""
        if zoom_in:
            scale = min(self.config.MAX_ZOOM, self.scale * self.config.ZOOM_STEP)
        else:
            scale = max(self.config.MIN_ZOOM, self.scale / self.config.ZOOM_STEP)
        self.scale = scale

    def set_scale(self, scale: float):
        self.scale = max(self.config.MIN_ZOOM, min(self.config.MAX_ZOOM, scale))

    def toggle_zoom(self):
        self.scale = self.config.DOUBLE_TAP_ZOOM if self.scale == 1 else 1.0

    def tap(self):
        if self.scale > 1:
            self._reset_view()

    def handle_key(self, key: str) -> bool:
        """Apply a keyboard shortcut. Returns True if the key was used.

        Mobile screens have no keyboard shortcuts.
        """
        if not self.is_open or self.screen_size == 'mobile':
            return False

        if key == 'ArrowLeft':
            self.navigate('prev')
        elif key == 'ArrowRight':
            self.navigate('next')
        elif key == 'Escape':
            self.close()
        elif key in ('+', '='):
            self.zoom(True)
        elif key == '-':
            self.zoom(False)
        elif key == '0':
            self._reset_view()
        else:
            return False
        return True

    def gesture_handlers(self) -> GestureHandlers:
        """Handlers that let a GestureRecognizer drive this viewer."""
        return GestureHandlers(
            on_swipe_left=lambda: self.navigate('next'),
            on_swipe_right=lambda: self.navigate('prev'),
            on_pinch=self.set_scale,
            on_double_tap=self.toggle_zoom,
            on_tap=self.tap,
        )

    def _reset_view(self):
        self.scale = 1.0
