#!/usr/bin/env python3
"""Photo Viewer Demo with Touch Gestures.

Swipe left/right to change photos, pinch or double tap to zoom, tap to
reset. A mouse works as a single finger; arrow keys, +/-, 0 and Escape
behave like the gallery's keyboard shortcuts.
"""

from typing import List

import pygame

from touch_gestures.core.pygame_surface import PygameTouchAdapter
from touch_gestures.core.surface import TouchSurface
from touch_gestures.gestures.photo_viewer import Photo, PhotoViewer
from touch_gestures.gestures.recognizer import GestureRecognizer
from touch_gestures.utils.gesture_utils import ScreenClassifier

KEY_NAMES = {
    pygame.K_LEFT: 'ArrowLeft',
    pygame.K_RIGHT: 'ArrowRight',
    pygame.K_ESCAPE: 'Escape',
    pygame.K_PLUS: '+',
    pygame.K_EQUALS: '=',
    pygame.K_MINUS: '-',
    pygame.K_0: '0',
}


class PhotoViewerDemo:
    """Interactive gallery modal driven by the gesture recognizer."""

    def __init__(self, size=(1200, 800)) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode(size)
        pygame.display.set_caption("Photo Viewer - Touch Gestures Demo")

        # Placeholder photos, drawn as coloured cards
        self.colors = [(220, 80, 80), (80, 160, 220), (90, 190, 110), (230, 180, 60)]
        photos: List[Photo] = [
            Photo(id=str(i), url=f"photo-{i}.jpg", caption=f"Photo {i + 1}")
            for i in range(len(self.colors))
        ]
        self.viewer = PhotoViewer(photos, screen_size=ScreenClassifier.screen_size(size[0]))
        self.viewer.open(0)

        self.surface = TouchSurface('demo')
        self.adapter = PygameTouchAdapter(self.surface, size)
        self.recognizer = GestureRecognizer(self.viewer.gesture_handlers())

        self.font = pygame.font.Font(None, 40)
        self.small_font = pygame.font.Font(None, 28)

    def run(self) -> None:
        """Run the demo loop."""
        clock = pygame.time.Clock()
        with self.recognizer.attached(self.surface):
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return
                    if self.adapter.handle_event(event):
                        continue
                    if event.type == pygame.KEYDOWN and event.key in KEY_NAMES:
                        self.viewer.handle_key(KEY_NAMES[event.key])
                        if not self.viewer.is_open:
                            return

                self.draw()
                clock.tick(60)

    def draw(self) -> None:
        """Render the current photo at its zoom level."""
        self.screen.fill((20, 20, 20))
        width, height = self.screen.get_size()

        card_w = int(width * 0.5 * self.viewer.scale)
        card_h = int(height * 0.5 * self.viewer.scale)
        card = pygame.Rect(0, 0, card_w, card_h)
        card.center = (width // 2, height // 2)
        color = self.colors[self.viewer.current_index % len(self.colors)]
        pygame.draw.rect(self.screen, color, card, border_radius=12)

        caption = self.viewer.selected.caption if self.viewer.selected else ""
        header = f"{caption}  ({self.viewer.current_index + 1}/{len(self.viewer.photos)})"
        self.screen.blit(self.font.render(header, True, (255, 255, 255)), (20, 20))
        zoom_text = f"Zoom: {self.viewer.scale:.2f}x"
        self.screen.blit(self.small_font.render(zoom_text, True, (200, 200, 200)), (20, 60))
        help_text = "Swipe: navigate   Pinch / double tap: zoom   Tap: reset   Esc: close"
        self.screen.blit(self.small_font.render(help_text, True, (150, 150, 150)), (20, height - 40))
        pygame.display.flip()


def main() -> None:
    """Entry point for the demo."""
    demo = PhotoViewerDemo()
    try:
        demo.run()
    except KeyboardInterrupt:
        pass
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
