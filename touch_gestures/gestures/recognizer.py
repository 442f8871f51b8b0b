"""
Tap, double-tap, swipe and pinch recognition for a single touch surface.

The recognizer tracks one gesture at a time as an explicit state:

    Idle --one contact--> SingleActive --release--> Idle   (tap / double tap / swipe / nothing)
    Idle | SingleActive --two contacts--> PinchActive --none left--> Idle   (pinch end)
    PinchActive --one left--> PinchEnding --none left--> Idle   (pinch end)

While one pinch contact remains down no scale updates are reported and the
remaining contact is not tracked for taps or swipes.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

from ..config.settings import GestureConfig
from ..core.surface import TOUCH_END, TOUCH_MOVE, TOUCH_START, TouchEvent, TouchSurface
from ..utils.gesture_utils import ContactPoint, GeometryUtils

logger = logging.getLogger(__name__)


@dataclass
class GestureHandlers:
    """Optional callbacks, each invoked once per matching gesture."""

    on_swipe_left: Optional[Callable[[], None]] = None
    on_swipe_right: Optional[Callable[[], None]] = None
    on_swipe_up: Optional[Callable[[], None]] = None
    on_swipe_down: Optional[Callable[[], None]] = None
    on_pinch_start: Optional[Callable[[], None]] = None
    on_pinch: Optional[Callable[[float], None]] = None
    on_pinch_end: Optional[Callable[[], None]] = None
    on_tap: Optional[Callable[[], None]] = None
    on_double_tap: Optional[Callable[[], None]] = None


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class SingleActive:
    start: ContactPoint


@dataclass(frozen=True)
class PinchActive:
    baseline: float
    scale: float = 1.0


@dataclass(frozen=True)
class PinchEnding:
    """One pinch contact lifted, waiting for the other."""


GestureState = Union[Idle, SingleActive, PinchActive, PinchEnding]

# (handler name, args) pairs produced by a transition
Emission = Tuple[str, tuple]


class GestureRecognizer:
    """Classifies contact events from one surface into gestures."""

    def __init__(self, handlers: Optional[GestureHandlers] = None,
                 swipe_threshold: float = GestureConfig.SWIPE_THRESHOLD,
                 pinch_threshold: float = GestureConfig.PINCH_THRESHOLD):
        self.handlers = handlers or GestureHandlers()
        self.swipe_threshold = swipe_threshold
        self.pinch_threshold = pinch_threshold
        self.config = GestureConfig()

        self.state: GestureState = Idle()
        self.last_tap_time: Optional[float] = None
        self.surface: Optional[TouchSurface] = None

    # -- attachment ---------------------------------------------------------

    def attach(self, surface: TouchSurface):
        """Start observing a surface. Session state starts empty."""
        if self.surface is not None:
            self.detach()
        self.reset()
        surface.add_listener(TOUCH_START, self.touch_start)
        surface.add_listener(TOUCH_MOVE, self.touch_move)
        surface.add_listener(TOUCH_END, self.touch_end)
        self.surface = surface
        logger.debug(f"Attached to {surface.name}")

    def detach(self):
        """Stop observing the current surface and drop all session state."""
        if self.surface is None:
            return
        self.surface.remove_listener(TOUCH_START, self.touch_start)
        self.surface.remove_listener(TOUCH_MOVE, self.touch_move)
        self.surface.remove_listener(TOUCH_END, self.touch_end)
        logger.debug(f"Detached from {self.surface.name}")
        self.surface = None
        self.reset()

    @contextmanager
    def attached(self, surface: TouchSurface):
        self.attach(surface)
        try:
            yield self
        finally:
            self.detach()

    def reset(self):
        self.state = Idle()
        self.last_tap_time = None

    # -- surface listeners --------------------------------------------------

    def touch_start(self, event: TouchEvent):
        self.handle(event)

    def touch_move(self, event: TouchEvent):
        self.handle(event)

    def touch_end(self, event: TouchEvent):
        self.handle(event)

    def handle(self, event: TouchEvent):
        """Apply one contact event, then fire whatever it produced."""
        new_state, emissions = self.transition(self.state, event)
        if new_state != self.state:
            logger.debug(f"{type(self.state).__name__} -> {type(new_state).__name__} on {event.kind}")
        self.state = new_state

        for name, args in emissions:
            handler = getattr(self.handlers, name)
            if handler is not None:
                handler(*args)

    # -- state machine ------------------------------------------------------

    def transition(self, state: GestureState, event: TouchEvent) -> Tuple[GestureState, List[Emission]]:
        """Return the next state and the handlers to fire for ``event``."""
        count = len(event.touches)

        if event.kind == TOUCH_START:
            if count == 1 and isinstance(state, Idle):
                touch = event.touches[0]
                return SingleActive(ContactPoint(touch.x, touch.y, event.timestamp)), []
            if count == self.config.PINCH_FINGERS and not isinstance(state, PinchActive):
                first, second = event.touches
                baseline = GeometryUtils.calculate_distance(first.x, first.y, second.x, second.y)
                return PinchActive(baseline), [('on_pinch_start', ())]
            return state, []

        if event.kind == TOUCH_MOVE:
            if isinstance(state, PinchActive) and count == self.config.PINCH_FINGERS and state.baseline > 0:
                first, second = event.touches
                distance = GeometryUtils.calculate_distance(first.x, first.y, second.x, second.y)
                scale = distance / state.baseline
                if abs(scale - state.scale) > self.pinch_threshold:
                    return PinchActive(state.baseline, scale), [('on_pinch', (scale,))]
            return state, []

        if event.kind == TOUCH_END:
            if isinstance(state, SingleActive) and count == 0:
                if not event.changed_touches:
                    return Idle(), []
                touch = event.changed_touches[0]
                end = ContactPoint(touch.x, touch.y, event.timestamp)
                return Idle(), self._classify_release(state.start, end)
            if isinstance(state, (PinchActive, PinchEnding)) and count == 0:
                return Idle(), [('on_pinch_end', ())]
            if isinstance(state, PinchActive) and count == 1:
                return PinchEnding(), []
            return state, []

        return state, []

    def _classify_release(self, start: ContactPoint, end: ContactPoint) -> List[Emission]:
        """Classify a finished single-contact sequence as tap, double tap or swipe."""
        dx = end.x - start.x
        dy = end.y - start.y
        elapsed = end.timestamp - start.timestamp
        distance = start.distance_to(end)

        if distance < self.config.TAP_MAX_DISTANCE and elapsed < self.config.TAP_MAX_DURATION:
            if (self.last_tap_time is not None and
                    end.timestamp - self.last_tap_time < self.config.DOUBLE_TAP_TIMEOUT):
                self.last_tap_time = None
                return [('on_double_tap', ())]
            self.last_tap_time = end.timestamp
            return [('on_tap', ())]

        if distance > self.swipe_threshold:
            direction = GeometryUtils.swipe_direction(dx, dy)
            return [(f'on_swipe_{direction}', ())]

        # Dead zone: too far for a tap, too short for a swipe, or too slow.
        return []
