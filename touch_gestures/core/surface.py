"""
In-memory touch surface that dispatches contact events to registered listeners.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Hashable, List, Optional

from ..utils.gesture_utils import now_ms

logger = logging.getLogger(__name__)

TOUCH_START = 'touchstart'
TOUCH_MOVE = 'touchmove'
TOUCH_END = 'touchend'
EVENT_KINDS = (TOUCH_START, TOUCH_MOVE, TOUCH_END)


@dataclass(frozen=True)
class Contact:
    """One finger on the surface."""

    identifier: Hashable
    x: float
    y: float


@dataclass(frozen=True)
class TouchEvent:
    """A contact event.

    ``touches`` lists the contacts still down after the event,
    ``changed_touches`` the contacts that started, moved or lifted in it.
    """

    kind: str
    touches: List[Contact] = field(default_factory=list)
    changed_touches: List[Contact] = field(default_factory=list)
    timestamp: float = 0.0


Listener = Callable[[TouchEvent], None]


class TouchSurface:
    """A surface that contact listeners can attach to."""

    def __init__(self, name: str = 'surface'):
        self.name = name
        self._listeners: Dict[str, List[Listener]] = {kind: [] for kind in EVENT_KINDS}
        self._active: Dict[Hashable, Contact] = {}

    def add_listener(self, kind: str, listener: Listener):
        if kind not in self._listeners:
            raise ValueError(f"Unknown touch event kind: {kind}")
        self._listeners[kind].append(listener)

    def remove_listener(self, kind: str, listener: Listener):
        if listener in self._listeners.get(kind, []):
            self._listeners[kind].remove(listener)

    def listener_count(self, kind: Optional[str] = None) -> int:
        if kind is not None:
            return len(self._listeners.get(kind, []))
        return sum(len(listeners) for listeners in self._listeners.values())

    def dispatch(self, event: TouchEvent):
        """Deliver an event to every listener of its kind, in registration order."""
        for listener in list(self._listeners.get(event.kind, [])):
            listener(event)

    @property
    def active_contacts(self) -> List[Contact]:
        return list(self._active.values())

    def press(self, identifier: Hashable, x: float, y: float,
              timestamp: Optional[float] = None) -> TouchEvent:
        """Put a contact down and dispatch the start event."""
        contact = Contact(identifier, float(x), float(y))
        self._active[identifier] = contact
        event = TouchEvent(TOUCH_START, self.active_contacts, [contact],
                           self._stamp(timestamp))
        self.dispatch(event)
        return event

    def move(self, positions: Dict[Hashable, tuple],
             timestamp: Optional[float] = None) -> Optional[TouchEvent]:
        """Move active contacts to new positions and dispatch one move event.

        Identifiers that are not down are ignored.
        """
        changed = []
        for identifier, (x, y) in positions.items():
            if identifier not in self._active:
                logger.debug(f"{self.name}: move for unknown contact {identifier!r}")
                continue
            contact = Contact(identifier, float(x), float(y))
            self._active[identifier] = contact
            changed.append(contact)

        if not changed:
            return None

        event = TouchEvent(TOUCH_MOVE, self.active_contacts, changed,
                           self._stamp(timestamp))
        self.dispatch(event)
        return event

    def release(self, identifier: Hashable, x: Optional[float] = None,
                y: Optional[float] = None,
                timestamp: Optional[float] = None) -> Optional[TouchEvent]:
        """Lift a contact, optionally at a new position, and dispatch the end event."""
        contact = self._active.pop(identifier, None)
        if contact is None:
            logger.debug(f"{self.name}: release for unknown contact {identifier!r}")
            return None

        if x is not None and y is not None:
            contact = Contact(identifier, float(x), float(y))

        event = TouchEvent(TOUCH_END, self.active_contacts, [contact],
                           self._stamp(timestamp))
        self.dispatch(event)
        return event

    def cancel_all(self, timestamp: Optional[float] = None):
        """Lift every active contact, one end event each."""
        for identifier in list(self._active):
            self.release(identifier, timestamp=timestamp)

    @staticmethod
    def _stamp(timestamp: Optional[float]) -> float:
        return now_ms() if timestamp is None else float(timestamp)
