"""
Touchscreen listener that turns evdev multitouch reports into surface contact events.
"""

import threading
import logging
from typing import Dict, List, Optional, Set
from evdev import ecodes

from ..device.device_manager import DeviceManager
from .surface import TouchSurface

logger = logging.getLogger(__name__)

class TouchListener:
    """Reads a multitouch device and replays its contacts on a TouchSurface."""

    def __init__(self, surface: Optional[TouchSurface] = None,
                 device_manager: Optional[DeviceManager] = None):
        self.surface = surface or TouchSurface('touchscreen')
        self.device_manager = device_manager or DeviceManager()

        # Slot tracking; positions persist across contacts because the
        # kernel drops unchanged coordinates from a report.
        self.running = False
        self.current_slot = 0
        self.slot_data: Dict[int, Dict[str, float]] = {}
        self.active_slots: Set[int] = set()

        # Per-frame changes, flushed on SYN_REPORT
        self.placed: List[int] = []
        self.lifted: List[int] = []
        self.replaced: List[int] = []
        self.moved: Set[int] = set()

        # Thread management
        self.thread = None
        self.state_lock = threading.Lock()

    def start(self) -> bool:
        """Open the touchscreen and start reading it in the background."""
        device = self.device_manager.find_device()
        if not device:
            print("❌ No touchscreen found")
            return False

        self.running = True
        self._print_startup_info(self.device_manager.get_device_info())

        self.thread = threading.Thread(target=self._event_loop)
        self.thread.daemon = True
        self.thread.start()
        return True

    def stop(self):
        """Stop the touchscreen listener."""
        self.running = False
        if self.thread:
            self.thread.join(timeout=1)
            self.thread = None

    def _print_startup_info(self, device_info: Dict):
        print(f"✅ Found: {self.device_manager.device.name}")
        print(f"📺 Screen: {device_info['screen_width']}x{device_info['screen_height']} "
              f"({device_info['screen_size']}, {device_info['orientation']})")
        print("🎯 Ready! Try taps, double taps, swipes and pinches!")

    def _event_loop(self):
        """Main event processing loop."""
        try:
            event_batch = []
            for event in self.device_manager.device.read_loop():
                if not self.running:
                    break

                event_batch.append(event)

                if event.type == ecodes.EV_SYN and event.code == ecodes.SYN_REPORT:
                    with self.state_lock:
                        self.process_batch(event_batch)
                    event_batch = []

        except OSError as e:
            logging.error(f"Error in event loop: {e}")
        finally:
            self.running = False

    def process_batch(self, event_batch):
        """Apply one SYN_REPORT frame and dispatch the resulting contact events."""
        for ev in event_batch:
            if ev.type == ecodes.EV_ABS:
                self._handle_abs_event(ev)

        if event_batch:
            self._flush(event_batch[-1].timestamp() * 1000)

    def _handle_abs_event(self, ev):
        """Handle absolute coordinate events."""
        if ev.code == ecodes.ABS_MT_SLOT:
            self.current_slot = ev.value
        elif ev.code == ecodes.ABS_MT_TRACKING_ID:
            self._handle_tracking_id(ev.value)
        elif ev.code == ecodes.ABS_MT_POSITION_X:
            self._handle_position('x', ev.value)
        elif ev.code == ecodes.ABS_MT_POSITION_Y:
            self._handle_position('y', ev.value)

    def _handle_tracking_id(self, value: int):
        slot = self.current_slot

        if value == -1:
            if slot in self.active_slots:
                self.active_slots.discard(slot)
                self.lifted.append(slot)
        elif slot not in self.active_slots:
            self.active_slots.add(slot)
            self.slot_data.setdefault(slot, {'x': 0.0, 'y': 0.0})
            self.placed.append(slot)
        elif slot not in self.placed:
            # A new tracking id in a busy slot replaces its contact.
            self.replaced.append(slot)
            self.placed.append(slot)
            self.moved.discard(slot)

    def _handle_position(self, axis: str, value: int):
        slot = self.current_slot
        self.slot_data.setdefault(slot, {'x': 0.0, 'y': 0.0})[axis] = float(value)
        if slot in self.active_slots and slot not in self.placed:
            self.moved.add(slot)

    def _flush(self, timestamp: float):
        """Dispatch replaced ends, starts, one move, then ends for the frame just read."""
        for slot in self.replaced:
            self.surface.release(slot, timestamp=timestamp)

        for slot in self.placed:
            pos = self.slot_data[slot]
            self.surface.press(slot, pos['x'], pos['y'], timestamp)

        moves = {
            slot: (self.slot_data[slot]['x'], self.slot_data[slot]['y'])
            for slot in sorted(self.moved) if slot in self.active_slots
        }
        if moves:
            self.surface.move(moves, timestamp)

        for slot in self.lifted:
            pos = self.slot_data[slot]
            self.surface.release(slot, pos['x'], pos['y'], timestamp)

        self.placed = []
        self.lifted = []
        self.replaced = []
        self.moved = set()
