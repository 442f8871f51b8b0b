#!/usr/bin/env python3
"""Tests for the tap / double-tap / swipe / pinch recognizer."""

import pytest

from touch_gestures.core.surface import Contact, TouchEvent, TOUCH_END, TOUCH_MOVE, TOUCH_START, TouchSurface
from touch_gestures.gestures.recognizer import (
    GestureHandlers,
    GestureRecognizer,
    Idle,
    PinchActive,
    PinchEnding,
    SingleActive,
)


class Recorder:
    """Collects handler calls in order."""

    def __init__(self):
        self.calls = []

    def handlers(self) -> GestureHandlers:
        def record(name):
            return lambda *args: self.calls.append((name,) + args)

        return GestureHandlers(
            on_swipe_left=record('swipe_left'),
            on_swipe_right=record('swipe_right'),
            on_swipe_up=record('swipe_up'),
            on_swipe_down=record('swipe_down'),
            on_pinch_start=record('pinch_start'),
            on_pinch=record('pinch'),
            on_pinch_end=record('pinch_end'),
            on_tap=record('tap'),
            on_double_tap=record('double_tap'),
        )

    @property
    def names(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def surface():
    return TouchSurface('test')


@pytest.fixture
def recognizer(recorder, surface):
    rec = GestureRecognizer(recorder.handlers())
    rec.attach(surface)
    yield rec
    rec.detach()


def tap(surface, t, x=100, y=100, duration=50):
    surface.press(0, x, y, t)
    surface.release(0, x, y, t + duration)


def stroke(surface, start, end, t=0, duration=50):
    surface.press(0, *start, t)
    surface.release(0, *end, t + duration)


def test_tap_fires_once(recognizer, surface, recorder):
    tap(surface, 0)
    assert recorder.names == ['tap']
    assert isinstance(recognizer.state, Idle)


@pytest.mark.parametrize("dx, dy, duration", [
    (0, 0, 0),
    (3, 4, 100),
    (9, 0, 200),
    (-6, 7, 10),
])
def test_tap_sized_contacts_fire_exactly_one_tap_kind(surface, dx, dy, duration):
    recorder = Recorder()
    rec = GestureRecognizer(recorder.handlers())
    with rec.attached(surface):
        stroke(surface, (50, 50), (50 + dx, 50 + dy), duration=duration)
        stroke(surface, (50, 50), (50 + dx, 50 + dy), t=duration + 50, duration=duration)
    assert recorder.names == ['tap', 'double_tap']


def test_double_tap_pairing_resets(recognizer, surface, recorder):
    tap(surface, 0)
    tap(surface, 100)
    tap(surface, 200)
    assert recorder.names == ['tap', 'double_tap', 'tap']


def test_slow_second_tap_is_single(recognizer, surface, recorder):
    tap(surface, 0)
    tap(surface, 400)
    assert recorder.names == ['tap', 'tap']


@pytest.mark.parametrize("end_x, expected", [
    (9, ['tap']),
    (10, []),
])
def test_tap_distance_boundary(recognizer, surface, recorder, end_x, expected):
    stroke(surface, (0, 0), (end_x, 0))
    assert recorder.names == expected


@pytest.mark.parametrize("gap, expected", [
    (299, ['tap', 'double_tap']),
    (300, ['tap', 'tap']),
])
def test_double_tap_window_boundary(recognizer, surface, recorder, gap, expected):
    tap(surface, 0)
    tap(surface, gap)
    assert recorder.names == expected


def test_long_press_is_not_a_tap(recognizer, surface, recorder):
    tap(surface, 0, duration=300)
    assert recorder.names == []


@pytest.mark.parametrize("end, expected", [
    ((100, 0), 'swipe_right'),
    ((-100, 0), 'swipe_left'),
    ((0, 100), 'swipe_down'),
    ((0, -100), 'swipe_up'),
])
def test_swipe_directions(recognizer, surface, recorder, end, expected):
    stroke(surface, (0, 0), end)
    assert recorder.names == [expected]


def test_diagonal_tie_goes_vertical(recognizer, surface, recorder):
    stroke(surface, (0, 0), (60, -60))
    assert recorder.names == ['swipe_up']


def test_slow_swipe_still_counts(recognizer, surface, recorder):
    stroke(surface, (0, 0), (200, 10), duration=2000)
    assert recorder.names == ['swipe_right']


def test_dead_zone_fires_nothing(recognizer, surface, recorder):
    stroke(surface, (0, 0), (30, 0), duration=500)
    stroke(surface, (0, 0), (0, 30), t=1000, duration=50)
    stroke(surface, (0, 0), (50, 0), t=2000, duration=50)
    assert recorder.names == []


def test_custom_swipe_threshold(surface, recorder):
    rec = GestureRecognizer(recorder.handlers(), swipe_threshold=20)
    with rec.attached(surface):
        stroke(surface, (0, 0), (30, 0))
    assert recorder.names == ['swipe_right']


def test_pinch_sequence(recognizer, surface, recorder):
    surface.press('a', 0, 0, 0)
    surface.press('b', 100, 0, 10)
    assert isinstance(recognizer.state, PinchActive)
    assert recognizer.state.baseline == pytest.approx(100)

    surface.move({'b': (120, 0)}, 20)
    surface.move({'b': (121, 0)}, 30)
    surface.release('a', timestamp=40)
    surface.release('b', timestamp=50)

    assert recorder.names == ['pinch_start', 'pinch', 'pinch_end']
    assert recorder.calls[1][1] == pytest.approx(1.2)
    assert isinstance(recognizer.state, Idle)


def test_pinch_debounce_measures_from_last_reported_scale(recognizer, surface, recorder):
    surface.press('a', 0, 0, 0)
    surface.press('b', 100, 0, 0)
    for step, x in enumerate([108, 116, 124, 132]):
        surface.move({'b': (x, 0)}, step)
    scales = [call[1] for call in recorder.calls if call[0] == 'pinch']
    assert scales == [pytest.approx(1.16), pytest.approx(1.32)]


def test_pinch_end_waits_for_last_contact(recognizer, surface, recorder):
    surface.press('a', 0, 0, 0)
    surface.press('b', 100, 0, 10)
    surface.release('b', timestamp=20)
    assert recorder.names == ['pinch_start']
    assert isinstance(recognizer.state, PinchEnding)

    # The finger left behind neither pinches nor taps.
    surface.move({'a': (300, 0)}, 25)
    surface.release('a', 0, 0, 30)
    assert recorder.names == ['pinch_start', 'pinch_end']
    assert isinstance(recognizer.state, Idle)


def test_remaining_pinch_contact_is_not_a_swipe(recognizer, surface, recorder):
    surface.press('a', 0, 0, 0)
    surface.press('b', 100, 0, 10)
    surface.release('a', timestamp=20)
    surface.release('b', 400, 0, 60)
    assert recorder.names == ['pinch_start', 'pinch_end']


def test_both_pinch_contacts_lifting_together_ends_pinch(recognizer, recorder):
    recognizer.handle(TouchEvent(TOUCH_START, [Contact('a', 0, 0), Contact('b', 100, 0)],
                                 [Contact('a', 0, 0), Contact('b', 100, 0)], 0))
    recognizer.handle(TouchEvent(TOUCH_END, [], [Contact('a', 0, 0), Contact('b', 100, 0)], 10))
    assert recorder.names == ['pinch_start', 'pinch_end']


def test_second_contact_discards_single_tracking(recognizer, surface, recorder):
    surface.press('a', 0, 0, 0)
    assert isinstance(recognizer.state, SingleActive)
    surface.press('b', 50, 0, 5)
    surface.release('a', timestamp=10)
    surface.release('b', timestamp=15)
    assert recorder.names == ['pinch_start', 'pinch_end']


def test_third_contact_is_ignored(recognizer, surface, recorder):
    surface.press('a', 0, 0, 0)
    surface.press('b', 100, 0, 0)
    surface.press('c', 50, 50, 0)
    surface.move({'b': (200, 0)}, 10)
    assert recorder.names == ['pinch_start']
    assert recognizer.state == PinchActive(100.0, 1.0)


def test_coincident_pinch_contacts_do_not_divide_by_zero(recognizer, surface, recorder):
    surface.press('a', 10, 10, 0)
    surface.press('b', 10, 10, 0)
    surface.move({'b': (60, 10)}, 10)
    surface.cancel_all(20)
    assert recorder.names == ['pinch_start', 'pinch_end']


def test_malformed_events_are_ignored(recognizer, recorder):
    recognizer.handle(TouchEvent(TOUCH_MOVE, [], [], 0))
    recognizer.handle(TouchEvent(TOUCH_END, [], [], 0))
    recognizer.handle(TouchEvent('touchcancel', [], [], 0))
    assert recorder.names == []
    assert isinstance(recognizer.state, Idle)


def test_release_without_changed_touches_resets(recognizer, surface, recorder):
    surface.press(0, 0, 0, 0)
    recognizer.handle(TouchEvent(TOUCH_END, [], [], 10))
    assert recorder.names == []
    assert isinstance(recognizer.state, Idle)


def test_missing_handlers_are_skipped(surface):
    rec = GestureRecognizer(GestureHandlers(on_double_tap=lambda: None))
    with rec.attached(surface):
        tap(surface, 0)
        stroke(surface, (0, 0), (100, 0), t=1000)
        surface.press('a', 0, 0, 2000)
        surface.press('b', 100, 0, 2000)
        surface.move({'b': (150, 0)}, 2010)
        surface.cancel_all(2020)
    assert isinstance(rec.state, Idle)


def test_detach_resets_double_tap_pairing(recorder, surface):
    rec = GestureRecognizer(recorder.handlers())
    rec.attach(surface)
    tap(surface, 0)
    rec.detach()
    assert surface.listener_count() == 0

    rec.attach(surface)
    tap(surface, 100)
    assert recorder.names == ['tap', 'tap']


def test_detach_mid_gesture_drops_state(recorder, surface):
    rec = GestureRecognizer(recorder.handlers())
    with rec.attached(surface):
        surface.press(0, 0, 0, 0)
        assert isinstance(rec.state, SingleActive)
    assert isinstance(rec.state, Idle)
    surface.release(0, 100, 0, 20)
    assert recorder.names == []


def test_detached_recognizer_sees_nothing(recorder, surface):
    rec = GestureRecognizer(recorder.handlers())
    with rec.attached(surface):
        pass
    tap(surface, 0)
    assert recorder.names == []


def test_attach_to_new_surface_leaves_old_one(recorder):
    first, second = TouchSurface('first'), TouchSurface('second')
    rec = GestureRecognizer(recorder.handlers())
    rec.attach(first)
    rec.attach(second)
    assert first.listener_count() == 0
    assert second.listener_count() == 3

    tap(first, 0)
    tap(second, 100)
    assert recorder.names == ['tap']


def test_surfaces_do_not_share_state():
    calls = []
    left, right = TouchSurface('left'), TouchSurface('right')
    rec_left = GestureRecognizer(GestureHandlers(on_tap=lambda: calls.append('left'),
                                                 on_double_tap=lambda: calls.append('left-double')))
    rec_right = GestureRecognizer(GestureHandlers(on_tap=lambda: calls.append('right'),
                                                  on_double_tap=lambda: calls.append('right-double')))
    with rec_left.attached(left), rec_right.attached(right):
        tap(left, 0)
        tap(right, 100)
    assert calls == ['left', 'right']


def test_handler_errors_propagate_with_state_committed(surface):
    def boom():
        raise RuntimeError("handler failed")

    rec = GestureRecognizer(GestureHandlers(on_tap=boom))
    with rec.attached(surface):
        with pytest.raises(RuntimeError):
            tap(surface, 0)
        assert isinstance(rec.state, Idle)
        assert rec.last_tap_time == 50
