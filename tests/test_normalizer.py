import math

import pytest

from fightstick_view.core import (
    Axis, AxisChanged, Button, ButtonChanged, Connected, Disconnected,
    InputNormalizer, Snapshot,
)


@pytest.fixture
def normalizer():
    return InputNormalizer()


def fold(normalizer, events, working=None):
    working = working if working is not None else Snapshot.zero()
    for event in events:
        normalizer.apply(working, event)
    return working


def test_deadzone_boundary(normalizer):
    assert fold(normalizer, [AxisChanged(Axis.LEFT_STICK_X, 0.25)]).axis.x == 0
    assert fold(normalizer, [AxisChanged(Axis.LEFT_STICK_X, 0.2501)]).axis.x == 1
    assert fold(normalizer, [AxisChanged(Axis.LEFT_STICK_X, -0.26)]).axis.x == -1
    assert fold(normalizer, [AxisChanged(Axis.LEFT_STICK_X, -0.25)]).axis.x == 0


@pytest.mark.parametrize("value", [-5.0, -1.0, -0.3, -0.1, 0.0, 0.1, 0.3, 1.0, 5.0,
                                   math.inf, -math.inf, math.nan])
def test_axis_always_quantized(normalizer, value):
    working = fold(normalizer, [
        AxisChanged(Axis.LEFT_STICK_X, value),
        AxisChanged(Axis.DPAD_Y, value),
    ])
    assert working.axis.x in (-1, 0, 1)
    assert working.axis.y in (-1, 0, 1)


def test_nan_is_treated_as_released(normalizer):
    working = fold(normalizer, [
        AxisChanged(Axis.LEFT_STICK_Y, 1.0),
        ButtonChanged(Button.SOUTH, 1.0),
        AxisChanged(Axis.LEFT_STICK_Y, math.nan),
        ButtonChanged(Button.SOUTH, math.nan),
    ])
    assert working.axis.y == 0
    assert Button.SOUTH not in working.buttons


def test_vertical_axes_drive_y(normalizer):
    assert fold(normalizer, [AxisChanged(Axis.LEFT_STICK_Y, 0.9)]).axis.y == 1
    assert fold(normalizer, [AxisChanged(Axis.DPAD_Y, -0.9)]).axis.y == -1
    assert fold(normalizer, [AxisChanged(Axis.DPAD_X, -0.9)]).axis.x == -1


def test_right_stick_and_unknown_axes_are_ignored(normalizer):
    working = fold(normalizer, [
        AxisChanged(Axis.RIGHT_STICK_X, 1.0),
        AxisChanged(Axis.RIGHT_STICK_Y, -1.0),
        AxisChanged(Axis.UNKNOWN, 1.0),
    ])
    assert working.is_zero()


def test_button_press_is_not_duplicated(normalizer):
    working = fold(normalizer, [ButtonChanged(Button.SOUTH, 0.9)])
    assert len(working.buttons) == 1
    normalizer.apply(working, ButtonChanged(Button.SOUTH, 0.9))
    assert len(working.buttons) == 1
    assert Button.SOUTH in working.buttons


def test_button_release_and_repeated_release(normalizer):
    working = fold(normalizer, [
        ButtonChanged(Button.EAST, 1.0),
        ButtonChanged(Button.WEST, 1.0),
        ButtonChanged(Button.EAST, 0.0),
        ButtonChanged(Button.EAST, 0.25),
    ])
    assert list(working.buttons) == [Button.WEST]


def test_dpad_maps_to_axis(normalizer):
    working = fold(normalizer, [ButtonChanged(Button.DPAD_LEFT, 0.5)])
    assert working.axis.x == -1
    normalizer.apply(working, ButtonChanged(Button.DPAD_LEFT, 0.1))
    assert working.axis.x == 0

    working = fold(normalizer, [ButtonChanged(Button.DPAD_RIGHT, 1.0),
                                ButtonChanged(Button.DPAD_UP, 1.0)])
    assert (working.axis.x, working.axis.y) == (1, 1)
    normalizer.apply(working, ButtonChanged(Button.DPAD_DOWN, 1.0))
    assert working.axis.y == -1


def test_dpad_never_enters_button_set(normalizer):
    working = fold(normalizer, [ButtonChanged(b, 1.0) for b in
                                (Button.DPAD_UP, Button.DPAD_DOWN,
                                 Button.DPAD_LEFT, Button.DPAD_RIGHT)])
    assert len(working.buttons) == 0


def test_opposite_direction_release_zeroes_axis(normalizer):
    # Left is still held, but releasing Right only looks at itself
    working = fold(normalizer, [
        ButtonChanged(Button.DPAD_LEFT, 1.0),
        ButtonChanged(Button.DPAD_RIGHT, 1.0),
    ])
    assert working.axis.x == 1
    normalizer.apply(working, ButtonChanged(Button.DPAD_RIGHT, 0.0))
    assert working.axis.x == 0


def test_trigger_axis_creates_virtual_button(normalizer):
    working = fold(normalizer, [AxisChanged(Axis.LEFT_Z, 0.9)])
    assert Button.LEFT_TRIGGER_2 in working.buttons
    normalizer.apply(working, AxisChanged(Axis.LEFT_Z, 0.1))
    assert Button.LEFT_TRIGGER_2 not in working.buttons


def test_trigger_axis_and_digital_trigger_do_not_duplicate(normalizer):
    working = fold(normalizer, [
        AxisChanged(Axis.RIGHT_Z, 0.5),
        AxisChanged(Axis.RIGHT_Z, 0.9),
        ButtonChanged(Button.RIGHT_TRIGGER_2, 1.0),
    ])
    assert list(working.buttons) == [Button.RIGHT_TRIGGER_2]


def test_trigger_release_is_keyed_to_its_axis(normalizer):
    working = fold(normalizer, [
        AxisChanged(Axis.LEFT_Z, 1.0),
        AxisChanged(Axis.RIGHT_Z, 1.0),
        AxisChanged(Axis.RIGHT_Z, 0.0),
    ])
    assert Button.LEFT_TRIGGER_2 in working.buttons
    assert Button.RIGHT_TRIGGER_2 not in working.buttons


def test_first_match_release_clears_left_first():
    normalizer = InputNormalizer(first_match_release=True)
    working = fold(normalizer, [
        AxisChanged(Axis.LEFT_Z, 1.0),
        AxisChanged(Axis.RIGHT_Z, 1.0),
        AxisChanged(Axis.RIGHT_Z, 0.0),
    ])
    assert Button.LEFT_TRIGGER_2 not in working.buttons
    assert Button.RIGHT_TRIGGER_2 in working.buttons

    normalizer.apply(working, AxisChanged(Axis.LEFT_Z, 0.0))
    assert len(working.buttons) == 0


def test_custom_deadzone():
    normalizer = InputNormalizer(deadzone=0.5)
    assert fold(normalizer, [AxisChanged(Axis.LEFT_STICK_X, 0.4)]).axis.x == 0
    assert fold(normalizer, [AxisChanged(Axis.LEFT_STICK_X, 0.6)]).axis.x == 1


def test_disconnected_signals_reset_without_mutating(normalizer):
    working = fold(normalizer, [ButtonChanged(Button.NORTH, 1.0),
                                AxisChanged(Axis.LEFT_STICK_X, -1.0)])
    before = working.clone()

    assert normalizer.apply(working, Disconnected()) is True
    assert working == before


def test_other_events_are_ignored(normalizer):
    working = Snapshot.zero()
    assert normalizer.apply(working, Connected("pad")) is False
    assert normalizer.apply(working, "not an event") is False
    assert normalizer.apply(working, ButtonChanged(Button.SOUTH, 1.0)) is False
    assert list(working.buttons) == [Button.SOUTH]
