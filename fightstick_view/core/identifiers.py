"""
Abstract button and axis identifiers

=============================================================================
WHY ABSTRACT IDENTIFIERS?
=============================================================================

Every controller family names its inputs differently:

    Xbox:        A      B      X      Y      LB   RB   LT   RT
    PlayStation: Cross  Circle Square Tri    L1   R1   L2   R2
    Nintendo:    B      A      Y      X      L    R    ZL   ZR

The overlay only cares about POSITION, so we name buttons by where they
sit on the pad (compass directions for the face buttons, left/right for
the shoulders). The input source translates device buttons to these
identifiers once, and nothing downstream ever sees a device-specific name.

    Face buttons:       North / South / East / West
    Shoulder (digital): LeftTrigger / RightTrigger
    Shoulder (analog):  LeftTrigger2 / RightTrigger2
    D-pad:              DPadUp / DPadDown / DPadLeft / DPadRight

D-pad buttons never reach a ButtonSet: the normalizer folds them into the
stick axis instead.

=============================================================================
"""

from enum import Enum


class Button(Enum):
    """Abstract, layout-based button identifier."""
    SOUTH = "South"
    EAST = "East"
    NORTH = "North"
    WEST = "West"
    LEFT_TRIGGER = "LeftTrigger"
    RIGHT_TRIGGER = "RightTrigger"
    LEFT_TRIGGER_2 = "LeftTrigger2"
    RIGHT_TRIGGER_2 = "RightTrigger2"
    SELECT = "Select"
    START = "Start"
    MODE = "Mode"
    LEFT_THUMB = "LeftThumb"
    RIGHT_THUMB = "RightThumb"
    DPAD_UP = "DPadUp"
    DPAD_DOWN = "DPadDown"
    DPAD_LEFT = "DPadLeft"
    DPAD_RIGHT = "DPadRight"
    UNKNOWN = "Unknown"

    @property
    def is_dpad(self) -> bool:
        return self in DPAD_BUTTONS

    def __repr__(self):
        return self.value


class Axis(Enum):
    """Abstract analog axis identifier."""
    LEFT_STICK_X = "LeftStickX"
    LEFT_STICK_Y = "LeftStickY"
    RIGHT_STICK_X = "RightStickX"
    RIGHT_STICK_Y = "RightStickY"
    LEFT_Z = "LeftZ"      # Left analog trigger
    RIGHT_Z = "RightZ"    # Right analog trigger
    DPAD_X = "DPadX"
    DPAD_Y = "DPadY"
    UNKNOWN = "Unknown"

    def __repr__(self):
        return self.value


DPAD_BUTTONS = frozenset({
    Button.DPAD_UP,
    Button.DPAD_DOWN,
    Button.DPAD_LEFT,
    Button.DPAD_RIGHT,
})

# Axes that drive StickAxis.x / StickAxis.y
HORIZONTAL_AXES = frozenset({Axis.DPAD_X, Axis.LEFT_STICK_X})
VERTICAL_AXES = frozenset({Axis.DPAD_Y, Axis.LEFT_STICK_Y})

# Analog trigger axis -> virtual digital button it produces
TRIGGER_AXES = {
    Axis.LEFT_Z: Button.LEFT_TRIGGER_2,
    Axis.RIGHT_Z: Button.RIGHT_TRIGGER_2,
}
