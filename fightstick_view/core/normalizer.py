"""
Input normalization: raw events -> quantized Snapshot

=============================================================================
POLICIES
=============================================================================

Each raw event is handled by exactly one policy:

    ButtonChanged(dpad button)   ->  sets StickAxis.x or StickAxis.y
    ButtonChanged(other button)  ->  inserts into / removes from ButtonSet
    AxisChanged(stick/pad axis)  ->  sets StickAxis.x or StickAxis.y
    AxisChanged(trigger axis)    ->  inserts / removes a virtual trigger button
    Disconnected                 ->  asks the caller to reset everything
    anything else                ->  ignored

=============================================================================
DEAD ZONE
=============================================================================

A signal counts as "actuated" only if it is STRICTLY above the dead zone:

    value           result (DEADZONE = 0.25)
    -----           ------
     0.25            0      (exactly on the edge is still neutral)
     0.2501          1
    -0.26           -1
     NaN             0      (comparisons with NaN are always False)

Unlike an analog dead zone there is no rescaling: the output is a direction,
not a magnitude.

=============================================================================
KNOWN LIMITATIONS
=============================================================================

No SOCD resolution: every direction event only looks at itself. Holding
DPadLeft and then tapping and releasing DPadRight leaves x = 0 even though
Left is still physically held.

=============================================================================
"""

from .events import AxisChanged, ButtonChanged, Disconnected
from .identifiers import (
    Axis, Button, HORIZONTAL_AXES, VERTICAL_AXES, TRIGGER_AXES,
)
from .snapshot import Snapshot


class InputNormalizer:
    """
    Folds raw events into a working Snapshot.

    Parameters:
    -----------
    deadzone : float, optional
        Actuation threshold on the [-1, 1] scale. Defaults to DEADZONE.
    first_match_release : bool
        Trigger axis release behaviour. False (default) clears only the
        virtual button belonging to the axis that fired. True clears
        LeftTrigger2 if held, otherwise RightTrigger2, whichever axis
        fired; this reproduces the overlay's historical behaviour.
    """

    DEADZONE = 0.25

    def __init__(self, deadzone: float = None, first_match_release: bool = False):
        self.deadzone = self.DEADZONE if deadzone is None else deadzone
        self.first_match_release = first_match_release

    def apply(self, working: Snapshot, event) -> bool:
        """
        Apply one event to working in place.

        Returns True only for Disconnected, in which case working is left
        untouched and the caller must reset history and working state.
        """
        if isinstance(event, ButtonChanged):
            self._on_button(working, event.button, event.value)
        elif isinstance(event, AxisChanged):
            self._on_axis(working, event.axis, event.value)
        elif isinstance(event, Disconnected):
            return True
        return False

    def quantize(self, value: float) -> int:
        """Map an analog value to -1, 0 or 1 using the dead zone."""
        if abs(value) > self.deadzone:
            return 1 if value > 0 else -1
        return 0

    def _on_button(self, working: Snapshot, button: Button, value: float):
        pressed = value > self.deadzone

        if button.is_dpad:
            axis = working.axis
            if button in (Button.DPAD_LEFT, Button.DPAD_RIGHT):
                axis.x = (-1 if button == Button.DPAD_LEFT else 1) if pressed else 0
            else:
                axis.y = (-1 if button == Button.DPAD_DOWN else 1) if pressed else 0
            return

        if pressed:
            working.buttons.add(button)
        else:
            working.buttons.discard(button)

    def _on_axis(self, working: Snapshot, axis: Axis, value: float):
        if axis in HORIZONTAL_AXES:
            working.axis.x = self.quantize(value)
        elif axis in VERTICAL_AXES:
            working.axis.y = self.quantize(value)
        elif axis in TRIGGER_AXES:
            if value > self.deadzone:
                working.buttons.add(TRIGGER_AXES[axis])
            elif self.first_match_release:
                # First held virtual trigger wins, regardless of the axis
                if not working.buttons.discard(Button.LEFT_TRIGGER_2):
                    working.buttons.discard(Button.RIGHT_TRIGGER_2)
            else:
                working.buttons.discard(TRIGGER_AXES[axis])
