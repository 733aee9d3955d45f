"""
Gamepad input source using GLFW

=============================================================================
FROM POLLED STATE TO EVENTS
=============================================================================

GLFW does not deliver gamepad button/axis events, it only lets us read the
current state of a controller. The overlay core, however, consumes a
stream of change events. This module bridges the two:

    frame N-1 state:  A released, left_x = 0.00
    frame N   state:  A pressed,  left_x = 0.80
                      -----------------------------
    events queued:    ButtonChanged(South, 1.0)
                      AxisChanged(LeftStickX, 0.80)

Once per frame pump() reads the device and diffs it against the previous
read. poll_next_event() then hands the queued events out one by one and
returns None when the queue is empty; it never blocks.

=============================================================================
CONNECTION CHANGES
=============================================================================

GLFW reports joystick connection changes through a callback that fires
inside glfw.poll_events(), on the main thread. A disconnect of the device
we are reading queues a Disconnected event; a connect while idle adopts
the new device.

=============================================================================
GLFW GAMEPAD vs JOYSTICK
=============================================================================

1. GAMEPAD MODE (glfw.joystick_is_gamepad() = True):
   - Controller has a known mapping in SDL_GameControllerDB
   - glfw.get_gamepad_state() gives an Xbox-style layout

2. JOYSTICK MODE (fallback):
   - Raw axes and buttons by index
   - We guess the common Xbox-like layout, d-pad from the first hat

=============================================================================
AXIS CONVENTIONS
=============================================================================

GLFW sticks report Y growing DOWNWARD; the overlay wants Up = +1, so
stick Y axes are negated. Triggers report -1.0 (released) to 1.0
(pressed) and are rescaled to 0.0..1.0:

    normalized = (raw + 1) / 2

=============================================================================
"""

import glfw
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Deque, Dict, List, Optional, Tuple

from .core.events import AxisChanged, ButtonChanged, Connected, Disconnected
from .core.identifiers import Axis, Button


def load_gamepad_mappings(filepath: str = None) -> int:
    """
    Load gamepad mappings from an SDL_GameControllerDB file.

    Parameters:
    -----------
    filepath : str, optional
        Explicit path to gamecontrollerdb.txt.
        If None, searches common locations.

    Returns:
    --------
    int : Number of mappings loaded, or -1 if no file found

    Search order: explicit path, current directory, assets/, this module's
    directory, its parent, ~/.config.
    """
    search_paths = []

    if filepath:
        search_paths.append(Path(filepath))

    search_paths.extend([
        Path("gamecontrollerdb.txt"),
        Path("assets/gamecontrollerdb.txt"),
        Path(__file__).parent / "gamecontrollerdb.txt",
        Path(__file__).parent.parent / "gamecontrollerdb.txt",
        Path.home() / ".config/gamecontrollerdb.txt",
    ])

    for path in search_paths:
        if not path.exists():
            continue
        try:
            content = path.read_text(encoding='utf-8')
        except OSError as e:
            print(f"Error loading mappings from {path}: {e}")
            continue

        if glfw.update_gamepad_mappings(content):
            count = sum(1 for line in content.splitlines()
                        if line.strip() and not line.startswith('#'))
            print(f"Gamepad mappings loaded: {count} from {path}")
            return count
        print(f"Gamepad mappings rejected by GLFW: {path}")

    print("gamecontrollerdb.txt not found, using built-in mappings")
    return -1


# =============================================================================
# LAYOUT TABLES
# =============================================================================

# Standard (mapped) gamepad buttons. Face buttons are named by position:
# A is the bottom one (South), Y the top one (North), and so on.
GAMEPAD_BUTTONS: Dict[int, Button] = {
    glfw.GAMEPAD_BUTTON_A: Button.SOUTH,
    glfw.GAMEPAD_BUTTON_B: Button.EAST,
    glfw.GAMEPAD_BUTTON_X: Button.WEST,
    glfw.GAMEPAD_BUTTON_Y: Button.NORTH,
    glfw.GAMEPAD_BUTTON_LEFT_BUMPER: Button.LEFT_TRIGGER,
    glfw.GAMEPAD_BUTTON_RIGHT_BUMPER: Button.RIGHT_TRIGGER,
    glfw.GAMEPAD_BUTTON_BACK: Button.SELECT,
    glfw.GAMEPAD_BUTTON_START: Button.START,
    glfw.GAMEPAD_BUTTON_GUIDE: Button.MODE,
    glfw.GAMEPAD_BUTTON_LEFT_THUMB: Button.LEFT_THUMB,
    glfw.GAMEPAD_BUTTON_RIGHT_THUMB: Button.RIGHT_THUMB,
    glfw.GAMEPAD_BUTTON_DPAD_UP: Button.DPAD_UP,
    glfw.GAMEPAD_BUTTON_DPAD_RIGHT: Button.DPAD_RIGHT,
    glfw.GAMEPAD_BUTTON_DPAD_DOWN: Button.DPAD_DOWN,
    glfw.GAMEPAD_BUTTON_DPAD_LEFT: Button.DPAD_LEFT,
}

# Standard gamepad axes: GLFW index -> (abstract axis, kind)
GAMEPAD_AXES: Dict[int, Tuple[Axis, str]] = {
    glfw.GAMEPAD_AXIS_LEFT_X: (Axis.LEFT_STICK_X, "stick"),
    glfw.GAMEPAD_AXIS_LEFT_Y: (Axis.LEFT_STICK_Y, "stick_inverted"),
    glfw.GAMEPAD_AXIS_RIGHT_X: (Axis.RIGHT_STICK_X, "stick"),
    glfw.GAMEPAD_AXIS_RIGHT_Y: (Axis.RIGHT_STICK_Y, "stick_inverted"),
    glfw.GAMEPAD_AXIS_LEFT_TRIGGER: (Axis.LEFT_Z, "trigger"),
    glfw.GAMEPAD_AXIS_RIGHT_TRIGGER: (Axis.RIGHT_Z, "trigger"),
}

# Unmapped joystick guess (Xbox-like): raw index -> abstract id
JOYSTICK_BUTTONS: List[Button] = [
    Button.SOUTH, Button.EAST, Button.WEST, Button.NORTH,
    Button.LEFT_TRIGGER, Button.RIGHT_TRIGGER,
    Button.SELECT, Button.START,
    Button.LEFT_THUMB, Button.RIGHT_THUMB,
    Button.DPAD_UP, Button.DPAD_RIGHT, Button.DPAD_DOWN, Button.DPAD_LEFT,
]

JOYSTICK_AXES: List[Tuple[Axis, str]] = [
    (Axis.LEFT_STICK_X, "stick"),
    (Axis.LEFT_STICK_Y, "stick_inverted"),
    (Axis.RIGHT_STICK_X, "stick"),
    (Axis.RIGHT_STICK_Y, "stick_inverted"),
    (Axis.LEFT_Z, "trigger"),
    (Axis.RIGHT_Z, "trigger"),
]

HAT_BUTTONS: List[Tuple[int, Button]] = [
    (glfw.HAT_UP, Button.DPAD_UP),
    (glfw.HAT_RIGHT, Button.DPAD_RIGHT),
    (glfw.HAT_DOWN, Button.DPAD_DOWN),
    (glfw.HAT_LEFT, Button.DPAD_LEFT),
]


def convert_axis(raw: float, kind: str) -> float:
    """Apply the overlay's axis conventions to a raw GLFW value."""
    if kind == "stick_inverted":
        return -raw
    if kind == "trigger":
        return (raw + 1) / 2
    return raw


# =============================================================================
# STATE DIFFING
# =============================================================================

@dataclass
class PadState:
    """One polled reading of a controller, in abstract identifiers."""
    buttons: Dict[Button, float] = field(default_factory=dict)
    axes: Dict[Axis, float] = field(default_factory=dict)


def diff_states(previous: PadState, current: PadState) -> list:
    """
    Events describing how current differs from previous.

    Inputs missing from previous count as released / at rest (0.0), so
    diffing against an empty PadState reports everything already held.
    """
    events = []
    for button, value in current.buttons.items():
        if previous.buttons.get(button, 0.0) != value:
            events.append(ButtonChanged(button, value))
    for axis, value in current.axes.items():
        if previous.axes.get(axis, 0.0) != value:
            events.append(AxisChanged(axis, value))
    return events


def _as_list(result) -> list:
    """
    Normalize GLFW array results to a list.

    Depending on the binding version GLFW returns (array, count), a plain
    sequence, or None.
    """
    if result is None:
        return []
    if isinstance(result, tuple):
        values, count = result[0], (result[1] if len(result) > 1 else 0)
        return [values[i] for i in range(count)] if count > 0 else []
    return [result[i] for i in range(len(result))]


# =============================================================================
# EVENT SOURCE
# =============================================================================

class GamepadEventSource:
    """
    Polls one GLFW controller and exposes its changes as raw events.

    ==========================================================================
    USAGE
    ==========================================================================

    ```python
    source = GamepadEventSource()

    # Each frame, after glfw.poll_events():
    source.pump()
    while (event := source.poll_next_event()) is not None:
        ...
    ```

    Only ONE controller is tracked, the first one found.
    ==========================================================================
    """

    def __init__(self, mappings_file: str = None):
        # Currently tracked GLFW joystick slot, None when nothing is connected
        self.connected_gamepad: Optional[int] = None
        self.is_standard_gamepad = False

        self._previous = PadState()
        self._queue: Deque = deque()

        load_gamepad_mappings(mappings_file)
        glfw.set_joystick_callback(self._joystick_callback)
        self._find_gamepad()

    # =========================================================================
    # DEVICE DISCOVERY
    # =========================================================================

    def _find_gamepad(self, skip: Optional[int] = None) -> bool:
        """Adopt the first present joystick slot (JOYSTICK_1 first)."""
        for jid in range(glfw.JOYSTICK_1, glfw.JOYSTICK_LAST + 1):
            if jid != skip and glfw.joystick_present(jid):
                self._adopt(jid)
                return True
        print("No joystick/gamepad found")
        return False

    def _adopt(self, jid: int):
        self.connected_gamepad = jid
        self.is_standard_gamepad = bool(glfw.joystick_is_gamepad(jid))
        self._previous = PadState()
        kind = "Gamepad" if self.is_standard_gamepad else "Joystick"
        print(f"{kind} found: {self._device_name(jid)} (ID: {jid})")

    @staticmethod
    def _device_name(jid: int) -> str:
        if glfw.joystick_is_gamepad(jid):
            name = glfw.get_gamepad_name(jid)
        else:
            name = glfw.get_joystick_name(jid)
        if isinstance(name, bytes):
            name = name.decode('utf-8', errors='replace')
        return name or f"joystick {jid}"

    def describe_devices(self) -> List[Tuple[int, str, bool, str]]:
        """
        (slot, name, mapped, power) for every connected device.

        GLFW has no battery API, so power is always "Unknown".
        """
        devices = []
        for jid in range(glfw.JOYSTICK_1, glfw.JOYSTICK_LAST + 1):
            if glfw.joystick_present(jid):
                devices.append((jid, self._device_name(jid),
                                bool(glfw.joystick_is_gamepad(jid)), "Unknown"))
        return devices

    def _joystick_callback(self, jid, event):
        if event == glfw.DISCONNECTED:
            if jid == self.connected_gamepad:
                self._lose_device()
        elif event == glfw.CONNECTED:
            self._queue.append(Connected(self._device_name(jid)))
            if self.connected_gamepad is None:
                self._adopt(jid)

    def _lose_device(self):
        lost = self.connected_gamepad
        self.connected_gamepad = None
        self._previous = PadState()
        self._queue.append(Disconnected())
        # Fall back to another controller that is already plugged in
        if self._find_gamepad(skip=lost):
            self._queue.append(Connected(self._device_name(self.connected_gamepad)))

    def is_connected(self) -> bool:
        return self.connected_gamepad is not None

    # =========================================================================
    # POLLING
    # =========================================================================

    def pump(self):
        """Read the device once and queue events for whatever changed."""
        if self.connected_gamepad is None:
            return

        # The callback normally catches this, but some backends only notice
        # a missing device when it is read
        if not glfw.joystick_present(self.connected_gamepad):
            self._lose_device()
            return

        current = self._read_state()
        if current is None:
            return
        self._queue.extend(diff_states(self._previous, current))
        self._previous = current

    def poll_next_event(self):
        """Next queued raw event, or None if nothing is pending."""
        if self._queue:
            return self._queue.popleft()
        return None

    def _read_state(self) -> Optional[PadState]:
        jid = self.connected_gamepad
        if self.is_standard_gamepad and glfw.joystick_is_gamepad(jid):
            state = glfw.get_gamepad_state(jid)
            if not state:
                return None
            return self._parse_gamepad_state(state)
        return self._parse_joystick_state(jid)

    @staticmethod
    def _parse_gamepad_state(state) -> PadState:
        pad = PadState()
        for index, button in GAMEPAD_BUTTONS.items():
            pad.buttons[button] = 1.0 if state.buttons[index] == glfw.PRESS else 0.0
        for index, (axis, kind) in GAMEPAD_AXES.items():
            pad.axes[axis] = convert_axis(float(state.axes[index]), kind)
        return pad

    @staticmethod
    def _parse_joystick_state(jid: int) -> PadState:
        axes = _as_list(glfw.get_joystick_axes(jid))
        buttons = _as_list(glfw.get_joystick_buttons(jid))
        hats = _as_list(glfw.get_joystick_hats(jid))

        pad = PadState()
        for raw, (axis, kind) in zip(axes, JOYSTICK_AXES):
            pad.axes[axis] = convert_axis(float(raw), kind)
        for raw, button in zip(buttons, JOYSTICK_BUTTONS):
            pad.buttons[button] = 1.0 if int(raw) == 1 else 0.0

        # D-pad reported as a hat switch takes precedence over buttons 10-13
        if hats:
            hat = int(hats[0])
            for bit, button in HAT_BUTTONS:
                pad.buttons[button] = 1.0 if hat & bit else 0.0
        return pad
