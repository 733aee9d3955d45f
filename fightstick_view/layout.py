"""
Overlay layout: button grid slots, colors and stick trail positions

=============================================================================
BUTTON GRID
=============================================================================

Eight attack buttons in a 4x2 grid, the usual "Vewlix" arcade layout.
Slot numbers run column by column:

              col 0   col 1   col 2   col 3
    row 0   [0 N]    [2 W]   [4 RB]  [6 LB]
    row 1   [1 S]    [3 E]   [5 RT]  [7 LT]

The first column is shifted down by one radius so the grid follows the
curve of the player's fingers.

=============================================================================
STICK TRAIL
=============================================================================

Each snapshot in history becomes one point of the trail:

    screen_x = center_x + axis.x * gate_radius
    screen_y = center_y - axis.y * gate_radius     (screen Y grows downward)

Points are produced newest first; older points fade out.

=============================================================================
"""

from typing import Dict, List, Tuple

from .core.history import HistoryBuffer
from .core.identifiers import Button
from .core.snapshot import Snapshot

RED = (230, 41, 55)
DARK_BLUE = (0, 82, 172)
WHITE = (255, 255, 255)
GATE_GRAY = (80, 80, 80)

BUTTON_RADIUS = 56
BUTTON_START = (6 * BUTTON_RADIUS, int(1.2 * BUTTON_RADIUS))
BUTTON_SEPARATION = BUTTON_RADIUS * 2 + 8

STICK_CENTER = (2 * BUTTON_RADIUS + 40, 3 * BUTTON_RADIUS + 40)
STICK_GATE_RADIUS = 90

# Abstract button -> grid slot. Only these buttons are drawn.
BUTTON_SLOTS: Dict[Button, int] = {
    Button.NORTH: 0,
    Button.SOUTH: 1,
    Button.WEST: 2,
    Button.EAST: 3,
    Button.RIGHT_TRIGGER: 4,
    Button.RIGHT_TRIGGER_2: 5,
    Button.LEFT_TRIGGER: 6,
    Button.LEFT_TRIGGER_2: 7,
}

SLOT_COUNT = len(BUTTON_SLOTS)


def button_center(slot: int) -> Tuple[int, int]:
    """Screen position of a grid slot's center."""
    start_x, start_y = BUTTON_START
    x = start_x + BUTTON_SEPARATION * (slot // 2 + 1)
    y = start_y + BUTTON_SEPARATION * (slot % 2 + 1)
    if slot < 2:
        y += BUTTON_RADIUS
    return x, y


def button_colors(snapshot: Snapshot) -> List[Tuple[int, int, int]]:
    """Color for every slot, indexed by slot number."""
    colors = [DARK_BLUE] * SLOT_COUNT
    for button in snapshot.buttons:
        slot = BUTTON_SLOTS.get(button)
        if slot is not None:
            colors[slot] = RED
    return colors


def trail_points(history: HistoryBuffer,
                 center: Tuple[float, float] = STICK_CENTER,
                 gate_radius: float = STICK_GATE_RADIUS) -> List[Tuple[float, float, float]]:
    """
    Stick trail as (x, y, alpha) tuples, newest first.

    Alpha goes linearly from 1.0 for the newest point toward 0 for the
    oldest slot the history could hold.
    """
    cx, cy = center
    points = []
    for age, snapshot in enumerate(history.iter_chronological_reverse()):
        alpha = 1.0 - age / history.capacity
        points.append((
            cx + snapshot.axis.x * gate_radius,
            cy - snapshot.axis.y * gate_radius,
            alpha,
        ))
    return points


def format_snapshot(snapshot: Snapshot) -> str:
    """One-line text dump of a snapshot."""
    held = ", ".join(button.value for button in snapshot.buttons)
    return f"Snapshot {{ axis: ({snapshot.axis.x}, {snapshot.axis.y}), buttons: [{held}] }}"
