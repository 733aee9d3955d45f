"""
FightStick View - live fightstick input overlay (GLFW/OpenGL)

Requirements:
    pip install glfw PyOpenGL pillow numpy

The window, renderer and gamepad source need a display and are imported
from their own modules (fightstick_view.app, fightstick_view.gamepad);
the core state machine below has no such dependency.
"""

from .core import (
    Axis, Button,
    AxisChanged, ButtonChanged, Connected, Disconnected,
    ButtonSet, Snapshot, StickAxis,
    InputNormalizer, HistoryBuffer, HistoryEmptyError,
    DisconnectHandler, FrameDriver,
)
from .config import OverlayConfig

__version__ = "1.0.0"
__all__ = [
    "Axis",
    "Button",
    "AxisChanged",
    "ButtonChanged",
    "Connected",
    "Disconnected",
    "ButtonSet",
    "Snapshot",
    "StickAxis",
    "InputNormalizer",
    "HistoryBuffer",
    "HistoryEmptyError",
    "DisconnectHandler",
    "FrameDriver",
    "OverlayConfig",
]
