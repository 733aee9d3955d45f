"""Input normalization and bounded-history state machine"""

from .identifiers import Axis, Button
from .events import AxisChanged, ButtonChanged, Connected, Disconnected
from .snapshot import ButtonSet, Snapshot, StickAxis
from .normalizer import InputNormalizer
from .history import HistoryBuffer, HistoryEmptyError
from .disconnect import DisconnectHandler
from .frame_driver import FrameDriver

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
]
