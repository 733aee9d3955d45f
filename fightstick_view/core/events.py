"""Raw input events produced by an input source"""

from dataclasses import dataclass
from typing import Union

from .identifiers import Axis, Button


@dataclass(frozen=True)
class ButtonChanged:
    """
    A button's analog value changed.

    Digital buttons report 0.0 (released) or 1.0 (pressed); pressure
    sensitive buttons may report anything in between.
    """
    button: Button
    value: float


@dataclass(frozen=True)
class AxisChanged:
    """An analog axis moved. Sticks report -1.0..1.0, triggers 0.0..1.0."""
    axis: Axis
    value: float


@dataclass(frozen=True)
class Disconnected:
    """The active device went away."""


@dataclass(frozen=True)
class Connected:
    """A device appeared. Informational only; the normalizer ignores it."""
    name: str = ""


RawEvent = Union[ButtonChanged, AxisChanged, Disconnected, Connected]
