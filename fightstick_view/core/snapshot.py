"""
Per-frame input state: ButtonSet, StickAxis and Snapshot

=============================================================================
QUANTIZED STATE
=============================================================================

A Snapshot answers one question: "what is the player pressing right now?"
It deliberately throws away analog detail:

    StickAxis.x / StickAxis.y  ->  always one of -1, 0, 1
    ButtonSet                  ->  held / not held, nothing in between

Direction conventions (fighting game numpad notation in brackets):

         y = +1
           (8)
    (4) x=-1  x=+1 (6)
           (2)
         y = -1

    Neutral (5) is x = 0, y = 0.

=============================================================================
MUTABLE WORKING COPY vs PUBLISHED SNAPSHOT
=============================================================================

Snapshots stored in the HistoryBuffer are never modified again. Each frame
starts from clone() of the latest one, which is the only instance the
normalizer is allowed to mutate.

=============================================================================
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional

from .identifiers import Button


class ButtonSet:
    """
    Small ordered set of held buttons.

    Order of insertion is kept so the text dump reads in press order,
    but equality ignores it.
    """

    def __init__(self, buttons: Optional[Iterable[Button]] = None):
        self._buttons: List[Button] = []
        for button in buttons or ():
            self.add(button)

    def add(self, button: Button) -> bool:
        """Insert button if absent. Returns True if the set changed."""
        if button in self._buttons:
            return False
        self._buttons.append(button)
        return True

    def discard(self, button: Button) -> bool:
        """Remove button if present. Returns True if the set changed."""
        if button not in self._buttons:
            return False
        self._buttons.remove(button)
        return True

    def clear(self):
        self._buttons.clear()

    def copy(self) -> "ButtonSet":
        return ButtonSet(self._buttons)

    def __contains__(self, button) -> bool:
        return button in self._buttons

    def __iter__(self) -> Iterator[Button]:
        return iter(list(self._buttons))

    def __len__(self) -> int:
        return len(self._buttons)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ButtonSet):
            return NotImplemented
        return set(self._buttons) == set(other._buttons)

    def __repr__(self):
        return f"ButtonSet({self._buttons!r})"


@dataclass
class StickAxis:
    """Quantized stick direction; each component is -1, 0 or 1."""
    x: int = 0
    y: int = 0

    def is_neutral(self) -> bool:
        return self.x == 0 and self.y == 0


@dataclass
class Snapshot:
    """One frame of discretized input state."""
    axis: StickAxis = field(default_factory=StickAxis)
    buttons: ButtonSet = field(default_factory=ButtonSet)

    @classmethod
    def zero(cls) -> "Snapshot":
        """Neutral stick, nothing held."""
        return cls()

    def clone(self) -> "Snapshot":
        return Snapshot(
            axis=StickAxis(self.axis.x, self.axis.y),
            buttons=self.buttons.copy(),
        )

    def is_zero(self) -> bool:
        return self.axis.is_neutral() and len(self.buttons) == 0
