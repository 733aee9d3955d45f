"""Device-loss recovery"""

from .history import HistoryBuffer
from .snapshot import Snapshot


class DisconnectHandler:
    """
    Resets history and working state when the controller goes away.

    A disconnect is not an error: the overlay simply forgets everything and
    starts again from neutral, so a stuck button from the lost device can't
    linger on screen.
    """

    def __init__(self, verbose: bool = True):
        self.verbose = verbose
        self.reset_count = 0

    def handle(self, history: HistoryBuffer) -> Snapshot:
        """Clear history and return a fresh zero working snapshot."""
        discarded = len(history)
        history.reset()
        self.reset_count += 1
        if self.verbose:
            print(f"Controller disconnected: history reset ({discarded} snapshots discarded)")
        return Snapshot.zero()
