"""
Per-frame orchestration of normalizer and history

=============================================================================
ONE FRAME
=============================================================================

    working = history.latest().clone()
    while (event := source.poll_next_event()) is not None:
        fold event into working
    push working  (or reset history if the batch contained a disconnect)

Draining never blocks: the loop stops as soon as the source has nothing
queued, however many events that turned out to be.

A disconnect in the middle of a batch resets history immediately and swaps
in a zero working snapshot. Events that arrive after it in the same batch
still fold into the new working copy, but that frame pushes nothing, so the
history after the frame is exactly one zero snapshot. The next frame starts
from latest() like any other.

=============================================================================
"""

from typing import Optional

from .disconnect import DisconnectHandler
from .history import HistoryBuffer
from .normalizer import InputNormalizer
from .snapshot import Snapshot


class FrameDriver:
    """Composes InputNormalizer, HistoryBuffer and DisconnectHandler."""

    def __init__(self, history: Optional[HistoryBuffer] = None,
                 normalizer: Optional[InputNormalizer] = None,
                 disconnect: Optional[DisconnectHandler] = None):
        self.history = history if history is not None else HistoryBuffer()
        self.normalizer = normalizer if normalizer is not None else InputNormalizer()
        self.disconnect = disconnect if disconnect is not None else DisconnectHandler()
        self.frame_count = 0

    def step(self, source) -> Snapshot:
        """
        Run one frame against source and return the latest snapshot.

        Parameters:
        -----------
        source : object
            Anything with a non-blocking poll_next_event() returning a raw
            event or None.
        """
        working = self.history.latest().clone()
        was_reset = False

        while True:
            event = source.poll_next_event()
            if event is None:
                break
            if self.normalizer.apply(working, event):
                working = self.disconnect.handle(self.history)
                was_reset = True

        if not was_reset:
            self.history.push(working)

        self.frame_count += 1
        return self.history.latest()
