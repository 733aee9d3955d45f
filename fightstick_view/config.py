"""Static startup configuration"""

from dataclasses import dataclass
from typing import Optional

from .core.history import HistoryBuffer
from .core.normalizer import InputNormalizer


@dataclass
class OverlayConfig:
    """
    Window and core settings, read once at startup.

    The window is transparent so the overlay can be composited over a
    game capture in streaming software.
    """
    screen_width: int = 960
    screen_height: int = 540
    title: str = "FightStick View"
    target_fps: int = 60
    transparent: bool = True

    history_capacity: int = HistoryBuffer.DEFAULT_CAPACITY
    deadzone: float = InputNormalizer.DEADZONE
    first_match_release: bool = False

    # Path to an SDL gamecontrollerdb.txt; None searches default locations
    mappings_file: Optional[str] = None

    @property
    def frame_time(self) -> float:
        """Seconds per frame at target_fps."""
        return 1.0 / self.target_fps
