"""OpenGL rendering components"""

from .overlay_renderer import OverlayRenderer
from .texture import Texture

__all__ = ["OverlayRenderer", "Texture"]
