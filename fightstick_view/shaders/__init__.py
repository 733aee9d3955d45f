"""GLSL shader sources"""

from .sources import (
    SHAPE_VERTEX_SHADER,
    SHAPE_FRAGMENT_SHADER,
    TEXT_VERTEX_SHADER,
    TEXT_FRAGMENT_SHADER,
)

__all__ = [
    "SHAPE_VERTEX_SHADER",
    "SHAPE_FRAGMENT_SHADER",
    "TEXT_VERTEX_SHADER",
    "TEXT_FRAGMENT_SHADER",
]
