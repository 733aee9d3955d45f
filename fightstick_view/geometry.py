"""
CPU-side geometry for the overlay renderer (numpy only, no OpenGL)

=============================================================================
VERTEX FORMAT
=============================================================================

Every shape vertex is 6 floats (24 bytes):

    [x, y, r, g, b, a]
     ^^^^  ^^^^^^^^^^
     pos   color, each channel 0.0 - 1.0

=============================================================================
CIRCLES AS TRIANGLES
=============================================================================

OpenGL has no circle primitive. A filled circle is a fan of thin
triangles sharing the center:

          p1
         /  \\
    p0 --  c  -- p2       triangle i = (c, p_i, p_{i+1})
         \\  /
          p3

We expand the fan into independent triangles (GL_TRIANGLES) so many
circles can go into a single draw call.

=============================================================================
"""

import numpy as np
from typing import Iterable, Sequence, Tuple

FLOATS_PER_VERTEX = 6


def normalize_color(color: Sequence[float], alpha: float = 1.0) -> Tuple[float, float, float, float]:
    """0-255 RGB or RGBA -> 0.0-1.0 RGBA. alpha multiplies the color's own alpha."""
    a = color[3] / 255.0 if len(color) > 3 else 1.0
    return color[0] / 255.0, color[1] / 255.0, color[2] / 255.0, a * alpha


def circle_triangles(cx: float, cy: float, radius: float, segments: int = 48) -> np.ndarray:
    """(segments * 3, 2) array of triangle corners filling a circle."""
    angles = np.linspace(0.0, 2.0 * np.pi, segments + 1, dtype=np.float32)
    rim = np.stack([cx + radius * np.cos(angles), cy + radius * np.sin(angles)], axis=1)

    tris = np.empty((segments, 3, 2), dtype=np.float32)
    tris[:, 0] = (cx, cy)
    tris[:, 1] = rim[:-1]
    tris[:, 2] = rim[1:]
    return tris.reshape(-1, 2)


def ring_lines(cx: float, cy: float, radius: float, segments: int = 64) -> np.ndarray:
    """(segments * 2, 2) array of GL_LINES endpoints outlining a circle."""
    angles = np.linspace(0.0, 2.0 * np.pi, segments + 1, dtype=np.float32)
    rim = np.stack([cx + radius * np.cos(angles), cy + radius * np.sin(angles)], axis=1)

    lines = np.empty((segments, 2, 2), dtype=np.float32)
    lines[:, 0] = rim[:-1]
    lines[:, 1] = rim[1:]
    return lines.reshape(-1, 2)


def colored_vertices(positions: np.ndarray, rgba: Sequence[float]) -> np.ndarray:
    """Attach one RGBA color to every position -> (n, 6) float32."""
    out = np.empty((len(positions), FLOATS_PER_VERTEX), dtype=np.float32)
    out[:, :2] = positions
    out[:, 2:] = rgba
    return out


def polyline_vertices(points: Iterable[Tuple[float, float, float]],
                      color: Sequence[float]) -> np.ndarray:
    """
    GL_LINES vertices joining consecutive (x, y, alpha) points.

    Each segment takes the alpha of its endpoints, so a fading point list
    gives a fading line. Fewer than two points gives an empty array.
    """
    pts = list(points)
    if len(pts) < 2:
        return np.empty((0, FLOATS_PER_VERTEX), dtype=np.float32)

    rows = []
    for (x1, y1, a1), (x2, y2, a2) in zip(pts, pts[1:]):
        rows.append((x1, y1) + normalize_color(color, a1))
        rows.append((x2, y2) + normalize_color(color, a2))
    return np.array(rows, dtype=np.float32)


def ortho_matrix(left: float, right: float, bottom: float,
                 top: float, near: float, far: float) -> np.ndarray:
    """
    Orthographic projection matrix (row-major; transpose for OpenGL).

    With bottom=height and top=0, (0, 0) is the top-left corner of the
    window and Y grows downward, like screen coordinates.
    """
    mat = np.zeros((4, 4), dtype=np.float32)
    mat[0, 0] = 2.0 / (right - left)
    mat[1, 1] = 2.0 / (top - bottom)
    mat[2, 2] = -2.0 / (far - near)
    mat[3, 3] = 1.0
    mat[0, 3] = -(right + left) / (right - left)
    mat[1, 3] = -(top + bottom) / (top - bottom)
    mat[2, 3] = -(far + near) / (far - near)
    return mat
