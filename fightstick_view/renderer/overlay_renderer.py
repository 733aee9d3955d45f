"""
OpenGL renderer for the fightstick overlay (GLFW window, PIL text)

=============================================================================
RENDERING PIPELINE
=============================================================================

1. begin_frame()      - Clear to fully transparent
2. draw_ring()        - Stick gate outline
3. draw_polyline()    - Stick trail (fading with age)
4. draw_circles()     - Button grid and trail dots
5. draw_text_lines()  - Snapshot text dump
6. (GLFW swaps buffers externally)

Shapes go through one small shader that only transforms positions and
passes colors through; text is a single PIL-rendered texture drawn as a
quad with a second shader.

=============================================================================
TRANSPARENCY
=============================================================================

The window is created with a transparent framebuffer. Clearing with
alpha = 0 lets the desktop (or a capture program's background) show
through everywhere we don't draw. Standard alpha blending is enabled so
the fading trail mixes correctly:

    final = src * src_alpha + dst * (1 - src_alpha)

=============================================================================
"""

import ctypes
import numpy as np
from OpenGL.GL import *
from OpenGL.GL.shaders import compileProgram, compileShader
from PIL import Image, ImageDraw, ImageFont
from typing import List, Optional, Sequence, Tuple

from .texture import Texture
from ..geometry import (
    FLOATS_PER_VERTEX, circle_triangles, colored_vertices, normalize_color,
    ortho_matrix, polyline_vertices, ring_lines,
)
from ..shaders.sources import (
    SHAPE_VERTEX_SHADER, SHAPE_FRAGMENT_SHADER,
    TEXT_VERTEX_SHADER, TEXT_FRAGMENT_SHADER,
)

FONT_PATH = "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf"


class OverlayRenderer:
    """
    Draws circles, lines and text into the current OpenGL context.

    The OpenGL context must already be current (GLFW handles this).
    """

    # Pre-allocated shape buffer; one frame of the overlay needs well under 1 MB
    SHAPE_BUFFER_BYTES = 1024 * 1024

    def __init__(self, screen_width: int, screen_height: int):
        self.screen_width = screen_width
        self.screen_height = screen_height

        self._init_shaders()
        self._init_buffers()
        self._init_state()

        print(f"OpenGL Renderer: {glGetString(GL_VERSION).decode()}")

    # =========================================================================
    # INITIALIZATION
    # =========================================================================

    def _init_shaders(self):
        self.shape_shader = compileProgram(
            compileShader(SHAPE_VERTEX_SHADER, GL_VERTEX_SHADER),
            compileShader(SHAPE_FRAGMENT_SHADER, GL_FRAGMENT_SHADER)
        )
        self.text_shader = compileProgram(
            compileShader(TEXT_VERTEX_SHADER, GL_VERTEX_SHADER),
            compileShader(TEXT_FRAGMENT_SHADER, GL_FRAGMENT_SHADER)
        )
        self.shape_proj_loc = glGetUniformLocation(self.shape_shader, "projection")
        self.text_proj_loc = glGetUniformLocation(self.text_shader, "projection")
        self.text_tex_loc = glGetUniformLocation(self.text_shader, "texture0")

    def _init_buffers(self):
        """
        Two VAO/VBO pairs:

        shape: [x, y, r, g, b, a]  - 24 bytes per vertex
        text:  [x, y, u, v]        - 16 bytes per vertex, one quad
        """
        stride = FLOATS_PER_VERTEX * 4

        self.shape_vao = glGenVertexArrays(1)
        self.shape_vbo = glGenBuffers(1)
        glBindVertexArray(self.shape_vao)
        glBindBuffer(GL_ARRAY_BUFFER, self.shape_vbo)
        glBufferData(GL_ARRAY_BUFFER, self.SHAPE_BUFFER_BYTES, None, GL_DYNAMIC_DRAW)
        glEnableVertexAttribArray(0)
        glVertexAttribPointer(0, 2, GL_FLOAT, GL_FALSE, stride, ctypes.c_void_p(0))
        glEnableVertexAttribArray(1)
        glVertexAttribPointer(1, 4, GL_FLOAT, GL_FALSE, stride, ctypes.c_void_p(8))
        glBindVertexArray(0)

        self.text_vao = glGenVertexArrays(1)
        self.text_vbo = glGenBuffers(1)
        glBindVertexArray(self.text_vao)
        glBindBuffer(GL_ARRAY_BUFFER, self.text_vbo)
        glBufferData(GL_ARRAY_BUFFER, 6 * 4 * 4, None, GL_DYNAMIC_DRAW)
        glEnableVertexAttribArray(0)
        glVertexAttribPointer(0, 2, GL_FLOAT, GL_FALSE, 16, ctypes.c_void_p(0))
        glEnableVertexAttribArray(1)
        glVertexAttribPointer(1, 2, GL_FLOAT, GL_FALSE, 16, ctypes.c_void_p(8))
        glBindVertexArray(0)

    def _init_state(self):
        self.update_projection()

        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        # Everything is flat 2D drawn in order, later draws on top
        glDisable(GL_DEPTH_TEST)
        glDisable(GL_CULL_FACE)

        self._font: Optional[ImageFont.ImageFont] = None
        self._font_size = 0
        self._text_texture: Optional[Texture] = None
        self._text_cache_key = ""

    def update_projection(self):
        """Y-down pixel coordinates, (0, 0) at the top-left corner."""
        self.projection = ortho_matrix(
            0, self.screen_width,
            self.screen_height, 0,
            -1, 1
        )

    # =========================================================================
    # FRAME MANAGEMENT
    # =========================================================================

    def begin_frame(self, clear_color: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)):
        """Clear the window. Default is fully transparent black."""
        glClearColor(*clear_color)
        glClear(GL_COLOR_BUFFER_BIT)

    # =========================================================================
    # SHAPES
    # =========================================================================

    def _draw_shape_vertices(self, vertices: np.ndarray, mode):
        if len(vertices) == 0:
            return
        vertices = np.ascontiguousarray(vertices, dtype=np.float32)

        glUseProgram(self.shape_shader)
        # .T because OpenGL expects column-major order
        glUniformMatrix4fv(self.shape_proj_loc, 1, GL_FALSE, self.projection.T)
        glBindBuffer(GL_ARRAY_BUFFER, self.shape_vbo)
        glBufferSubData(GL_ARRAY_BUFFER, 0, vertices.nbytes, vertices)
        glBindVertexArray(self.shape_vao)
        glDrawArrays(mode, 0, len(vertices))
        glBindVertexArray(0)
        glUseProgram(0)

    def draw_circles(self, circles: List[Tuple[float, float, float]],
                     colors: List[Sequence[float]], segments: int = 48):
        """
        Draw filled circles in one call.

        Parameters:
        -----------
        circles : List[Tuple[float, float, float]]
            (center_x, center_y, radius) per circle
        colors : List[Sequence[float]]
            0-255 RGB or RGBA per circle, same length as circles
        """
        if not circles:
            return
        parts = [
            colored_vertices(circle_triangles(x, y, r, segments), normalize_color(color))
            for (x, y, r), color in zip(circles, colors)
        ]
        self._draw_shape_vertices(np.concatenate(parts), GL_TRIANGLES)

    def draw_ring(self, cx: float, cy: float, radius: float, color: Sequence[float]):
        """Circle outline."""
        self._draw_shape_vertices(
            colored_vertices(ring_lines(cx, cy, radius), normalize_color(color)),
            GL_LINES
        )

    def draw_polyline(self, points: List[Tuple[float, float, float]], color: Sequence[float]):
        """Connected line through (x, y, alpha) points."""
        self._draw_shape_vertices(polyline_vertices(points, color), GL_LINES)

    # =========================================================================
    # TEXT
    # =========================================================================

    def draw_text_lines(self, text_lines: List[str], x: int, y: int,
                        font_size: int = 12, color=(255, 255, 255, 255)):
        """
        Draw text using a PIL-rendered texture.

        The texture is only rebuilt when the text changes; at 60 FPS the
        snapshot dump is usually identical for many frames in a row.

        Parameters:
        -----------
        text_lines : List[str]
            Lines of text to render
        x, y : int
            Screen position of the top-left corner of the text block
        """
        if not text_lines:
            return

        cache_key = f"{font_size}|{color}|" + "\n".join(text_lines)
        if cache_key != self._text_cache_key or self._text_texture is None:
            self._text_cache_key = cache_key
            if self._text_texture is not None:
                self._text_texture.delete()
            self._text_texture = Texture.from_pil(
                self._render_text_image(text_lines, font_size, color))

        tex = self._text_texture
        x0, y0, x1, y1 = float(x), float(y), float(x + tex.width), float(y + tex.height)
        quad = np.array([
            x0, y0, 0.0, 0.0,
            x1, y0, 1.0, 0.0,
            x1, y1, 1.0, 1.0,
            x0, y0, 0.0, 0.0,
            x1, y1, 1.0, 1.0,
            x0, y1, 0.0, 1.0,
        ], dtype=np.float32)

        glUseProgram(self.text_shader)
        glUniformMatrix4fv(self.text_proj_loc, 1, GL_FALSE, self.projection.T)
        glUniform1i(self.text_tex_loc, 0)
        tex.bind(0)
        glBindBuffer(GL_ARRAY_BUFFER, self.text_vbo)
        glBufferSubData(GL_ARRAY_BUFFER, 0, quad.nbytes, quad)
        glBindVertexArray(self.text_vao)
        glDrawArrays(GL_TRIANGLES, 0, 6)
        glBindVertexArray(0)
        glBindTexture(GL_TEXTURE_2D, 0)
        glUseProgram(0)

    def _get_font(self, font_size: int):
        if self._font is None or self._font_size != font_size:
            try:
                self._font = ImageFont.truetype(FONT_PATH, font_size)
            except OSError:
                # Fallback to PIL's built-in bitmap font
                self._font = ImageFont.load_default()
            self._font_size = font_size
        return self._font

    def _render_text_image(self, text_lines: List[str], font_size: int, color) -> Image.Image:
        font = self._get_font(font_size)
        line_height = font_size + 2

        # Measure on a scratch image so the strip is exactly as wide as needed
        scratch = ImageDraw.Draw(Image.new('RGBA', (1, 1)))
        width = max(int(scratch.textlength(line, font=font)) for line in text_lines) + 2
        height = len(text_lines) * line_height + 2

        img = Image.new('RGBA', (width, height), (0, 0, 0, 0))
        draw = ImageDraw.Draw(img)
        for i, line in enumerate(text_lines):
            draw.text((1, 1 + i * line_height), line, font=font, fill=tuple(color))
        return img

    # =========================================================================
    # WINDOW MANAGEMENT
    # =========================================================================

    def resize(self, width: int, height: int):
        self.screen_width = width
        self.screen_height = height
        glViewport(0, 0, width, height)
        self.update_projection()
