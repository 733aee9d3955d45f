"""
OpenGL texture wrapper for PIL images

=============================================================================
ROW ORDER
=============================================================================

PIL stores rows top to bottom. We upload them unflipped, so texture row 0
is the TOP of the image and V grows downward:

    (u=0, v=0) -------- (u=1, v=0)      <- top of the text strip
        |                   |
    (u=0, v=1) -------- (u=1, v=1)      <- bottom

This matches the overlay's Y-down projection, so quads map UVs straight
onto screen corners with no flipping anywhere.

=============================================================================
"""

from OpenGL.GL import *
from PIL import Image


class Texture:
    """RGBA texture uploaded from raw bytes or a PIL image."""

    def __init__(self, width: int, height: int, data: bytes):
        """
        Create texture from raw RGBA data, top row first.

        Parameters:
        -----------
        width, height : int
            Texture size in pixels
        data : bytes
            width × height × 4 bytes of RGBA pixels
        """
        self.width = width
        self.height = height

        self.id = glGenTextures(1)
        glBindTexture(GL_TEXTURE_2D, self.id)

        # Text strips are drawn 1:1, no filtering or wrapping wanted
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_S, GL_CLAMP_TO_EDGE)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_T, GL_CLAMP_TO_EDGE)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_NEAREST)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_NEAREST)

        glTexImage2D(
            GL_TEXTURE_2D,      # Target
            0,                  # Mipmap level (0 = base)
            GL_RGBA,            # Internal format (GPU storage)
            width, height,      # Dimensions
            0,                  # Border (must be 0)
            GL_RGBA,            # Input format
            GL_UNSIGNED_BYTE,   # Input data type
            data                # Pixel data
        )

        glBindTexture(GL_TEXTURE_2D, 0)

    @classmethod
    def from_pil(cls, image: Image.Image) -> 'Texture':
        """Create texture from any PIL image (converted to RGBA)."""
        if image.mode != 'RGBA':
            image = image.convert('RGBA')
        return cls(image.width, image.height, image.tobytes())

    def bind(self, unit: int = 0):
        """Bind to a texture unit (0 by default)."""
        glActiveTexture(GL_TEXTURE0 + unit)
        glBindTexture(GL_TEXTURE_2D, self.id)

    def delete(self):
        """Free the GPU copy. The object must not be used afterwards."""
        if self.id:
            glDeleteTextures([self.id])
            self.id = 0
