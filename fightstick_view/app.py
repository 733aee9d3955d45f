"""
FightStick View - Main Application (GLFW Version)
"""

import glfw
from OpenGL.GL import GL_TRUE, GL_FALSE
import time
from typing import Optional

from .config import OverlayConfig
from .core import DisconnectHandler, FrameDriver, HistoryBuffer, InputNormalizer
from .gamepad import GamepadEventSource
from .layout import (
    BUTTON_RADIUS, GATE_GRAY, SLOT_COUNT, STICK_CENTER, STICK_GATE_RADIUS, WHITE,
    button_center, button_colors, format_snapshot, trail_points,
)
from .renderer.overlay_renderer import OverlayRenderer

TRAIL_DOT_RADIUS = 6


class FightStickView:
    """Fightstick input overlay - GLFW version"""

    def __init__(self, config: Optional[OverlayConfig] = None):
        self.config = config or OverlayConfig()
        self.screen_width = self.config.screen_width
        self.screen_height = self.config.screen_height

        # Initialize GLFW
        if not glfw.init():
            raise RuntimeError("Could not initialize GLFW")

        # Request OpenGL 3.3 Core
        glfw.window_hint(glfw.CONTEXT_VERSION_MAJOR, 3)
        glfw.window_hint(glfw.CONTEXT_VERSION_MINOR, 3)
        glfw.window_hint(glfw.OPENGL_PROFILE, glfw.OPENGL_CORE_PROFILE)
        glfw.window_hint(glfw.OPENGL_FORWARD_COMPAT, GL_TRUE)
        glfw.window_hint(glfw.RESIZABLE, GL_FALSE)
        glfw.window_hint(glfw.TRANSPARENT_FRAMEBUFFER,
                         GL_TRUE if self.config.transparent else GL_FALSE)

        self.window = glfw.create_window(
            self.screen_width, self.screen_height,
            self.config.title,
            None, None
        )
        if not self.window:
            glfw.terminate()
            raise RuntimeError("Could not create GLFW window")

        glfw.make_context_current(self.window)
        # Frame pacing is done by run(), not by VSync
        glfw.swap_interval(0)

        glfw.set_key_callback(self.window, self._key_callback)
        glfw.set_framebuffer_size_callback(self.window, self._resize_callback)

        self.renderer = OverlayRenderer(self.screen_width, self.screen_height)

        # Input source and core state machine
        self.source = GamepadEventSource(self.config.mappings_file)
        self.driver = FrameDriver(
            history=HistoryBuffer(self.config.history_capacity),
            normalizer=InputNormalizer(self.config.deadzone,
                                       first_match_release=self.config.first_match_release),
            disconnect=DisconnectHandler(),
        )

        self.running = True

        print("\nConnected devices:")
        devices = self.source.describe_devices()
        for jid, name, mapped, power in devices:
            print(f"  {name} is {power} (ID: {jid}, {'mapped' if mapped else 'raw'})")
        if not devices:
            print("  (none)")

        print("\n=== Ready! ===")
        print("ESC: Quit")

    # === GLFW Callbacks ===

    def _key_callback(self, window, key, scancode, action, mods):
        if action == glfw.PRESS and key == glfw.KEY_ESCAPE:
            self.running = False

    def _resize_callback(self, window, width, height):
        self.screen_width = width
        self.screen_height = height
        self.renderer.resize(width, height)

    # === Drawing ===

    def draw_stick(self):
        """Gate outline plus the fading trail of recent stick positions."""
        cx, cy = STICK_CENTER
        self.renderer.draw_ring(cx, cy, STICK_GATE_RADIUS, GATE_GRAY)

        points = trail_points(self.driver.history)
        self.renderer.draw_polyline(points, WHITE)

        # Oldest first so the newest dot ends up on top
        dots = [(x, y, TRAIL_DOT_RADIUS) for x, y, _ in reversed(points)]
        colors = [WHITE + (int(255 * alpha),) for _, _, alpha in reversed(points)]
        self.renderer.draw_circles(dots, colors, segments=16)

    def draw_buttons(self):
        latest = self.driver.history.latest()
        circles = []
        for slot in range(SLOT_COUNT):
            x, y = button_center(slot)
            circles.append((x, y, BUTTON_RADIUS))
        self.renderer.draw_circles(circles, button_colors(latest))

    def draw_ui(self):
        """Text dump of the latest snapshot along the bottom edge."""
        latest = self.driver.history.latest()
        self.renderer.draw_text_lines([format_snapshot(latest)], 20, self.screen_height - 14)

    def draw(self):
        self.renderer.begin_frame()
        self.draw_stick()
        self.draw_buttons()
        self.draw_ui()

    def run(self):
        """Main loop: one input frame and one draw per iteration."""
        frame_time = self.config.frame_time
        try:
            while self.running and not glfw.window_should_close(self.window):
                frame_start = time.perf_counter()

                glfw.poll_events()
                self.source.pump()
                self.driver.step(self.source)
                self.draw()
                glfw.swap_buffers(self.window)

                remaining = frame_time - (time.perf_counter() - frame_start)
                if remaining > 0:
                    time.sleep(remaining)
        finally:
            glfw.terminate()
