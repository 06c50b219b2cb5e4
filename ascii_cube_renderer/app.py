#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/app.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import time

from .renderer import Renderer

logger = logging.getLogger(__name__)

PAN_STEP_H = 5.0
PAN_STEP_V = 1.0
RESIZE_STEP = 1.0


class CubeApp:
    """
    Frame loop around a Renderer: drain keys, draw, emit, advance, sleep.

    `keyboard` needs a poll() returning one pending key or ''. `out` is a
    binary stream; each frame goes out in a single write followed by flush.
    """

    def __init__(self, renderer: Renderer, keyboard, out,
                 frame_delay: float = 0.016, max_frames=None,
                 sleep=time.sleep):
        self.renderer = renderer
        self.keyboard = keyboard
        self.out = out
        self.frame_delay = frame_delay
        self.max_frames = max_frames
        self.sleep = sleep
        self.running = True

        self.frames = 0
        self.fps = 0
        self._fps_frames = 0
        self._last_fps_time = time.monotonic()

    # ────────────────────────────────────────────────────────────────────
    # Input
    # ────────────────────────────────────────────────────────────────────
    def handle_key(self, key):
        view = self.renderer.view

        if key == 'q':
            self.running = False
        elif key == 'h':
            view.pan(-PAN_STEP_H, 0.0)
        elif key == 'l':
            view.pan(PAN_STEP_H, 0.0)
        elif key == 'k':
            view.pan(0.0, -PAN_STEP_V)
        elif key == 'j':
            view.pan(0.0, PAN_STEP_V)
        elif key in ('+', '='):
            view.resize(RESIZE_STEP)
        elif key in ('-', '_'):
            view.resize(-RESIZE_STEP)

    def handle_input(self):
        """Apply every key pressed since the last tick."""
        while self.running:
            key = self.keyboard.poll()
            if not key:
                break
            self.handle_key(key)

    # ────────────────────────────────────────────────────────────────────
    # Main loop
    # ────────────────────────────────────────────────────────────────────
    def tick(self) -> bool:
        """
        One clear -> input -> rasterize -> emit -> advance cycle.
        Returns False, without emitting anything, once a quit was requested.
        """
        renderer = self.renderer
        renderer.clear()
        self.handle_input()
        if not self.running:
            return False

        renderer.rasterize()
        self.out.write(renderer.serialize())
        self.out.flush()
        renderer.advance()

        self.frames += 1
        self._count_fps()
        return True

    def _count_fps(self):
        self._fps_frames += 1
        now = time.monotonic()
        if now - self._last_fps_time >= 1.0:
            self.fps = self._fps_frames
            self._fps_frames = 0
            self._last_fps_time = now
            logger.debug("fps=%d angles=%r", self.fps, self.renderer.angles)

    def run(self) -> int:
        """Loop until 'q' or max_frames. Returns the number of frames shown."""
        logger.info("frame loop started (%dx%d)",
                    self.renderer.width, self.renderer.height)
        while self.running:
            if self.max_frames is not None and self.frames >= self.max_frames:
                break
            if not self.tick():
                break
            self.sleep(self.frame_delay)
        self.running = False
        logger.info("frame loop stopped after %d frames", self.frames)
        return self.frames
