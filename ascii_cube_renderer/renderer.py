#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .config import RenderConfig
from .framebuffer import FrameBuffers
from .rasterizer import rasterize
from .serializer import serialize
from .view import Angles, ViewState

logger = logging.getLogger(__name__)


class Renderer:
    """
    Rotating-cube renderer.

    Owns the animation angles, the view state and one set of frame
    buffers sized to the screen. A frame is produced by
    render_frame(): clear, rasterize the six faces, serialize.

    The buffers are allocated here and released by close(), exactly once.
    BufferAllocationError propagates from the constructor with nothing
    left allocated.
    """

    def __init__(self, config: RenderConfig = None):
        if config is None:
            config = RenderConfig()
        self.config = config
        self.width = config.width
        self.height = config.height
        self.background = config.background
        self.step = config.step

        self.angles = Angles()
        self.view = ViewState(
            cube_width=config.cube_width,
            distance=config.distance,
            k1=config.k1,
            horizontal_offset=config.initial_horizontal_offset,
            vertical_offset=config.vertical_offset,
            min_cube_width=config.min_cube_width,
            max_cube_width=config.max_cube_width,
        )

        self._buffers = FrameBuffers(self.width, self.height, self.background)
        self._buffers.clear()
        logger.debug("allocated %dx%d frame buffers", self.width, self.height)

    @property
    def buffers(self) -> FrameBuffers:
        if self._buffers is None:
            raise ValueError("renderer is closed")
        return self._buffers

    @property
    def closed(self) -> bool:
        return self._buffers is None

    def clear(self):
        self.buffers.clear()

    def rasterize(self):
        rasterize(self)

    def serialize(self) -> bytes:
        return serialize(self)

    def render_frame(self) -> bytes:
        """Run one complete clear -> rasterize -> serialize cycle."""
        self.clear()
        self.rasterize()
        return self.serialize()

    def advance(self):
        """Step the animation angles by the configured per-frame speeds."""
        cfg = self.config
        self.angles.advance(cfg.speed_a, cfg.speed_b, cfg.speed_c)

    def close(self):
        if self._buffers is None:
            return
        self._buffers.release()
        self._buffers = None
        logger.debug("released frame buffers")

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
