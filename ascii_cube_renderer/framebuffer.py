#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/framebuffer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .color import FaceColor


class BufferAllocationError(MemoryError):
    """Raised when the frame buffers cannot be allocated."""


def _allocate(size, fill):
    return [fill] * size


class FrameBuffers:
    """
    Depth, character and color planes for one frame.

    The three lists are co-indexed by y * w + x. A character or color is
    only meaningful where the stored depth is above zero.
    """
    __slots__ = ['w', 'h', 'size', 'background', 'depth', 'chars', 'colors']

    def __init__(self, w, h, background=' '):
        self.w, self.h = w, h
        self.size = w * h
        self.background = background

        depth = chars = colors = None
        try:
            depth = _allocate(self.size, 0.0)
            chars = _allocate(self.size, background)
            colors = _allocate(self.size, FaceColor.NONE)
        except MemoryError as e:
            # Drop whatever did get allocated before reporting.
            del depth, chars, colors
            raise BufferAllocationError(
                f"cannot allocate {w}x{h} frame buffers") from e

        self.depth = depth
        self.chars = chars
        self.colors = colors

    def index(self, x, y):
        return x + y * self.w

    def clear(self):
        """Reset every pixel to background at zero depth, in place."""
        n = self.size
        self.depth[:] = [0.0] * n
        self.chars[:] = [self.background] * n
        self.colors[:] = [FaceColor.NONE] * n

    def plot(self, idx, ooz, char, color):
        """
        Depth-tested write. Nearer samples (larger ooz) replace farther
        ones; ties keep what is already there. Out-of-range indices are
        ignored. Returns True when the pixel was written.
        """
        if idx < 0 or idx >= self.size:
            return False
        if ooz > self.depth[idx]:
            self.depth[idx] = ooz
            self.chars[idx] = char
            self.colors[idx] = color
            return True
        return False

    def release(self):
        self.depth = None
        self.chars = None
        self.colors = None
