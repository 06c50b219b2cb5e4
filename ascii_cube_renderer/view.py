#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/view.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .transform import f32, to_f32


class Angles:
    """
    Animation angles A, B, C (radians) around the X, Y and Z axes.

    Held and accumulated in single precision. They grow without bound;
    trig is periodic so no wraparound is needed.
    """
    __slots__ = ('a', 'b', 'c')

    def __init__(self, a: float = 0.0, b: float = 0.0, c: float = 0.0):
        self.a = to_f32(a)
        self.b = to_f32(b)
        self.c = to_f32(c)

    def __repr__(self):
        return f"Angles({self.a:.3f}, {self.b:.3f}, {self.c:.3f})"

    def advance(self, da: float, db: float, dc: float):
        """Add one frame's worth of rotation."""
        self.a = float(f32(self.a) + f32(da))
        self.b = float(f32(self.b) + f32(db))
        self.c = float(f32(self.c) + f32(dc))


class ViewState:
    """
    Cube size, camera and screen placement.

    Written only by input handling between frames; the rasterizer and
    serializer read it.
    """
    __slots__ = ('cube_width', 'min_cube_width', 'max_cube_width',
                 'distance', 'k1', 'horizontal_offset', 'vertical_offset')

    def __init__(self, cube_width: float = 10.0, distance: float = 100.0,
                 k1: float = 40.0, horizontal_offset: float = 0.0,
                 vertical_offset: float = 0.0,
                 min_cube_width: float = 5.0, max_cube_width: float = 50.0):
        self.min_cube_width = min_cube_width
        self.max_cube_width = max_cube_width
        self.cube_width = max(min_cube_width, min(max_cube_width, cube_width))
        self.distance = distance          # Camera Z offset
        self.k1 = k1                      # Perspective scale
        self.horizontal_offset = horizontal_offset
        self.vertical_offset = vertical_offset

    def pan(self, dh: float, dv: float):
        """Shift the cube on screen by dh columns and dv rows."""
        self.horizontal_offset = float(f32(self.horizontal_offset) + f32(dh))
        self.vertical_offset = float(f32(self.vertical_offset) + f32(dv))

    def resize(self, delta: float):
        """Grow (positive) or shrink the cube, clamped to [min, max]."""
        width = float(f32(self.cube_width) + f32(delta))
        self.cube_width = max(self.min_cube_width, min(self.max_cube_width, width))
