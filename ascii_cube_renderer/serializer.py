#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/serializer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .color import CURSOR_HOME, RESET, STATUS_COLOR, FaceColor
from .transform import to_f32

ENCODING = 'utf-8'


def status_line(view) -> str:
    """Offsets and cube size as single-precision values, one decimal place each."""
    return "H=%.1f:V=%.1f:W=%.1f" % (to_f32(view.horizontal_offset),
                                     to_f32(view.vertical_offset),
                                     to_f32(view.cube_width))


def serialize(renderer) -> bytes:
    """
    Turn the frame buffers into one blob for a single terminal write.

    Layout: cursor home, the pixel grid in row-major order (a line break
    before each row but the first; colored pixels wrapped in their escape
    and a reset), a global reset, cursor home again and the status line
    in bright white.
    """
    buffers = renderer.buffers
    width = renderer.width
    chars = buffers.chars
    colors = buffers.colors
    none = FaceColor.NONE

    out = [CURSOR_HOME]
    append = out.append
    for k in range(buffers.size):
        if k and k % width == 0:
            append('\n')
        color = colors[k]
        if color is none:
            append(chars[k])
        else:
            append(color.escape)
            append(chars[k])
            append(RESET)

    append(RESET)
    append(CURSOR_HOME)
    append(STATUS_COLOR.escape)
    append(status_line(renderer.view))
    append(RESET)
    return ''.join(out).encode(ENCODING)
