#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from enum import Enum

ESC = '\x1b'
CURSOR_HOME = ESC + '[H'
CLEAR_SCREEN = ESC + '[2J'
RESET = ESC + '[0m'


def sgr(code: int) -> str:
    """Build an SGR escape sequence for a single numeric code."""
    return f"{ESC}[{code}m"


class FaceColor(Enum):
    """
    Color tag stored per pixel.

    Values are bright-foreground SGR codes. NONE marks an uncolored
    (background) pixel and emits nothing.
    """
    NONE = None
    RED = 91
    GREEN = 92
    YELLOW = 93
    BLUE = 94
    MAGENTA = 95
    CYAN = 96
    WHITE = 97

    @property
    def escape(self) -> str:
        if self.value is None:
            return ''
        return sgr(self.value)


# Initial foreground written when the screen is first cleared.
STARTUP_COLOR = sgr(36)
STATUS_COLOR = FaceColor.WHITE
