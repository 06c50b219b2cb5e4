#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import shutil
from dataclasses import dataclass
from typing import Optional

DEFAULT_WIDTH = 160
DEFAULT_HEIGHT = 44


@dataclass
class RenderConfig:
    """Configuration for the cube renderer and its frame loop."""
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    cube_width: float = 10.0
    min_cube_width: float = 5.0
    max_cube_width: float = 50.0
    distance: float = 100.0
    k1: float = 40.0
    step: float = 0.6
    background: str = ' '
    # None means "start centred on the cube's own width"
    horizontal_offset: Optional[float] = None
    vertical_offset: float = 0.0
    speed_a: float = 0.05
    speed_b: float = 0.05
    speed_c: float = 0.01
    frame_delay: float = 0.016

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Check field ranges and clamp the initial cube width.

        Raises ValueError on settings the pipeline cannot render with.
        """
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"screen size must be positive, got {self.width}x{self.height}")
        if self.step <= 0:
            raise ValueError(f"sample step must be positive, got {self.step}")
        if self.min_cube_width > self.max_cube_width:
            raise ValueError(
                f"min cube width {self.min_cube_width} exceeds "
                f"max cube width {self.max_cube_width}")
        if len(self.background) != 1:
            raise ValueError(
                f"background must be a single character, got {self.background!r}")
        if self.frame_delay < 0:
            raise ValueError(f"frame delay must not be negative, got {self.frame_delay}")

        self.cube_width = max(self.min_cube_width,
                              min(self.max_cube_width, self.cube_width))

    @property
    def initial_horizontal_offset(self) -> float:
        if self.horizontal_offset is None:
            return self.cube_width
        return self.horizontal_offset

    @classmethod
    def detect_terminal(cls, **overrides) -> 'RenderConfig':
        """
        Size the frame to the current terminal and return a config.
        Falls back to the default 160x44 grid when stdout is not a terminal.
        """
        size = shutil.get_terminal_size((DEFAULT_WIDTH, DEFAULT_HEIGHT))

        # The frame is height rows joined by height-1 line breaks, so it
        # fills the screen exactly without scrolling.
        overrides.setdefault('width', max(1, size.columns))
        overrides.setdefault('height', max(1, size.lines))
        return cls(**overrides)
