#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .config import RenderConfig
from .transform import Point3, Rotation, rotate
from .view import Angles, ViewState
from .projection import ScreenSample, project
from .color import FaceColor
from .framebuffer import FrameBuffers, BufferAllocationError
from .rasterizer import rasterize
from .serializer import serialize
from .renderer import Renderer
from .app import CubeApp
