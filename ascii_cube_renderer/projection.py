#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/projection.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from typing import NamedTuple, Optional

import numpy as np

from .transform import Point3, f32
from .view import ViewState

# Points at or behind this camera-space depth are dropped.
NEAR_EPSILON = float(f32(0.001))

_EPS = f32(NEAR_EPSILON)
_ONE = f32(1.0)
_TWO = f32(2.0)


class ScreenSample(NamedTuple):
    x: int
    y: int
    ooz: float


def _screen_origin(view: ViewState, width: int, height: int):
    return (f32(width) / _TWO + f32(view.horizontal_offset),
            f32(height) / _TWO + f32(view.vertical_offset))


def project(point: Point3, view: ViewState, width: int,
            height: int) -> Optional[ScreenSample]:
    """
    Perspective-project a rotated point to a screen cell.

    Returns None when the point is on or behind the camera plane. The
    horizontal term is doubled because terminal cells are about twice as
    tall as they are wide. All arithmetic is single precision; coordinates
    are truncated toward zero and are not bounds-checked.
    """
    z = f32(point.z) + f32(view.distance)
    if z <= _EPS:
        return None

    ooz = _ONE / z
    k1 = f32(view.k1)
    cx, cy = _screen_origin(view, width, height)
    x = int(cx + k1 * ooz * f32(point.x) * _TWO)
    y = int(cy + k1 * ooz * f32(point.y))
    return ScreenSample(x, y, float(ooz))


def project_arrays(px, py, pz, view: ViewState, width: int, height: int):
    """
    project() over float32 arrays of rotated points.

    Returns (keep, x, y, ooz): a mask of points in front of the camera and
    the integer coordinates and inverse depths of those points only.
    """
    z = pz + f32(view.distance)
    keep = z > _EPS
    z = z[keep]

    ooz = _ONE / z
    k1 = f32(view.k1)
    cx, cy = _screen_origin(view, width, height)
    x = (cx + k1 * ooz * px[keep] * _TWO).astype(np.int64)
    y = (cy + k1 * ooz * py[keep]).astype(np.int64)
    return keep, x, y, ooz
