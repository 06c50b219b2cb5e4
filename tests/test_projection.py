"""Perspective projection to screen cells."""

from __future__ import annotations

import pytest

from ascii_cube_renderer.projection import NEAR_EPSILON, ScreenSample, project
from ascii_cube_renderer.transform import Point3
from ascii_cube_renderer.view import ViewState


def _view(**kw) -> ViewState:
    kw.setdefault("cube_width", 10.0)
    kw.setdefault("distance", 100.0)
    kw.setdefault("k1", 40.0)
    return ViewState(**kw)


def test_projects_with_doubled_horizontal_scale() -> None:
    s = project(Point3(11, 6, 0), _view(), 80, 24)

    assert isinstance(s, ScreenSample)
    assert (s.x, s.y) == (48, 14)  # 40 + 8.8, 12 + 2.4
    assert s.ooz == pytest.approx(0.01)


def test_offsets_shift_the_sample() -> None:
    s = project(Point3(11, 6, 0), _view(horizontal_offset=5.0, vertical_offset=-2.0), 80, 24)
    assert (s.x, s.y) == (53, 12)


def test_truncates_toward_zero() -> None:
    # 2 - 3.5 = -1.5 truncates to -1, not -2.
    s = project(Point3(-1, 0, 0), _view(k1=175.0), 4, 4)
    assert s.x == -1


@pytest.mark.parametrize("z", [-50.0, -1.0, 0.0, NEAR_EPSILON])
def test_points_on_or_behind_camera_are_dropped(z) -> None:
    assert project(Point3(0, 0, z), _view(distance=0.0), 80, 24) is None


def test_just_in_front_of_camera_is_kept() -> None:
    assert project(Point3(0, 0, 0.01), _view(distance=0.0), 80, 24) is not None


def test_inverse_depth_decreases_as_z_grows() -> None:
    view = _view(distance=5.0)
    oozs = [project(Point3(1, 1, z), view, 80, 24).ooz for z in [-4.5, -2, 0, 3, 10, 200]]
    assert all(a > b for a, b in zip(oozs, oozs[1:]))


def test_coordinates_are_not_bounds_checked() -> None:
    s = project(Point3(500, 500, 0), _view(), 10, 10)
    assert s.x >= 10 and s.y >= 10
