"""Frame buffers to terminal bytes."""

from __future__ import annotations

from ascii_cube_renderer.color import FaceColor
from ascii_cube_renderer.config import RenderConfig
from ascii_cube_renderer.renderer import Renderer
from ascii_cube_renderer.serializer import serialize, status_line

HOME = "\x1b[H"
RESET = "\x1b[0m"


def _renderer(**kw) -> Renderer:
    return Renderer(RenderConfig(**kw))


def test_background_only_frame_is_exact() -> None:
    r = _renderer(width=5, height=3)
    r.clear()

    blob = serialize(r)

    assert isinstance(blob, bytes)
    assert blob.decode("utf-8") == (
        HOME
        + "     \n     \n     "
        + RESET + HOME
        + "\x1b[97mH=10.0:V=0.0:W=10.0" + RESET
    )


def test_background_only_frame_shape() -> None:
    width, height = 17, 9
    r = _renderer(width=width, height=height, background=".")
    r.clear()

    text = serialize(r).decode("utf-8")
    grid = text[len(HOME):text.index(RESET)]

    assert grid.count("\n") == height - 1
    assert grid.count(".") == width * height
    assert "\x1b" not in grid
    assert grid.split("\n") == ["." * width] * height


def test_colored_pixels_are_wrapped_in_escapes() -> None:
    r = _renderer(width=3, height=1)
    r.clear()
    r.buffers.plot(1, 0.5, "#", FaceColor.RED)

    text = serialize(r).decode("utf-8")

    assert text.startswith(HOME + " \x1b[91m#" + RESET + " " + RESET + HOME)


def test_status_line_tracks_view() -> None:
    r = _renderer(width=2, height=2)
    r.view.pan(-15.0, -3.0)
    r.view.resize(2.5)

    assert status_line(r.view) == "H=-5.0:V=-3.0:W=12.5"
    assert serialize(r).endswith(b"\x1b[97mH=-5.0:V=-3.0:W=12.5\x1b[0m")


def test_rendered_frame_has_one_escape_pair_per_lit_pixel() -> None:
    r = _renderer(width=60, height=24, cube_width=8.0, distance=40.0, k1=20.0,
                  horizontal_offset=0.0)
    text = r.render_frame().decode("utf-8")

    lit = sum(1 for d in r.buffers.depth if d > 0)
    assert lit > 0
    grid = text[len(HOME):text.rindex(RESET + HOME)]
    assert grid.count("#") == lit
    assert grid.count(RESET) == lit
    assert grid.count("\n") == 23
