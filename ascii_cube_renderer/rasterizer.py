#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import numpy as np

from .color import FaceColor
from .projection import project_arrays
from .transform import Rotation, f32

FACE_CHAR = '#'

# Each face maps grid coordinates (u, v) and the half-extent w to a point
# with one axis pinned to +/-w. Together they sample a hollow shell.
FACES = (
    (lambda u, v, w: (u, v, -w), FaceColor.RED),
    (lambda u, v, w: (w, v, u), FaceColor.GREEN),
    (lambda u, v, w: (-w, v, -u), FaceColor.YELLOW),
    (lambda u, v, w: (-u, v, w), FaceColor.BLUE),
    (lambda u, v, w: (u, -w, -v), FaceColor.MAGENTA),
    (lambda u, v, w: (u, w, v), FaceColor.CYAN),
)


def sample_grid(cube_width, step):
    """
    Grid coordinates from -cube_width up to (not including) cube_width.
    Built by repeated single-precision addition, the way an accumulating
    float loop counter walks the face.
    """
    w = f32(cube_width)
    inc = f32(step)
    coords = []
    u = -w
    while u < w:
        coords.append(float(u))
        u = u + inc
    return coords


def face_samples(cube_width, step):
    """
    All samples of the six faces in drawing order, as arrays.

    Returns (x, y, z, face) where x, y, z are integer coordinates,
    truncated toward zero, and face indexes FACES. Within a face the
    first grid coordinate is the outer loop.
    """
    grid = np.asarray(sample_grid(cube_width, step), dtype=f32)
    u, v = np.meshgrid(grid, grid, indexing='ij')
    u, v = u.ravel(), v.ravel()
    w = f32(cube_width)

    xs, ys, zs, faces = [], [], [], []
    for n, (face, _color) in enumerate(FACES):
        x, y, z = np.broadcast_arrays(*face(u, v, w))
        xs.append(x.astype(np.int64))
        ys.append(y.astype(np.int64))
        zs.append(z.astype(np.int64))
        faces.append(np.full(u.size, n, dtype=np.int64))

    return (np.concatenate(xs), np.concatenate(ys), np.concatenate(zs),
            np.concatenate(faces))


def iter_face_samples(cube_width, step):
    """Yield (x, y, z, char, color) for every sample of all six faces."""
    xs, ys, zs, faces = face_samples(cube_width, step)
    for x, y, z, n in zip(xs.tolist(), ys.tolist(), zs.tolist(), faces.tolist()):
        yield x, y, z, FACE_CHAR, FACES[n][1]


def rasterize(renderer):
    """
    Draw the cube into the renderer's frame buffers.

    Samples are rotated and projected as arrays, then written one by one,
    in drawing order, through the depth test. Samples behind the camera
    or off the buffer are skipped. Only the buffers are mutated.
    """
    buffers = renderer.buffers
    view = renderer.view
    rotation = Rotation.from_angles(renderer.angles)

    xs, ys, zs, faces = face_samples(view.cube_width, renderer.step)
    px, py, pz = rotation.apply_arrays(xs.astype(np.float64),
                                       ys.astype(np.float64),
                                       zs.astype(np.float64))
    keep, sx, sy, ooz = project_arrays(px, py, pz, view,
                                       renderer.width, renderer.height)

    colors = [color for _face, color in FACES]
    plot = buffers.plot
    indices = buffers.index(sx, sy)
    for idx, depth, n in zip(indices.tolist(), ooz.tolist(), faces[keep].tolist()):
        plot(idx, depth, FACE_CHAR, colors[n])
