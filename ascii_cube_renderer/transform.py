#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/transform.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

import numpy as np

f32 = np.float32


def to_f32(value) -> float:
    """Round a number to single precision, returned as a Python float."""
    return float(f32(value))


class Point3:
    """Model- or camera-space point. Transient, one per face sample."""
    __slots__ = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __repr__(self):
        return f"Point3({self.x:.2f}, {self.y:.2f}, {self.z:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other):
        if isinstance(other, Point3):
            return (self.x, self.y, self.z) == (other.x, other.y, other.z)
        return NotImplemented


class Rotation:
    """
    Sines and cosines of the three Euler angles, computed once.

    apply() evaluates the closed-form composition Rz(C)*Ry(B)*Rx(A)
    term by term; no matrix is stored. Angles are taken as single
    precision, the trig and the products run in double precision and each
    rotated component is rounded back to single precision.
    """
    __slots__ = ('sa', 'ca', 'sb', 'cb', 'sc', 'cc')

    def __init__(self, a: float, b: float, c: float):
        a, b, c = to_f32(a), to_f32(b), to_f32(c)
        self.sa, self.ca = math.sin(a), math.cos(a)
        self.sb, self.cb = math.sin(b), math.cos(b)
        self.sc, self.cc = math.sin(c), math.cos(c)

    @classmethod
    def from_angles(cls, angles) -> 'Rotation':
        return cls(angles.a, angles.b, angles.c)

    def _components(self, i, j, k):
        sa, ca = self.sa, self.ca
        sb, cb = self.sb, self.cb
        sc, cc = self.sc, self.cc

        x = (j * sa * sb * cc - k * ca * sb * cc +
             j * ca * sc + k * sa * sc + i * cb * cc)
        y = (j * ca * cc + k * sa * cc -
             j * sa * sb * sc + k * ca * sb * sc -
             i * cb * sc)
        z = k * ca * cb - j * sa * cb + i * sb
        return x, y, z

    def apply(self, i: float, j: float, k: float) -> Point3:
        x, y, z = self._components(i, j, k)
        return Point3(to_f32(x), to_f32(y), to_f32(z))

    def apply_arrays(self, i, j, k):
        """
        Vectorised apply() over float64 coordinate arrays.
        Returns float32 arrays, element-for-element equal to apply().
        """
        x, y, z = self._components(i, j, k)
        return x.astype(f32), y.astype(f32), z.astype(f32)


def rotate(angles, point) -> Point3:
    """Rotate a point by the angles' (A, B, C) Euler triple."""
    x, y, z = point
    return Rotation.from_angles(angles).apply(x, y, z)
