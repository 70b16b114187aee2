#
# PROJECT: polyhedron-cli-renderer
# MODULE: polyhedron_cli_renderer/quaternion.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math

from .math_utils import Vec3


class Quaternion:
    """
    Immutable quaternion q = a + b*i + c*j + d*k (scalar first).

    Used only as a rotation operator: a 3-vector is embedded as the pure
    quaternion (0, x, y, z) and rotated by conjugation u * v * u^-1.
    """
    __slots__ = ('a', 'b', 'c', 'd')

    def __init__(self, a: float, b: float, c: float, d: float):
        object.__setattr__(self, 'a', float(a))
        object.__setattr__(self, 'b', float(b))
        object.__setattr__(self, 'c', float(c))
        object.__setattr__(self, 'd', float(d))

    def __setattr__(self, name, value):
        raise AttributeError("Quaternion is immutable")

    def __repr__(self):
        return f"Quaternion({self.a:.4f}, {self.b:.4f}, {self.c:.4f}, {self.d:.4f})"

    def __iter__(self):
        yield self.a
        yield self.b
        yield self.c
        yield self.d

    def __eq__(self, other):
        if isinstance(other, Quaternion):
            return tuple(self) == tuple(other)
        return NotImplemented

    def __hash__(self):
        return hash(tuple(self))

    # ── Construction ────────────────────────────────────────────────────
    @classmethod
    def from_vector(cls, v) -> 'Quaternion':
        """Embed a 3-vector as a pure quaternion (scalar = 0)."""
        x, y, z = v
        return cls(0.0, x, y, z)

    @classmethod
    def identity(cls) -> 'Quaternion':
        return cls(1.0, 0.0, 0.0, 0.0)

    @property
    def vector(self) -> Vec3:
        """Imaginary part as a Vec3."""
        return Vec3(self.b, self.c, self.d)

    # ── Algebra ─────────────────────────────────────────────────────────
    def __add__(self, other):
        if isinstance(other, Quaternion):
            return quaternion_sum(self, other)
        if isinstance(other, (int, float)):
            return Quaternion(self.a + other, self.b, self.c, self.d)
        return NotImplemented

    __radd__ = __add__

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            return product(self, other)
        if isinstance(other, (int, float)):
            return scale(self, other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return scale(self, other)
        return NotImplemented

    def conjugate(self) -> 'Quaternion':
        return Quaternion(self.a, -self.b, -self.c, -self.d)

    def norm(self) -> float:
        return math.sqrt(self.a * self.a + self.b * self.b
                         + self.c * self.c + self.d * self.d)

    def unit(self) -> 'Quaternion':
        # Zero quaternion is a caller error; float division raises here.
        return self * (1.0 / self.norm())

    def inverse(self) -> 'Quaternion':
        n = self.norm()
        return self.conjugate() * (1.0 / (n * n))

    def rotate_point(self, point) -> Vec3:
        """Rotate a 3-vector by this quaternion (unitized first)."""
        u = self.unit()
        lv = u * Quaternion.from_vector(point) * u.inverse()
        return lv.vector


def quaternion_sum(q: Quaternion, p: Quaternion) -> Quaternion:
    return Quaternion(q.a + p.a, q.b + p.b, q.c + p.c, q.d + p.d)


def product(q: Quaternion, p: Quaternion) -> Quaternion:
    """Hamilton product q * p (not commutative)."""
    return Quaternion(
        q.a * p.a - q.b * p.b - q.c * p.c - q.d * p.d,
        q.a * p.b + q.b * p.a + q.c * p.d - q.d * p.c,
        q.a * p.c - q.b * p.d + q.c * p.a + q.d * p.b,
        q.a * p.d + q.b * p.c - q.c * p.b + q.d * p.a,
    )


def scale(q: Quaternion, alpha: float) -> Quaternion:
    return Quaternion(q.a * alpha, q.b * alpha, q.c * alpha, q.d * alpha)


def conjugate(q: Quaternion) -> Quaternion:
    return q.conjugate()


def norm(q: Quaternion) -> float:
    return q.norm()


def unit(q: Quaternion) -> Quaternion:
    return q.unit()


def inverse(q: Quaternion) -> Quaternion:
    return q.inverse()


def rotation_from_axis_angle(axis, theta: float) -> Quaternion:
    """
    Unit quaternion for a rotation of theta radians about axis.

    unit(axis) * sin(theta/2) + cos(theta/2)
    """
    q = Quaternion.from_vector(axis)
    if q.norm() == 0.0:
        raise ValueError("Rotation axis must be a non-zero vector")
    return q.unit() * math.sin(theta / 2.0) + math.cos(theta / 2.0)


def rotate_point(rotation: Quaternion, point) -> Vec3:
    return rotation.rotate_point(point)
