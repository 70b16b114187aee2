#
# PROJECT: polyhedron-cli-renderer
# MODULE: polyhedron_cli_renderer/rotation.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .math_utils import Mat3, Vec3
from .quaternion import rotation_from_axis_angle


class MatrixRotation:
    """Fixed rotation applied to every point, independent of time."""
    __slots__ = ('matrix',)

    def __init__(self, matrix: Mat3 = None):
        self.matrix = matrix if matrix is not None else Mat3.identity()

    def __repr__(self):
        return f"MatrixRotation({self.matrix!r})"

    def at(self, world):
        """Per-frame operator: a callable mapping Vec3 -> Vec3."""
        return self.matrix.mul_vec3

    def apply(self, point: Vec3, world) -> Vec3:
        return self.matrix.mul_vec3(point)


class QuaternionRotation:
    """
    Time-animated rotation about a fixed axis.

    The angle is world.timestamp * speed (radians per millisecond), so the
    same timestamp always yields the same pose.
    """
    __slots__ = ('axis', 'speed')

    def __init__(self, axis=(1.0, 1.0, 0.0), speed: float = 0.001):
        axis = Vec3.of(axis)
        if axis.magnitude() == 0.0:
            raise ValueError("Rotation axis must be a non-zero vector")
        self.axis = axis
        self.speed = float(speed)

    def __repr__(self):
        return f"QuaternionRotation(axis={self.axis!r}, speed={self.speed})"

    def angle(self, world) -> float:
        return world.timestamp * self.speed

    def quaternion(self, world):
        return rotation_from_axis_angle(self.axis, self.angle(world))

    def at(self, world):
        # Build the unit quaternion once per frame, reuse it for every point
        return self.quaternion(world).rotate_point

    def apply(self, point: Vec3, world) -> Vec3:
        return self.quaternion(world).rotate_point(point)


IDENTITY = MatrixRotation()
