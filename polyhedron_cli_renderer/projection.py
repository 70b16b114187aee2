#
# PROJECT: polyhedron-cli-renderer
# MODULE: polyhedron_cli_renderer/projection.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math

from .math_utils import Vec2, Vec3, ORIGIN

# |dz| below this is treated as lying on the focal plane and clamped.
FOCAL_EPSILON = 1e-9


def eye_distance(fov: float) -> float:
    """Distance from the eye to the display plane for a FOV in radians."""
    return 1.0 / math.tan(fov / 2.0)


def to_view_space(a: Vec3, angles, camera_center: Vec3 = ORIGIN):
    """
    Rotate a point relative to the camera by the inverse camera orientation.

    angles is the Tait-Bryan triple (pitch, yaw, roll). Returns (dx, dy, dz).
    """
    tx, ty, tz = angles
    cx, cy, cz = math.cos(tx), math.cos(ty), math.cos(tz)
    sx, sy, sz = math.sin(tx), math.sin(ty), math.sin(tz)

    x = a.x - camera_center.x
    y = a.y - camera_center.y
    z = a.z - camera_center.z

    # Shared sub-expressions of the yaw-pitch-roll composition
    xy = sz * y + cz * x
    yx = cz * y - sz * x
    zxy = cy * z + sy * xy

    dx = cy * xy - sy * z
    dy = sx * zxy + cx * yx
    dz = cx * zxy - sx * yx
    return dx, dy, dz


def clamp_depth(dz: float) -> float:
    """Keep dz away from zero, preserving its sign (0.0 clamps to +eps)."""
    if -FOCAL_EPSILON < dz < FOCAL_EPSILON:
        return -FOCAL_EPSILON if dz < 0 else FOCAL_EPSILON
    return dz


def project_point(a: Vec3, eye, angles, camera_center: Vec3 = ORIGIN) -> Vec2:
    """
    Perspective-project a world point onto the display plane.

    eye is the display surface position (ex, ey, ez) relative to the camera;
    ez is the eye distance. Points on the focal plane are clamped, so the
    result is always finite.
    """
    ex, ey, ez = eye
    dx, dy, dz = to_view_space(a, angles, camera_center)
    f = ez / clamp_depth(dz)
    return Vec2(f * dx + ex, f * dy + ey)
