#
# PROJECT: polyhedron-cli-renderer
# MODULE: polyhedron_cli_renderer/edge.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .math_utils import Vec3, midpoint

# Points per edge. Braille cells are 2x4 dots, so a few hundred points keep
# a full-screen edge continuous.
LINE_POINTS = 200


def interpolate(start: Vec3, end: Vec3, n: int = LINE_POINTS):
    """
    Discretize the segment start -> end into n evenly spaced points.

    Point k is start + k * (end - start) / n for k in [0, n): the first point
    is start, end itself is left out (the next edge of a ring starts there).
    """
    if n < 1:
        raise ValueError(f"Edge resolution must be >= 1, got {n}")
    dx = (end.x - start.x) / n
    dy = (end.y - start.y) / n
    dz = (end.z - start.z) / n
    sx, sy, sz = start.x, start.y, start.z
    return tuple(Vec3(sx + dx * k, sy + dy * k, sz + dz * k) for k in range(n))


def center(start: Vec3, end: Vec3) -> Vec3:
    return midpoint(start, end)


class Edge:
    """One side of a polygon: its endpoints, dense point run and midpoint."""
    __slots__ = ('start', 'end', 'points', 'center')

    def __init__(self, start, end, n: int = LINE_POINTS):
        self.start = Vec3.of(start)
        self.end = Vec3.of(end)
        self.points = interpolate(self.start, self.end, n)
        self.center = center(self.start, self.end)

    def __repr__(self):
        return f"Edge({self.start!r} -> {self.end!r}, n={len(self.points)})"
