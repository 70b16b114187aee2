#
# PROJECT: polyhedron-cli-renderer
# MODULE: polyhedron_cli_renderer/shape.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from dataclasses import dataclass

from .config import RenderConfig
from .edge import Edge, LINE_POINTS, center as edge_center
from .math_utils import Vec3
from .projection import eye_distance, project_point
from .rotation import IDENTITY

DEFAULT_FOV = RenderConfig().fov_radians


class ShapeError(ValueError):
    """Invalid shape input or use of a shape before it was rendered."""


@dataclass(frozen=True)
class Drawable:
    """A projected 2-D polyline and its color tag."""
    points: tuple
    color: str

    def __len__(self):
        return len(self.points)


class Shape:
    """
    Closed polygon built from an ordered vertex ring.

    Consecutive vertices form the edges; the ring closes from the last
    vertex back to the first. Each frame a Shape is rendered once:

      1. tessellate - every edge becomes a dense run of points
      2. transform  - rotate each point, then add offset + world translation
      3. project    - perspective-project onto the display plane

    The centre used for culling and depth ordering is the mean of the edge
    midpoints, not the centroid of the tessellated points.
    """
    __slots__ = ('vertices', 'color', 'offset', 'rotation', 'line_points',
                 'points', 'projection', 'center')

    def __init__(self, vertices, color: str = "white", offset=(0.0, 0.0, 0.0),
                 rotation=None, line_points: int = LINE_POINTS):
        vertices = tuple(Vec3.of(v) for v in vertices)
        if len(vertices) < 2:
            raise ShapeError(
                f"A shape needs at least 2 vertices, got {len(vertices)}")
        if line_points < 1:
            raise ShapeError(f"line_points must be >= 1, got {line_points}")

        self.vertices = vertices
        self.color = color
        self.offset = Vec3.of(offset)
        self.rotation = rotation if rotation is not None else IDENTITY
        self.line_points = line_points
        self.points = ()
        self.projection = None
        self.center = self._mean_of(edge_center(a, b) for a, b in self.sides())

    def __repr__(self):
        return (f"Shape({len(self.vertices)} vertices, color={self.color!r}, "
                f"offset={self.offset!r})")

    @staticmethod
    def _mean_of(centers) -> Vec3:
        cx = cy = cz = 0.0
        n = 0
        for c in centers:
            cx += c.x
            cy += c.y
            cz += c.z
            n += 1
        return Vec3(cx / n, cy / n, cz / n)

    def sides(self):
        """(start, end) vertex pairs, including the closing side."""
        v = self.vertices
        return [(v[i], v[(i + 1) % len(v)]) for i in range(len(v))]

    def depth(self, world) -> float:
        """Near-plane test value: centre z + offset z + world z."""
        return self.center.z + self.offset.z + world.translation_z

    # ── Pipeline stages ─────────────────────────────────────────────────
    def tessellate(self):
        edges = [Edge(a, b, self.line_points) for a, b in self.sides()]
        self.center = self._mean_of(e.center for e in edges)
        self.points = tuple(p for e in edges for p in e.points)
        return self.points

    def transform(self, world):
        rotate = self.rotation.at(world)
        shift = self.offset + Vec3(world.translation_x,
                                   world.translation_y,
                                   world.translation_z)
        self.points = tuple(rotate(p) + shift for p in self.points)
        return self.points

    def project(self, world, fov: float = DEFAULT_FOV):
        eye = (0.0, 0.0, eye_distance(fov))
        # Roll does not take part in the projection
        angles = (world.camera_pitch, world.camera_yaw, 0.0)
        self.projection = tuple(project_point(p, eye, angles) for p in self.points)
        return self.projection

    def render(self, world, fov: float = DEFAULT_FOV) -> 'Shape':
        self.tessellate()
        self.transform(world)
        self.project(world, fov)
        return self

    def drawable(self) -> Drawable:
        if self.projection is None:
            raise ShapeError("Shape has not been rendered yet")
        return Drawable(self.projection, self.color)
