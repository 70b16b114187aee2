#
# PROJECT: polyhedron-cli-renderer
# MODULE: polyhedron_cli_renderer/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import time
import logging
from concurrent.futures import ThreadPoolExecutor

from .config import RenderConfig
from .polyhedron import Polyhedron, render_shapes
from .rotation import QuaternionRotation
from .shape import Shape
from . import solids

logger = logging.getLogger(__name__)


def display_bounds(aspect_ratio: float):
    """
    Visible ((x_left, x_right), (y_bottom, y_top)) for a display aspect ratio.

    y always spans [-1, 1]; x is widened symmetrically for wide displays.
    """
    pad = (aspect_ratio - 1.0) / 2.0
    return (-1.0 - pad, 1.0 + pad), (-1.0, 1.0)


class Frame:
    """Ordered drawables of one frame (back to front) plus display bounds."""
    __slots__ = ('drawables', 'x_bounds', 'y_bounds')

    def __init__(self, drawables, x_bounds, y_bounds):
        self.drawables = list(drawables)
        self.x_bounds = x_bounds
        self.y_bounds = y_bounds

    def __repr__(self):
        return f"Frame({len(self.drawables)} drawables, x={self.x_bounds}, y={self.y_bounds})"

    def __iter__(self):
        return iter(self.drawables)

    def __len__(self):
        return len(self.drawables)

    def __getitem__(self, index):
        return self.drawables[index]


class Scene:
    """
    Container for the shapes of a frame.

    Entries are Shapes or Polyhedra; polyhedra are flattened into their
    faces so each face is culled and depth-ordered on its own.
    """

    def __init__(self):
        self.objects = []

    def add(self, item):
        """Add a Shape or a Polyhedron."""
        if not isinstance(item, (Shape, Polyhedron)):
            raise TypeError(f"Scene accepts Shape or Polyhedron, got {type(item).__name__}")
        self.objects.append(item)
        return item

    def clear(self):
        """Remove all objects from the scene."""
        self.objects.clear()

    def shapes(self):
        flat = []
        for obj in self.objects:
            if isinstance(obj, Polyhedron):
                flat.extend(obj)
            else:
                flat.append(obj)
        return flat

    def render_frame(self, world, aspect_ratio: float, config: RenderConfig = None) -> Frame:
        """
        Build the drawable list for one frame.

        Pipeline:
          1. Flatten objects into shapes
          2. Cull shapes whose centre depth is at or in front of the near plane
          3. Render survivors (tessellate -> transform -> project)
          4. Painter's order: sort by centre z descending, emit reversed
        """
        config = config or RenderConfig()
        # The pipeline reads a frozen snapshot, never the live state
        world = world.copy()
        fov = config.fov_radians
        start = time.perf_counter()

        shapes = self.shapes()
        visible = [s for s in shapes if s.depth(world) > config.near_plane]

        if config.workers > 1 and len(visible) > 1:
            with ThreadPoolExecutor(max_workers=config.workers) as pool:
                render_shapes(visible, world, fov, pool)
        else:
            render_shapes(visible, world, fov)

        ordered = sorted(visible, key=lambda s: s.center.z, reverse=True)
        drawables = [s.drawable() for s in reversed(ordered)]

        x_bounds, y_bounds = display_bounds(aspect_ratio)
        logger.debug(
            f"Frame: {len(shapes)} shapes, {len(shapes) - len(visible)} culled, "
            f"{len(drawables)} drawn in {(time.perf_counter() - start) * 1000:.1f}ms")
        return Frame(drawables, x_bounds, y_bounds)


def render_frame(scene: Scene, world, aspect_ratio: float,
                 config: RenderConfig = None) -> Frame:
    return scene.render_frame(world, aspect_ratio, config)


SCENES = ('demo', 'cube', 'pentagram', 'square', 'dodecahedron')


def build_scene(name: str = 'demo', config: RenderConfig = None) -> Scene:
    """
    Build one of the named scenes.

    'demo' is a spinning pentagram in front of a cube, both at z = 7.
    """
    config = config or RenderConfig()
    n = config.line_points

    def spin():
        return QuaternionRotation(config.rotation_axis, config.rotation_speed)

    scene = Scene()
    if name == 'demo':
        rotation = spin()
        scene.add(solids.pentagram(offset=(0.0, 0.0, 7.0), rotation=rotation, line_points=n))
        scene.add(solids.cube(offset=(0.0, 0.0, 7.0), rotation=rotation, line_points=n))
    elif name == 'cube':
        scene.add(solids.cube(offset=(0.0, 0.0, 7.0), rotation=spin(), line_points=n))
    elif name == 'pentagram':
        scene.add(solids.pentagram(offset=(0.0, 0.0, 7.0), rotation=spin(), line_points=n))
    elif name == 'square':
        # Static: the rotation axis is never consulted
        scene.add(solids.square(color="white", offset=(1.0, 1.0, 7.0), line_points=n))
    elif name == 'dodecahedron':
        scene.add(solids.dodecahedron_skeleton(offset=(0.0, 0.0, 10.0), rotation=spin(),
                                               line_points=n))
    else:
        raise ValueError(f"Unknown scene '{name}', expected one of {', '.join(SCENES)}")

    logger.info(f"Built scene '{name}' with {len(scene.shapes())} shapes")
    return scene
