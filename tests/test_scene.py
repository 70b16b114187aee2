"""Tests for the scene assembler: near-plane cull, painter's order, bounds."""

import math
import sys
import unittest
from pathlib import Path

# Add parent directory to path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from polyhedron_cli_renderer import solids
from polyhedron_cli_renderer.config import RenderConfig
from polyhedron_cli_renderer.math_utils import Vec3
from polyhedron_cli_renderer.projection import eye_distance, project_point
from polyhedron_cli_renderer.scene import (
    Frame, Scene, build_scene, display_bounds, render_frame)
from polyhedron_cli_renderer.shape import Shape
from polyhedron_cli_renderer.world import WorldState


def flat_triangle(z, color, offset_z=0.0):
    """Triangle lying in the plane at height z, so its centre z is exactly z."""
    return Shape([(-1.0, -1.0, z), (1.0, -1.0, z), (0.0, 1.0, z)],
                 color=color, offset=(0.0, 0.0, offset_z), line_points=4)


class TestCulling(unittest.TestCase):
    """Shapes at or in front of the near plane are dropped."""

    def test_depth_half_is_culled_and_one_and_half_is_kept(self):
        scene = Scene()
        # centre 0.0 + offset 0.25 + world 0.25 = 0.5
        scene.add(flat_triangle(0.0, "culled", offset_z=0.25))
        # centre 1.0 + offset 0.25 + world 0.25 = 1.5
        scene.add(flat_triangle(1.0, "kept", offset_z=0.25))
        world = WorldState(translation_z=0.25)

        frame = scene.render_frame(world, 1.0)
        self.assertEqual([d.color for d in frame], ["kept"])

    def test_near_plane_itself_is_culled(self):
        scene = Scene()
        scene.add(flat_triangle(1.0, "edge"))
        self.assertEqual(len(scene.render_frame(WorldState(), 1.0)), 0)

    def test_near_plane_is_configurable(self):
        scene = Scene()
        scene.add(flat_triangle(1.0, "edge"))
        frame = scene.render_frame(WorldState(), 1.0, RenderConfig(near_plane=0.5))
        self.assertEqual(len(frame), 1)

    def test_world_translation_moves_shapes_behind_camera(self):
        scene = build_scene('cube', RenderConfig(line_points=2))
        self.assertEqual(len(scene.render_frame(WorldState(), 1.0)), 6)
        self.assertEqual(len(scene.render_frame(WorldState(translation_z=-10.0), 1.0)), 0)


class TestOrdering(unittest.TestCase):
    """Painter's algorithm: farthest first, nearest last."""

    def test_larger_center_z_is_emitted_last(self):
        scene = Scene()
        scene.add(flat_triangle(5.0, "z5"))
        scene.add(flat_triangle(2.0, "z2"))
        frame = scene.render_frame(WorldState(), 1.0)
        self.assertEqual([d.color for d in frame], ["z2", "z5"])

    def test_cube_face_order(self):
        scene = Scene()
        scene.add(solids.cube(offset=(0.0, 0.0, 7.0), line_points=2))
        frame = scene.render_frame(WorldState(), 1.0)
        colors = [d.color for d in frame]
        self.assertEqual(len(colors), 6)
        # back face (centre z = -1) first, front face (centre z = +1) last
        self.assertEqual(colors[0], "yellow")
        self.assertEqual(colors[-1], "blue")

    def test_parallel_render_matches_sequential(self):
        world = WorldState(camera_pitch=0.2, camera_yaw=-0.1, timestamp=98765.0)
        seq = build_scene('demo', RenderConfig(line_points=25)).render_frame(
            world, 1.5, RenderConfig(line_points=25, workers=1))
        par = build_scene('demo', RenderConfig(line_points=25)).render_frame(
            world, 1.5, RenderConfig(line_points=25, workers=4))
        self.assertEqual(list(seq), list(par))


class TestFrame(unittest.TestCase):
    """Frame container and display bounds."""

    def test_display_bounds(self):
        self.assertEqual(display_bounds(1.0), ((-1.0, 1.0), (-1.0, 1.0)))
        self.assertEqual(display_bounds(2.0), ((-1.5, 1.5), (-1.0, 1.0)))

    def test_frame_carries_bounds(self):
        scene = Scene()
        scene.add(flat_triangle(3.0, "a"))
        frame = render_frame(scene, WorldState(), 3.0)
        self.assertIsInstance(frame, Frame)
        self.assertEqual(frame.x_bounds, (-2.0, 2.0))
        self.assertEqual(frame[0].color, "a")

    def test_render_does_not_mutate_world(self):
        world = WorldState(camera_pitch=0.3, translation_z=1.0, timestamp=42.0)
        build_scene('demo', RenderConfig(line_points=3)).render_frame(world, 1.0)
        self.assertEqual((world.camera_pitch, world.translation_z, world.timestamp),
                         (0.3, 1.0, 42.0))

    def test_scene_rejects_unknown_objects(self):
        with self.assertRaises(TypeError):
            Scene().add("not a shape")

    def test_build_scene(self):
        self.assertEqual(len(build_scene('demo').shapes()), 7)
        self.assertEqual(len(build_scene('square').shapes()), 1)
        with self.assertRaises(ValueError):
            build_scene('teapot')

    def test_static_scene_ignores_rotation_axis(self):
        still = RenderConfig(rotation_axis=(0.0, 0.0, 0.0))
        self.assertEqual(len(build_scene('square', still).shapes()), 1)
        with self.assertRaises(ValueError):
            build_scene('cube', still)

    def test_clear(self):
        scene = build_scene('cube')
        scene.clear()
        self.assertEqual(scene.shapes(), [])


class TestCubeSilhouette(unittest.TestCase):
    """Regression fixture: an unrotated cube seen head-on."""

    def setUp(self):
        self.config = RenderConfig(fov=90.0, line_points=1)
        self.world = WorldState()

    def test_vertex_projection(self):
        ez = eye_distance(math.pi / 2)
        eye = (0.0, 0.0, ez)
        corners = [Vec3(x, y, z + 7.0)
                   for x in (-1.0, 1.0) for y in (-1.0, 1.0) for z in (-1.0, 1.0)]
        projected = [project_point(c, eye, (0.0, 0.0, 0.0)) for c in corners]
        radii = sorted({round(abs(p.x), 9) for p in projected})
        # Near face (z = 8) and far face (z = 6) squares
        self.assertEqual(radii, [round(ez / 8.0, 9), round(ez / 6.0, 9)])
        for p in projected:
            self.assertAlmostEqual(abs(p.x), abs(p.y), places=12)

    def test_silhouette_is_symmetric_and_stable(self):
        scene = Scene()
        scene.add(solids.cube(offset=(0.0, 0.0, 7.0), line_points=1))
        first = scene.render_frame(self.world, 1.0, self.config)
        second = scene.render_frame(self.world, 1.0, self.config)
        self.assertEqual(list(first), list(second))

        points = {(round(p.x, 9), round(p.y, 9)) for d in first for p in d.points}
        self.assertEqual(len(points), 8)
        for x, y in points:
            self.assertIn((-x, y), points)
            self.assertIn((x, -y), points)
        front = next(d for d in first if d.color == "blue")
        for p in front.points:
            self.assertAlmostEqual(abs(p.x), 0.125, places=9)
            self.assertAlmostEqual(abs(p.y), 0.125, places=9)


if __name__ == "__main__":
    unittest.main()
