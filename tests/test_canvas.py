"""Tests for the dot canvas, line rasterizer and color tag resolution."""

import sys
import unittest
from pathlib import Path

# Add parent directory to path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from polyhedron_cli_renderer import color, solids
from polyhedron_cli_renderer.canvas import Canvas, render_cell_ascii, render_cell_braille
from polyhedron_cli_renderer.math_utils import Vec2
from polyhedron_cli_renderer.rasterizer import draw_line_dda, draw_polyline, to_pixel
from polyhedron_cli_renderer.renderer import Renderer
from polyhedron_cli_renderer.scene import Frame, Scene
from polyhedron_cli_renderer.shape import Drawable
from polyhedron_cli_renderer.world import WorldState


class TestCanvas(unittest.TestCase):
    """2x4 cell masks and their characters."""

    def test_braille_dots(self):
        c = Canvas(4, 8)
        c.set_pixel(0, 0, "red")
        self.assertEqual(render_cell_braille(c.grid[0][0]), chr(0x2801))
        c.set_pixel(1, 0, "red")
        self.assertEqual(render_cell_braille(c.grid[0][0]), chr(0x2809))
        c.set_pixel(0, 3, "red")
        self.assertEqual(render_cell_braille(c.grid[0][0]), chr(0x2849))

    def test_out_of_bounds_is_ignored(self):
        c = Canvas(4, 8)
        c.set_pixel(-1, 0)
        c.set_pixel(4, 0)
        c.set_pixel(0, 8)
        self.assertEqual(list(c.cells()), [])

    def test_later_color_wins(self):
        c = Canvas(4, 8)
        c.set_pixel(0, 0, "far")
        c.set_pixel(1, 1, "near")
        self.assertEqual(list(c.cells()), [(0, 0, c.grid[0][0], "near")])

    def test_ascii_density(self):
        self.assertEqual(render_cell_ascii(0), ' ')
        self.assertEqual(render_cell_ascii(0b1), '.')
        self.assertEqual(render_cell_ascii(0xFF), '%')
        self.assertEqual(render_cell_braille(0), ' ')


class TestRasterizer(unittest.TestCase):
    """Display-plane to pixel mapping and line drawing."""

    def test_to_pixel_corners(self):
        bounds = ((-1.0, 1.0), (-1.0, 1.0))
        self.assertEqual(to_pixel((-1.0, 1.0), *bounds, 11, 21), (0.0, 0.0))
        self.assertEqual(to_pixel((1.0, -1.0), *bounds, 11, 21), (10.0, 20.0))
        self.assertEqual(to_pixel((0.0, 0.0), *bounds, 11, 21), (5.0, 10.0))

    def test_horizontal_line(self):
        c = Canvas(8, 4)
        draw_line_dda(c, (0, 1), (3, 1), "c")
        # Pixels (0..3, 1): two cells, both columns, row 1 of each
        self.assertEqual(c.grid[0][0], (1 << 1) | (1 << 5))
        self.assertEqual(c.grid[0][1], (1 << 1) | (1 << 5))
        self.assertEqual(c.grid[0][2], 0)

    def test_far_off_segment_plots_only_endpoints(self):
        c = Canvas(8, 8)
        draw_line_dda(c, (1, 1), (1e9, 1), "c")
        self.assertEqual(len(list(c.cells())), 1)

    def test_polyline(self):
        c = Canvas(20, 20)
        pts = [Vec2(-1.0, 0.0), Vec2(1.0, 0.0)]
        draw_polyline(c, pts, (-1.0, 1.0), (-1.0, 1.0), "white")
        lit = [cell for cell in c.cells()]
        self.assertEqual(len(lit), 10)
        self.assertTrue(all(cell[3] == "white" for cell in lit))

    def test_closed_polyline_joins_last_point_to_first(self):
        ring = [Vec2(-0.5, 0.5), Vec2(0.5, 0.5), Vec2(0.5, -0.5), Vec2(-0.5, -0.5)]
        bounds = ((-1.0, 1.0), (-1.0, 1.0))
        # Corners land on pixels 10 and 30; the left side is cell column 5
        open_run = Canvas(41, 41)
        draw_polyline(open_run, ring, *bounds, "c")
        self.assertEqual([open_run.grid[r][5] for r in range(3, 7)], [0, 0, 0, 0])

        closed = Canvas(41, 41)
        draw_polyline(closed, ring, *bounds, "c", closed=True)
        self.assertTrue(all(closed.grid[r][5] for r in range(3, 7)))

    def test_sparse_square_has_all_four_sides(self):
        for n in (1, 2):
            scene = Scene()
            scene.add(solids.square(offset=(0.0, 0.0, 7.0), line_points=n))
            canv = Renderer.rasterize(scene.render_frame(WorldState(), 1.0), 80, 80)
            lit = {(row, col) for row, col, _, _ in canv.cells()}
            top = min(r for r, _ in lit)
            bottom = max(r for r, _ in lit)
            left = min(c for _, c in lit)
            right = max(c for _, c in lit)
            self.assertGreater(bottom - top, 2)
            self.assertGreater(right - left, 2)
            for r in range(top, bottom + 1):
                self.assertIn((r, left), lit, f"left side gap, n={n}")
                self.assertIn((r, right), lit, f"right side gap, n={n}")
            for c in range(left, right + 1):
                self.assertIn((top, c), lit, f"top side gap, n={n}")
                self.assertIn((bottom, c), lit, f"bottom side gap, n={n}")

    def test_renderer_rasterize_draws_in_frame_order(self):
        frame = Frame([Drawable((Vec2(0.0, 0.0),), "far"),
                       Drawable((Vec2(0.0, 0.0),), "near")],
                      (-1.0, 1.0), (-1.0, 1.0))
        canv = Renderer.rasterize(frame, 21, 21)
        colors = {cell[3] for cell in canv.cells()}
        self.assertEqual(colors, {"near"})

    def test_aspect_ratio(self):
        self.assertAlmostEqual(Renderer.aspect_ratio(180, 50, 1.8), 2.0)


class TestColor(unittest.TestCase):
    """Color tags to terminal colors."""

    def test_named(self):
        self.assertEqual(color.resolve_color("red"), 1)
        self.assertEqual(color.resolve_color("Gray"), 7)
        self.assertEqual(color.resolve_color("light_yellow"), 3)

    def test_unknown_falls_back_with_warning(self):
        with self.assertLogs("polyhedron_cli_renderer.color", level="WARNING"):
            self.assertEqual(color.resolve_color("chartreuse-ish"), 7)


if __name__ == "__main__":
    unittest.main()
