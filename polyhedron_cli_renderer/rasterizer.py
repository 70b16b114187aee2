#
# PROJECT: polyhedron-cli-renderer
# MODULE: polyhedron_cli_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .canvas import Canvas


def to_pixel(point, x_bounds, y_bounds, w, h):
    """Map a display-plane point to canvas pixel coordinates (y grows down)."""
    x_left, x_right = x_bounds
    y_bottom, y_top = y_bounds
    px = (point[0] - x_left) / (x_right - x_left) * (w - 1)
    py = (y_top - point[1]) / (y_top - y_bottom) * (h - 1)
    return px, py


def draw_line_dda(canvas: Canvas, p1, p2, color=None):
    """
    Draws a line using the DDA algorithm.

    Segments longer than the canvas perimeter come from points close to the
    focal plane; only their endpoints are plotted.
    """
    x1, y1 = int(p1[0]), int(p1[1])
    x2, y2 = int(p2[0]), int(p2[1])

    dx = x2 - x1
    dy = y2 - y1
    if dx == 0 and dy == 0:
        canvas.set_pixel(x1, y1, color)
        return

    step = abs(dx) if abs(dx) > abs(dy) else abs(dy)
    if step > 2 * (canvas.w + canvas.h):
        canvas.set_pixel(x1, y1, color)
        canvas.set_pixel(x2, y2, color)
        return

    x_inc = dx / step
    y_inc = dy / step
    cx, cy = float(x1), float(y1)
    for _ in range(int(step) + 1):
        canvas.set_pixel(int(round(cx)), int(round(cy)), color)
        cx += x_inc; cy += y_inc


def draw_polyline(canvas: Canvas, points, x_bounds, y_bounds, color=None, closed=False):
    """
    Plot a projected point run, joining consecutive points with lines.

    closed: also join the last point back to the first, as for a polygon
    whose tessellation stops short of its starting vertex.
    """
    w, h = canvas.w, canvas.h
    first = prev = None
    for p in points:
        cur = to_pixel(p, x_bounds, y_bounds, w, h)
        if prev is None:
            first = cur
        else:
            draw_line_dda(canvas, prev, cur, color)
        prev = cur
    if prev is None:
        return
    if closed:
        draw_line_dda(canvas, prev, first, color)
    else:
        canvas.set_pixel(int(prev[0]), int(prev[1]), color)
