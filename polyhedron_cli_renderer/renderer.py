#
# PROJECT: polyhedron-cli-renderer
# MODULE: polyhedron_cli_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses

from .config import RenderConfig
from .canvas import Canvas, render_cell_ascii, render_cell_braille
from .color import ColorPairs
from .rasterizer import draw_polyline
from .scene import Frame, Scene


class Renderer:
    """
    Terminal front end for the geometry pipeline.

    render(stdscr, scene, world, config) asks the scene for the frame's
    drawables and plots them onto a braille canvas sized to the terminal.
    """

    def __init__(self, config: RenderConfig = None):
        self.colors = ColorPairs(config.use_color if config else True)

    def init_colors(self):
        """Initialize curses color pairs.  Call once after curses.wrapper init."""
        self.colors.init()

    @staticmethod
    def aspect_ratio(cols: int, rows: int, character_ratio: float) -> float:
        """Display aspect ratio corrected for non-square terminal cells."""
        return cols / rows / character_ratio

    @staticmethod
    def rasterize(frame: Frame, w: int, h: int) -> Canvas:
        """Plot a frame's drawables in order onto a w x h dot canvas."""
        canv = Canvas(w, h)
        for d in frame:
            draw_polyline(canv, d.points, frame.x_bounds, frame.y_bounds, d.color,
                          closed=True)
        return canv

    def render(self, stdscr, scene: Scene, world, config: RenderConfig) -> Frame:
        """
        Render one frame and output to curses screen.

        Row 0 is left for the HUD. Does NOT call stdscr.refresh(); the caller
        does that after drawing the HUD.
        """
        th, tw = stdscr.getmaxyx()
        cols, rows = tw - 1, th - 2
        if cols <= 0 or rows <= 0:
            return None

        frame = scene.render_frame(
            world, self.aspect_ratio(cols, rows, config.character_ratio), config)

        # Braille cells hold 2x4 dots; ASCII cells show dot density
        canv = self.rasterize(frame, cols * 2, rows * 4)
        draw_cell = render_cell_braille if config.use_braille else render_cell_ascii

        stdscr.erase()
        for y, x, mask, color in canv.cells():
            if y >= rows or x >= cols:
                continue
            try:
                stdscr.addstr(y + 1, x, draw_cell(mask), self.colors.pair_for(color))
            except curses.error:
                # Writing the bottom-right cell raises after the write succeeds
                pass
        return frame
