#
# PROJECT: polyhedron-cli-renderer
# MODULE: polyhedron_cli_renderer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import time
import logging

from .config import RenderConfig
from .renderer import Renderer
from .scene import Scene, build_scene
from .world import WorldState, now_ms

logger = logging.getLogger(__name__)

KEY_ESC = 27
KEY_CTRL_D = 4

ANGLE_STEP = 0.05
MOVE_STEP = 0.1


class DemoApp:
    """
    Interactive harness around the geometry pipeline: keyboard input mutates
    the WorldState between frames, then each tick renders the scene and the
    HUD overlay.
    """

    def __init__(self, stdscr, config: RenderConfig = None, scene: Scene = None,
                 world: WorldState = None):
        self.stdscr = stdscr
        self.running = True

        # ── Curses setup ────────────────────────────────────────────────
        curses.curs_set(0)
        stdscr.nodelay(True)

        self.config = config or RenderConfig.detect_terminal()
        self.scene = scene or build_scene('demo', self.config)
        self.world = world or WorldState()

        # ── Renderer + curses color init ────────────────────────────────
        self.renderer = Renderer(self.config)
        self.renderer.init_colors()

        # ── Frame counter ───────────────────────────────────────────────
        self.frame_count = 0
        self.fps = 0
        self.last_fps_time = time.time()
        self.last_drawn = 0

    # ────────────────────────────────────────────────────────────────────
    # Input
    # ────────────────────────────────────────────────────────────────────
    def handle_key(self, key: int):
        """Apply one key press to the world state or app flags."""
        world = self.world

        if key in (KEY_ESC, KEY_CTRL_D, ord('q')):
            self.running = False
        elif key == curses.KEY_UP:
            world.orbit(-ANGLE_STEP, 0.0)
        elif key == curses.KEY_DOWN:
            world.orbit(ANGLE_STEP, 0.0)
        elif key == curses.KEY_LEFT:
            world.orbit(0.0, -ANGLE_STEP)
        elif key == curses.KEY_RIGHT:
            world.orbit(0.0, ANGLE_STEP)
        elif key == ord('w'):
            world.translate(0.0, 0.0, -MOVE_STEP)
        elif key == ord('s'):
            world.translate(0.0, 0.0, MOVE_STEP)
        elif key == ord('a'):
            world.translate(MOVE_STEP, 0.0, 0.0)
        elif key == ord('d'):
            world.translate(-MOVE_STEP, 0.0, 0.0)
        elif key == ord('r'):
            world.translate(0.0, -MOVE_STEP, 0.0)
        elif key == ord('f'):
            world.translate(0.0, MOVE_STEP, 0.0)
        elif key == ord('0'):
            world.reset_camera()
        elif key == ord('b'):
            self.config.use_braille = not self.config.use_braille

    def handle_input(self):
        # Drain everything queued since the last frame
        while True:
            try:
                key = self.stdscr.getch()
            except curses.error:
                key = -1
            if key == -1:
                return
            self.handle_key(key)

    def draw_hud(self, started: float):
        th, tw = self.stdscr.getmaxyx()

        self.frame_count += 1
        now = time.time()
        if now - self.last_fps_time >= 1.0:
            self.fps = self.frame_count
            self.frame_count = 0
            self.last_fps_time = now

        ms = (now - started) * 1000
        w = self.world
        hdr = (f" SHAPES:{self.last_drawn}/{len(self.scene.shapes())}"
               f" | P:{w.camera_pitch:+.2f} Y:{w.camera_yaw:+.2f}"
               f" | T:({w.translation_x:+.1f},{w.translation_y:+.1f},{w.translation_z:+.1f})"
               f" | FPS:{self.fps}"
               f" | {ms:.1f}ms ")
        try:
            self.stdscr.addstr(0, 0, hdr.center(max(tw - 1, 0), '='),
                               curses.color_pair(0) | curses.A_BOLD)
        except curses.error:
            pass

    # ────────────────────────────────────────────────────────────────────
    # Main loop
    # ────────────────────────────────────────────────────────────────────
    def step(self):
        """One tick: refresh timestamp, apply input, render, overlay HUD."""
        started = time.time()
        self.world.tick(now_ms())
        self.handle_input()
        if not self.running:
            return

        frame = self.renderer.render(self.stdscr, self.scene, self.world, self.config)
        self.last_drawn = len(frame) if frame is not None else 0
        self.draw_hud(started)
        self.stdscr.refresh()

        budget = 1.0 / self.config.fps_limit if self.config.fps_limit > 0 else 0.0
        spare = budget - (time.time() - started)
        if spare > 0:
            time.sleep(spare)

    def run(self):
        logger.info(f"Starting render loop with {len(self.scene.shapes())} shapes")
        while self.running:
            self.step()
        logger.info("Render loop stopped")


def main(stdscr, config: RenderConfig = None, scene: Scene = None):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, config, scene)
    app.run()
