#
# PROJECT: polyhedron-cli-renderer
# MODULE: polyhedron_cli_renderer/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import argparse
import logging
import sys

from .config import RenderConfig
from .demo import main as demo_main
from .scene import SCENES, build_scene

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def build_parser() -> argparse.ArgumentParser:
    epilog = """\
keys:
  arrows          pitch / yaw the camera
  w s / a d / r f move the world along z / x / y
  0               reset camera and translation
  b               toggle braille / ASCII
  q, Esc, Ctrl-D  quit

examples:
  %(prog)s                                   Spinning pentagram and cube
  %(prog)s --scene dodecahedron --fov 60     Dodecahedron skeleton, wider lens
  %(prog)s --workers 4 --line-points 400     Denser edges on a thread pool
  %(prog)s --log-file render.log --log-level DEBUG
"""
    parser = argparse.ArgumentParser(
        description="Quaternion-rotated wireframe solids in the terminal",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--scene", choices=SCENES, default="demo",
                        help="Scene to show (default: demo)")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable color output")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII characters instead of Braille")
    parser.add_argument("--fov", type=float, default=45.0,
                        help="Field of view in degrees (default: 45)")
    parser.add_argument("--line-points", type=int, default=200,
                        help="Tessellation points per edge (default: 200)")
    parser.add_argument("--near-plane", type=float, default=1.0,
                        help="Cull shapes whose depth is at or below this (default: 1.0)")
    parser.add_argument("--speed", type=float, default=0.001,
                        help="Rotation speed in radians per millisecond (default: 0.001)")
    parser.add_argument("--axis", type=float, nargs=3, default=(1.0, 1.0, 0.0),
                        metavar=("X", "Y", "Z"),
                        help="Rotation axis (default: 1 1 0)")
    parser.add_argument("--workers", type=int, default=1,
                        help="Render shapes on this many threads (default: 1)")
    parser.add_argument("--fps", type=int, default=30,
                        help="Frame rate cap, 0 for none (default: 30)")
    parser.add_argument("--log-file", default=None,
                        help="Write logs to this file (the terminal is busy)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Log level for --log-file (default: INFO)")
    return parser


def config_from_args(args) -> RenderConfig:
    """Terminal detection first, then CLI overrides."""
    config = RenderConfig.detect_terminal()
    if args.no_color:
        config.use_color = False
    if args.ascii:
        config.use_braille = False
    return RenderConfig(
        use_color=config.use_color,
        use_braille=config.use_braille,
        fov=args.fov,
        line_points=args.line_points,
        near_plane=args.near_plane,
        rotation_speed=args.speed,
        rotation_axis=tuple(args.axis),
        workers=args.workers,
        fps_limit=args.fps,
    )


def setup_logging(log_file=None, level="INFO"):
    """File logging when requested; otherwise silence, since curses owns stderr."""
    if log_file:
        handlers = [logging.FileHandler(log_file)]
    else:
        handlers = [logging.NullHandler()]
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT,
                        handlers=handlers, force=True)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_file, args.log_level)

    try:
        config = config_from_args(args)
        scene = build_scene(args.scene, config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        curses.wrapper(lambda s: demo_main(s, config, scene))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.exception("Render loop failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
