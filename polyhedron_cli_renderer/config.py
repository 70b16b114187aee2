#
# PROJECT: polyhedron-cli-renderer
# MODULE: polyhedron_cli_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import os
import math
from dataclasses import dataclass

from .edge import LINE_POINTS


@dataclass
class RenderConfig:
    """Configuration for the geometry pipeline and terminal output."""
    use_color: bool = True
    use_braille: bool = True
    fov: float = 45.0                    # Degrees
    line_points: int = LINE_POINTS       # Tessellation points per edge
    near_plane: float = 1.0              # Shapes with depth <= this are culled
    character_ratio: float = 1.8         # Terminal cell height / width
    rotation_speed: float = 0.001        # Radians per millisecond
    rotation_axis: tuple = (1.0, 1.0, 0.0)
    workers: int = 1                     # >1 renders shapes on a thread pool
    fps_limit: int = 30

    def __post_init__(self):
        if self.line_points < 1:
            raise ValueError(f"line_points must be >= 1, got {self.line_points}")
        if not 0.0 < self.fov < 180.0:
            raise ValueError(f"fov must be in (0, 180) degrees, got {self.fov}")
        if self.workers < 1:
            self.workers = 1

    @property
    def fov_radians(self) -> float:
        return math.radians(self.fov)

    @classmethod
    def detect_terminal(cls) -> 'RenderConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks TERM and LANG environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        is_dumb = term in ('dumb', 'unknown')
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        return cls(
            use_color=not is_dumb,
            # Linux console font often lacks braille, so default off there
            use_braille=supports_utf8 and not is_linux_console,
        )
