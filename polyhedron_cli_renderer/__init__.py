#
# PROJECT: polyhedron-cli-renderer
# MODULE: polyhedron_cli_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .math_utils import Vec3, Vec2, Mat3
from .quaternion import Quaternion, rotation_from_axis_angle, rotate_point
from .edge import Edge, interpolate
from .projection import project_point, eye_distance
from .rotation import MatrixRotation, QuaternionRotation
from .shape import Shape, ShapeError, Drawable
from .polyhedron import Polyhedron
from .world import WorldState
from .config import RenderConfig
from .scene import Scene, Frame, render_frame, build_scene, display_bounds

__version__ = "0.1.0"
