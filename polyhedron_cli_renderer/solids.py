#
# PROJECT: polyhedron-cli-renderer
# MODULE: polyhedron_cli_renderer/solids.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math

from .edge import LINE_POINTS
from .math_utils import Vec3
from .polyhedron import Polyhedron
from .shape import Shape

# Corner naming: (front|back)(top|bottom)(left|right)
FTR = ( 1.0,  1.0,  1.0)
FTL = (-1.0,  1.0,  1.0)
FBR = ( 1.0, -1.0,  1.0)
FBL = (-1.0, -1.0,  1.0)
BTR = ( 1.0,  1.0, -1.0)
BTL = (-1.0,  1.0, -1.0)
BBR = ( 1.0, -1.0, -1.0)
BBL = (-1.0, -1.0, -1.0)

CUBE_FACES = [
    [FTR, FBR, FBL, FTL],   # front
    [FTR, FBR, BBR, BTR],   # right
    [BTR, BBR, BBL, BTL],   # back
    [FTL, FBL, BBL, BTL],   # left
    [FTR, FTL, BTL, BTR],   # top
    [FBR, FBL, BBL, BBR],   # bottom
]

CUBE_COLORS = ["blue", "green", "yellow", "magenta", "cyan", "red"]

PHI = (1.0 + math.sqrt(5.0)) / 2.0


def square(color="white", offset=(0.0, 0.0, 0.0), rotation=None,
           line_points=LINE_POINTS) -> Shape:
    """2x2 square in the z = 0 plane."""
    return Shape(
        [(-1.0, -1.0, 0.0), (-1.0, 1.0, 0.0), (1.0, 1.0, 0.0), (1.0, -1.0, 0.0)],
        color, offset, rotation, line_points)


def pentagram_vertices(scale: float = 1.0):
    """Five points visited every other corner, so the ring draws a star."""
    step = 2.0 * math.pi / 5.0
    offset = -math.pi / 10.0
    verts = []
    for n in range(5):
        angle = n * 2.0 * step + offset
        verts.append(Vec3(math.cos(angle) * scale, math.sin(angle) * scale, 0.0))
    return verts


def pentagon_face_vertices(scale: float = 0.5):
    """Regular pentagon lying in the xz plane."""
    step = math.pi / 5.0
    verts = []
    for n in range(5):
        angle = n * 2.0 * step
        verts.append(Vec3(math.cos(angle) * scale, 0.0, math.sin(angle) * scale))
    return verts


def pentagram(color="red", offset=(0.0, 0.0, 7.0), rotation=None,
              line_points=LINE_POINTS) -> Shape:
    return Shape(pentagram_vertices(), color, offset, rotation, line_points)


def pentagon_face(color="white", offset=(0.0, 0.0, 7.0), rotation=None,
                  line_points=LINE_POINTS) -> Shape:
    return Shape(pentagon_face_vertices(), color, offset, rotation, line_points)


def cube(colors=None, offset=(0.0, 0.0, 7.0), rotation=None,
         line_points=LINE_POINTS) -> Polyhedron:
    """Unit cube (side 2) centred on its offset, one colored Shape per face."""
    colors = colors or CUBE_COLORS
    return Polyhedron(
        Shape(face, colors[i % len(colors)], offset, rotation, line_points)
        for i, face in enumerate(CUBE_FACES)
    )


def dodecahedron_vertices():
    """The 20 vertices of a regular dodecahedron built from the golden ratio."""
    phi_i = 1.0 / PHI
    verts = [
        (1.0, 1.0, 1.0), (1.0, 1.0, -1.0), (1.0, -1.0, 1.0), (1.0, -1.0, -1.0),
        (0.0, phi_i, PHI), (0.0, phi_i, -PHI), (0.0, -phi_i, PHI), (0.0, -phi_i, -PHI),
        (-1.0, 1.0, 1.0), (-1.0, 1.0, -1.0), (-1.0, -1.0, 1.0), (-1.0, -1.0, -1.0),
        (phi_i, PHI, 0.0), (phi_i, -PHI, 0.0), (-phi_i, PHI, 0.0), (-phi_i, -PHI, 0.0),
        (PHI, 0.0, phi_i), (PHI, 0.0, -phi_i), (-PHI, 0.0, phi_i), (-PHI, 0.0, -phi_i),
    ]
    return [Vec3(*v) for v in verts]


def nearest_neighbours(vertices):
    """Map every vertex to its closest other vertex (first found on ties)."""
    result = []
    for v0 in vertices:
        best = None
        best_d = math.inf
        for v1 in vertices:
            if v1 is v0:
                continue
            d = (v1 - v0).magnitude()
            if d < best_d:
                best_d = d
                best = v1
        result.append(best)
    return result


def dodecahedron_skeleton(color="green", offset=(0.0, 0.0, 10.0), rotation=None,
                          line_points=LINE_POINTS) -> Shape:
    """Single ring through each dodecahedron vertex's nearest neighbour."""
    return Shape(nearest_neighbours(dodecahedron_vertices()),
                 color, offset, rotation, line_points)
