#
# PROJECT: polyhedron-cli-renderer
# MODULE: polyhedron_cli_renderer/polyhedron.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .shape import DEFAULT_FOV, Shape


def render_shapes(shapes, world, fov: float = DEFAULT_FOV, executor=None):
    """
    Render each shape for one frame.

    executor: optional concurrent.futures Executor. Shapes share no mutable
    state, so they may be rendered on a worker pool in any order.
    """
    if executor is not None:
        # Drain the iterator so worker exceptions surface here
        list(executor.map(lambda s: s.render(world, fov), shapes))
    else:
        for s in shapes:
            s.render(world, fov)
    return shapes


class Polyhedron:
    """A group of Shapes rendered as one solid (e.g. the faces of a cube)."""

    def __init__(self, shapes):
        self.shapes = list(shapes)
        for s in self.shapes:
            if not isinstance(s, Shape):
                raise TypeError(f"Polyhedron faces must be Shape, got {type(s).__name__}")

    def __repr__(self):
        return f"Polyhedron({len(self.shapes)} faces)"

    def __iter__(self):
        return iter(self.shapes)

    def __len__(self):
        return len(self.shapes)

    def render(self, world, fov: float = DEFAULT_FOV, executor=None) -> 'Polyhedron':
        """Render every face. executor: optional concurrent.futures Executor."""
        render_shapes(self.shapes, world, fov, executor)
        return self

    def drawables(self):
        return [s.drawable() for s in self.shapes]
