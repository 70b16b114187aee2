#
# PROJECT: polyhedron-cli-renderer
# MODULE: polyhedron_cli_renderer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

class Canvas:
    """
    Dot canvas backed by 2x4 terminal cells.

    There is no depth buffer: drawables arrive in painter's order, so a later
    dot simply takes over its cell's color.
    """
    __slots__ = ['w', 'h', 'grid', 'c_grid']

    # Braille dot mapping for 2x4 grid
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    # 0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80
    BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

    def __init__(self, w, h):
        self.w, self.h = w, h
        # Grid stores 8-bit masks for 2x4 cells
        self.grid = [[0] * (w // 2 + 1) for _ in range(h // 4 + 1)]
        # Color grid stores the color tag per cell
        self.c_grid = [[None] * (w // 2 + 1) for _ in range(h // 4 + 1)]

    def set_pixel(self, x, y, color=None):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return
        cx, cy = x >> 1, y >> 2
        # Bit index 0-3 for the left column, 4-7 for the right
        self.grid[cy][cx] |= (1 << ((y & 3) + (x & 1) * 4))
        self.c_grid[cy][cx] = color

    def cells(self):
        """Yield (row, col, mask, color) for every non-empty cell."""
        for y, row in enumerate(self.grid):
            colors = self.c_grid[y]
            for x, mask in enumerate(row):
                if mask:
                    yield y, x, mask, colors[x]


def render_cell_ascii(mask: int) -> str:
    """
    Renders a 2x4 cell mask as an ASCII character based on pixel density.
    Used when Braille is unavailable.
    """
    if not mask:
        return ' '
    density = bin(mask).count('1')
    chars = " .:-=+*#%@"
    return chars[density] if density < len(chars) else '@'


def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(Canvas.BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)
