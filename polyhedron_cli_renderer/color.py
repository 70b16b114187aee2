#
# PROJECT: polyhedron-cli-renderer
# MODULE: polyhedron_cli_renderer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import curses
import logging

logger = logging.getLogger(__name__)

DEFAULT_COLOR = "white"

# Color tags understood by shapes, mapped to the 8 basic ANSI indices
NAMED_COLORS = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
    "gray": 7,
    "grey": 7,
    "light_yellow": 3,
}


def resolve_color(tag) -> int:
    """Map a shape color tag to an ANSI color index; unknown tags fall back to DEFAULT_COLOR."""
    key = str(tag).strip().lower()
    if key in NAMED_COLORS:
        return NAMED_COLORS[key]
    logger.warning(f"Unknown color tag {tag!r}, using {DEFAULT_COLOR}")
    return NAMED_COLORS[DEFAULT_COLOR]


class ColorPairs:
    """
    Lazily allocated curses color pairs, one per distinct color tag.

    Pair 0 (terminal default) is used when color is off or unavailable.
    """

    def __init__(self, use_color: bool = True):
        self.use_color = use_color
        self.enabled = False
        self.pairs = {}

    def init(self):
        """Start curses color support. Call once after curses.wrapper init."""
        if not self.use_color:
            return
        try:
            if not curses.has_colors():
                return
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                pass
            self.enabled = True
        except curses.error as e:
            logger.warning(f"Color initialisation failed: {e}")
            self.enabled = False

    def pair_for(self, tag) -> int:
        """Curses attribute for a color tag."""
        if not self.enabled:
            return curses.color_pair(0)
        if tag not in self.pairs:
            pair_id = len(self.pairs) + 1
            fg = resolve_color(tag)
            try:
                curses.init_pair(pair_id, fg, -1)
            except curses.error:
                pair_id = 0
            self.pairs[tag] = pair_id
        return curses.color_pair(self.pairs[tag])
