# controls.py
"""Turn raw input (key names, drag/swipe vectors) into headings."""
from typing import Optional

from .config import UP, DOWN, LEFT, RIGHT
from .game import Heading

# Names as reported by pygame.key.name()
KEY_HEADINGS = {
    "up": UP, "w": UP,
    "down": DOWN, "s": DOWN,
    "left": LEFT, "a": LEFT,
    "right": RIGHT, "d": RIGHT,
}

MIN_SWIPE_DISTANCE = 30  # pixels


def heading_for_key(name: str) -> Optional[Heading]:
    return KEY_HEADINGS.get(name.lower())

def heading_for_swipe(dx: float, dy: float,
                      min_distance: float = MIN_SWIPE_DISTANCE) -> Optional[Heading]:
    """
    Dominant axis of the drag decides the heading; drags no longer than
    min_distance along that axis are ignored. dy grows downward.
    """
    if abs(dx) > abs(dy):
        if abs(dx) <= min_distance:
            return None
        return RIGHT if dx > 0 else LEFT
    if abs(dy) <= min_distance:
        return None
    return DOWN if dy > 0 else UP

def is_pause_key(name: str) -> bool:
    return name.lower() in ("space", "p")

def is_start_key(name: str) -> bool:
    return name.lower() in ("return", "enter")

def is_reset_key(name: str) -> bool:
    return name.lower() == "r"
