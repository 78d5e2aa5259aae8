# food.py
from typing import Iterable, Optional, Tuple
import logging

import numpy as np  # type: ignore

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


def free_cells(snake: Iterable[Cell], grid_extent: int) -> list:
    """All cells of the grid not covered by the snake, row by row."""
    occupied = set(snake)
    return [
        (x, y)
        for y in range(grid_extent)
        for x in range(grid_extent)
        if (x, y) not in occupied
    ]


def spawn_food(
    snake: Iterable[Cell],
    grid_extent: int,
    rng: np.random.Generator,
    max_attempts: int = 1000,
) -> Optional[Cell]:
    """
    Pick a cell uniformly at random among the cells the snake does not cover.

    Rejection sampling first: draw candidates over the whole grid and
    discard those on the snake. After max_attempts misses, choose directly
    from the enumerated free cells, which keeps the result uniform.
    Returns None when the snake fills the board.
    """
    occupied = set(snake)
    if len(occupied) >= grid_extent * grid_extent:
        return None

    for _ in range(max_attempts):
        fx, fy = (int(v) for v in rng.integers(0, grid_extent, size=2))
        if (fx, fy) not in occupied:
            return (fx, fy)

    remaining = free_cells(occupied, grid_extent)
    logger.debug(
        "Rejection sampling missed %d times; choosing among %d free cells",
        max_attempts, len(remaining),
    )
    return remaining[int(rng.integers(len(remaining)))]
