"""Read-only view of a game for renderers."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np  # type: ignore

from .game import Cell, EndReason, GameState, Heading, Phase

# Occupancy codes used by Snapshot.to_grid()
EMPTY, BODY, FOOD, HEAD = 0, 1, 2, 3


@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]        # head first
    food: Optional[Cell]
    score: int
    phase: Phase
    heading: Heading
    end_reason: Optional[EndReason]
    grid_extent: int
    ticks: int

    @classmethod
    def of(cls, state: GameState) -> "Snapshot":
        return cls(
            snake=tuple(state.snake),
            food=state.food,
            score=state.score,
            phase=state.phase,
            heading=state.heading,
            end_reason=state.end_reason,
            grid_extent=state.grid_extent,
            ticks=state.ticks,
        )

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def won(self) -> bool:
        return self.end_reason is EndReason.BOARD_FULL

    def to_grid(self) -> np.ndarray:
        """
        Occupancy matrix of shape (grid_extent, grid_extent), indexed [y, x]:
          0 = empty, 1 = body, 2 = food, 3 = head
        """
        grid = np.zeros((self.grid_extent, self.grid_extent), dtype=np.int8)
        for x, y in self.snake[1:]:
            grid[y, x] = BODY
        if self.food is not None:
            fx, fy = self.food
            grid[fy, fx] = FOOD
        hx, hy = self.snake[0]
        grid[hy, hx] = HEAD
        return grid

    def to_dict(self) -> dict:
        return {
            "snake": [list(c) for c in self.snake],
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "phase": self.phase.value,
            "heading": list(self.heading),
            "end_reason": self.end_reason.value if self.end_reason else None,
            "grid_extent": self.grid_extent,
            "ticks": self.ticks,
        }
