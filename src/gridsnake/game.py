# game.py
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple
import logging

import numpy as np  # type: ignore

from .config import Config, GRID_EXTENT, HEADINGS, NONE
from .food import spawn_food

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]
Heading = Tuple[int, int]


class Phase(Enum):
    READY = "ready"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


class EndReason(Enum):
    WALL = "wall"
    SELF = "self"
    BOARD_FULL = "board_full"   # snake covers every cell: the player won


# ---------- Helpers ----------
def _canonical_heading(requested) -> Optional[Heading]:
    """The HEADINGS entry equal to requested, or None."""
    try:
        return HEADINGS[HEADINGS.index(tuple(requested))]
    except (TypeError, ValueError):
        return None

def is_opposite(a: Heading, b: Heading) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def in_bounds(cell: Cell, grid_extent: int) -> bool:
    x, y = cell
    return 0 <= x < grid_extent and 0 <= y < grid_extent

# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    food: Optional[Cell]
    heading: Heading = NONE
    pending: Heading = NONE
    score: int = 0
    phase: Phase = Phase.READY
    end_reason: Optional[EndReason] = None
    ticks: int = 0                 # completed moves
    grid_extent: int = GRID_EXTENT

    @property
    def head(self) -> Cell:
        return self.snake[0]

def new_game_state(cfg: Config, rng: np.random.Generator,
                   start_running: Optional[bool] = None) -> GameState:
    """Fresh state: one-cell snake at cfg.start, no heading, new food."""
    if start_running is None:
        start_running = cfg.start_running
    snake = [tuple(cfg.start)]
    food = spawn_food(snake, cfg.grid_extent, rng, cfg.max_food_attempts)
    state = GameState(
        snake=snake,
        food=food,
        phase=Phase.RUNNING if start_running else Phase.READY,
        grid_extent=cfg.grid_extent,
    )
    if food is None:
        # 1x1 board: the starting snake already fills it
        _finish(state, EndReason.BOARD_FULL)
    return state

# ---------- Commands ----------
def set_heading(state: GameState, requested: Heading) -> bool:
    """
    Buffer a heading for the next tick. Only a running game takes input;
    reversals of the committed heading and anything that is not one of the
    four headings are ignored. Returns True if the request was buffered.
    """
    if state.phase is not Phase.RUNNING:
        return False
    canonical = _canonical_heading(requested)
    if canonical is None:
        logger.debug("Ignoring non-heading %r", requested)
        return False
    requested = canonical
    if state.heading != NONE and is_opposite(requested, state.heading):
        logger.debug("Ignoring reversal %r while heading %r", requested, state.heading)
        return False
    state.pending = requested
    return True

def start(state: GameState) -> None:
    if state.phase is Phase.READY:
        state.phase = Phase.RUNNING

def pause(state: GameState) -> None:
    if state.phase is Phase.RUNNING:
        state.phase = Phase.PAUSED

def resume(state: GameState) -> None:
    if state.phase is Phase.PAUSED:
        state.phase = Phase.RUNNING

def toggle_pause(state: GameState) -> None:
    if state.phase is Phase.RUNNING:
        pause(state)
    else:
        resume(state)

# ---------- Update ----------
def step_game(state: GameState, cfg: Config, rng: np.random.Generator) -> Phase:
    """
    Advance the game by one tick and return the resulting phase.
    Ticks outside RUNNING change nothing. Collisions leave the snake as it
    was before the tick so the final frame can still be drawn.
    """
    if state.phase is not Phase.RUNNING:
        return state.phase

    # Commit direction once per tick
    state.heading = state.pending
    if state.heading == NONE:
        return state.phase  # waiting for the first direction

    hx, hy = state.snake[0]
    dx, dy = state.heading
    new_head = (hx + dx, hy + dy)

    # Wall collision
    if not in_bounds(new_head, state.grid_extent):
        _finish(state, EndReason.WALL)
        return state.phase

    # Self collision; the tail moves out of the way unless we are about to grow
    will_grow = new_head == state.food
    body = state.snake if will_grow else state.snake[:-1]
    if new_head in body:
        _finish(state, EndReason.SELF)
        return state.phase

    # Move / grow
    state.snake.insert(0, new_head)
    state.ticks += 1
    if will_grow:
        state.score += cfg.food_reward
        state.food = spawn_food(state.snake, state.grid_extent, rng, cfg.max_food_attempts)
        if state.food is None:
            _finish(state, EndReason.BOARD_FULL)
    else:
        state.snake.pop()

    return state.phase

def _finish(state: GameState, reason: EndReason) -> None:
    state.phase = Phase.OVER
    state.end_reason = reason
    logger.info(
        "Game over (%s) after %d ticks, length %d, score %d",
        reason.value, state.ticks, len(state.snake), state.score,
    )
