"""Tick-driven snake game engine with an optional pygame front-end."""

from .config import CFG, Config, UP, DOWN, LEFT, RIGHT, NONE
from .engine import SnakeEngine
from .game import EndReason, GameState, Phase
from .scheduler import Ticker
from .snapshot import Snapshot

__all__ = [
    "CFG", "Config", "UP", "DOWN", "LEFT", "RIGHT", "NONE",
    "SnakeEngine", "EndReason", "GameState", "Phase", "Ticker", "Snapshot",
]
