# engine.py
from __future__ import annotations
from typing import Optional
import logging

import numpy as np  # type: ignore

from .config import CFG, Config
from .game import GameState, Heading, Phase, new_game_state
from . import game
from .snapshot import Snapshot

logger = logging.getLogger(__name__)


class SnakeEngine:
    """
    Owns one game: its state, its tunables and its random generator.

    Drivers call tick() on their own cadence and forward translated input
    through set_heading(); renderers read snapshot(). Nothing here raises
    for game input: collisions, reversals and out-of-phase calls show up
    only through the phase.
    """

    def __init__(self, cfg: Config = CFG, seed: Optional[int] = None):
        self.cfg = cfg.validate()
        self.rng = np.random.default_rng(cfg.seed if seed is None else seed)
        self.state: GameState = new_game_state(self.cfg, self.rng)

    # Commands ---------------------------------------------------------------
    def set_heading(self, requested: Heading) -> bool:
        return game.set_heading(self.state, requested)

    def tick(self) -> Phase:
        return game.step_game(self.state, self.cfg, self.rng)

    def reset(self, start_running: Optional[bool] = None) -> None:
        """Throw the current game away and build a fresh one."""
        self.state = new_game_state(self.cfg, self.rng, start_running)
        logger.info("Game reset (phase=%s, food=%s)", self.state.phase.value, self.state.food)

    def start(self) -> None:
        game.start(self.state)

    def pause(self) -> None:
        game.pause(self.state)

    def resume(self) -> None:
        game.resume(self.state)

    def toggle_pause(self) -> None:
        game.toggle_pause(self.state)

    # Queries ----------------------------------------------------------------
    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def score(self) -> int:
        return self.state.score

    def snapshot(self) -> Snapshot:
        return Snapshot.of(self.state)
