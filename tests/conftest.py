"""Shared fixtures for the gridsnake test suite."""

import dataclasses

import pytest

from gridsnake.config import CFG, NONE
from gridsnake.engine import SnakeEngine
from gridsnake.game import Phase


def _install(engine, snake, heading=NONE, food=(0, 0), phase=Phase.RUNNING):
    """Put an engine into an exact state; pending matches the heading."""
    state = engine.state
    state.snake = [tuple(c) for c in snake]
    state.heading = heading
    state.pending = heading
    state.food = food
    state.phase = phase
    state.end_reason = None
    return state


@pytest.fixture
def install():
    return _install


@pytest.fixture
def cfg():
    return dataclasses.replace(CFG, seed=1234)


@pytest.fixture
def engine(cfg):
    """A 20x20 engine that is already running."""
    eng = SnakeEngine(cfg)
    eng.start()
    return eng
