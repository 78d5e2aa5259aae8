"""Tests for the renderer-facing Snapshot."""

import dataclasses

import numpy as np
import pytest

from gridsnake.config import RIGHT
from gridsnake.game import Phase
from gridsnake.snapshot import BODY, EMPTY, FOOD, HEAD, Snapshot


class TestSnapshot:

    def test_fields(self, engine, install):
        install(engine, [(5, 5), (4, 5)], heading=RIGHT, food=(9, 9))
        engine.state.score = 30
        snap = engine.snapshot()
        assert snap.snake == ((5, 5), (4, 5))
        assert snap.head == (5, 5)
        assert snap.food == (9, 9)
        assert snap.score == 30
        assert snap.phase is Phase.RUNNING
        assert snap.heading == RIGHT
        assert snap.grid_extent == 20
        assert not snap.won

    def test_is_immutable(self, engine):
        snap = engine.snapshot()
        with pytest.raises(dataclasses.FrozenInstanceError):
            snap.score = 99

    def test_detached_from_later_ticks(self, engine, install):
        """A snapshot keeps showing the state it was taken from."""
        install(engine, [(5, 5)], heading=RIGHT)
        snap = engine.snapshot()
        engine.tick()
        assert snap.snake == ((5, 5),)
        assert engine.snapshot().snake == ((6, 5),)

    def test_to_grid(self, engine, install):
        install(engine, [(2, 1), (1, 1), (0, 1)], heading=RIGHT, food=(3, 3))
        grid = engine.snapshot().to_grid()
        assert grid.shape == (20, 20)
        assert grid.dtype == np.int8
        assert grid[1, 2] == HEAD
        assert grid[1, 1] == BODY and grid[1, 0] == BODY
        assert grid[3, 3] == FOOD
        assert int((grid != EMPTY).sum()) == 4

    def test_to_grid_without_food(self):
        snap = Snapshot(
            snake=((0, 0),), food=None, score=0, phase=Phase.OVER,
            heading=RIGHT, end_reason=None, grid_extent=1, ticks=0,
        )
        assert snap.to_grid().tolist() == [[HEAD]]

    def test_to_dict(self, engine, install):
        install(engine, [(5, 5), (4, 5)], heading=RIGHT, food=(9, 9))
        data = engine.snapshot().to_dict()
        assert data == {
            "snake": [[5, 5], [4, 5]],
            "food": [9, 9],
            "score": 0,
            "phase": "running",
            "heading": [1, 0],
            "end_reason": None,
            "grid_extent": 20,
            "ticks": 0,
        }
