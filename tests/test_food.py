"""Tests for food placement."""

import numpy as np

from gridsnake.food import free_cells, spawn_food


class TestSpawnFood:

    def test_never_on_snake(self):
        """Placed food never overlaps the snake."""
        rng = np.random.default_rng(0)
        snake = [(x, 0) for x in range(10)] + [(x, 1) for x in range(10)]
        for _ in range(200):
            food = spawn_food(snake, 10, rng)
            assert food not in snake
            assert 0 <= food[0] < 10 and 0 <= food[1] < 10

    def test_returns_plain_ints(self):
        food = spawn_food([(0, 0)], 5, np.random.default_rng(3))
        assert all(type(v) is int for v in food)

    def test_full_board_returns_none(self):
        """No free cell: an explicit None instead of looping forever."""
        snake = [(x, y) for y in range(3) for x in range(3)]
        assert spawn_food(snake, 3, np.random.default_rng(0)) is None

    def test_falls_back_to_free_cells_after_budget(self):
        """With a budget of one draw, the last free cell is still found."""
        snake = [(x, y) for y in range(3) for x in range(3) if (x, y) != (2, 2)]
        rng = np.random.default_rng(5)
        for _ in range(20):
            assert spawn_food(snake, 3, rng, max_attempts=1) == (2, 2)

    def test_reaches_every_free_cell(self):
        rng = np.random.default_rng(11)
        snake = [(0, 0)]
        seen = {spawn_food(snake, 2, rng) for _ in range(300)}
        assert seen == {(1, 0), (0, 1), (1, 1)}

    def test_same_seed_same_sequence(self):
        a = np.random.default_rng(42)
        b = np.random.default_rng(42)
        snake = [(5, 5)]
        assert [spawn_food(snake, 20, a) for _ in range(5)] == [spawn_food(snake, 20, b) for _ in range(5)]


class TestFreeCells:

    def test_excludes_snake(self):
        assert free_cells([(0, 0), (1, 1)], 2) == [(1, 0), (0, 1)]

    def test_empty_when_full(self):
        assert free_cells([(0, 0)], 1) == []
