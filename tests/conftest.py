from __future__ import annotations
import pytest

from minefield.engine import BoardEngine


class FakeTime:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def engine() -> BoardEngine:
    return BoardEngine(seed=1234)


@pytest.fixture
def corner_mine(engine) -> BoardEngine:
    """2x2 board with its only mine at (0, 0)."""
    engine.new_game(2, 1, mines=[(0, 0)])
    return engine


@pytest.fixture
def walled(engine) -> BoardEngine:
    """5x5 board with a full row of mines across row 2."""
    engine.new_game(5, 5, mines=[(2, c) for c in range(5)])
    return engine


@pytest.fixture
def fake_time() -> FakeTime:
    return FakeTime()
