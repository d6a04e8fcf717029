
from __future__ import annotations


class MinefieldError(Exception):
    """Base class for board errors."""


class InvalidConfiguration(MinefieldError, ValueError):
    """Board size or mine count cannot form a playable game."""


class InvalidCoordinate(MinefieldError, IndexError):
    """Row or column lies outside the board."""

    def __init__(self, row: int, col: int, size: int):
        super().__init__(f'cell ({row}, {col}) is outside a {size}x{size} board')
        self.row = row
        self.col = col
        self.size = size
