
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, Iterable, List, Optional, Tuple

import numpy as np

from .errors import InvalidConfiguration, InvalidCoordinate

logger = logging.getLogger(__name__)

Coordinate = Tuple[int, int]


class Status(Enum):
    NOT_STARTED = 'not_started'
    IN_PROGRESS = 'in_progress'
    WON = 'won'
    LOST = 'lost'

    @property
    def is_terminal(self) -> bool:
        return self in (Status.WON, Status.LOST)


class RevealState(IntEnum):
    HIDDEN = 0
    FLAGGED = 1
    REVEALED = 2


@dataclass(frozen=True)
class CellView:
    """Read-only snapshot of one cell.

    ``is_mine`` stays ``None`` while the game is running so a renderer cannot
    leak the layout; once the game is won or lost every cell reports it.
    """
    row: int
    col: int
    reveal_state: RevealState
    adjacent_count: int
    is_mine: Optional[bool] = None
    exploded: bool = False

    @property
    def is_flagged(self) -> bool:
        return self.reveal_state is RevealState.FLAGGED

    @property
    def is_revealed(self) -> bool:
        return self.reveal_state is RevealState.REVEALED

    @property
    def end_marker(self) -> Optional[str]:
        if self.is_mine is None:
            return None
        if self.exploded:
            return 'exploded'
        if self.is_mine:
            return 'correct_flag' if self.is_flagged else 'mine'
        if self.is_flagged:
            return 'wrong_flag'
        return None


@dataclass(frozen=True)
class BoardSummary:
    status: Status
    size: int
    num_mines: int
    remaining_safe_cells: int
    flagged_count: int

    @property
    def remaining_mine_estimate(self) -> int:
        return self.num_mines - self.flagged_count


def _is_int(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def count_adjacent(mines: np.ndarray) -> np.ndarray:
    """Number of mines in the 8-neighborhood of every cell."""
    rows, cols = mines.shape
    padded = np.pad(mines.astype(np.int8), 1)
    counts = np.zeros((rows, cols), dtype=np.int8)
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == 0 and dc == 0:
                continue
            counts += padded[1 + dr:1 + dr + rows, 1 + dc:1 + dc + cols]
    return counts


class BoardEngine:
    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)
        self.size = 0
        self.num_mines = 0
        self._mines = np.zeros((0, 0), dtype=bool)
        self._counts = np.zeros((0, 0), dtype=np.int8)
        self._state = np.zeros((0, 0), dtype=np.int8)
        self.remaining_safe_cells = 0
        self.flagged_count = 0
        self.status = Status.NOT_STARTED
        self.exploded: Optional[Coordinate] = None
        self._started_callbacks: List[Callable[[], None]] = []
        self._ended_callbacks: List[Callable[[bool], None]] = []

    # Signals

    def on_game_started(self, callback: Callable[[], None]) -> None:
        self._started_callbacks.append(callback)

    def on_game_ended(self, callback: Callable[[bool], None]) -> None:
        self._ended_callbacks.append(callback)

    # Setup

    def new_game(self, size: int, num_mines: int, mines: Optional[Iterable[Coordinate]] = None) -> None:
        """Discard the current board and deal a fresh one.

        ``mines`` pins the layout instead of sampling it; it must list exactly
        ``num_mines`` distinct in-bounds cells. Nothing changes if validation
        fails.
        """
        if not _is_int(size) or size < 1:
            raise InvalidConfiguration(f'board size must be a positive integer, got {size!r}')
        total = size * size
        if not _is_int(num_mines) or not 0 <= num_mines <= total - 1:
            raise InvalidConfiguration(
                f'mine count must be between 0 and {total - 1} on a {size}x{size} board, got {num_mines!r}')
        size = int(size)
        num_mines = int(num_mines)

        layout = np.zeros((size, size), dtype=bool)
        if mines is None:
            # Uniform sample without replacement over flat indices
            picks = self.rng.choice(total, size=num_mines, replace=False)
            layout.flat[picks] = True
        else:
            fixed = set()
            for r, c in mines:
                if not (_is_int(r) and _is_int(c) and 0 <= r < size and 0 <= c < size):
                    raise InvalidConfiguration(f'mine ({r}, {c}) is outside a {size}x{size} board')
                fixed.add((int(r), int(c)))
            if len(fixed) != num_mines:
                raise InvalidConfiguration(f'expected {num_mines} distinct mines, got {len(fixed)}')
            for r, c in fixed:
                layout[r, c] = True

        self.size = size
        self.num_mines = num_mines
        self._mines = layout
        self._counts = count_adjacent(layout)
        self._state = np.full((size, size), RevealState.HIDDEN, dtype=np.int8)
        self.remaining_safe_cells = total - num_mines
        self.flagged_count = 0
        self.status = Status.NOT_STARTED
        self.exploded = None
        logger.info('new game: %dx%d board, %d mines', size, size, num_mines)

    # Geometry

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def neighbors(self, row: int, col: int) -> List[Coordinate]:
        """In-bounds cells of the 8-neighborhood, clipped at the edges."""
        rows = range(max(row - 1, 0), min(row + 2, self.size))
        cols = range(max(col - 1, 0), min(col + 2, self.size))
        return [(r, c) for r in rows for c in cols if (r, c) != (row, col)]

    def _check(self, row: int, col: int) -> None:
        if not (_is_int(row) and _is_int(col) and self.in_bounds(row, col)):
            raise InvalidCoordinate(row, col, self.size)

    # Play

    def reveal_cell(self, row: int, col: int) -> int:
        """Reveal a cell, cascading through zero-count regions.

        Returns how many cells were newly revealed (0 for a no-op).
        """
        self._check(row, col)
        if self.status.is_terminal or self._state[row, col] != RevealState.HIDDEN:
            return 0
        first = self.status is Status.NOT_STARTED
        if self._mines[row, col]:
            self._state[row, col] = RevealState.REVEALED
            self.exploded = (row, col)
            revealed = 1
        else:
            revealed = self._flood_reveal(row, col)
        if first:
            # Listeners see the board with this reveal already applied
            self.status = Status.IN_PROGRESS
            logger.info('game started at (%d, %d)', row, col)
            for callback in self._started_callbacks:
                callback()
        if self.exploded is not None:
            self._finish(won=False)
        elif self.remaining_safe_cells == 0:
            self._finish(won=True)
        return revealed

    def _flood_reveal(self, row: int, col: int) -> int:
        revealed = 0
        stack = [(row, col)]
        while stack:
            r, c = stack.pop()
            # A cell may be pushed by several zero neighbors before it is popped
            if self._state[r, c] != RevealState.HIDDEN:
                continue
            self._state[r, c] = RevealState.REVEALED
            self.remaining_safe_cells -= 1
            revealed += 1
            if self._counts[r, c] == 0:
                for nr, nc in self.neighbors(r, c):
                    if self._state[nr, nc] == RevealState.HIDDEN:
                        stack.append((nr, nc))
        if revealed > 1:
            logger.debug('cascade from (%d, %d) revealed %d cells', row, col, revealed)
        return revealed

    def _finish(self, won: bool) -> None:
        self.status = Status.WON if won else Status.LOST
        logger.info('game %s', 'won' if won else 'lost')
        for callback in self._ended_callbacks:
            callback(won)

    def toggle_flag(self, row: int, col: int) -> int:
        """Flip a hidden cell between flagged and unflagged.

        Returns the remaining-mine estimate, which goes negative when the
        player places more flags than there are mines.
        """
        self._check(row, col)
        if not self.status.is_terminal:
            state = self._state[row, col]
            if state == RevealState.HIDDEN:
                self._state[row, col] = RevealState.FLAGGED
                self.flagged_count += 1
            elif state == RevealState.FLAGGED:
                self._state[row, col] = RevealState.HIDDEN
                self.flagged_count -= 1
            logger.debug('flag toggle at (%d, %d), %d flags', row, col, self.flagged_count)
        return self.remaining_mine_estimate

    # Queries

    @property
    def remaining_mine_estimate(self) -> int:
        return self.num_mines - self.flagged_count

    def reveal_state(self, row: int, col: int) -> RevealState:
        self._check(row, col)
        return RevealState(int(self._state[row, col]))

    def adjacent_count(self, row: int, col: int) -> int:
        self._check(row, col)
        return int(self._counts[row, col])

    def cell_view(self, row: int, col: int) -> CellView:
        self._check(row, col)
        over = self.status.is_terminal
        return CellView(
            row=row,
            col=col,
            reveal_state=RevealState(int(self._state[row, col])),
            adjacent_count=int(self._counts[row, col]),
            is_mine=bool(self._mines[row, col]) if over else None,
            exploded=self.exploded == (row, col),
        )

    def views(self) -> List[List[CellView]]:
        return [[self.cell_view(r, c) for c in range(self.size)] for r in range(self.size)]

    def summary(self) -> BoardSummary:
        return BoardSummary(
            status=self.status,
            size=self.size,
            num_mines=self.num_mines,
            remaining_safe_cells=self.remaining_safe_cells,
            flagged_count=self.flagged_count,
        )

    def mine_layout(self) -> np.ndarray:
        return self._mines.copy()

    def adjacency_counts(self) -> np.ndarray:
        return self._counts.copy()
