
from __future__ import annotations
import time
from typing import Callable, Optional


class GameClock:
    """Wall clock for a single game, driven by the board's start/end signals."""

    def __init__(self, time_source: Callable[[], float] = time.monotonic):
        self._now = time_source
        self._started_at: Optional[float] = None
        self._stopped_at: Optional[float] = None

    @property
    def running(self) -> bool:
        return self._started_at is not None and self._stopped_at is None

    def start(self) -> None:
        self._started_at = self._now()
        self._stopped_at = None

    def stop(self) -> None:
        if self.running:
            self._stopped_at = self._now()

    def reset(self) -> None:
        self._started_at = None
        self._stopped_at = None

    @property
    def elapsed_seconds(self) -> int:
        if self._started_at is None:
            return 0
        end = self._stopped_at if self._stopped_at is not None else self._now()
        return int(end - self._started_at)

    def attach(self, engine) -> None:
        """Start on the first reveal and stop when the game ends."""
        engine.on_game_started(self.start)
        engine.on_game_ended(lambda won: self.stop())
