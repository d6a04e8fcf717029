
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict

from .errors import InvalidConfiguration


@dataclass(frozen=True)
class Preset:
    key: str
    size: int
    num_mines: int

    @property
    def label(self) -> str:
        return f'New Game ({self.size}x{self.size} - {self.num_mines} mines)'


SMALL = Preset('small', 10, 10)
LARGE = Preset('large', 15, 20)

PRESETS: Dict[str, Preset] = {p.key: p for p in (SMALL, LARGE)}
DEFAULT_PRESET = SMALL


def get_preset(key: str) -> Preset:
    try:
        return PRESETS[key.lower()]
    except KeyError:
        raise InvalidConfiguration(f'unknown preset {key!r}, choose one of {", ".join(PRESETS)}') from None
