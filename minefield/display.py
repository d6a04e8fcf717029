
from __future__ import annotations
from typing import Dict, Optional

from .engine import CellView, Status

STATUS_TEXT: Dict[Status, str] = {
    Status.NOT_STARTED: 'Click to start',
    Status.IN_PROGRESS: 'Game in progress',
    Status.LOST: 'Game Over!',
    Status.WON: 'You Win!',
}

NUMBER_COLORS = {
    1: '#0000ff',
    2: '#008000',
    3: '#ff0000',
    4: '#000080',
    5: '#800000',
}
DEFAULT_NUMBER_COLOR = '#000000'

# Background per end-of-game marker
MARKER_COLORS = {
    'exploded': '#ff0000',
    'mine': '#ff0000',
    'correct_flag': '#00ff00',
    'wrong_flag': '#ffc800',
}


def format_elapsed(seconds: int) -> str:
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f'Time: {minutes}:{secs:02d}'


def status_text(status: Status) -> str:
    return STATUS_TEXT[status]


def mine_counter_text(estimate: int) -> str:
    return f'Mines: {estimate}'


def number_color(count: int) -> str:
    return NUMBER_COLORS.get(count, DEFAULT_NUMBER_COLOR)


def cell_glyph(view: CellView) -> str:
    marker = view.end_marker
    if marker in ('exploded', 'mine'):
        return '*'
    if view.is_flagged:
        return 'F'
    if not view.is_revealed:
        return ''
    if view.adjacent_count == 0:
        return ''
    return str(view.adjacent_count)


def cell_background(view: CellView) -> Optional[str]:
    return MARKER_COLORS.get(view.end_marker) if view.end_marker else None


def text_glyph(view: CellView) -> str:
    """Single character for a cell on a text board."""
    if view.end_marker == 'wrong_flag':
        return 'X'
    glyph = cell_glyph(view)
    if glyph:
        return glyph
    return '.' if view.is_revealed else '#'


def render_board(engine) -> str:
    return '\n'.join(' '.join(text_glyph(view) for view in row) for row in engine.views())
