from __future__ import annotations
import pytest

from minefield.display import (cell_background, cell_glyph, format_elapsed, mine_counter_text, render_board,
                               number_color, status_text)
from minefield.engine import Status
from minefield.presets import LARGE, PRESETS, SMALL, get_preset
from minefield.errors import InvalidConfiguration


@pytest.mark.parametrize('seconds,text', [(0, 'Time: 0:00'), (9, 'Time: 0:09'), (75, 'Time: 1:15'), (600, 'Time: 10:00')])
def test_format_elapsed(seconds, text):
    assert format_elapsed(seconds) == text


def test_status_text():
    assert status_text(Status.NOT_STARTED) == 'Click to start'
    assert status_text(Status.IN_PROGRESS) == 'Game in progress'
    assert status_text(Status.LOST) == 'Game Over!'
    assert status_text(Status.WON) == 'You Win!'


def test_mine_counter_text():
    assert mine_counter_text(10) == 'Mines: 10'
    assert mine_counter_text(-2) == 'Mines: -2'


def test_number_colors():
    assert number_color(1) == '#0000ff'
    assert number_color(7) == '#000000'


def test_glyphs_during_play(corner_mine):
    corner_mine.reveal_cell(1, 1)
    corner_mine.toggle_flag(0, 1)
    assert cell_glyph(corner_mine.cell_view(1, 1)) == '1'
    assert cell_glyph(corner_mine.cell_view(0, 1)) == 'F'
    assert cell_glyph(corner_mine.cell_view(0, 0)) == ''
    assert cell_background(corner_mine.cell_view(0, 1)) is None


def test_glyphs_after_loss(corner_mine):
    corner_mine.toggle_flag(0, 1)
    corner_mine.reveal_cell(0, 0)
    assert cell_glyph(corner_mine.cell_view(0, 0)) == '*'
    assert cell_background(corner_mine.cell_view(0, 0)) == '#ff0000'
    assert cell_glyph(corner_mine.cell_view(0, 1)) == 'F'
    assert cell_background(corner_mine.cell_view(0, 1)) == '#ffc800'


class TestPresets:
    def test_standard_boards(self):
        assert (SMALL.size, SMALL.num_mines) == (10, 10)
        assert (LARGE.size, LARGE.num_mines) == (15, 20)
        assert set(PRESETS) == {'small', 'large'}

    def test_labels(self):
        assert SMALL.label == 'New Game (10x10 - 10 mines)'
        assert LARGE.label == 'New Game (15x15 - 20 mines)'

    def test_lookup(self):
        assert get_preset('LARGE') is LARGE
        with pytest.raises(InvalidConfiguration):
            get_preset('expert')

    def test_presets_are_playable(self, engine):
        for preset in PRESETS.values():
            engine.new_game(preset.size, preset.num_mines)
            assert engine.remaining_safe_cells == preset.size ** 2 - preset.num_mines


class TestRenderBoard:
    def test_during_play(self, corner_mine):
        corner_mine.reveal_cell(1, 1)
        corner_mine.toggle_flag(0, 0)
        assert render_board(corner_mine) == 'F #\n# 1'

    def test_after_cascade(self, walled):
        walled.reveal_cell(0, 0)
        assert render_board(walled).splitlines() == [
            '. . . . .',
            '2 3 3 3 2',
            '# # # # #',
            '# # # # #',
            '# # # # #',
        ]

    def test_loss_shows_every_mine_and_wrong_flag(self, engine):
        engine.new_game(3, 2, mines=[(0, 0), (2, 2)])
        engine.toggle_flag(0, 2)
        engine.reveal_cell(0, 0)
        assert render_board(engine) == '* # X\n# # #\n# # *'

    def test_correct_flag_stays_flagged(self, engine):
        engine.new_game(3, 2, mines=[(0, 0), (2, 2)])
        engine.toggle_flag(2, 2)
        engine.reveal_cell(0, 0)
        assert render_board(engine).splitlines()[2] == '# # F'
