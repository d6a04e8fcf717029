from __future__ import annotations
import pytest

from minefield.clock import GameClock
from minefield.engine import Status
from play import parse_command, run_session


class TestParseCommand:
    def test_reveal_and_flag(self):
        assert parse_command('r 3 4') == ('r', (3, 4), None)
        assert parse_command('F 0 1\n') == ('f', (0, 1), None)

    def test_new_game(self):
        assert parse_command('n') == ('n', None, None)
        assert parse_command('n large') == ('n', None, 'large')

    def test_quit(self):
        assert parse_command('q') == ('q', None, None)

    @pytest.mark.parametrize('line', ['', 'r 1', 'r a b', 'f 1 2 3', 'n a b', 'boom'])
    def test_malformed(self, line):
        with pytest.raises(ValueError):
            parse_command(line)


def play(engine, lines, fake_time):
    out = []
    clock = GameClock(fake_time)
    clock.attach(engine)
    run_session(engine, clock, lines, out=out.append)
    return out


class TestRunSession:
    def test_winning_game(self, corner_mine, fake_time):
        out = play(corner_mine, ['r 1 1', 'r 0 1', 'f 0 0', 'r 1 0'], fake_time)
        assert corner_mine.status is Status.WON
        assert out[-1] == 'WIN'
        assert out[-2].startswith('Mines: 0 | You Win! | Time: 0:00')

    def test_losing_game(self, corner_mine, fake_time):
        out = play(corner_mine, ['r 0 0', 'r 1 1'], fake_time)
        assert out.count('LOSE') == 1
        assert corner_mine.status is Status.LOST

    def test_errors_are_reported(self, corner_mine, fake_time):
        out = play(corner_mine, ['r 5 5', 'x', 'n expert'], fake_time)
        assert '[play] cell (5, 5) is outside a 2x2 board' in out
        assert '[play] unknown command: x' in out
        assert any(line.startswith("[play] unknown preset 'expert'") for line in out)
        assert corner_mine.size == 2

    def test_new_game_and_quit(self, corner_mine, fake_time):
        out = play(corner_mine, ['n large', 'q', 'r 0 0'], fake_time)
        assert corner_mine.size == 15
        assert corner_mine.num_mines == 20
        assert corner_mine.status is Status.NOT_STARTED
        assert out[-1].startswith('Mines: 20 | Click to start')


class TestEndOfGameBoard:
    @pytest.fixture
    def two_mines(self, engine):
        engine.new_game(3, 2, mines=[(0, 0), (2, 2)])
        return engine

    def test_loss_shows_all_mines(self, two_mines, fake_time):
        out = play(two_mines, ['r 0 0'], fake_time)
        assert out[-1] == 'LOSE'
        assert out[-2] == 'Mines: 2 | Game Over! | Time: 0:00\n* # #\n# # #\n# # *'

    def test_loss_marks_wrong_flags(self, two_mines, fake_time):
        out = play(two_mines, ['f 1 1', 'f 2 2', 'r 0 0'], fake_time)
        assert out[-2].splitlines()[1:] == ['* # #', '# X #', '# # F']

    def test_win_shows_remaining_mines(self, two_mines, fake_time):
        out = play(two_mines, ['r 0 2', 'r 2 0'], fake_time)
        assert out[-1] == 'WIN'
        assert out[-2] == 'Mines: 2 | You Win! | Time: 0:00\n* 1 .\n1 2 1\n. 1 *'
