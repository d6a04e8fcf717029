from __future__ import annotations
import argparse
import logging
import sys
from typing import Callable, Iterable, Optional, Tuple

from minefield.clock import GameClock
from minefield.display import format_elapsed, mine_counter_text, render_board, status_text
from minefield.engine import BoardEngine, Status
from minefield.errors import MinefieldError
from minefield.presets import DEFAULT_PRESET, PRESETS, get_preset

HELP = 'commands: r ROW COL (reveal) | f ROW COL (flag) | n [small|large] (new game) | q (quit)'

Command = Tuple[str, Optional[Tuple[int, int]], Optional[str]]


def parse_command(line: str) -> Command:
    """Split a typed line into (action, coordinate, preset key)."""
    parts = line.split()
    if not parts:
        raise ValueError('empty command')
    action = parts[0].lower()
    if action in ('r', 'f'):
        if len(parts) != 3:
            raise ValueError(f'{action} needs ROW COL')
        try:
            return action, (int(parts[1]), int(parts[2])), None
        except ValueError:
            raise ValueError(f'bad coordinate: {" ".join(parts[1:])}') from None
    if action == 'n':
        if len(parts) > 2:
            raise ValueError('n takes at most one preset name')
        return action, None, (parts[1] if len(parts) == 2 else None)
    if action in ('q', 'h', '?'):
        return action, None, None
    raise ValueError(f'unknown command: {parts[0]}')


def render(engine: BoardEngine, clock: GameClock) -> str:
    header = ' | '.join([
        mine_counter_text(engine.remaining_mine_estimate),
        status_text(engine.status),
        format_elapsed(clock.elapsed_seconds),
    ])
    return header + '\n' + render_board(engine)


def run_session(engine: BoardEngine, clock: GameClock, lines: Iterable[str],
                out: Callable[[str], None] = print) -> None:
    """Feed typed commands into the board until input runs out or `q`."""
    last_size, last_mines = engine.size, engine.num_mines
    out(render(engine, clock))
    for line in lines:
        if not line.strip():
            continue
        try:
            action, coord, preset = parse_command(line)
        except ValueError as e:
            out(f'[play] {e}')
            out(HELP)
            continue
        if action == 'q':
            break
        if action in ('h', '?'):
            out(HELP)
            continue
        was_over = engine.status.is_terminal
        try:
            if action == 'n':
                if preset is not None:
                    p = get_preset(preset)
                    last_size, last_mines = p.size, p.num_mines
                clock.reset()
                engine.new_game(last_size, last_mines)
            elif action == 'r':
                engine.reveal_cell(*coord)
            else:
                engine.toggle_flag(*coord)
        except MinefieldError as e:
            out(f'[play] {e}')
            continue
        out(render(engine, clock))
        if engine.status.is_terminal and not was_over:
            out('WIN' if engine.status is Status.WON else 'LOSE')


def main(argv=None):
    parser = argparse.ArgumentParser(description='Play minesweeper in the terminal.')
    parser.add_argument('--preset', type=str, default=DEFAULT_PRESET.key, choices=list(PRESETS))
    parser.add_argument('--size', type=int, default=None, help='Board side length; overrides the preset')
    parser.add_argument('--mines', type=int, default=None, help='Mine count; overrides the preset')
    parser.add_argument('--seed', type=int, default=-1, help='RNG seed; <0 uses OS entropy (random every run)')
    parser.add_argument('--log-level', type=str, default='WARNING')
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format='%(asctime)s %(name)s %(levelname)s %(message)s')

    preset = get_preset(args.preset)
    size = preset.size if args.size is None else args.size
    mines = preset.num_mines if args.mines is None else args.mines

    engine = BoardEngine(seed=(None if args.seed < 0 else args.seed))
    clock = GameClock()
    clock.attach(engine)
    try:
        engine.new_game(size, mines)
    except MinefieldError as e:
        parser.error(str(e))
    print(HELP)
    try:
        run_session(engine, clock, sys.stdin)
    except KeyboardInterrupt:
        print()


if __name__ == '__main__':
    main()
