from __future__ import annotations
import argparse
import logging
import tkinter as tk
from tkinter import ttk, messagebox

from minefield.clock import GameClock
from minefield.display import (cell_background, cell_glyph, format_elapsed, mine_counter_text,
                               number_color, status_text)
from minefield.engine import BoardEngine
from minefield.errors import MinefieldError
from minefield.presets import DEFAULT_PRESET, PRESETS, Preset


CELL_SIZE = 35
PADDING = 10
TICK_MS = 1000


class MinefieldGUI:
    def __init__(self, root: tk.Tk, engine: BoardEngine, preset: Preset = DEFAULT_PRESET):
        self.root = root
        self.root.title('Minesweeper')
        self.engine = engine
        self.clock = GameClock()
        self.clock.attach(engine)
        self.engine.on_game_ended(self._on_game_ended)
        self.tick_id = None

        # Menu
        menubar = tk.Menu(root)
        game_menu = tk.Menu(menubar, tearoff=0)
        for p in PRESETS.values():
            game_menu.add_command(label=p.label, command=lambda p=p: self.new_game(p.size, p.num_mines))
        menubar.add_cascade(label='Game', menu=game_menu)
        root.config(menu=menubar)

        # Controls
        control_frame = ttk.Frame(root)
        control_frame.pack(side=tk.TOP, fill=tk.X, padx=8, pady=6)
        self.flag_mode = tk.BooleanVar(value=False)
        ttk.Checkbutton(control_frame, text='Flag Mode (F)', variable=self.flag_mode).pack(side=tk.TOP)

        # Info
        info_frame = ttk.Frame(root)
        info_frame.pack(side=tk.TOP, fill=tk.X, padx=8, pady=2)
        for col in range(3):
            info_frame.columnconfigure(col, weight=1)
        label_font = ('Arial', 14, 'bold')
        self.label_mines = ttk.Label(info_frame, font=label_font, anchor='center')
        self.label_mines.grid(row=0, column=0, sticky='ew')
        self.label_status = ttk.Label(info_frame, font=label_font, anchor='center')
        self.label_status.grid(row=0, column=1, sticky='ew')
        self.label_time = ttk.Label(info_frame, font=label_font, anchor='center')
        self.label_time.grid(row=0, column=2, sticky='ew')

        # Board
        self.canvas = tk.Canvas(root, bg='#eeeeee', highlightthickness=0)
        self.canvas.pack(side=tk.TOP, padx=PADDING, pady=PADDING)
        self.canvas.bind('<Button-1>', self._on_left_click)
        self.canvas.bind('<Button-3>', self._on_right_click)
        root.bind('<KeyPress-f>', self._toggle_mode)
        root.bind('<KeyPress-F>', self._toggle_mode)

        self.new_game(preset.size, preset.num_mines)

    def new_game(self, size: int, num_mines: int):
        try:
            self.engine.new_game(size, num_mines)
        except MinefieldError as e:
            messagebox.showerror('Error', str(e))
            return
        self._cancel_tick()
        self.clock.reset()
        self.flag_mode.set(False)
        side = size * CELL_SIZE
        self.canvas.config(width=side, height=side)
        self._render()

    def _toggle_mode(self, _event=None):
        self.flag_mode.set(not self.flag_mode.get())

    def _cell_at(self, event):
        row, col = event.y // CELL_SIZE, event.x // CELL_SIZE
        if not self.engine.in_bounds(row, col):
            return None
        return row, col

    def _on_left_click(self, event):
        cell = self._cell_at(event)
        if cell is None:
            return
        if self.flag_mode.get():
            self.engine.toggle_flag(*cell)
        else:
            self.engine.reveal_cell(*cell)
            if self.clock.running and self.tick_id is None:
                self.tick_id = self.root.after(TICK_MS, self._tick)
        self._render()

    def _on_right_click(self, event):
        cell = self._cell_at(event)
        if cell is None:
            return
        self.engine.toggle_flag(*cell)
        self._render()

    def _on_game_ended(self, won: bool):
        self._cancel_tick()

    def _tick(self):
        self.label_time.config(text=format_elapsed(self.clock.elapsed_seconds))
        self.tick_id = self.root.after(TICK_MS, self._tick) if self.clock.running else None

    def _cancel_tick(self):
        if self.tick_id is not None:
            self.root.after_cancel(self.tick_id)
            self.tick_id = None

    def _render(self):
        self.canvas.delete('all')
        for row in self.engine.views():
            for view in row:
                px = view.col * CELL_SIZE
                py = view.row * CELL_SIZE
                background = cell_background(view)
                if background is None:
                    background = '#eeeeee' if view.is_revealed else '#bdbdbd'
                self.canvas.create_rectangle(px, py, px + CELL_SIZE, py + CELL_SIZE, fill=background, outline='#9e9e9e')
                glyph = cell_glyph(view)
                if not glyph:
                    continue
                color = number_color(view.adjacent_count) if glyph.isdigit() else '#000000'
                self.canvas.create_text(px + CELL_SIZE / 2, py + CELL_SIZE / 2, text=glyph, fill=color,
                                        font=('Helvetica', 12, 'bold'))
        self.label_mines.config(text=mine_counter_text(self.engine.remaining_mine_estimate))
        self.label_status.config(text=status_text(self.engine.status))
        self.label_time.config(text=format_elapsed(self.clock.elapsed_seconds))


def main(argv=None):
    parser = argparse.ArgumentParser(description='Play minesweeper in a window.')
    parser.add_argument('--preset', type=str, default=DEFAULT_PRESET.key, choices=list(PRESETS))
    parser.add_argument('--seed', type=int, default=-1, help='RNG seed; <0 uses OS entropy (random every run)')
    parser.add_argument('--log-level', type=str, default='WARNING')
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format='%(asctime)s %(name)s %(levelname)s %(message)s')

    root = tk.Tk()
    MinefieldGUI(root, BoardEngine(seed=(None if args.seed < 0 else args.seed)), PRESETS[args.preset])
    root.mainloop()


if __name__ == '__main__':
    main()
