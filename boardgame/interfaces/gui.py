"""
gui.py - tkinter front end for Connect 4

A 7x6 grid of slot buttons. Clicking any slot drops a piece into that slot's
column. The turn label, the output log and the message boxes are driven by
TurnBasedShell.
"""

import tkinter as tk
from tkinter import messagebox
from tkinter.scrolledtext import ScrolledText
from typing import Optional, Sequence

from boardgame.config import GameConfig
from boardgame.debug import debug
from boardgame.interfaces.shell import TurnBasedShell
from boardgame.utils import Cell, Player


class Style:
    EMPTY_COLOR = "#E8F0FE"
    RED_COLOR = "#D93025"
    BLUE_COLOR = "#1A56DB"
    HIGHLIGHT_COLOR = "#F9D71C"
    SLOT_FONT = ("Segoe UI", 10, "bold")
    STATUS_FONT = ("Segoe UI", 12)
    LOG_FONT = ("Consolas", 10)


PIECE_COLORS = {
    Player.RED: Style.RED_COLOR,
    Player.BLUE: Style.BLUE_COLOR,
}


class SlotGridApp(TurnBasedShell):
    """Connect 4 window built from a grid of slot buttons."""

    def __init__(self, master: tk.Tk, config: Optional[GameConfig] = None):
        self.master = master
        self.slots = {}
        self.status_text = tk.StringVar(master=master)

        board_frame = tk.Frame(master)
        board_frame.grid(row=0, column=0, padx=10, pady=10)
        for row in range(self.y_count):
            for column in range(self.x_count):
                slot = tk.Button(board_frame, width=6, height=3, font=Style.SLOT_FONT,
                                 command=lambda c=column: self.select_column(c))
                slot.grid(row=row, column=column, padx=1, pady=1)
                self.slots[Cell(column, row)] = slot

        side_frame = tk.Frame(master)
        side_frame.grid(row=0, column=1, sticky="ns", padx=(0, 10), pady=10)
        tk.Label(side_frame, textvariable=self.status_text,
                 font=Style.STATUS_FONT, anchor="w").pack(fill=tk.X)
        self.log_view = ScrolledText(side_frame, width=28, height=16,
                                     font=Style.LOG_FONT, state=tk.DISABLED)
        self.log_view.pack(fill=tk.BOTH, expand=True, pady=5)
        tk.Button(side_frame, text="New Game", command=self.new_game).pack(fill=tk.X)

        super().__init__(config)
        master.title(self.title)

    def init_game(self):
        for slot in self.slots.values():
            slot.config(text=" ", bg=Style.EMPTY_COLOR, state=tk.NORMAL)
        self.log_view.config(state=tk.NORMAL)
        self.log_view.delete("1.0", tk.END)
        self.log_view.config(state=tk.DISABLED)
        self.turn_changed(self.current_player_name)

    def render_piece(self, player: Player, column: int, row: int):
        self.slots[Cell(column, row)].config(text=self.name_of(player),
                                             bg=PIECE_COLORS[player])

    def show_invalid_move(self, column: int):
        messagebox.showinfo(self.title, "Invalid Move", parent=self.master)

    def highlight(self, cells: Sequence[Cell]):
        for cell in cells:
            self.slots[cell].config(bg=Style.HIGHLIGHT_COLOR)

    def turn_changed(self, player_name: str):
        self.status_text.set(f"Turn: {player_name}")

    def announce_game_over(self, message: str):
        for slot in self.slots.values():
            slot.config(state=tk.DISABLED)
        self.status_text.set(message)
        messagebox.showinfo(self.title, "Game ended!", parent=self.master)

    def output_line_added(self, line: str):
        self.log_view.config(state=tk.NORMAL)
        self.log_view.insert(tk.END, line + "\n")
        self.log_view.see(tk.END)
        self.log_view.config(state=tk.DISABLED)


def run_gui(config: Optional[GameConfig] = None):
    """Open the Connect 4 window and run the tkinter main loop."""
    root = tk.Tk()
    root.resizable(False, False)
    SlotGridApp(root, config)
    debug.info("GUI started", "shell")
    root.mainloop()
