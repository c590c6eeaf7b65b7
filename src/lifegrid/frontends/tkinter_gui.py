"""Tkinter GUI frontend for Conway's Game of Life."""

import sys
import tkinter as tk
from tkinter import ttk
from typing import Any, Dict, Optional, Tuple

from ..core.board import Board, random_seed
from ..core.engine import GridEngine
from ..core.patterns import PatternLibrary
from ..core.simulation import SimulationConfig

ALIVE_COLOR = "#00FF00"
DEAD_COLOR = "#222222"


class TkinterGameOfLifeGUI:
    """Tkinter-based GUI: draws the board on a canvas and toggles cells on click."""

    def __init__(self, master: tk.Tk, config: Optional[SimulationConfig] = None, cell_size: int = 12) -> None:
        """Initialize the GUI.

        Args:
            master: Root Tkinter window
            config: Board size, seeding and timer interval
            cell_size: Size of a cell on the canvas in pixels
        """
        self.master = master
        self.master.title("Conway's Game of Life")
        self.master.configure(bg="#333333")

        self.config = config or SimulationConfig()
        self.cell_size = cell_size
        self.interval_ms = max(1, int(self.config.interval * 1000))

        self.engine = GridEngine(
            self.config.rows, self.config.columns, random_seed(self.config.population_rate, self.config.seed)
        )
        self.pattern_library = PatternLibrary()

        self.running = False

        # Canvas rectangle per cell, keyed by (row, column)
        self.cell_objects: Dict[Tuple[int, int], int] = {}

        self.setup_ui()
        self.render(self.engine.board)
        self.update_loop()

    def setup_ui(self) -> None:
        """Set up the user interface."""
        control_frame = tk.Frame(self.master, bg="#333333")
        control_frame.pack(pady=5)
        self._create_control_buttons(control_frame)

        self._create_canvas()

        self.stats_label = tk.Label(self.master, bg="#333333", fg="white", font=("Arial", 9))
        self.stats_label.pack(pady=3)

    def _create_control_buttons(self, parent: tk.Frame) -> None:
        """Create the control buttons and pattern selector."""
        buttons = [
            ("toggle_btn", "Start", self.toggle_running),
            ("step_btn", "Step", self.step),
            ("randomize_btn", "Randomize", self.randomize),
            ("clear_btn", "Clear", self.clear),
        ]
        for attr, text, command in buttons:
            button = tk.Button(parent, text=text, command=command, bg="#555555", fg="white", font=("Arial", 9))
            button.pack(side=tk.LEFT, padx=3)
            setattr(self, attr, button)

        self.pattern_var = tk.StringVar()
        self.pattern_combo = ttk.Combobox(
            parent,
            textvariable=self.pattern_var,
            values=self.pattern_library.list_patterns(),
            state="readonly",
            width=20,
        )
        self.pattern_combo.pack(side=tk.LEFT, padx=3)

        self.load_btn = tk.Button(
            parent,
            text="Load Pattern",
            command=self.load_selected_pattern,
            bg="#444444",
            fg="white",
            font=("Arial", 9),
        )
        self.load_btn.pack(side=tk.LEFT, padx=3)

    def _create_canvas(self) -> None:
        """Create the board canvas with one rectangle per cell."""
        self.canvas = tk.Canvas(
            self.master,
            width=self.engine.columns * self.cell_size,
            height=self.engine.rows * self.cell_size,
            bg=DEAD_COLOR,
            highlightthickness=0,
        )
        self.canvas.pack(padx=5, pady=5)
        self.canvas.bind("<Button-1>", self.on_click)

        for row in range(self.engine.rows):
            for column in range(self.engine.columns):
                x1 = column * self.cell_size
                y1 = row * self.cell_size
                self.cell_objects[(row, column)] = self.canvas.create_rectangle(
                    x1, y1, x1 + self.cell_size, y1 + self.cell_size, fill=DEAD_COLOR, outline="#333333"
                )

    def render(self, board: Board) -> None:
        """Draw a board on the canvas."""
        for (row, column), obj in self.cell_objects.items():
            color = ALIVE_COLOR if board.get_cell(row, column) else DEAD_COLOR
            self.canvas.itemconfig(obj, fill=color)
        self.update_statistics()

    def update_statistics(self) -> None:
        stats = self.engine.get_statistics()
        self.stats_label.config(
            text=(
                f"Running: {'Yes' if self.running else 'No'}   "
                f"Generation: {stats['generation']}   "
                f"Population: {stats['population']} ({stats['population_density']:.1%})"
            )
        )

    def toggle_running(self) -> None:
        self.running = not self.running
        self.toggle_btn.config(text="Stop" if self.running else "Start")
        self.update_statistics()

    def step(self) -> None:
        """Advance a single generation."""
        self.render(self.engine.step())

    def randomize(self) -> None:
        """Reseed the board randomly."""
        self.engine.reset(random_seed(self.config.population_rate))
        self.render(self.engine.board)

    def clear(self) -> None:
        self.engine.clear()
        self.render(self.engine.board)

    def load_selected_pattern(self) -> None:
        """Load the pattern chosen in the selector, centered."""
        pattern = self.pattern_library.get_pattern(self.pattern_var.get())
        if pattern is None:
            return

        row_offset, column_offset = pattern.centered_offset(self.engine.board)
        self.engine.load_pattern(pattern, row_offset, column_offset)
        self.render(self.engine.board)

    def on_click(self, event: Any) -> None:
        """Handle mouse click on canvas."""
        self.toggle_cell_at_position(event.x, event.y)

    def toggle_cell_at_position(self, canvas_x: int, canvas_y: int) -> Optional[bool]:
        """Toggle the cell under canvas coordinates.

        Returns:
            New cell state, or None if the position is off the board
        """
        row = canvas_y // self.cell_size
        column = canvas_x // self.cell_size

        if not self.engine.board.in_bounds(row, column):
            return None

        new_value = self.engine.toggle_cell(row, column)
        self.render(self.engine.board)
        return new_value

    def update_loop(self) -> None:
        """Advance one generation when running, then schedule the next tick."""
        if self.running:
            self.step()

        self.master.after(self.interval_ms, self.update_loop)


def main() -> None:
    """Main entry point for the Tkinter GUI."""
    root = tk.Tk()
    root.resizable(False, False)

    test_mode = "--test" in sys.argv

    app = TkinterGameOfLifeGUI(root)

    if test_mode:
        print("Running in test mode...")
        app.toggle_running()

        def auto_exit() -> None:
            print(f"Test completed. Ran {app.engine.generation} generations.")
            root.quit()
            root.destroy()

        root.after(3000, auto_exit)

    root.mainloop()


if __name__ == "__main__":
    main()
