"""Grid engine that owns the current board of a simulation."""

import logging
from typing import Any, Dict, Tuple

from .board import Board, Seed, init_board
from .patterns import Pattern

logger = logging.getLogger(__name__)


class GridEngine:
    """Holds the dimensions and current board of one simulation.

    Each step replaces the board wholesale with its next generation, so a
    board handed to a renderer is never modified by a later step.
    """

    def __init__(self, rows: int, columns: int, seed: Seed = None) -> None:
        """Initialize the engine with a freshly seeded board.

        Args:
            rows: Number of rows
            columns: Number of columns
            seed: Seed strategy passed to ``init_board``

        Raises:
            InvalidDimensions: If a dimension is negative or not an integer
        """
        self._board = init_board(rows, columns, seed)
        self._generation = 0

    @property
    def board(self) -> Board:
        """The current board."""
        return self._board

    @property
    def rows(self) -> int:
        return self._board.rows

    @property
    def columns(self) -> int:
        return self._board.columns

    @property
    def shape(self) -> Tuple[int, int]:
        return self._board.shape

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._board.population

    def get_cell(self, row: int, column: int) -> bool:
        return self._board.get_cell(row, column)

    def set_cell(self, row: int, column: int, value: bool) -> None:
        self._board.set_cell(row, column, value)

    def toggle_cell(self, row: int, column: int) -> bool:
        return self._board.toggle_cell(row, column)

    def count_alive_neighbors(self, row: int, column: int) -> int:
        return self._board.count_alive_neighbors(row, column)

    def step(self) -> Board:
        """Advance the simulation by one generation.

        Returns:
            The new current board
        """
        self._board = self._board.next_generation()
        self._generation += 1
        logger.debug("Generation %d: population %d", self._generation, self._board.population)
        return self._board

    def reset(self, seed: Seed = None) -> None:
        """Replace the board with a freshly seeded one of the same size."""
        logger.debug("Resetting %dx%d board", self.rows, self.columns)
        self._board = init_board(self.rows, self.columns, seed)
        self._generation = 0

    def clear(self) -> None:
        """Reset to an all-dead board."""
        self.reset(False)

    def load_pattern(self, pattern: Pattern, row_offset: int = 0, column_offset: int = 0) -> None:
        """Clear the board and place a pattern on it.

        Pattern cells that fall off the board are skipped.
        """
        self.clear()
        pattern.apply_to_board(self._board, row_offset, column_offset)
        logger.debug("Loaded pattern '%s' at (%d, %d)", pattern.name, row_offset, column_offset)

    def get_statistics(self) -> Dict[str, Any]:
        """Get simulation statistics.

        Returns:
            Dictionary with generation, population, grid size and density
        """
        area = self.rows * self.columns
        return {
            "generation": self._generation,
            "population": self.population,
            "grid_size": self.shape,
            "population_density": self.population / area if area else 0.0,
        }
