"""Board data structure and the Game of Life transition kernel."""

import logging
import random
from typing import Callable, Iterator, List, Optional, Tuple, Union

import numpy as np
import torch
import torch.nn.functional as F

from .errors import IndexOutOfRange, InvalidDimensions

logger = logging.getLogger(__name__)

SeedFn = Callable[[int, int], bool]
Seed = Union[SeedFn, bool, None]

# Moore neighborhood weights: every adjacent cell counts once, the center not at all.
_NEIGHBOR_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).view(1, 1, 3, 3)


def _check_dimensions(rows: int, columns: int) -> None:
    for name, value in (("rows", rows), ("columns", columns)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidDimensions(f"{name} must be an integer, got {value!r}")
        if value < 0:
            raise InvalidDimensions(f"{name} must be non-negative, got {value}")


class Board:
    """A rectangular grid of boolean cells, indexed by (row, column).

    The dimensions are fixed when the board is created. Cells outside the
    board read as dead; there is no wraparound.
    """

    def __init__(self, rows: int, columns: int, cells: Optional[np.ndarray] = None) -> None:
        """Create a board.

        Args:
            rows: Number of rows
            columns: Number of columns
            cells: Optional initial cell array of shape (rows, columns); copied

        Raises:
            InvalidDimensions: If a dimension is negative or not an integer,
                or ``cells`` does not match the dimensions
        """
        _check_dimensions(rows, columns)
        self._rows = int(rows)
        self._columns = int(columns)

        if cells is None:
            self._cells = np.zeros((self._rows, self._columns), dtype=bool)
        else:
            arr = np.asarray(cells)
            if arr.shape != (self._rows, self._columns):
                raise InvalidDimensions(f"Cell array shape {arr.shape} doesn't match board {self.shape}")
            self._cells = arr.astype(bool, copy=True)

    @classmethod
    def from_list(cls, data: List[List[bool]]) -> "Board":
        """Build a board from nested row lists.

        Raises:
            InvalidDimensions: If the rows are not all the same length
        """
        rows = len(data)
        columns = len(data[0]) if rows else 0
        if any(len(row) != columns for row in data):
            raise InvalidDimensions("All rows must have the same number of columns")

        return cls(rows, columns, np.array(data, dtype=bool).reshape(rows, columns))

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        """Board dimensions as (rows, columns)."""
        return (self._rows, self._columns)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cell array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def population(self) -> int:
        """Number of living cells."""
        return int(np.count_nonzero(self._cells))

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self._rows and 0 <= column < self._columns

    def get_cell(self, row: int, column: int) -> bool:
        """Get the state of a cell.

        Args:
            row: Row coordinate
            column: Column coordinate

        Returns:
            True if the cell is alive; False if it is dead or off the board
        """
        if not self.in_bounds(row, column):
            return False

        return bool(self._cells[row, column])

    def set_cell(self, row: int, column: int, value: bool) -> None:
        """Set the state of a cell.

        Args:
            row: Row coordinate
            column: Column coordinate
            value: Whether the cell should be alive

        Raises:
            IndexOutOfRange: If the coordinates are off the board
        """
        if not self.in_bounds(row, column):
            raise IndexOutOfRange(f"Cell ({row}, {column}) out of bounds for {self._rows}x{self._columns} board")

        self._cells[row, column] = bool(value)

    def toggle_cell(self, row: int, column: int) -> bool:
        """Toggle the state of a cell.

        Returns:
            New state of the cell
        """
        new_value = not self.get_cell(row, column)
        self.set_cell(row, column, new_value)
        return new_value

    def count_alive_neighbors(self, row: int, column: int) -> int:
        """Count living cells in the Moore neighborhood of (row, column).

        Neighbors off the board count as dead, so this is defined for any
        coordinates, including ones outside the board.

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                if self.get_cell(row + dr, column + dc):
                    count += 1

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for every cell with a zero-padded convolution.

        Returns:
            Array of shape (rows, columns) with neighbor counts
        """
        if self._cells.size == 0:
            return np.zeros(self.shape, dtype=np.int8)

        source = torch.from_numpy(self._cells.astype(np.float32)).view(1, 1, self._rows, self._columns)
        neighbors = F.conv2d(source, _NEIGHBOR_KERNEL, padding=1)
        return neighbors[0, 0].numpy().astype(np.int8)

    def next_generation(self) -> "Board":
        """Compute the next generation as a new board.

        All neighbor counts are taken from this board before any new value
        is written, and this board is left untouched.
        """
        counts = self.count_all_neighbors()
        alive = self._cells

        # Live cell with 2-3 neighbors survives
        survivors = alive & ((counts == 2) | (counts == 3))

        # Dead cell with exactly 3 neighbors becomes alive
        births = ~alive & (counts == 3)

        return Board(self._rows, self._columns, survivors | births)

    def copy(self) -> "Board":
        return Board(self._rows, self._columns, self._cells)

    def to_list(self) -> List[List[bool]]:
        """Convert the board to nested row lists of bool."""
        return [[bool(value) for value in row] for row in self._cells]

    def __iter__(self) -> Iterator[List[bool]]:
        for row in self._cells:
            yield [bool(value) for value in row]

    def __len__(self) -> int:
        return self._rows

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"Board(rows={self._rows}, columns={self._columns}, population={self.population})"

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join("".join("*" if value else "." for value in row) for row in self._cells)


def random_seed(probability: float = 0.5, seed: Optional[int] = None) -> SeedFn:
    """Seed strategy that makes each cell alive with the given probability.

    Args:
        probability: Chance each cell will be alive (0.0 to 1.0)
        seed: Optional seed for a reproducible layout
    """
    rng = random.Random(seed)

    def seed_fn(row: int, column: int) -> bool:
        return rng.random() < probability

    return seed_fn


def constant_seed(value: bool) -> SeedFn:
    """Seed strategy that gives every cell the same value."""
    value = bool(value)

    def seed_fn(row: int, column: int) -> bool:
        return value

    return seed_fn


def _resolve_seed(seed: Seed) -> SeedFn:
    if seed is None:
        return random_seed()
    if isinstance(seed, (bool, np.bool_)):
        return constant_seed(bool(seed))
    return seed


def init_board(rows: int, columns: int, seed: Seed = None) -> Board:
    """Create a rows x columns board seeded cell by cell.

    Args:
        rows: Number of rows
        columns: Number of columns
        seed: Callable ``(row, column) -> bool``, a constant bool, or None
            for a 50% random layout

    Returns:
        A fully populated board

    Raises:
        InvalidDimensions: If a dimension is negative or not an integer
    """
    board = Board(rows, columns)
    logger.debug("Initializing %dx%d board", board.rows, board.columns)

    seed_fn = _resolve_seed(seed)
    for row in range(board.rows):
        for column in range(board.columns):
            board._cells[row, column] = bool(seed_fn(row, column))

    return board
