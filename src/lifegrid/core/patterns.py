"""Common Conway's Game of Life patterns."""

from typing import Dict, List, Optional, Tuple

from .board import Board
from .errors import IndexOutOfRange


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (row, column) coordinates for living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def apply_to_board(self, board: Board, row_offset: int = 0, column_offset: int = 0) -> None:
        """Place this pattern on a board.

        Cells that fall outside the board are skipped. The rest of the board
        is left as it is.

        Args:
            board: Target board
            row_offset: Vertical offset
            column_offset: Horizontal offset
        """
        for row, column in self.cells:
            try:
                board.set_cell(row + row_offset, column + column_offset, True)
            except IndexOutOfRange:
                pass

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_row, min_column, max_row, max_column)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        rows, columns = zip(*self.cells)
        return (min(rows), min(columns), max(rows), max(columns))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (rows, columns)."""
        min_row, min_column, max_row, max_column = self.get_bounding_box()
        return (max_row - min_row + 1, max_column - min_column + 1)

    def centered_offset(self, board: Board) -> Tuple[int, int]:
        """Offset that centers the pattern's bounding box on a board.

        The box is pinned to the top-left corner when it is larger than the board.
        """
        min_row, min_column, _, _ = self.get_bounding_box()
        height, width = self.get_size()
        return (
            max(0, (board.rows - height) // 2) - min_row,
            max(0, (board.columns - width) // 2) - min_column,
        )

    @classmethod
    def from_board(cls, board: Board, name: str, description: str = "") -> "Pattern":
        """Create a pattern from the living cells of a board."""
        cells = [
            (row, column)
            for row in range(board.rows)
            for column in range(board.columns)
            if board.get_cell(row, column)
        ]
        return cls(name, cells, description)


class PatternLibrary:
    """In-memory collection of named patterns."""

    CATEGORIES = {
        "Still Life": ["Block", "Beehive", "Loaf"],
        "Oscillators": ["Blinker", "Toad", "Beacon", "Pulsar"],
        "Spaceships": ["Glider", "Lightweight Spaceship"],
        "Methuselahs": ["R-pentomino", "Diehard", "Acorn"],
    }

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still life patterns
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))
        self.add_pattern(
            Pattern("Beehive", [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2)], "Beehive still life")
        )
        self.add_pattern(
            Pattern("Loaf", [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 3), (3, 2)], "Loaf still life")
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(1, 0), (1, 1), (1, 2)], "Period-2 oscillator"))
        self.add_pattern(
            Pattern("Toad", [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)], "Period-2 oscillator")
        )
        self.add_pattern(
            Pattern("Beacon", [(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)], "Period-2 oscillator")
        )

        # Pulsar: one quadrant mirrored across both axes
        quadrant = [(0, 2), (0, 3), (0, 4), (2, 0), (3, 0), (4, 0), (2, 5), (3, 5), (4, 5), (5, 2), (5, 3), (5, 4)]
        pulsar = set()
        for row, column in quadrant:
            for r in (row, 12 - row):
                for c in (column, 12 - column):
                    pulsar.add((r, c))
        self.add_pattern(Pattern("Pulsar", sorted(pulsar), "Period-3 oscillator"))

        # Spaceships
        self.add_pattern(
            Pattern("Glider", [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)], "Smallest spaceship, period-4")
        )
        self.add_pattern(
            Pattern(
                "Lightweight Spaceship",
                [(0, 0), (0, 3), (1, 4), (2, 0), (2, 4), (3, 1), (3, 2), (3, 3), (3, 4)],
                "LWSS - Period-4 spaceship",
            )
        )

        # Methuselahs
        self.add_pattern(
            Pattern(
                "R-pentomino",
                [(0, 1), (0, 2), (1, 0), (1, 1), (2, 1)],
                "Famous methuselah that stabilizes after 1103 generations",
            )
        )
        self.add_pattern(
            Pattern(
                "Diehard",
                [(0, 6), (1, 0), (1, 1), (2, 1), (2, 5), (2, 6), (2, 7)],
                "Dies after exactly 130 generations",
            )
        )
        self.add_pattern(
            Pattern(
                "Acorn",
                [(0, 1), (1, 3), (2, 0), (2, 1), (2, 4), (2, 5), (2, 6)],
                "Takes 5206 generations to stabilize",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Patterns added at runtime are listed under "Custom".
        """
        categories = {category: list(names) for category, names in self.CATEGORIES.items()}
        categories["Custom"] = []

        builtin = {name for names in self.CATEGORIES.values() for name in names}
        for name in self._patterns:
            if name not in builtin:
                categories["Custom"].append(name)

        # Remove empty categories
        return {category: names for category, names in categories.items() if names}
