"""Tests for the Pattern and PatternLibrary classes."""

from lifegrid.core.board import init_board
from lifegrid.core.patterns import Pattern, PatternLibrary


class TestPattern:
    """Test cases for the Pattern class."""

    def test_initialization(self):
        """Test pattern initialization."""
        cells = [(0, 0), (0, 1), (0, 2)]
        pattern = Pattern("Blinker", cells, "Period-2 oscillator")

        assert pattern.name == "Blinker"
        assert pattern.cells == cells
        assert pattern.description == "Period-2 oscillator"

    def test_apply_to_board_with_offset(self):
        """Test applying pattern with offset."""
        board = init_board(10, 10, False)
        pattern = Pattern("Blinker", [(0, 0), (0, 1), (0, 2)])

        pattern.apply_to_board(board, row_offset=3, column_offset=5)

        assert board.get_cell(3, 5)
        assert board.get_cell(3, 6)
        assert board.get_cell(3, 7)
        assert not board.get_cell(0, 0)
        assert board.population == 3

    def test_apply_to_board_out_of_bounds(self):
        """Test applying pattern that goes out of bounds."""
        board = init_board(3, 3, False)
        pattern = Pattern("Test", [(0, 0), (0, 1), (0, 2), (0, 3), (-1, 0)])

        # Should not raise error, just skip out-of-bounds cells
        pattern.apply_to_board(board)

        assert board.population == 3

    def test_bounding_box_and_size(self):
        """Test bounding box calculation."""
        assert Pattern("Empty", []).get_bounding_box() == (0, 0, 0, 0)

        pattern = Pattern("L", [(1, 2), (3, 2), (3, 5)])
        assert pattern.get_bounding_box() == (1, 2, 3, 5)
        assert pattern.get_size() == (3, 4)

    def test_centered_offset(self):
        """Test centering on a board and clamping on small boards."""
        blinker = Pattern("Blinker", [(1, 0), (1, 1), (1, 2)])
        assert blinker.centered_offset(init_board(5, 5, False)) == (1, 1)

        glider = Pattern("Glider", [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)])
        assert glider.centered_offset(init_board(2, 2, False)) == (0, 0)

    def test_from_board(self):
        """Test capturing the live cells of a board."""
        board = init_board(4, 4, False)
        board.set_cell(1, 2, True)
        board.set_cell(3, 0, True)

        pattern = Pattern.from_board(board, "Captured")
        assert pattern.name == "Captured"
        assert sorted(pattern.cells) == [(1, 2), (3, 0)]


class TestPatternLibrary:
    """Test cases for the PatternLibrary class."""

    def test_builtin_patterns(self):
        """Test built-in patterns are present."""
        library = PatternLibrary()
        names = library.list_patterns()

        for name in ["Block", "Blinker", "Glider", "Pulsar", "R-pentomino"]:
            assert name in names
            assert library.get_pattern(name) is not None

    def test_get_missing_pattern(self):
        assert PatternLibrary().get_pattern("Missing") is None

    def test_categories(self):
        """Test category grouping and the Custom category."""
        library = PatternLibrary()
        categories = library.get_patterns_by_category()

        assert "Blinker" in categories["Oscillators"]
        assert "Block" in categories["Still Life"]
        assert "Custom" not in categories

        library.add_pattern(Pattern("Dot", [(0, 0)]))
        assert library.get_patterns_by_category()["Custom"] == ["Dot"]

    def test_pulsar_shape(self):
        """Test the pulsar is 13x13 with 48 cells."""
        pulsar = PatternLibrary().get_pattern("Pulsar")
        assert pulsar.get_size() == (13, 13)
        assert len(pulsar.cells) == 48

    def test_still_lifes_are_stable(self):
        """Test still life patterns don't change."""
        library = PatternLibrary()
        for name in ["Block", "Beehive", "Loaf"]:
            board = init_board(8, 8, False)
            library.get_pattern(name).apply_to_board(board, 2, 2)
            assert board.next_generation() == board, name

    def test_period_two_oscillators(self):
        """Test period-2 oscillators return after two generations."""
        library = PatternLibrary()
        for name in ["Blinker", "Toad", "Beacon"]:
            board = init_board(8, 8, False)
            library.get_pattern(name).apply_to_board(board, 2, 2)
            assert board.next_generation() != board, name
            assert board.next_generation().next_generation() == board, name

    def test_pulsar_period_three(self):
        """Test the pulsar returns after three generations."""
        board = init_board(17, 17, False)
        PatternLibrary().get_pattern("Pulsar").apply_to_board(board, 2, 2)

        after = board
        for _ in range(3):
            after = after.next_generation()
        assert after == board

    def test_glider_moves(self):
        """Test the glider keeps five cells and shifts one cell diagonally every four generations."""
        glider = PatternLibrary().get_pattern("Glider")
        board = init_board(10, 10, False)
        glider.apply_to_board(board, 1, 1)

        after = board
        for _ in range(4):
            after = after.next_generation()

        expected = init_board(10, 10, False)
        glider.apply_to_board(expected, 2, 2)
        assert after == expected
