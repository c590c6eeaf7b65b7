"""Basic tests for the lifegrid package."""

from lifegrid import GridEngine, PatternLibrary, Simulation, SimulationConfig, init_board


def test_board_creation():
    """Test basic board creation and cell operations."""
    board = init_board(10, 10, False)
    assert board.shape == (10, 10)
    assert board.get_cell(0, 0) is False

    board.set_cell(5, 5, True)
    assert board.get_cell(5, 5) is True


def test_engine_creation():
    """Test basic engine creation."""
    engine = GridEngine(5, 5, False)
    assert engine.population == 0

    engine.set_cell(2, 2, True)
    assert engine.population == 1


def test_pattern_library():
    """Test pattern library has some patterns."""
    patterns = PatternLibrary().list_patterns()
    assert len(patterns) > 0
    assert "Glider" in patterns


def test_blinker_pattern():
    """Test the blinker oscillates through a simulation."""
    boards = []
    config = SimulationConfig(rows=5, columns=5, pattern="Blinker", max_generations=2)
    Simulation(config, boards.append, sleep=lambda seconds: None).run()

    assert [board.population for board in boards] == [3, 3, 3]
    assert boards[1].to_list() == [
        [False, False, False, False, False],
        [False, False, True, False, False],
        [False, False, True, False, False],
        [False, False, True, False, False],
        [False, False, False, False, False],
    ]
    assert boards[2] == boards[0]
