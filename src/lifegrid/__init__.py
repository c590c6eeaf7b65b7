"""Conway's Game of Life on a fixed-size bounded grid."""

__version__ = "0.1.0"

from .core.board import Board, init_board
from .core.engine import GridEngine
from .core.patterns import Pattern, PatternLibrary
from .core.simulation import Simulation, SimulationConfig

__all__ = ["Board", "init_board", "GridEngine", "Pattern", "PatternLibrary", "Simulation", "SimulationConfig"]
