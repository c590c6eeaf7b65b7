"""Core cellular automata logic."""

from .board import Board, init_board, random_seed, constant_seed
from .engine import GridEngine
from .errors import LifeGridError, InvalidDimensions, IndexOutOfRange, PatternNotFound
from .patterns import Pattern, PatternLibrary
from .simulation import Simulation, SimulationConfig

__all__ = [
    "Board",
    "init_board",
    "random_seed",
    "constant_seed",
    "GridEngine",
    "LifeGridError",
    "InvalidDimensions",
    "IndexOutOfRange",
    "PatternNotFound",
    "Pattern",
    "PatternLibrary",
    "Simulation",
    "SimulationConfig",
]
