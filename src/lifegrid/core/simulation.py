"""Timed simulation loop driving a grid engine and a render sink."""

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from .board import Board, random_seed
from .engine import GridEngine
from .errors import PatternNotFound
from .patterns import PatternLibrary

logger = logging.getLogger(__name__)

DEFAULT_ROWS = 40
DEFAULT_COLUMNS = 40
DEFAULT_INTERVAL = 0.5

RenderSink = Callable[[Board], None]


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""

    rows: int = DEFAULT_ROWS
    columns: int = DEFAULT_COLUMNS
    interval: float = DEFAULT_INTERVAL
    population_rate: float = 0.5
    seed: Optional[int] = None
    pattern: Optional[str] = None
    max_generations: Optional[int] = None

    def validate(self) -> List[str]:
        """Check the configuration.

        Returns:
            List of error messages, empty when the configuration is valid
        """
        errors = []

        if self.rows < 0:
            errors.append("Rows must be non-negative")

        if self.columns < 0:
            errors.append("Columns must be non-negative")

        if self.interval < 0:
            errors.append("Interval must be non-negative")

        if not 0.0 <= self.population_rate <= 1.0:
            errors.append("Population rate must be between 0.0 and 1.0")

        if self.max_generations is not None and self.max_generations <= 0:
            errors.append("Max generations must be positive")

        return errors


class Simulation:
    """Drives a GridEngine at a fixed cadence and hands each board to a render sink."""

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        render: Optional[RenderSink] = None,
        sleep: Callable[[float], None] = time.sleep,
        pattern_library: Optional[PatternLibrary] = None,
    ) -> None:
        """Initialize the simulation.

        Args:
            config: Simulation configuration (defaults to a 40x40 random board)
            render: Callable that displays a board; defaults to doing nothing
            sleep: Function used to wait between generations
            pattern_library: Library used to resolve ``config.pattern``
        """
        self.config = config or SimulationConfig()
        self.render = render or (lambda board: None)
        self.pattern_library = pattern_library or PatternLibrary()
        self.engine: Optional[GridEngine] = None
        self.running = False
        self._sleep = sleep

    def start(self) -> GridEngine:
        """Build the engine from the configuration and render the first board.

        Raises:
            PatternNotFound: If ``config.pattern`` is not in the library
            InvalidDimensions: If the configured dimensions are invalid
        """
        config = self.config
        logger.debug("Initializing %dx%d simulation", config.rows, config.columns)

        if config.pattern:
            pattern = self.pattern_library.get_pattern(config.pattern)
            if pattern is None:
                raise PatternNotFound(f"Pattern '{config.pattern}' not found")

            engine = GridEngine(config.rows, config.columns, False)
            row_offset, column_offset = pattern.centered_offset(engine.board)
            engine.load_pattern(pattern, row_offset, column_offset)
        else:
            engine = GridEngine(config.rows, config.columns, random_seed(config.population_rate, config.seed))

        self.engine = engine
        self.render(engine.board)
        return engine

    def tick(self) -> Board:
        """Advance one generation and render it."""
        if self.engine is None:
            self.start()

        board = self.engine.step()
        self.render(board)
        return board

    def run(self) -> int:
        """Run until stopped or until ``max_generations`` is reached.

        Returns:
            The generation reached
        """
        if self.engine is None:
            self.start()

        self.running = True
        logger.debug("Simulation started (interval %.3fs)", self.config.interval)
        try:
            while self.running and not self._reached_limit():
                self._sleep(self.config.interval)
                if not self.running:
                    break
                self.tick()
        finally:
            self.running = False
            logger.debug("Simulation stopped at generation %d", self.engine.generation)

        return self.engine.generation

    def stop(self) -> None:
        """Stop the loop after the current generation."""
        self.running = False

    def _reached_limit(self) -> bool:
        limit = self.config.max_generations
        return limit is not None and self.engine.generation >= limit
