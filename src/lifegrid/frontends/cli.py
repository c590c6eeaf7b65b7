"""Command-line interface for Conway's Game of Life."""

import argparse
import logging
import sys
import time
from typing import Any, Dict, List, Optional, TextIO, Tuple

from ..core.errors import LifeGridError
from ..core.patterns import PatternLibrary
from ..core.simulation import DEFAULT_COLUMNS, DEFAULT_INTERVAL, DEFAULT_ROWS, Simulation, SimulationConfig
from .render import HtmlTableRenderer, TextRenderer

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self) -> None:
        self.pattern_library = PatternLibrary()

    def run_simulation(
        self,
        config: SimulationConfig,
        output_format: str = "text",
        clear_screen: bool = False,
        verbose: bool = False,
        stream: Optional[TextIO] = None,
    ) -> Tuple[int, Dict[str, Any]]:
        """Run a simulation, rendering every generation.

        Args:
            config: Simulation configuration
            output_format: 'text' or 'html'
            clear_screen: Clear the terminal between text frames
            verbose: Print progress updates
            stream: Output stream for rendered boards (defaults to stdout)

        Returns:
            Tuple of (final_generation, statistics)
        """
        if output_format == "html":
            renderer = HtmlTableRenderer(stream or sys.stdout)
        else:
            renderer = TextRenderer(stream, clear_screen=clear_screen)

        simulation = Simulation(config, renderer, pattern_library=self.pattern_library)

        if verbose:
            print(f"Initializing {config.rows}x{config.columns} grid")
            if config.pattern:
                print(f"Loading pattern '{config.pattern}'")
            else:
                print(f"Generating random population (rate: {config.population_rate:.2%})")

        engine = simulation.start()
        initial_population = engine.population

        start_time = time.time()
        try:
            final_generation = simulation.run()
        finally:
            duration = time.time() - start_time

        stats = engine.get_statistics()
        stats["initial_population"] = initial_population
        stats["duration_seconds"] = duration
        return final_generation, stats

    def list_patterns(self) -> None:
        """List available patterns by category."""
        categories = self.pattern_library.get_patterns_by_category()

        print("Available patterns:")
        for category, patterns in categories.items():
            print(f"\n{category}:")
            for pattern_name in patterns:
                pattern = self.pattern_library.get_pattern(pattern_name)
                if pattern:
                    rows, columns = pattern.get_size()
                    print(f"  {pattern_name}: {rows}x{columns}, {len(pattern.cells)} cells")
                    if pattern.description:
                        print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run a random 40x40 board forever, one generation every 500 ms
  lifegrid-cli

  # Run a glider on a 20x20 board for 30 generations
  lifegrid-cli -r 20 -c 20 --pattern Glider -n 30 --clear

  # Emit each generation as an HTML table
  lifegrid-cli -r 10 -c 10 -n 5 --interval 0 --format html

  # List available patterns
  lifegrid-cli --list-patterns
        """,
    )

    # Grid configuration
    parser.add_argument(
        "-r", "--rows", type=int, default=DEFAULT_ROWS, help=f"Number of rows (default: {DEFAULT_ROWS})"
    )

    parser.add_argument(
        "-c",
        "--columns",
        type=int,
        default=DEFAULT_COLUMNS,
        help=f"Number of columns (default: {DEFAULT_COLUMNS})",
    )

    parser.add_argument(
        "-p",
        "--population",
        type=float,
        default=0.5,
        help="Initial random population rate 0.0-1.0 (default: 0.5)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for a reproducible initial board",
    )

    parser.add_argument(
        "--pattern",
        type=str,
        help="Start from a named pattern (centered) instead of a random board",
    )

    # Simulation configuration
    parser.add_argument(
        "-i",
        "--interval",
        type=float,
        default=DEFAULT_INTERVAL,
        help=f"Seconds between generations (default: {DEFAULT_INTERVAL})",
    )

    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        help="Stop after this many generations (default: run until interrupted)",
    )

    # Output configuration
    parser.add_argument(
        "--format",
        choices=["text", "html"],
        default="text",
        help="Output format for each generation (default: text)",
    )

    parser.add_argument(
        "--clear",
        action="store_true",
        help="Clear the terminal before each text frame",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level for engine diagnostics (default: WARNING)",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    return SimulationConfig(
        rows=args.rows,
        columns=args.columns,
        interval=args.interval,
        population_rate=args.population,
        seed=args.seed,
        pattern=args.pattern,
        max_generations=args.generations,
    )


def validate_args(args: argparse.Namespace, pattern_library: Optional[PatternLibrary] = None) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments
        pattern_library: Library used to check ``--pattern``

    Returns:
        True if arguments are valid
    """
    errors = config_from_args(args).validate()

    if args.pattern and pattern_library is not None and pattern_library.get_pattern(args.pattern) is None:
        errors.append(f"Pattern '{args.pattern}' not found (use --list-patterns)")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def print_results(final_generation: int, stats: Dict[str, Any], verbose: bool) -> None:
    """Print simulation results.

    Args:
        final_generation: Final generation number
        stats: Statistics dictionary
        verbose: Whether to show detailed statistics
    """
    print(f"Simulation completed after {final_generation} generations")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population density: {stats['population_density']:.2%}")
        print(f"  Duration: {stats['duration_seconds']:.3f} seconds")
    else:
        print(f"Population: {stats['initial_population']} -> {stats['population']}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    cli = CLIGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args, cli.pattern_library):
        return 1

    try:
        final_generation, stats = cli.run_simulation(
            config_from_args(args),
            output_format=args.format,
            clear_screen=args.clear,
            verbose=args.verbose,
        )
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except LifeGridError as e:
        print(f"Error: {e}")
        return 1

    print_results(final_generation, stats, args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
