#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import GridEngine, PatternLibrary


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    engine = GridEngine(12, 12, False)

    # Load a pattern
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    if glider:
        engine.load_pattern(glider, 1, 1)

        print("Initial state:")
        print(engine.board)
        print(f"Population: {engine.population}")
        print()

        # Toggle a cell the way a click in the GUI would
        engine.toggle_cell(10, 10)

        for _ in range(8):
            engine.step()
            print(f"Generation {engine.generation}:")
            print(engine.board)
            print(f"Population: {engine.population}")
            print()

    stats = engine.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
