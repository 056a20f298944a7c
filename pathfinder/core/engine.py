"""
Pathfinder Lab engine facade.

The operations a rendering layer needs: build a board (blank or maze),
edit it, and ask for a shortest path. All state lives in the Grid that
is passed in; nothing is cached between calls.
"""

import random
from typing import Optional

from .grid import CellState, Grid, Position
from .maze_generator import MazeGenerator
from .path_solver import Path, PathSolver


def generate_maze(
    height: int,
    width: int,
    rng: Optional[random.Random] = None,
) -> Grid:
    """
    Generate a maze with START at the top-left and END at the bottom-right.

    Args:
        height: Number of rows (at least 2).
        width: Number of columns (at least 2).
        rng: Random source for carving. Pass a seeded instance for
            reproducible mazes.

    Raises:
        InvalidDimensions: If height or width is below 2.
    """
    return MazeGenerator(rng).generate(height, width)


def create_empty_grid(height: int, width: int) -> Grid:
    """Create an all-EMPTY grid for free drawing."""
    return Grid.create(height, width)


def set_cell(grid: Grid, pos: Position, state: CellState) -> None:
    """Set a cell state. See Grid.set_cell."""
    grid.set_cell(pos, state)


def toggle_barrier(grid: Grid, pos: Position) -> bool:
    """Toggle a barrier. Returns False if the cell is START or END."""
    return grid.toggle_barrier(pos)


def find_path(grid: Grid) -> Optional[Path]:
    """
    Find a shortest path from the grid's START cell to its END cell.

    Returns:
        The path, or None if END is unreachable.

    Raises:
        MissingEndpoints: If START or END is not set.
    """
    return PathSolver().solve(grid)


def mark_path(grid: Grid, path: Path) -> int:
    """
    Stamp PATH markers on the cells of a solved path.

    START, END and BARRIER cells are never overwritten. Any earlier
    markers are cleared first.

    Returns:
        Number of cells marked.
    """
    grid.clear_path()
    marked = 0
    for pos in path:
        if grid.get(pos) is CellState.EMPTY:
            grid.set_cell(pos, CellState.PATH)
            marked += 1
    return marked


def clear_path(grid: Grid) -> int:
    """Remove PATH markers. Returns the number of cells cleared."""
    return grid.clear_path()
