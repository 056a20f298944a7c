"""
Maze Generator for Pathfinder Lab.

Builds a random maze with iterative recursive backtracking. Passages are
carved on a step-2 lattice starting at the top-left corner, so a wall cell
is left between every pair of carved cells. The far corner is the exit.
"""

import logging
import random
from collections import deque
from typing import Optional

from .grid import (
    NEIGHBOR_ORDER,
    CellState,
    Grid,
    InvalidDimensions,
    Position,
)

logger = logging.getLogger(__name__)

MIN_MAZE_SIZE = 2


class MazeGenerator:
    """
    Randomized depth-first maze carver.

    Example usage:
        generator = MazeGenerator(random.Random(42))
        grid = generator.generate(10, 10)
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize the generator.

        Args:
            rng: Random source used to shuffle carve directions. A fresh
                unseeded `random.Random` is used if not provided.
        """
        self.rng = rng if rng is not None else random.Random()

    def generate(self, height: int, width: int) -> Grid:
        """
        Generate a maze.

        Args:
            height: Number of rows (at least 2).
            width: Number of columns (at least 2).

        Returns:
            Grid with START at (0, 0) and END at (height-1, width-1), where
            every non-barrier cell is reachable from START.

        Raises:
            InvalidDimensions: If height or width is below 2.
        """
        if height < MIN_MAZE_SIZE or width < MIN_MAZE_SIZE:
            raise InvalidDimensions(
                f"Maze must be at least {MIN_MAZE_SIZE}x{MIN_MAZE_SIZE}, "
                f"got {height}x{width}"
            )

        grid = Grid(height, width, fill=CellState.BARRIER)
        entry = Position(0, 0)
        exit_pos = Position(height - 1, width - 1)

        carved = self._carve(grid, entry)
        opened = self._connect_exit(grid, entry, exit_pos)

        grid.set_cell(entry, CellState.START)
        grid.set_cell(exit_pos, CellState.END)

        logger.debug(
            f"Generated {height}x{width} maze "
            f"({carved} lattice cells carved, {opened} opened for exit)"
        )
        return grid

    def _carve(self, grid: Grid, entry: Position) -> int:
        """Carve passages from entry with an explicit stack. Returns cells visited."""
        grid.set_cell(entry, CellState.EMPTY)
        visited = {entry}
        stack = [entry]

        while stack:
            current = stack[-1]

            candidates = [
                (direction, current.move(direction, 2))
                for direction in NEIGHBOR_ORDER
            ]
            self.rng.shuffle(candidates)

            for direction, candidate in candidates:
                if not grid.in_bounds(candidate) or candidate in visited:
                    continue
                grid.set_cell(current.move(direction), CellState.EMPTY)
                grid.set_cell(candidate, CellState.EMPTY)
                visited.add(candidate)
                stack.append(candidate)
                break
            else:
                # Dead end: backtrack
                stack.pop()

        return len(visited)

    def _connect_exit(self, grid: Grid, entry: Position, exit_pos: Position) -> int:
        """
        Make sure the exit is open and joined to the carved region.

        Opens the exit cell, then, if it is still isolated, opens the
        shortest run of wall cells linking it to a reachable cell.

        Returns:
            Number of cells opened.
        """
        reachable = _reachable_from(grid, entry)
        if exit_pos in reachable:
            return 0

        opened = 0
        if not grid.is_passable(exit_pos):
            grid.set_cell(exit_pos, CellState.EMPTY)
            opened += 1

        if any(n in reachable for n in grid.neighbors(exit_pos)):
            return opened

        # Walk outward through walls until the carved region is hit
        parent: dict[Position, Position] = {}
        queue = deque([exit_pos])
        seen = {exit_pos}
        target: Optional[Position] = None

        while queue and target is None:
            pos = queue.popleft()
            for neighbor in grid.neighbors(pos):
                if neighbor in seen:
                    continue
                seen.add(neighbor)
                parent[neighbor] = pos
                if neighbor in reachable:
                    target = neighbor
                    break
                queue.append(neighbor)

        if target is None:
            raise RuntimeError("Carved region is empty; cannot connect exit")

        pos = parent[target]
        while pos != exit_pos:
            if not grid.is_passable(pos):
                grid.set_cell(pos, CellState.EMPTY)
                opened += 1
            pos = parent[pos]

        logger.info(f"Exit at ({exit_pos.row}, {exit_pos.col}) was isolated; opened {opened} cells")
        return opened


def _reachable_from(grid: Grid, origin: Position) -> set[Position]:
    """Flood-fill the passable cells reachable from origin."""
    reachable = {origin}
    queue = deque([origin])
    while queue:
        pos = queue.popleft()
        for neighbor in grid.neighbors(pos):
            if neighbor not in reachable and grid.is_passable(neighbor):
                reachable.add(neighbor)
                queue.append(neighbor)
    return reachable
