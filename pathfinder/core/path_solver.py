"""
Path Solver for Pathfinder Lab.

Breadth-first search over the 4-connected passable cells of a grid.
Neighbours are expanded in the grid's fixed order, so the same grid
always yields the same shortest path.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional

from .grid import Grid, GridError, Position

logger = logging.getLogger(__name__)


class MissingEndpoints(GridError):
    """Exception raised when a search is requested without START and END."""

    pass


@dataclass(frozen=True)
class Path:
    """Ordered cells from START to END inclusive."""
    positions: tuple[Position, ...]

    @property
    def length(self) -> int:
        """Number of edges (moves) along the path."""
        return len(self.positions) - 1

    @property
    def start(self) -> Position:
        return self.positions[0]

    @property
    def end(self) -> Position:
        return self.positions[-1]

    def __iter__(self) -> Iterator[Position]:
        return iter(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "length": self.length,
            "positions": [pos.to_dict() for pos in self.positions],
        }


class PathSolver:
    """
    BFS shortest-path solver.

    The solver only reads the grid; it never changes cell states.

    Example usage:
        solver = PathSolver()
        path = solver.solve(grid)
        if path is None:
            print("No path found!")
    """

    def solve(
        self,
        grid: Grid,
        start: Optional[Position] = None,
        end: Optional[Position] = None,
    ) -> Optional[Path]:
        """
        Find a shortest path between two cells.

        Args:
            grid: Grid to search.
            start: Origin cell. Defaults to the grid's START cell.
            end: Target cell. Defaults to the grid's END cell.

        Returns:
            Path with the fewest edges, or None if END is unreachable.

        Raises:
            MissingEndpoints: If START or END is unset, or they coincide.
            OutOfBounds: If an explicit endpoint is outside the grid.
        """
        start = start if start is not None else grid.start
        end = end if end is not None else grid.end

        if start is None or end is None:
            raise MissingEndpoints("Set both start and end points")
        if start == end:
            raise MissingEndpoints(
                f"Start and end must differ, both at ({start.row}, {start.col})"
            )

        # Validates bounds for explicit endpoints
        grid.get(start)
        grid.get(end)

        queue = deque([start])
        visited = {start}
        parent: dict[Position, Position] = {}

        while queue:
            current = queue.popleft()

            if current == end:
                path = self._reconstruct(parent, start, end)
                logger.debug(f"Path found with {path.length} moves ({len(visited)} cells visited)")
                return path

            for neighbor in grid.neighbors(current):
                if neighbor in visited or not grid.is_passable(neighbor):
                    continue
                visited.add(neighbor)
                parent[neighbor] = current
                queue.append(neighbor)

        logger.debug(f"No path found ({len(visited)} cells visited)")
        return None

    @staticmethod
    def _reconstruct(
        parent: dict[Position, Position],
        start: Position,
        end: Position,
    ) -> Path:
        """Walk parent pointers back from end and reverse."""
        positions = [end]
        current = end
        while current != start:
            current = parent[current]
            positions.append(current)
        positions.reverse()
        return Path(positions=tuple(positions))
