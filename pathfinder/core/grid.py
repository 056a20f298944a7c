"""
Pathfinder Lab Grid Model

Bounds-checked storage of cell states for the maze and pathfinding boards.

Cell States:
    . = Empty
    X = Barrier (impassable)
    S = Start (at most one per grid)
    E = End (at most one per grid)
    * = Path marker (transient solver output)

Positions are (row, col) pairs with row 0 at the top.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


class GridError(Exception):
    """Base exception for grid engine errors."""

    pass


class InvalidDimensions(GridError):
    """Exception raised when a grid is requested with unusable dimensions."""

    pass


class OutOfBounds(GridError):
    """Exception raised when a position falls outside the grid."""

    pass


class CellState(Enum):
    """States a single grid cell can hold."""
    EMPTY = "."
    BARRIER = "X"
    START = "S"
    END = "E"
    PATH = "*"


class Direction(Enum):
    """Movement directions."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (drow, dcol) for this direction."""
        deltas = {
            Direction.UP: (-1, 0),
            Direction.DOWN: (1, 0),
            Direction.LEFT: (0, -1),
            Direction.RIGHT: (0, 1),
        }
        return deltas[self]


# Neighbour order used everywhere; BFS tie-breaking depends on it.
NEIGHBOR_ORDER = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


@dataclass(frozen=True)
class Position:
    """2D position in the grid."""
    row: int
    col: int

    def move(self, direction: Direction, steps: int = 1) -> "Position":
        """Return new position after moving in direction."""
        drow, dcol = direction.delta
        return Position(self.row + drow * steps, self.col + dcol * steps)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"row": self.row, "col": self.col}


class Grid:
    """
    Fixed-size rectangular board of cell states, mutable in place.

    The grid tracks which cells hold START and END so that setting a new
    one demotes the previous holder to EMPTY.

    Example usage:
        grid = Grid(3, 3)
        grid.set_cell(Position(0, 0), CellState.START)
        grid.set_cell(Position(2, 2), CellState.END)
        grid.toggle_barrier(Position(1, 1))
    """

    def __init__(
        self,
        height: int,
        width: int,
        fill: CellState = CellState.EMPTY,
    ):
        """
        Initialize a grid with every cell set to `fill`.

        Args:
            height: Number of rows.
            width: Number of columns.
            fill: Initial state of every cell. Only EMPTY or BARRIER.

        Raises:
            InvalidDimensions: If height or width is not positive.
        """
        if height <= 0 or width <= 0:
            raise InvalidDimensions(
                f"Grid dimensions must be positive, got {height}x{width}"
            )
        if fill not in (CellState.EMPTY, CellState.BARRIER):
            raise ValueError(f"Cannot fill a grid with {fill.name}")

        self.height: int = height
        self.width: int = width
        self._cells: list[list[CellState]] = [
            [fill] * width for _ in range(height)
        ]
        self._start: Optional[Position] = None
        self._end: Optional[Position] = None

    @classmethod
    def create(cls, height: int, width: int) -> "Grid":
        """Create an all-EMPTY grid."""
        return cls(height, width)

    @property
    def start(self) -> Optional[Position]:
        """Position of the START cell, if one is set."""
        return self._start

    @property
    def end(self) -> Optional[Position]:
        """Position of the END cell, if one is set."""
        return self._end

    def in_bounds(self, pos: Position) -> bool:
        """Check whether a position lies inside the grid."""
        return 0 <= pos.row < self.height and 0 <= pos.col < self.width

    def _check_bounds(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise OutOfBounds(
                f"Position ({pos.row}, {pos.col}) is outside "
                f"{self.height}x{self.width} grid"
            )

    def get(self, pos: Position) -> CellState:
        """
        Get cell state at position.

        Raises:
            OutOfBounds: If pos is outside the grid.
        """
        self._check_bounds(pos)
        return self._cells[pos.row][pos.col]

    def set_cell(self, pos: Position, state: CellState) -> None:
        """
        Set the state of a single cell.

        Setting START or END moves that designation: the previous holder,
        if any and if different, is reset to EMPTY first. Overwriting the
        current START or END cell with another state clears it.

        Raises:
            OutOfBounds: If pos is outside the grid.
        """
        self._check_bounds(pos)

        if pos == self._start and state is not CellState.START:
            self._start = None
        if pos == self._end and state is not CellState.END:
            self._end = None

        if state is CellState.START:
            if self._start is not None and self._start != pos:
                self._cells[self._start.row][self._start.col] = CellState.EMPTY
            self._start = pos
        elif state is CellState.END:
            if self._end is not None and self._end != pos:
                self._cells[self._end.row][self._end.col] = CellState.EMPTY
            self._end = pos

        self._cells[pos.row][pos.col] = state

    def toggle_barrier(self, pos: Position) -> bool:
        """
        Flip a cell between EMPTY and BARRIER.

        START, END and PATH cells are left alone.

        Returns:
            True if the cell changed, False if the toggle was a no-op.

        Raises:
            OutOfBounds: If pos is outside the grid.
        """
        current = self.get(pos)
        if current is CellState.EMPTY:
            self._cells[pos.row][pos.col] = CellState.BARRIER
        elif current is CellState.BARRIER:
            self._cells[pos.row][pos.col] = CellState.EMPTY
        else:
            return False
        return True

    def neighbors(self, pos: Position) -> list[Position]:
        """
        Get in-bounds 4-directional neighbours, ordered up, down, left, right.

        Raises:
            OutOfBounds: If pos is outside the grid.
        """
        self._check_bounds(pos)
        result = []
        for direction in NEIGHBOR_ORDER:
            neighbor = pos.move(direction)
            if self.in_bounds(neighbor):
                result.append(neighbor)
        return result

    def is_passable(self, pos: Position) -> bool:
        """Check whether a cell can be walked through."""
        return self.get(pos) is not CellState.BARRIER

    def positions(self) -> Iterator[Position]:
        """Iterate over every position in row-major order."""
        for row in range(self.height):
            for col in range(self.width):
                yield Position(row, col)

    def clear_path(self) -> int:
        """Reset all PATH markers to EMPTY. Returns the number cleared."""
        cleared = 0
        for row in self._cells:
            for col, cell in enumerate(row):
                if cell is CellState.PATH:
                    row[col] = CellState.EMPTY
                    cleared += 1
        return cleared

    def rows(self) -> list[list[CellState]]:
        """Get a copy of the cell matrix."""
        return [list(row) for row in self._cells]

    def copy(self) -> "Grid":
        """Return an independent copy of this grid."""
        clone = Grid(self.height, self.width)
        clone._cells = self.rows()
        clone._start = self._start
        clone._end = self._end
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.height == other.height
            and self.width == other.width
            and self._cells == other._cells
        )

    def __repr__(self) -> str:
        return f"Grid(height={self.height}, width={self.width})"
