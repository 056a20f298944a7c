"""
Maze escape game.

A player token starts on the grid's START cell and moves one cell at a
time. Barriers and the grid edge block movement; reaching END completes
the game. Every attempted move is counted, blocked or not.
"""

from dataclasses import dataclass
from typing import Literal, Optional

from .grid import CellState, Direction, Grid, Position
from .path_solver import MissingEndpoints


class GameCompleted(Exception):
    """Exception raised when moving after the player has escaped."""

    pass


@dataclass
class MoveResult:
    """Result of a move action."""
    status: Literal["moved", "blocked", "completed"]
    position: Position
    moves: int
    message: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        result = {
            "status": self.status,
            "position": self.position.to_dict(),
            "moves": self.moves,
        }
        if self.message:
            result["message"] = self.message
        return result


class EscapeGame:
    """
    Player state for escaping a maze.

    Example usage:
        game = EscapeGame(generate_maze(10, 10))
        result = game.move(Direction.DOWN)
    """

    def __init__(self, grid: Grid):
        """
        Initialize a game on a grid.

        Raises:
            MissingEndpoints: If the grid has no START or END cell.
        """
        if grid.start is None or grid.end is None:
            raise MissingEndpoints("Grid needs both start and end points to play")

        self.grid = grid
        self.position: Position = grid.start
        self.moves: int = 0
        self.completed: bool = False

    def reset(self) -> None:
        """Return the player to START and clear the move counter."""
        if self.grid.start is None:
            raise MissingEndpoints("Grid no longer has a start point")
        self.position = self.grid.start
        self.moves = 0
        self.completed = False

    def move(self, direction: Direction) -> MoveResult:
        """
        Move one cell in a direction.

        Raises:
            GameCompleted: If the player already reached the end.
        """
        if self.completed:
            raise GameCompleted("Game already completed")

        self.moves += 1
        target = self.position.move(direction)

        if not self.grid.in_bounds(target) or not self.grid.is_passable(target):
            return MoveResult(
                status="blocked",
                position=self.position,
                moves=self.moves,
                message=f"Cannot move {direction.value} - path blocked",
            )

        self.position = target

        if self.grid.get(target) is CellState.END:
            self.completed = True
            return MoveResult(
                status="completed",
                position=self.position,
                moves=self.moves,
                message="Congratulations! You escaped the maze!",
            )

        return MoveResult(
            status="moved",
            position=self.position,
            moves=self.moves,
        )
