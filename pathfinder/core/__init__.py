# Core module
from .grid import (
    CellState,
    Direction,
    Grid,
    GridError,
    InvalidDimensions,
    NEIGHBOR_ORDER,
    OutOfBounds,
    Position,
)
from .maze_generator import MazeGenerator
from .path_solver import MissingEndpoints, Path, PathSolver
from .engine import (
    clear_path,
    create_empty_grid,
    find_path,
    generate_maze,
    mark_path,
    set_cell,
    toggle_barrier,
)
from .grid_parser import (
    GridParseError,
    GridValidationError,
    parse_grid_text,
    render_grid_text,
    load_grid_file,
    validate_grid_text,
)
from .escape import EscapeGame, GameCompleted, MoveResult

__all__ = [
    "CellState",
    "Direction",
    "Grid",
    "GridError",
    "InvalidDimensions",
    "NEIGHBOR_ORDER",
    "OutOfBounds",
    "Position",
    "MazeGenerator",
    "MissingEndpoints",
    "Path",
    "PathSolver",
    "clear_path",
    "create_empty_grid",
    "find_path",
    "generate_maze",
    "mark_path",
    "set_cell",
    "toggle_barrier",
    "GridParseError",
    "GridValidationError",
    "parse_grid_text",
    "render_grid_text",
    "load_grid_file",
    "validate_grid_text",
    "EscapeGame",
    "GameCompleted",
    "MoveResult",
]
