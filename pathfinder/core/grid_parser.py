"""
Grid Parser for Pathfinder Lab.

Converts grids to and from their text form, one row per line.

Grid Format:
    S = Start position
    E = End position
    X = Barrier (impassable)
    * = Path marker
    . = Empty (can also be space)
"""

from pathlib import Path
from typing import Optional

from .grid import CellState, Grid, Position


class GridParseError(Exception):
    """Exception raised when grid text cannot be parsed."""

    pass


class GridValidationError(Exception):
    """Exception raised when grid text is well-formed but invalid."""

    pass


CHAR_STATES = {
    ".": CellState.EMPTY,
    " ": CellState.EMPTY,
    "X": CellState.BARRIER,
    "S": CellState.START,
    "E": CellState.END,
    "*": CellState.PATH,
}


def parse_grid_text(grid_text: str) -> Grid:
    """
    Parse grid text into a Grid.

    START and END are optional, but at most one of each may appear.

    Args:
        grid_text: Multi-line string representing the grid.

    Returns:
        Grid with the parsed cell states.

    Raises:
        GridParseError: If the text is empty or its rows differ in length.
        GridValidationError: If the text has unknown characters or
            repeated start/end cells.
    """
    if not grid_text or not grid_text.strip():
        raise GridParseError("Grid text is empty")

    lines = grid_text.strip("\r\n").splitlines()
    height = len(lines)
    width = len(lines[0])

    if width == 0:
        raise GridParseError("Grid has no columns")

    for row, line in enumerate(lines):
        if len(line) != width:
            raise GridParseError(
                f"Row {row} has {len(line)} columns, expected {width}"
            )

    grid = Grid(height, width)
    start_pos: Optional[Position] = None
    end_pos: Optional[Position] = None

    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            state = CHAR_STATES.get(char)
            if state is None:
                raise GridValidationError(
                    f"Invalid character '{char}' at position ({row}, {col}). "
                    f"Valid characters: {', '.join(sorted(CHAR_STATES))}"
                )

            pos = Position(row, col)
            if state is CellState.START:
                if start_pos is not None:
                    raise GridValidationError(
                        f"Multiple start positions found: first at "
                        f"({start_pos.row}, {start_pos.col}), second at ({row}, {col})"
                    )
                start_pos = pos
            elif state is CellState.END:
                if end_pos is not None:
                    raise GridValidationError(
                        f"Multiple end positions found: first at "
                        f"({end_pos.row}, {end_pos.col}), second at ({row}, {col})"
                    )
                end_pos = pos

            if state is not CellState.EMPTY:
                grid.set_cell(pos, state)

    return grid


def render_grid_text(grid: Grid) -> str:
    """Render a Grid in the text format accepted by parse_grid_text."""
    return "\n".join(
        "".join(cell.value for cell in row) for row in grid.rows()
    )


def load_grid_file(file_path: Path | str) -> Grid:
    """
    Load and parse a grid file from the filesystem.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        GridParseError: If the file cannot be read or parsed.
        GridValidationError: If the grid is invalid.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Grid file not found: {file_path}")

    if not file_path.is_file():
        raise GridParseError(f"Path is not a file: {file_path}")

    try:
        grid_text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise GridParseError(f"Failed to read grid file: {e}") from e

    return parse_grid_text(grid_text)


def validate_grid_text(grid_text: str) -> tuple[bool, Optional[str]]:
    """
    Validate grid text without raising exceptions.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_grid_text(grid_text)
        return True, None
    except (GridParseError, GridValidationError) as e:
        return False, str(e)
