"""Grid routes for building, editing and solving grids."""

import logging
import random
import uuid
from typing import Optional

from fastapi import APIRouter, HTTPException, Response, status

from pathfinder.api.deps import AppSettings, CurrentGrid, Store
from pathfinder.config import Settings
from pathfinder.core import engine
from pathfinder.core.grid import CellState, GridError, Position
from pathfinder.core.grid_parser import (
    GridParseError,
    GridValidationError,
    parse_grid_text,
    render_grid_text,
)
from pathfinder.core.path_solver import MissingEndpoints
from pathfinder.schemas.grid import (
    CellResponse,
    CellToggleRequest,
    CellUpdateRequest,
    GridCreateRequest,
    GridDetail,
    GridImportRequest,
    GridPosition,
    MazeCreateRequest,
    PathRequest,
    PathResponse,
)
from pathfinder.services.grid_store import GridRecord

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/grid", tags=["Grids"])


def _position(pos: Optional[Position]) -> Optional[GridPosition]:
    if pos is None:
        return None
    return GridPosition(**pos.to_dict())


def _end_escape(record: GridRecord) -> None:
    """Drop a running escape game; its player may no longer stand on an open cell."""
    if record.game is not None:
        logger.info(f"Grid {record.id} edited; escape game ended")
        record.game = None


def _grid_detail(record: GridRecord) -> GridDetail:
    grid = record.grid
    return GridDetail(
        id=record.id,
        kind=record.kind,
        height=grid.height,
        width=grid.width,
        grid_data=render_grid_text(grid),
        start=_position(grid.start),
        end=_position(grid.end),
        seed=record.seed,
        created_at=record.created_at,
    )


def _resolve_size(settings: Settings, height: Optional[int], width: Optional[int]) -> tuple[int, int]:
    """Fill in default dimensions and enforce the configured maximum."""
    height = height if height is not None else settings.default_grid_size
    width = width if width is not None else settings.default_grid_size

    if height > settings.max_grid_size or width > settings.max_grid_size:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Grid may be at most {settings.max_grid_size}x{settings.max_grid_size}",
        )
    return height, width


@router.post(
    "",
    response_model=GridDetail,
    status_code=status.HTTP_201_CREATED,
)
async def create_grid(
    store: Store,
    settings: AppSettings,
    request: Optional[GridCreateRequest] = None,
) -> GridDetail:
    """Create a blank grid for free drawing."""
    request = request or GridCreateRequest()
    height, width = _resolve_size(settings, request.height, request.width)

    try:
        grid = engine.create_empty_grid(height, width)
    except GridError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e

    return _grid_detail(store.add(grid, kind="blank"))


@router.post(
    "/maze",
    response_model=GridDetail,
    status_code=status.HTTP_201_CREATED,
)
async def create_maze(
    store: Store,
    settings: AppSettings,
    request: Optional[MazeCreateRequest] = None,
) -> GridDetail:
    """Generate a random maze.

    START is placed at the top-left corner and END at the bottom-right.
    The seed used is returned so the same maze can be generated again.
    """
    request = request or MazeCreateRequest()
    height, width = _resolve_size(settings, request.height, request.width)

    seed = request.seed if request.seed is not None else settings.maze_seed
    if seed is None:
        seed = random.SystemRandom().randrange(2**32)

    try:
        grid = engine.generate_maze(height, width, random.Random(seed))
    except GridError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e

    return _grid_detail(store.add(grid, kind="maze", seed=seed))


@router.post(
    "/import",
    response_model=GridDetail,
    status_code=status.HTTP_201_CREATED,
)
async def import_grid(
    request: GridImportRequest,
    store: Store,
    settings: AppSettings,
) -> GridDetail:
    """Create a grid from its text form."""
    try:
        grid = parse_grid_text(request.grid_data)
    except (GridParseError, GridValidationError) as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e

    _resolve_size(settings, grid.height, grid.width)
    return _grid_detail(store.add(grid, kind="imported"))


@router.get(
    "/{grid_id}",
    response_model=GridDetail,
)
async def get_grid(record: CurrentGrid) -> GridDetail:
    """Get a grid with its cells in text form."""
    return _grid_detail(record)


@router.delete(
    "/{grid_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_grid(grid_id: uuid.UUID, store: Store) -> Response:
    """Discard a grid."""
    if not store.remove(grid_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Grid not found: {grid_id}",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/{grid_id}/cell",
    response_model=CellResponse,
)
async def update_cell(
    request: CellUpdateRequest,
    record: CurrentGrid,
) -> CellResponse:
    """Set the state of a single cell.

    Setting start or end moves it: the previous start/end cell is emptied.
    Any running escape game on the grid is ended.
    """
    pos = Position(request.row, request.col)
    state = CellState[request.state.upper()]

    try:
        engine.set_cell(record.grid, pos, state)
    except GridError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e

    _end_escape(record)

    return CellResponse(position=_position(pos), state=state.name.lower())


@router.post(
    "/{grid_id}/toggle",
    response_model=CellResponse,
)
async def toggle_cell(
    request: CellToggleRequest,
    record: CurrentGrid,
) -> CellResponse:
    """Toggle a barrier. Start, end and path cells are left unchanged.

    A toggle that changes the grid ends any running escape game.
    """
    pos = Position(request.row, request.col)

    try:
        changed = engine.toggle_barrier(record.grid, pos)
    except GridError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e

    if changed:
        _end_escape(record)

    return CellResponse(
        position=_position(pos),
        state=record.grid.get(pos).name.lower(),
        changed=changed,
    )


@router.post(
    "/{grid_id}/path",
    response_model=PathResponse,
)
async def find_path(
    record: CurrentGrid,
    request: Optional[PathRequest] = None,
) -> PathResponse:
    """Find a shortest path from start to end.

    An unreachable end is a normal result (`found: false`), not an error.
    """
    request = request or PathRequest()

    try:
        path = engine.find_path(record.grid)
    except MissingEndpoints as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        ) from e

    if path is None:
        logger.info(f"No path on grid {record.id}")
        return PathResponse(found=False, message="No path found!")

    if request.mark:
        engine.mark_path(record.grid, path)

    return PathResponse(found=True, **path.to_dict())


@router.delete(
    "/{grid_id}/path",
    response_model=GridDetail,
)
async def clear_path(record: CurrentGrid) -> GridDetail:
    """Remove path markers from a grid."""
    engine.clear_path(record.grid)
    return _grid_detail(record)
