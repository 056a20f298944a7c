"""Escape routes for playing a grid as a maze."""

import logging

from fastapi import APIRouter, HTTPException, status

from pathfinder.api.deps import CurrentGrid
from pathfinder.core.escape import EscapeGame, GameCompleted
from pathfinder.core.grid import Direction
from pathfinder.core.path_solver import MissingEndpoints
from pathfinder.schemas.grid import EscapeState, GridPosition, MoveRequest, MoveResponse
from pathfinder.services.grid_store import GridRecord

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/grid", tags=["Escape"])


def _escape_state(game: EscapeGame) -> EscapeState:
    return EscapeState(
        position=GridPosition(**game.position.to_dict()),
        moves=game.moves,
        completed=game.completed,
    )


def _require_game(record: GridRecord) -> EscapeGame:
    if record.game is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No escape game started on grid {record.id}",
        )
    return record.game


@router.post(
    "/{grid_id}/escape",
    response_model=EscapeState,
    status_code=status.HTTP_201_CREATED,
)
async def start_escape(record: CurrentGrid) -> EscapeState:
    """Start (or restart) an escape game on this grid.

    The player is placed on the start cell.
    """
    try:
        record.game = EscapeGame(record.grid)
    except MissingEndpoints as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        ) from e

    return _escape_state(record.game)


@router.get(
    "/{grid_id}/escape",
    response_model=EscapeState,
)
async def get_escape(record: CurrentGrid) -> EscapeState:
    """Get the escape game state."""
    return _escape_state(_require_game(record))


@router.post(
    "/{grid_id}/escape/move",
    response_model=MoveResponse,
)
async def move(request: MoveRequest, record: CurrentGrid) -> MoveResponse:
    """Move the player one cell.

    Blocked moves leave the player in place but still count.
    """
    game = _require_game(record)

    try:
        result = game.move(Direction(request.direction))
    except GameCompleted as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    if result.status == "completed":
        logger.info(f"Grid {record.id} escaped in {result.moves} moves")

    return MoveResponse(**result.to_dict())
