"""Grid schemas for request/response validation."""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class GridPosition(BaseModel):
    """Schema for a position in the grid."""

    row: int
    col: int


class GridCreateRequest(BaseModel):
    """Schema for creating a blank grid. Omitted sizes use the configured default."""

    height: Optional[int] = Field(None, gt=0)
    width: Optional[int] = Field(None, gt=0)


class MazeCreateRequest(BaseModel):
    """Schema for generating a maze."""

    height: Optional[int] = Field(None, ge=2)
    width: Optional[int] = Field(None, ge=2)
    seed: Optional[int] = None


class GridImportRequest(BaseModel):
    """Schema for importing a grid from its text form."""

    grid_data: str = Field(..., min_length=1)


class GridDetail(BaseModel):
    """Schema for detailed grid response."""

    id: uuid.UUID
    kind: str  # blank, maze, imported
    height: int
    width: int
    grid_data: str
    start: Optional[GridPosition] = None
    end: Optional[GridPosition] = None
    seed: Optional[int] = None
    created_at: datetime


class CellUpdateRequest(BaseModel):
    """Schema for setting a single cell."""

    row: int
    col: int
    state: str = Field(..., pattern="^(empty|barrier|start|end)$")


class CellToggleRequest(BaseModel):
    """Schema for toggling a barrier."""

    row: int
    col: int


class CellResponse(BaseModel):
    """Schema for a cell after an edit."""

    position: GridPosition
    state: str
    changed: bool = True


class PathRequest(BaseModel):
    """Schema for a path search."""

    mark: bool = False  # stamp path markers onto the stored grid


class PathResponse(BaseModel):
    """Schema for path search result. `found` is False when the end is unreachable."""

    found: bool
    length: Optional[int] = None
    positions: list[GridPosition] = []
    message: Optional[str] = None


class EscapeState(BaseModel):
    """Schema for escape game state."""

    position: GridPosition
    moves: int
    completed: bool


class MoveRequest(BaseModel):
    """Schema for move request."""

    direction: str = Field(..., pattern="^(up|down|left|right)$")


class MoveResponse(BaseModel):
    """Schema for move response."""

    status: str  # moved, blocked, completed
    position: GridPosition
    moves: int
    message: Optional[str] = None
