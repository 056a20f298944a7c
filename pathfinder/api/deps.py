"""API dependencies for dependency injection."""

import uuid
from typing import Annotated

from fastapi import Depends, HTTPException, status

from pathfinder.config import Settings, get_settings
from pathfinder.services.grid_store import GridRecord, GridStore, get_grid_store


def get_grid_record(
    grid_id: uuid.UUID,
    store: GridStore = Depends(get_grid_store),
) -> GridRecord:
    """Look up the grid named in the path, or 404."""
    record = store.get(grid_id)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Grid not found: {grid_id}",
        )
    return record


# Type aliases for cleaner route signatures
Store = Annotated[GridStore, Depends(get_grid_store)]
CurrentGrid = Annotated[GridRecord, Depends(get_grid_record)]
AppSettings = Annotated[Settings, Depends(get_settings)]
