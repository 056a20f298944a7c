"""In-memory store of live grids."""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal, Optional

from pathfinder.config import get_settings
from pathfinder.core.escape import EscapeGame
from pathfinder.core.grid import Grid

logger = logging.getLogger(__name__)

GridKind = Literal["blank", "maze", "imported"]


@dataclass
class GridRecord:
    """A stored grid and the state attached to it."""

    id: uuid.UUID
    grid: Grid
    kind: GridKind
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    seed: Optional[int] = None
    game: Optional[EscapeGame] = None


class GridStore:
    """
    Registry of grids keyed by ID.

    Holds at most `max_records` grids; adding one more evicts the oldest.
    """

    def __init__(self, max_records: int = 1000):
        self.max_records = max_records
        # Insertion order is creation order
        self._records: dict[uuid.UUID, GridRecord] = {}

    def add(
        self,
        grid: Grid,
        kind: GridKind,
        seed: Optional[int] = None,
    ) -> GridRecord:
        """Store a grid under a new ID."""
        while len(self._records) >= self.max_records:
            oldest = next(iter(self._records))
            del self._records[oldest]
            logger.info(f"Evicted grid {oldest}; store is at {self.max_records} grids")

        record = GridRecord(id=uuid.uuid4(), grid=grid, kind=kind, seed=seed)
        self._records[record.id] = record
        logger.info(
            f"Stored {kind} grid {record.id} ({grid.height}x{grid.width})"
        )
        return record

    def get(self, grid_id: uuid.UUID) -> Optional[GridRecord]:
        """Get a record by ID."""
        return self._records.get(grid_id)

    def remove(self, grid_id: uuid.UUID) -> bool:
        """Discard a grid."""
        if grid_id in self._records:
            del self._records[grid_id]
            logger.info(f"Removed grid {grid_id}")
            return True
        return False

    def clear(self) -> None:
        """Discard every grid."""
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)


# Singleton instance
_grid_store: Optional[GridStore] = None


def get_grid_store() -> GridStore:
    """Get singleton grid store."""
    global _grid_store
    if _grid_store is None:
        _grid_store = GridStore(max_records=get_settings().max_stored_grids)
    return _grid_store
