"""Pytest configuration and fixtures."""

import random
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from pathfinder.core.grid import CellState, Grid, Position
from pathfinder.main import app
from pathfinder.services.grid_store import get_grid_store


@pytest.fixture(autouse=True)
def clear_grid_store():
    """Start every test with an empty grid store."""
    get_grid_store().clear()
    yield
    get_grid_store().clear()


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible mazes."""
    return random.Random(1234)


@pytest.fixture
def open_grid() -> Grid:
    """3x3 empty grid with START at the top-left and END at the bottom-right."""
    grid = Grid(3, 3)
    grid.set_cell(Position(0, 0), CellState.START)
    grid.set_cell(Position(2, 2), CellState.END)
    return grid


@pytest.fixture
def sample_grid_data() -> str:
    """Sample grid text for testing."""
    return """S...X
.XX.X
.X...
.X.X.
...XE"""
