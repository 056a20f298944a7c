"""Tests for grid endpoints."""

import uuid

import pytest

from pathfinder.config import Settings, get_settings
from pathfinder.main import app


@pytest.fixture
def small_limits():
    """Override settings with a small grid size limit."""
    app.dependency_overrides[get_settings] = lambda: Settings(
        _env_file=None, default_grid_size=4, max_grid_size=6, maze_seed=11
    )
    yield
    app.dependency_overrides.pop(get_settings, None)


@pytest.mark.asyncio
async def test_create_blank_grid(client):
    """Test POST /v1/grid creates an empty grid."""
    response = await client.post("/v1/grid", json={"height": 2, "width": 3})
    assert response.status_code == 201
    data = response.json()

    assert data["kind"] == "blank"
    assert data["height"] == 2
    assert data["width"] == 3
    assert data["grid_data"] == "...\n..."
    assert data["start"] is None
    assert data["end"] is None


@pytest.mark.asyncio
async def test_create_blank_grid_defaults(client, small_limits):
    """Test that omitted sizes use the configured default."""
    response = await client.post("/v1/grid")
    assert response.status_code == 201
    assert response.json()["height"] == 4
    assert response.json()["width"] == 4


@pytest.mark.asyncio
async def test_create_grid_validation(client, small_limits):
    """Test that bad sizes are rejected."""
    response = await client.post("/v1/grid", json={"height": 0, "width": 3})
    assert response.status_code == 422

    response = await client.post("/v1/grid", json={"height": 7, "width": 3})
    assert response.status_code == 422
    assert "at most 6x6" in response.json()["detail"]


@pytest.mark.asyncio
async def test_create_maze(client):
    """Test POST /v1/grid/maze generates a solvable maze."""
    response = await client.post("/v1/grid/maze", json={"height": 9, "width": 9, "seed": 3})
    assert response.status_code == 201
    data = response.json()

    assert data["kind"] == "maze"
    assert data["seed"] == 3
    assert data["start"] == {"row": 0, "col": 0}
    assert data["end"] == {"row": 8, "col": 8}

    response = await client.post(f"/v1/grid/{data['id']}/path")
    assert response.status_code == 200
    assert response.json()["found"] is True


@pytest.mark.asyncio
async def test_create_maze_same_seed(client):
    """Test that the same seed yields the same maze."""
    first = await client.post("/v1/grid/maze", json={"height": 8, "width": 12, "seed": 77})
    second = await client.post("/v1/grid/maze", json={"height": 8, "width": 12, "seed": 77})

    assert first.json()["grid_data"] == second.json()["grid_data"]
    assert first.json()["id"] != second.json()["id"]


@pytest.mark.asyncio
async def test_create_maze_reports_seed(client, small_limits):
    """Test that the configured seed is used when none is given."""
    response = await client.post("/v1/grid/maze")
    assert response.status_code == 201
    assert response.json()["seed"] == 11


@pytest.mark.asyncio
async def test_create_maze_random_seed(client):
    """Test that a seed is always reported so the maze can be regenerated."""
    response = await client.post("/v1/grid/maze", json={"height": 5, "width": 5})
    data = response.json()
    assert isinstance(data["seed"], int)

    again = await client.post(
        "/v1/grid/maze", json={"height": 5, "width": 5, "seed": data["seed"]}
    )
    assert again.json()["grid_data"] == data["grid_data"]


@pytest.mark.asyncio
async def test_create_maze_too_small(client):
    """Test that a 1-row maze is rejected."""
    response = await client.post("/v1/grid/maze", json={"height": 1, "width": 5})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_import_grid(client, sample_grid_data):
    """Test POST /v1/grid/import parses grid text."""
    response = await client.post("/v1/grid/import", json={"grid_data": sample_grid_data})
    assert response.status_code == 201
    data = response.json()

    assert data["kind"] == "imported"
    assert data["grid_data"] == sample_grid_data
    assert data["start"] == {"row": 0, "col": 0}
    assert data["end"] == {"row": 4, "col": 4}


@pytest.mark.asyncio
async def test_import_invalid_grid(client):
    """Test that invalid grid text is rejected with the parser message."""
    response = await client.post("/v1/grid/import", json={"grid_data": "S.S\n..E"})
    assert response.status_code == 422
    assert "Multiple start" in response.json()["detail"]

    response = await client.post("/v1/grid/import", json={"grid_data": "S..\n.E"})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_get_and_delete_grid(client):
    """Test fetching and discarding a grid."""
    grid_id = (await client.post("/v1/grid", json={"height": 2, "width": 2})).json()["id"]

    response = await client.get(f"/v1/grid/{grid_id}")
    assert response.status_code == 200
    assert response.json()["id"] == grid_id

    response = await client.delete(f"/v1/grid/{grid_id}")
    assert response.status_code == 204

    response = await client.get(f"/v1/grid/{grid_id}")
    assert response.status_code == 404

    response = await client.delete(f"/v1/grid/{grid_id}")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_unknown_grid(client):
    """Test that unknown grid IDs return 404."""
    response = await client.get(f"/v1/grid/{uuid.uuid4()}")
    assert response.status_code == 404
    assert "Grid not found" in response.json()["detail"]


@pytest.mark.asyncio
async def test_set_cells_and_find_path(client):
    """Test the free-draw flow: place endpoints, toggle barriers, solve."""
    grid_id = (await client.post("/v1/grid", json={"height": 3, "width": 3})).json()["id"]

    response = await client.put(
        f"/v1/grid/{grid_id}/cell", json={"row": 0, "col": 0, "state": "start"}
    )
    assert response.status_code == 200
    assert response.json()["state"] == "start"

    await client.put(f"/v1/grid/{grid_id}/cell", json={"row": 2, "col": 0, "state": "end"})
    await client.post(f"/v1/grid/{grid_id}/toggle", json={"row": 1, "col": 0})
    await client.post(f"/v1/grid/{grid_id}/toggle", json={"row": 1, "col": 2})

    response = await client.post(f"/v1/grid/{grid_id}/path")
    assert response.status_code == 200
    data = response.json()

    assert data["found"] is True
    assert data["length"] == 4
    assert {"row": 1, "col": 1} in data["positions"]
    assert data["positions"][0] == {"row": 0, "col": 0}
    assert data["positions"][-1] == {"row": 2, "col": 0}


@pytest.mark.asyncio
async def test_move_start(client):
    """Test that setting a new start empties the old one."""
    grid_id = (await client.post("/v1/grid", json={"height": 2, "width": 2})).json()["id"]

    await client.put(f"/v1/grid/{grid_id}/cell", json={"row": 0, "col": 0, "state": "start"})
    await client.put(f"/v1/grid/{grid_id}/cell", json={"row": 1, "col": 1, "state": "start"})

    data = (await client.get(f"/v1/grid/{grid_id}")).json()
    assert data["grid_data"] == "..\n.S"
    assert data["start"] == {"row": 1, "col": 1}


@pytest.mark.asyncio
async def test_set_cell_validation(client):
    """Test out-of-bounds positions and unknown states."""
    grid_id = (await client.post("/v1/grid", json={"height": 3, "width": 3})).json()["id"]

    response = await client.put(
        f"/v1/grid/{grid_id}/cell", json={"row": -1, "col": 0, "state": "barrier"}
    )
    assert response.status_code == 422
    assert "outside" in response.json()["detail"]

    response = await client.put(
        f"/v1/grid/{grid_id}/cell", json={"row": 3, "col": 0, "state": "barrier"}
    )
    assert response.status_code == 422

    response = await client.put(
        f"/v1/grid/{grid_id}/cell", json={"row": 0, "col": 0, "state": "path"}
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_toggle_endpoint_noop(client):
    """Test that toggling the start cell reports no change."""
    grid_id = (await client.post("/v1/grid", json={"height": 2, "width": 2})).json()["id"]
    await client.put(f"/v1/grid/{grid_id}/cell", json={"row": 0, "col": 0, "state": "start"})

    response = await client.post(f"/v1/grid/{grid_id}/toggle", json={"row": 0, "col": 0})
    assert response.status_code == 200
    assert response.json()["changed"] is False
    assert response.json()["state"] == "start"

    response = await client.post(f"/v1/grid/{grid_id}/toggle", json={"row": 1, "col": 0})
    assert response.json()["changed"] is True
    assert response.json()["state"] == "barrier"


@pytest.mark.asyncio
async def test_find_path_missing_endpoints(client):
    """Test that solving without endpoints returns 409."""
    grid_id = (await client.post("/v1/grid", json={"height": 3, "width": 3})).json()["id"]

    response = await client.post(f"/v1/grid/{grid_id}/path")
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_find_path_unreachable(client):
    """Test that an unreachable end is a normal response."""
    response = await client.post("/v1/grid/import", json={"grid_data": "S.X\n.X.\nX.E"})
    grid_id = response.json()["id"]

    response = await client.post(f"/v1/grid/{grid_id}/path")
    assert response.status_code == 200
    data = response.json()
    assert data["found"] is False
    assert data["length"] is None
    assert data["positions"] == []
    assert data["message"] == "No path found!"


@pytest.mark.asyncio
async def test_mark_and_clear_path(client):
    """Test stamping path markers and clearing them."""
    response = await client.post("/v1/grid/import", json={"grid_data": "S..\n...\n..E"})
    grid_id = response.json()["id"]

    response = await client.post(f"/v1/grid/{grid_id}/path", json={"mark": True})
    assert response.json()["found"] is True

    data = (await client.get(f"/v1/grid/{grid_id}")).json()
    assert data["grid_data"] == "S..\n*..\n**E"

    response = await client.delete(f"/v1/grid/{grid_id}/path")
    assert response.status_code == 200
    assert response.json()["grid_data"] == "S..\n...\n..E"
