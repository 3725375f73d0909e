"""Tests for the API layer: health, board generation, legal moves, solving."""

import pytest
from fastapi.testclient import TestClient

from jumpgrid.main import app
from jumpgrid.tests.helpers.boards import (
    board_payload, boxed_in_board, corridor_board, mirrored_corridor_board,
    open_board,
)


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as c:
        yield c


# --- Health ---

class TestHealth:
    def test_health(self, client):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


# --- Board routes ---

class TestBoardRoutes:
    def test_create_board(self, client):
        resp = client.post("/api/boards", json={"size": 10, "seed": 1})
        assert resp.status_code == 201
        data = resp.json()
        assert data["size"] == 10
        assert len(data["grid"]) == 10
        assert all(len(row) == 10 for row in data["grid"])
        assert sum(cell for row in data["visited"] for cell in row) == 1
        assert data["visited"][data["player_row"]][data["player_col"]]
        assert data["score"] == 0

    def test_create_board_seeded(self, client):
        a = client.post("/api/boards", json={"size": 10, "seed": 5}).json()
        b = client.post("/api/boards", json={"size": 10, "seed": 5}).json()
        assert a == b

    def test_create_board_max_distance(self, client):
        data = client.post("/api/boards", json={"size": 10, "seed": 2, "max_distance": 2}).json()
        assert max(max(row) for row in data["grid"]) <= 2

    def test_create_board_rejects_bad_size(self, client):
        resp = client.post("/api/boards", json={"size": 0})
        assert resp.status_code == 422

    def test_legal_moves(self, client):
        resp = client.post("/api/boards/legal-moves", json=board_payload(corridor_board()))
        assert resp.status_code == 200
        moves = [(m["d_row"], m["d_col"]) for m in resp.json()]
        assert moves == [(1, 0), (0, 1)]
        assert [m["description"] for m in resp.json()] == ["S", "E"]

    def test_legal_moves_boxed_in(self, client):
        resp = client.post("/api/boards/legal-moves", json=board_payload(boxed_in_board()))
        assert resp.status_code == 200
        assert resp.json() == []


# --- Solver ---

class TestSolve:
    def test_solve_small_board(self, client):
        payload = {"board": board_payload(mirrored_corridor_board()), "budget_ms": 200}
        resp = client.post("/api/solve", json=payload)
        assert resp.status_code == 200
        data = resp.json()
        assert data["move"]["d_row"] == 0
        assert data["move"]["d_col"] == 1
        assert data["strategy"] == "opening"
        assert data["evaluated"] == 2

    def test_solve_boxed_in(self, client):
        payload = {"board": board_payload(boxed_in_board()), "budget_ms": 50}
        data = client.post("/api/solve", json=payload).json()
        assert data["move"] is None
        assert data["strategy"] == "none"

    def test_solve_large_board_samples(self, client):
        board = client.post("/api/boards", json={"size": 25, "seed": 3, "max_distance": 3}).json()
        resp = client.post("/api/solve", json={"board": board, "budget_ms": 60, "seed": 1})
        assert resp.status_code == 200
        data = resp.json()
        legal = client.post("/api/boards/legal-moves", json=board).json()
        if legal:
            assert data["strategy"] == "sampling"
            assert data["move"] in legal
        else:
            assert data["move"] is None

    def test_solve_rejects_ragged_grid(self, client):
        payload = board_payload(corridor_board())
        payload["grid"][1] = [1, 1]
        resp = client.post("/api/solve", json={"board": payload})
        assert resp.status_code == 400

    def test_solve_rejects_player_off_board(self, client):
        payload = board_payload(corridor_board())
        payload["player_row"] = 5
        resp = client.post("/api/solve", json={"board": payload})
        assert resp.status_code == 400

    def test_solve_rejects_bad_budget(self, client):
        payload = {"board": board_payload(corridor_board()), "budget_ms": 0}
        resp = client.post("/api/solve", json=payload)
        assert resp.status_code == 422

    def test_solve_rejects_distance_too_large_to_store(self, client):
        payload = board_payload(corridor_board())
        payload["grid"][0][1] = 40000
        resp = client.post("/api/solve", json={"board": payload})
        assert resp.status_code == 400

    def test_legal_moves_rejects_distance_too_large_to_store(self, client):
        payload = board_payload(corridor_board())
        payload["grid"][2][2] = 40000
        resp = client.post("/api/boards/legal-moves", json=payload)
        assert resp.status_code == 400

    def test_solve_accepts_any_square_size(self, client):
        board = open_board(7, (3, 3), distance=2)
        payload = {"board": board_payload(board), "budget_ms": 100}
        resp = client.post("/api/solve", json=payload)
        assert resp.status_code == 200
        data = resp.json()
        assert data["strategy"] == "opening"
        legal = {(m.d_row, m.d_col) for m in board.possible_moves()}
        assert (data["move"]["d_row"], data["move"]["d_col"]) in legal
