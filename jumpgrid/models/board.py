"""Authoritative jump-grid board: the rule engine the decision engine plays against."""

from __future__ import annotations

from typing import Protocol

import numpy as np

from jumpgrid.config import MAX_JUMP_DISTANCE
from jumpgrid.models.move import ALL_MOVES, Move

# Distances are stored as int16
_DISTANCE_LIMIT = int(np.iinfo(np.int16).max)


class AuthoritativeBoard(Protocol):
    """What the decision engine needs from the board that enforces the match."""

    def size(self) -> int: ...

    def possible_moves(self) -> list[Move]: ...

    def apply_move(self, move: Move) -> bool: ...

    def copy_grid(self) -> np.ndarray: ...

    def is_visited(self, row: int, col: int) -> bool: ...

    def player_row(self) -> int: ...

    def player_col(self) -> int: ...

    def copy(self) -> "AuthoritativeBoard": ...


class GameBoard:
    """N x N grid of jump distances with a player, visited marks and a score.

    The player's start cell is expected to be marked visited by whoever
    builds the board; it never counts toward the score.
    """

    def __init__(
        self,
        grid: np.ndarray,
        visited: np.ndarray,
        player_row: int,
        player_col: int,
        score: int = 0,
    ):
        grid = np.asarray(grid)
        if grid.size and (grid.min() < 0 or grid.max() > _DISTANCE_LIMIT):
            raise ValueError(f"Jump distances must lie in [0, {_DISTANCE_LIMIT}]")
        grid = grid.astype(np.int16)
        visited = np.array(visited, dtype=bool)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
            raise ValueError(f"Grid must be square, got shape {grid.shape}")
        if visited.shape != grid.shape:
            raise ValueError(
                f"Visited shape {visited.shape} does not match grid shape {grid.shape}"
            )
        n = grid.shape[0]
        if not (0 <= player_row < n and 0 <= player_col < n):
            raise ValueError(f"Player ({player_row}, {player_col}) is off a {n}x{n} board")
        self._grid = grid
        self._visited = visited
        self._row = int(player_row)
        self._col = int(player_col)
        self._score = int(score)

    # --- Authoritative interface ---

    def size(self) -> int:
        return self._grid.shape[0]

    def possible_moves(self) -> list[Move]:
        return [m for m in ALL_MOVES if self._destination(m) is not None]

    def apply_move(self, move: Move) -> bool:
        dest = self._destination(move)
        if dest is None:
            return False
        self._row, self._col = dest
        self._visited[dest] = True
        self._grid[dest] = 0
        self._score += 1
        return True

    def copy_grid(self) -> np.ndarray:
        return self._grid.copy()

    def is_visited(self, row: int, col: int) -> bool:
        return bool(self._visited[row, col])

    def player_row(self) -> int:
        return self._row

    def player_col(self) -> int:
        return self._col

    def copy(self) -> GameBoard:
        return GameBoard(self._grid, self._visited, self._row, self._col, self._score)

    # --- Match bookkeeping ---

    def score(self) -> int:
        return self._score

    def is_game_over(self) -> bool:
        return not self.possible_moves()

    def copy_visited(self) -> np.ndarray:
        return self._visited.copy()

    def _destination(self, move: Move) -> tuple[int, int] | None:
        n = self._grid.shape[0]
        step_row = self._row + move.d_row
        step_col = self._col + move.d_col
        if not (0 <= step_row < n and 0 <= step_col < n):
            return None
        if self._visited[step_row, step_col]:
            return None
        step = int(self._grid[step_row, step_col])
        dest_row = self._row + move.d_row * step
        dest_col = self._col + move.d_col * step
        if not (0 <= dest_row < n and 0 <= dest_col < n):
            return None
        if self._visited[dest_row, dest_col]:
            return None
        return dest_row, dest_col


def create_new_board(
    size: int,
    seed: int | None = None,
    max_distance: int = MAX_JUMP_DISTANCE,
) -> GameBoard:
    """Generate a board with uniform random distances and a random start cell."""
    if size <= 0:
        raise ValueError(f"Board size must be positive, got {size}")
    if max_distance < 1:
        raise ValueError(f"max_distance must be at least 1, got {max_distance}")
    rng = np.random.default_rng(seed)
    grid = rng.integers(1, max_distance + 1, size=(size, size), dtype=np.int16)
    visited = np.zeros((size, size), dtype=bool)
    row, col = (int(x) for x in rng.integers(0, size, size=2))
    visited[row, col] = True
    return GameBoard(grid, visited, row, col)
