"""Lightweight board simulation for lookahead search and random playouts.

SimBoard mirrors the authoritative board's move rules on its own copies of
the grid and visited marks, so search branches can be cloned and mutated
freely without touching the real match state.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

import numpy as np

from jumpgrid.models.move import ALL_MOVES, Move

if TYPE_CHECKING:
    from jumpgrid.engine_search.time_manager import TimeManager
    from jumpgrid.models.board import AuthoritativeBoard


class SimBoard:
    """Grid, visited marks, player position and score for one search lineage."""

    __slots__ = ("grid", "visited", "row", "col", "_score")

    def __init__(
        self,
        grid: np.ndarray,
        visited: np.ndarray,
        row: int,
        col: int,
        score: int = 0,
    ):
        self.grid = grid
        self.visited = visited
        self.row = row
        self.col = col
        self._score = score

    @classmethod
    def from_board(cls, board: AuthoritativeBoard) -> SimBoard:
        """Snapshot the authoritative board. The simulated score starts at 0."""
        n = board.size()
        grid = np.array(board.copy_grid(), dtype=np.int16)
        visited = np.array(
            [[board.is_visited(r, c) for c in range(n)] for r in range(n)],
            dtype=bool,
        )
        return cls(grid, visited, board.player_row(), board.player_col())

    @property
    def size(self) -> int:
        return self.grid.shape[0]

    @property
    def score(self) -> int:
        return self._score

    def clone(self) -> SimBoard:
        return SimBoard(self.grid.copy(), self.visited.copy(), self.row, self.col, self._score)

    def _destination(self, d_row: int, d_col: int) -> tuple[int, int] | None:
        n = self.grid.shape[0]
        step_row = self.row + d_row
        step_col = self.col + d_col
        if not (0 <= step_row < n and 0 <= step_col < n) or self.visited[step_row, step_col]:
            return None
        step = int(self.grid[step_row, step_col])
        dest_row = self.row + d_row * step
        dest_col = self.col + d_col * step
        if not (0 <= dest_row < n and 0 <= dest_col < n) or self.visited[dest_row, dest_col]:
            return None
        return dest_row, dest_col

    def legal_moves(self) -> list[Move]:
        return [m for m in ALL_MOVES if self._destination(m.d_row, m.d_col) is not None]

    def is_terminal(self) -> bool:
        for m in ALL_MOVES:
            if self._destination(m.d_row, m.d_col) is not None:
                return False
        return True

    def apply_move(self, move: Move) -> bool:
        dest = self._destination(move.d_row, move.d_col)
        if dest is None:
            return False
        self.row, self.col = dest
        self.visited[dest] = True
        self.grid[dest] = 0
        self._score += 1
        return True


def simulate_playout(
    sim: SimBoard,
    rng: random.Random,
    clock: TimeManager | None = None,
) -> int:
    """Play uniformly random legal moves until none remain or time runs out.

    Mutates ``sim`` in place and returns its final score.
    """
    while clock is None or not clock.expired():
        moves = sim.legal_moves()
        if not moves:
            break
        sim.apply_move(rng.choice(moves))
    return sim.score
