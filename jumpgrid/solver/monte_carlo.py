"""Monte Carlo solver: evaluate root moves by round-robin random playouts.

Used on boards too large for the exhaustive lookahead. Until the clock
expires, the solver cycles through every root move:
1. Applies the move on a fresh copy of the board
2. Plays uniformly random legal moves to completion (or timeout)
3. Adds the final score to that move's running total

The move with the highest average score wins. Ties go to the move that
comes first in the root move list.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from jumpgrid.models.move import Move
from jumpgrid.solver.simulation import SimBoard, simulate_playout

if TYPE_CHECKING:
    from jumpgrid.engine_search.time_manager import TimeManager
    from jumpgrid.models.board import AuthoritativeBoard

logger = logging.getLogger(__name__)


@dataclass
class RootStat:
    visits: int = 0
    value_sum: float = 0.0

    @property
    def mean_value(self) -> float:
        return self.value_sum / self.visits if self.visits > 0 else 0.0


@dataclass
class MCResult:
    """Outcome of one sampling run."""
    move: Move
    avg_score: float = 0.0
    stats: list[RootStat] = field(default_factory=list)
    playouts: int = 0
    elapsed_ms: float = 0.0


def pick_best_index(stats: list[RootStat]) -> int:
    """Index with the highest average; earliest index wins ties."""
    best_avg = -1.0
    best_idx = 0
    for i, st in enumerate(stats):
        if st.mean_value > best_avg:
            best_avg = st.mean_value
            best_idx = i
    return best_idx


def monte_carlo_search(
    board: AuthoritativeBoard,
    clock: TimeManager,
    rng: random.Random,
) -> MCResult | None:
    """Sample every root move round-robin until ``clock`` expires.

    Returns None when the board has no legal move.
    """
    moves = board.possible_moves()
    if not moves:
        return None

    root = SimBoard.from_board(board)
    stats = [RootStat() for _ in moves]
    playouts = 0

    while not clock.expired():
        for i, move in enumerate(moves):
            if clock.expired():
                break
            sim = root.clone()
            if not sim.apply_move(move):
                continue
            score = simulate_playout(sim, rng, clock)
            stats[i].visits += 1
            stats[i].value_sum += score
            playouts += 1

    best_idx = pick_best_index(stats)
    result = MCResult(
        move=moves[best_idx],
        avg_score=round(stats[best_idx].mean_value, 3),
        stats=stats,
        playouts=playouts,
        elapsed_ms=round(clock.elapsed_ms(), 1),
    )
    logger.debug(
        "Sampled %d playouts over %d moves in %.1f ms; best %s avg %.3f",
        playouts, len(moves), result.elapsed_ms, result.move, result.avg_score,
    )
    return result


def monte_carlo_best_move(
    board: AuthoritativeBoard,
    clock: TimeManager,
    rng: random.Random | None = None,
) -> Move | None:
    """Quick interface: get the best move via round-robin sampling."""
    result = monte_carlo_search(board, clock, rng or random.Random())
    return result.move if result else None
