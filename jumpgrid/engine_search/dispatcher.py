"""Per-turn move selection for the jump-grid puzzle.

Three strategies share one time-budget discipline:
- Opening: a greedy exhaustive pass run once at construction, replayed on
  the first request without recomputation.
- Exhaustive: a fresh one-ply greedy pass over the current root moves, each
  scored by the bounded exhaustive lookahead.
- Sampling: round-robin Monte Carlo playouts, for the 25x25 boards. These
  never replay the opening, so they skip the construction pass.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace

from jumpgrid.config import (
    DECISION_BUDGET_MS,
    DECISION_ROOT_MARGIN_MS,
    FRAME_MARGIN_MS,
    OPENING_ROOT_MARGIN_MS,
    SAMPLING_BUDGET_MS,
    SAMPLING_SIZES,
)
from jumpgrid.engine_search.time_manager import TimeManager
from jumpgrid.models.board import AuthoritativeBoard
from jumpgrid.models.move import Move
from jumpgrid.solver.exhaustive import evaluate_move
from jumpgrid.solver.monte_carlo import monte_carlo_search
from jumpgrid.solver.simulation import SimBoard

logger = logging.getLogger(__name__)


@dataclass
class EngineConfig:
    decision_budget_ms: float = DECISION_BUDGET_MS
    sampling_budget_ms: float = SAMPLING_BUDGET_MS
    opening_root_margin_ms: float = OPENING_ROOT_MARGIN_MS
    decision_root_margin_ms: float = DECISION_ROOT_MARGIN_MS
    frame_margin_ms: float = FRAME_MARGIN_MS
    sampling_sizes: tuple[int, ...] = SAMPLING_SIZES
    seed: int | None = None

    def scaled(self, budget_ms: float) -> EngineConfig:
        """Same margins, different decision budget. The sampler keeps its share."""
        ratio = SAMPLING_BUDGET_MS / DECISION_BUDGET_MS
        return replace(
            self,
            decision_budget_ms=budget_ms,
            sampling_budget_ms=budget_ms * ratio,
        )


@dataclass
class EngineResult:
    best_move: Move | None
    strategy: str
    score: float = 0.0
    evaluated: int = 0  # root candidates scored, or playouts when sampling
    elapsed_ms: float = 0.0


class JumpEngine:
    """Decision engine bound to one authoritative board for a whole match."""

    def __init__(self, board: AuthoritativeBoard, config: EngineConfig | None = None):
        self.board = board
        self.config = config or EngineConfig()
        self.rng = random.Random(self.config.seed)
        self.opening_used = False
        if self.sampled:
            self.opening = EngineResult(None, "none")
            return
        opening = self._greedy_pass(
            TimeManager(self.config.decision_budget_ms),
            self.config.opening_root_margin_ms,
        )
        self.opening = replace(opening, strategy="opening") if opening.best_move else opening

    @property
    def sampled(self) -> bool:
        return self.board.size() in self.config.sampling_sizes

    @property
    def opening_move(self) -> Move | None:
        return self.opening.best_move

    def next_move(self) -> Move | None:
        """The move to play this turn, or None when no move is available."""
        return self.decide().best_move

    def decide(self) -> EngineResult:
        if self.sampled:
            result = self._sample()
        elif not self.opening_used:
            self.opening_used = True
            result = self.opening
        else:
            result = self._greedy_pass(
                TimeManager(self.config.decision_budget_ms),
                self.config.decision_root_margin_ms,
            )
        logger.debug(
            "Decision via %s: %s (score %.3f, %d evaluated, %.1f ms)",
            result.strategy, result.best_move, result.score,
            result.evaluated, result.elapsed_ms,
        )
        return result

    def _greedy_pass(self, clock: TimeManager, root_margin_ms: float) -> EngineResult:
        """Score each root move with the exhaustive lookahead and keep the best.

        Falls back to the first legal move when nothing could be scored in time.
        """
        moves = self.board.possible_moves()
        if not moves:
            return EngineResult(None, "none", elapsed_ms=round(clock.elapsed_ms(), 1))

        root = SimBoard.from_board(self.board)
        best_move = None
        best_score = -1
        evaluated = 0
        for move in moves:
            if clock.time_left_ms() <= root_margin_ms:
                break
            score = evaluate_move(root, move, clock, self.config.frame_margin_ms)
            evaluated += 1
            if score > best_score:
                best_score = score
                best_move = move

        if best_move is None:
            logger.debug("No root move scored before the deadline; using %s", moves[0])
            best_move = moves[0]
            best_score = 0

        return EngineResult(
            best_move=best_move,
            strategy="exhaustive",
            score=float(best_score),
            evaluated=evaluated,
            elapsed_ms=round(clock.elapsed_ms(), 1),
        )

    def _sample(self) -> EngineResult:
        clock = TimeManager(self.config.sampling_budget_ms)
        mc = monte_carlo_search(self.board, clock, self.rng)
        if mc is None:
            return EngineResult(None, "none", elapsed_ms=round(clock.elapsed_ms(), 1))
        return EngineResult(
            best_move=mc.move,
            strategy="sampling",
            score=mc.avg_score,
            evaluated=mc.playouts,
            elapsed_ms=mc.elapsed_ms,
        )
