"""Bounded exhaustive lookahead: scores a root move by walking every continuation.

The walk is a depth-first traversal driven by an explicit stack of
SearchFrame records instead of recursion, so the clock can be polled before
every frame expansion no matter how deep the current line is. When time runs
short the walk simply stops and the best total seen so far is returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from jumpgrid.config import FRAME_MARGIN_MS
from jumpgrid.models.move import Move
from jumpgrid.solver.simulation import SimBoard

if TYPE_CHECKING:
    from jumpgrid.engine_search.time_manager import TimeManager

logger = logging.getLogger(__name__)


@dataclass
class SearchFrame:
    """One node on the DFS stack. Owns its board exclusively."""
    board: SimBoard
    current_score: int
    moves: list[Move] = field(default_factory=list)
    best_future: int = 0
    index: int = 0

    @property
    def has_next(self) -> bool:
        return self.index < len(self.moves)


def _search_continuations(
    board: SimBoard,
    move: Move,
    clock: TimeManager,
    min_time_left_ms: float,
) -> int:
    base = board.clone()
    if not base.apply_move(move):
        return 0

    best_total = base.score
    next_moves = base.legal_moves()
    if not next_moves:
        return best_total

    stack = [SearchFrame(base, base.score, next_moves)]

    while stack:
        if clock.time_left_ms() < min_time_left_ms:
            break
        frame = stack[-1]

        if frame.has_next:
            next_move = frame.moves[frame.index]
            frame.index += 1
            child = frame.board.clone()
            if child.apply_move(next_move):
                further = child.legal_moves()
                if not further:
                    frame.best_future = max(frame.best_future, child.score)
                else:
                    stack.append(SearchFrame(child, child.score, further))
        else:
            total = frame.current_score + frame.best_future
            best_total = max(best_total, total)
            stack.pop()
            if stack:
                stack[-1].best_future = max(stack[-1].best_future, total)

    return best_total


def evaluate_move(
    board: SimBoard,
    move: Move,
    clock: TimeManager,
    min_time_left_ms: float = FRAME_MARGIN_MS,
) -> int:
    """Best cumulative score reachable after playing ``move`` on a copy of ``board``.

    Returns 0 for an illegal move. A fault while exploring one candidate is
    absorbed here and also scores 0, so the caller can keep ranking the rest.
    """
    try:
        return _search_continuations(board, move, clock, min_time_left_ms)
    except Exception:
        logger.debug("Evaluation of %s failed; scoring it 0", move, exc_info=True)
        return 0
