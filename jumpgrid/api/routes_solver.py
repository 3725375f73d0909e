"""Solver routes: pick the next move for a posted board."""

from fastapi import APIRouter

from jumpgrid.engine_search import EngineConfig, JumpEngine
from jumpgrid.api.routes_board import _parse_board
from jumpgrid.api.schemas import SolveRequest, SolveResponse
from jumpgrid.api.serializers import result_to_response

router = APIRouter()


@router.post("/solve", response_model=SolveResponse)
def solve(req: SolveRequest) -> SolveResponse:
    """Run one decision on a fresh engine.

    On unsampled sizes this replays the construction-time greedy pass, so the
    request spends one decision budget. Sampled sizes skip that pass and spend
    only the sampler budget.
    """
    board = _parse_board(req.board)
    config = EngineConfig(seed=req.seed)
    if req.budget_ms is not None:
        config = config.scaled(req.budget_ms)
    engine = JumpEngine(board, config)
    return result_to_response(engine.decide())
