"""Convert between domain models and API schemas."""

from jumpgrid.models.board import GameBoard
from jumpgrid.models.move import Move
from jumpgrid.engine_search.dispatcher import EngineResult
from jumpgrid.api.schemas import BoardSchema, MoveSchema, SolveResponse


def move_to_schema(move: Move) -> MoveSchema:
    return MoveSchema(d_row=move.d_row, d_col=move.d_col, description=move.description())


def board_to_schema(board: GameBoard) -> BoardSchema:
    return BoardSchema(
        size=board.size(),
        grid=board.copy_grid().tolist(),
        visited=board.copy_visited().tolist(),
        player_row=board.player_row(),
        player_col=board.player_col(),
        score=board.score(),
    )


def schema_to_board(data: BoardSchema) -> GameBoard:
    """Build a GameBoard from request data.

    Raises ValueError when the payload does not describe a valid board.
    """
    if len(data.grid) != data.size or any(len(row) != data.size for row in data.grid):
        raise ValueError(f"grid must be {data.size}x{data.size}")
    if len(data.visited) != data.size or any(len(row) != data.size for row in data.visited):
        raise ValueError(f"visited must be {data.size}x{data.size}")
    return GameBoard(
        data.grid,
        data.visited,
        data.player_row,
        data.player_col,
        score=data.score,
    )


def result_to_response(result: EngineResult) -> SolveResponse:
    return SolveResponse(
        move=move_to_schema(result.best_move) if result.best_move else None,
        strategy=result.strategy,
        score=round(result.score, 3),
        evaluated=result.evaluated,
        elapsed_ms=result.elapsed_ms,
    )
