"""Board generation and rule-query routes."""

from fastapi import APIRouter, HTTPException

from jumpgrid.models.board import GameBoard, create_new_board
from jumpgrid.api.schemas import BoardSchema, MoveSchema, NewBoardRequest
from jumpgrid.api.serializers import board_to_schema, move_to_schema, schema_to_board

router = APIRouter()


def _parse_board(data: BoardSchema) -> GameBoard:
    try:
        return schema_to_board(data)
    except ValueError as e:
        raise HTTPException(400, str(e))


@router.post("", status_code=201, response_model=BoardSchema)
def create_board(req: NewBoardRequest) -> BoardSchema:
    board = create_new_board(req.size, seed=req.seed, max_distance=req.max_distance)
    return board_to_schema(board)


@router.post("/legal-moves", response_model=list[MoveSchema])
def legal_moves(data: BoardSchema) -> list[MoveSchema]:
    board = _parse_board(data)
    return [move_to_schema(m) for m in board.possible_moves()]
