"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, Field

from jumpgrid.config import MAX_JUMP_DISTANCE


# --- Board schemas ---

class MoveSchema(BaseModel):
    d_row: int
    d_col: int
    description: str = ""


class BoardSchema(BaseModel):
    size: int
    grid: list[list[int]]  # jump distances, 0 = consumed
    visited: list[list[bool]]
    player_row: int
    player_col: int
    score: int = 0


class NewBoardRequest(BaseModel):
    size: int = Field(10, ge=1, le=100)
    seed: int | None = None
    max_distance: int = Field(MAX_JUMP_DISTANCE, ge=1)


# --- Solver schemas ---

class SolveRequest(BaseModel):
    board: BoardSchema
    budget_ms: float | None = Field(None, gt=0, le=60_000)
    seed: int | None = None


class SolveResponse(BaseModel):
    move: MoveSchema | None
    strategy: str  # opening, exhaustive, sampling, none
    score: float
    evaluated: int
    elapsed_ms: float
