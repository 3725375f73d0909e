"""Move value type: a compass direction resolved against the grid when applied."""

from dataclasses import dataclass

from jumpgrid.config import DIRECTIONS


@dataclass(frozen=True)
class Move:
    """One of the 8 compass directions.

    A move is not a displacement. The actual destination depends on the
    jump distance stored in the neighboring cell at the time it is applied.
    """
    d_row: int
    d_col: int

    def __post_init__(self):
        if self.d_row not in (-1, 0, 1) or self.d_col not in (-1, 0, 1):
            raise ValueError(f"Invalid direction: ({self.d_row}, {self.d_col})")
        if self.d_row == 0 and self.d_col == 0:
            raise ValueError("Direction (0, 0) is not a move")

    def description(self) -> str:
        return _NAMES[(self.d_row, self.d_col)]


_NAMES = {
    (-1, 0): "N", (1, 0): "S", (0, -1): "W", (0, 1): "E",
    (-1, -1): "NW", (-1, 1): "NE", (1, -1): "SW", (1, 1): "SE",
}

ALL_MOVES: tuple[Move, ...] = tuple(Move(dr, dc) for dr, dc in DIRECTIONS)
