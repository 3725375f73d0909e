"""Engine-wide constants: time budgets, sampled sizes, move directions."""

# Time budgets (milliseconds, measured from the start of a decision)
DECISION_BUDGET_MS = 997
SAMPLING_BUDGET_MS = 900

# Stop starting new root candidates once this little time is left.
# The opening pass runs at construction, so it can cut closer.
OPENING_ROOT_MARGIN_MS = 2
DECISION_ROOT_MARGIN_MS = 10

# Stop expanding search frames once this little time is left
FRAME_MARGIN_MS = 3

# Board sizes sampled instead of searched exhaustively. Every other size,
# 50 included, uses the exhaustive lookahead.
SAMPLING_SIZES = (25,)

# Upper bound for generated jump distances
MAX_JUMP_DISTANCE = 9

# (d_row, d_col) in enumeration order: N, S, W, E, NW, NE, SW, SE
DIRECTIONS = (
    (-1, 0), (1, 0), (0, -1), (0, 1),
    (-1, -1), (-1, 1), (1, -1), (1, 1),
)
