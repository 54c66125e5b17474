"""
Fixed constants for the 3x3 tic-tac-toe board.
"""

GRID_SIZE = 3
CELL_COUNT = GRID_SIZE * GRID_SIZE

# Rows, columns, then diagonals. Order decides which line is reported
# when a board holds more than one.
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def is_valid_cell(cell) -> bool:
    """Check if a cell index addresses the board."""
    return isinstance(cell, int) and not isinstance(cell, bool) and 0 <= cell < CELL_COUNT
