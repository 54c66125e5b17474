from enum import Enum
from typing import List, Tuple

from tictactoe.core.game_config import CELL_COUNT, GRID_SIZE, is_valid_cell


class Mark(str, Enum):
    EMPTY = ""
    X = "X"
    O = "O"

    def opponent(self) -> "Mark":
        if self is Mark.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Mark.O if self is Mark.X else Mark.X


Board = Tuple[Mark, ...]


def empty_board() -> Board:
    return (Mark.EMPTY,) * CELL_COUNT


def place(board: Board, cell: int, mark: Mark) -> Board:
    """Return a copy of the board with the mark placed at cell."""
    if not is_valid_cell(cell):
        raise ValueError(f"Cell {cell!r} is outside the board")
    return board[:cell] + (mark,) + board[cell + 1:]


def empty_cells(board: Board) -> List[int]:
    return [i for i, mark in enumerate(board) if mark is Mark.EMPTY]


def cell_to_coords(cell: int) -> Tuple[int, int]:
    """1-indexed (row, column) of a cell, as shown to players."""
    return cell // GRID_SIZE + 1, cell % GRID_SIZE + 1


def render(board: Board) -> str:
    rows = []
    for start in range(0, CELL_COUNT, GRID_SIZE):
        rows.append(" | ".join(mark.value or " " for mark in board[start:start + GRID_SIZE]))
    return "\n---------\n".join(rows)
