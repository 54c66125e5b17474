"""
Outcome evaluation for a single board.

Every function here is pure and total over well-formed boards: it reads the
nine cells and never mutates them or raises.
"""
from typing import Optional, Tuple

from tictactoe.core.game_config import WINNING_LINES
from tictactoe.models.board import Board, Mark
from tictactoe.schemas.game import Outcome


def winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """First line, in WINNING_LINES order, held by a single mark."""
    for a, b, c in WINNING_LINES:
        if board[a] is not Mark.EMPTY and board[a] == board[b] == board[c]:
            return a, b, c
    return None


def winner(board: Board) -> Optional[Mark]:
    line = winning_line(board)
    if line is None:
        return None
    return board[line[0]]


def is_draw(board: Board) -> bool:
    return all(mark is not Mark.EMPTY for mark in board) and winner(board) is None


def next_mark(board: Board) -> Mark:
    """X moves whenever an even number of marks has been placed."""
    placed = sum(1 for mark in board if mark is not Mark.EMPTY)
    return Mark.X if placed % 2 == 0 else Mark.O


def status(board: Board) -> Outcome:
    line = winning_line(board)
    if line is not None:
        return Outcome.won(board[line[0]], line)
    if is_draw(board):
        return Outcome.draw()
    return Outcome.in_progress(next_mark(board))
