import itertools

import pytest
from pydantic import ValidationError

from tictactoe.core.game_config import WINNING_LINES
from tictactoe.models.board import Mark, empty_board, empty_cells, place
from tictactoe.schemas.game import GameStatus, Outcome
from tictactoe.services import outcome

X, O, E = Mark.X, Mark.O, Mark.EMPTY


def board_of(text):
    """Build a board from a 9 character string of X, O and '.'."""
    marks = {"X": X, "O": O, ".": E}
    return tuple(marks[ch] for ch in text)


class TestWinningLine:

    def test_empty_board_has_no_line(self):
        assert outcome.winning_line(empty_board()) is None
        assert outcome.winner(empty_board()) is None

    @pytest.mark.parametrize("line", WINNING_LINES)
    def test_every_line_is_detected(self, line):
        board = empty_board()
        for cell in line:
            board = place(board, cell, O)
        assert outcome.winning_line(board) == line
        assert outcome.winner(board) == O

    def test_mixed_line_is_not_a_win(self):
        assert outcome.winning_line(board_of("XXO......")) is None

    def test_first_line_in_order_wins_tie(self):
        # Top row and left column both belong to X
        board = board_of("XXXX..X..")
        assert outcome.winning_line(board) == (0, 1, 2)

    def test_diagonals_after_rows_and_columns(self):
        board = board_of("X.X.X.X.X")
        assert outcome.winning_line(board) == (0, 4, 8)

    def test_never_reports_mixed_or_empty_line(self):
        for cells in itertools.product((E, X, O), repeat=9):
            line = outcome.winning_line(cells)
            if line is None:
                continue
            marks = {cells[i] for i in line}
            assert len(marks) == 1
            assert E not in marks


class TestStatus:

    def test_empty_board_is_in_progress_for_x(self):
        result = outcome.status(empty_board())
        assert result.state == GameStatus.IN_PROGRESS
        assert result.next_mark == X
        assert not result.is_over

    def test_next_mark_alternates(self):
        assert outcome.next_mark(board_of("X........")) == O
        assert outcome.next_mark(board_of("X...O....")) == X

    def test_won(self):
        result = outcome.status(board_of("XXXOO...."))
        assert result == Outcome.won(X, (0, 1, 2))
        assert result.is_over
        assert result.describe() == "Winner: X"
        assert result.is_winning_cell(1)
        assert not result.is_winning_cell(3)

    def test_draw(self):
        board = board_of("XOXXOOOXX")
        assert outcome.is_draw(board)
        result = outcome.status(board)
        assert result.state == GameStatus.DRAW
        assert result.describe() == "Draw! No winner."
        assert not result.is_winning_cell(0)

    def test_full_board_with_winner_is_not_draw(self):
        board = board_of("XXXOOXOXO")
        assert not outcome.is_draw(board)
        assert outcome.status(board).state == GameStatus.WON

    def test_status_is_exclusive_on_reachable_boards(self):
        seen = set()
        frontier = [empty_board()]
        while frontier:
            board = frontier.pop()
            if board in seen:
                continue
            seen.add(board)
            states = [
                outcome.winner(board) is not None,
                outcome.is_draw(board),
                outcome.status(board).state == GameStatus.IN_PROGRESS,
            ]
            assert states.count(True) == 1
            if outcome.status(board).is_over:
                continue
            mark = outcome.next_mark(board)
            for cell in empty_cells(board):
                frontier.append(place(board, cell, mark))
        assert len(seen) == 5478


class TestOutcomeModel:

    def test_in_progress_requires_next_mark(self):
        with pytest.raises(ValidationError):
            Outcome(state=GameStatus.IN_PROGRESS)

    def test_won_requires_line(self):
        with pytest.raises(ValidationError):
            Outcome(state=GameStatus.WON, winner=X)

    def test_draw_rejects_winner(self):
        with pytest.raises(ValidationError):
            Outcome(state=GameStatus.DRAW, winner=O)

    def test_outcome_is_frozen(self):
        result = Outcome.draw()
        with pytest.raises(ValidationError):
            result.state = GameStatus.WON
