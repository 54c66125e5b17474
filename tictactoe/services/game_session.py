import logging
from typing import List, Optional, Tuple

from tictactoe.core.config import settings
from tictactoe.core.exceptions import HistoryIndexOutOfRange, IllegalMove
from tictactoe.models.board import Board, Mark, empty_cells, place, render
from tictactoe.models.snapshot import Snapshot
from tictactoe.schemas.game import GameView, MoveEntry, Outcome
from tictactoe.services import outcome
from tictactoe.services.validators import MoveValidator

logger = logging.getLogger(__name__)


class GameSession:
    """
    A single game with a navigable history.

    History always starts with the empty board. The cursor selects the
    snapshot being viewed and played from; whose turn it is and whether the
    game is over are derived from it on every call, never stored.
    """

    def __init__(self, ascending: Optional[bool] = None,
                 validator: Optional[MoveValidator] = None):
        self.validator = validator or MoveValidator()
        self.ascending = settings.DEFAULT_ASCENDING if ascending is None else ascending
        self._history: List[Snapshot] = [Snapshot.initial()]
        self._cursor = 0

    @property
    def history(self) -> Tuple[Snapshot, ...]:
        return tuple(self._history)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def next_mark(self) -> Mark:
        return Mark.X if self._cursor % 2 == 0 else Mark.O

    def current_snapshot(self) -> Snapshot:
        return self._history[self._cursor]

    def current_board(self) -> Board:
        return self.current_snapshot().board

    def current_status(self) -> Outcome:
        return outcome.status(self.current_board())

    def legal_moves(self) -> List[int]:
        board = self.current_board()
        return [cell for cell in empty_cells(board) if self.validator.is_legal(board, cell)]

    def play_move(self, cell: int) -> bool:
        """
        Play the next mark at cell.

        Illegal moves leave the session untouched and return False. Playing
        from an earlier cursor position discards every later snapshot.
        """
        board = self.current_board()
        try:
            self.validator.validate_move(board, cell)
        except IllegalMove as e:
            logger.debug(f"Rejected move at {cell!r}: {e}")
            return False

        mark = self.next_mark
        snapshot = Snapshot(place(board, cell, mark), cell)

        discarded = len(self._history) - self._cursor - 1
        if discarded:
            logger.debug(f"Branching from move {self._cursor}, dropping {discarded} later snapshot(s)")
        del self._history[self._cursor + 1:]
        self._history.append(snapshot)
        self._cursor = len(self._history) - 1

        result = self.current_status()
        if result.is_over:
            logger.info(f"Game over after move {self._cursor}: {result.describe()}")
            logger.debug(f"Final board:\n{render(snapshot.board)}")
        return True

    def jump_to(self, index: int) -> None:
        self._check_index(index)
        self._cursor = index

    def toggle_move_order(self) -> bool:
        self.ascending = not self.ascending
        return self.ascending

    def reset(self) -> None:
        """Start over from the empty board, forgetting all history."""
        self._history = [Snapshot.initial()]
        self._cursor = 0

    def describe_move(self, index: int) -> str:
        self._check_index(index)
        snapshot = self._history[index]
        if index == 0 or snapshot.move is None:
            return "game start"
        return f"({snapshot.row}, {snapshot.column})"

    def move_list(self, ascending: Optional[bool] = None) -> List[MoveEntry]:
        """Entries for the jump-to list, one per snapshot."""
        if ascending is None:
            ascending = self.ascending

        entries = []
        for index, snapshot in enumerate(self._history):
            is_current = index == self._cursor
            entries.append(MoveEntry(
                index=index,
                row=snapshot.row,
                column=snapshot.column,
                label=self._move_label(index, is_current),
                is_current=is_current,
            ))

        if not ascending:
            entries.reverse()
        return entries

    def view(self) -> GameView:
        result = self.current_status()
        return GameView(
            board=list(self.current_board()),
            outcome=result,
            status_text=result.describe(),
            winning_cells=list(result.line or ()),
            cursor=self._cursor,
            history_length=len(self._history),
            ascending=self.ascending,
            order_label="Ascending" if self.ascending else "Descending",
            moves=self.move_list(),
        )

    def _move_label(self, index: int, is_current: bool) -> str:
        if index == 0:
            return "You are at game start" if is_current else "Go to game start"
        prefix = "You are at" if is_current else "Go to"
        return f"{prefix} move #{index} {self.describe_move(index)}"

    def _check_index(self, index: int) -> None:
        if (not isinstance(index, int) or isinstance(index, bool)
                or not 0 <= index < len(self._history)):
            raise HistoryIndexOutOfRange(
                f"History index {index!r} is out of range [0, {len(self._history)})"
            )
