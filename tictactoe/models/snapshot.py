from dataclasses import dataclass
from typing import Optional

from tictactoe.models.board import Board, Mark, cell_to_coords, empty_board


@dataclass(frozen=True)
class Snapshot:
    """One point in game history: a board and the cell played to reach it."""
    board: Board
    move: Optional[int] = None

    @classmethod
    def initial(cls) -> "Snapshot":
        return cls(empty_board(), None)

    @property
    def row(self) -> Optional[int]:
        if self.move is None:
            return None
        return cell_to_coords(self.move)[0]

    @property
    def column(self) -> Optional[int]:
        if self.move is None:
            return None
        return cell_to_coords(self.move)[1]

    def follows(self, previous: "Snapshot") -> bool:
        """Check this snapshot adds exactly one mark to the previous board."""
        changed = [
            i for i, (before, after) in enumerate(zip(previous.board, self.board))
            if before != after
        ]
        return (
            len(changed) == 1
            and changed[0] == self.move
            and previous.board[self.move] is Mark.EMPTY
            and self.board[self.move] is not Mark.EMPTY
        )
