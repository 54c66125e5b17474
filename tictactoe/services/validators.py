from tictactoe.core.exceptions import CellOccupied, GameEnded, IllegalMove, InvalidCell
from tictactoe.core.game_config import is_valid_cell
from tictactoe.models.board import Board, Mark
from tictactoe.services import outcome


class MoveValidator:
    """Validates moves against the board they would be played on."""

    def validate_move(self, board: Board, cell: int) -> None:
        """Raise an IllegalMove subclass if the cell cannot be played."""
        if not is_valid_cell(cell):
            raise InvalidCell(f"Cell {cell!r} is outside the 3x3 board")

        # Check if game is over
        current = outcome.status(board)
        if current.is_over:
            raise GameEnded(f"Game has already ended: {current.describe()}")

        # Check if cell is already occupied
        if board[cell] is not Mark.EMPTY:
            raise CellOccupied(f"Cell {cell} is already occupied by {board[cell].value}")

    def is_legal(self, board: Board, cell: int) -> bool:
        try:
            self.validate_move(board, cell)
        except IllegalMove:
            return False
        return True
