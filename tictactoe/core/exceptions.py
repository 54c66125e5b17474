class GameException(Exception):
    """Base exception for game-related errors."""
    pass


class IllegalMove(GameException):
    """Base for moves the rules reject."""
    pass


class InvalidCell(IllegalMove):
    """Raised when a cell index is outside the 3x3 grid."""
    pass


class CellOccupied(IllegalMove):
    """Raised when trying to move to an occupied cell."""
    pass


class GameEnded(IllegalMove):
    """Raised when trying to move in an ended game."""
    pass


class HistoryIndexOutOfRange(GameException, IndexError):
    """Raised when navigating to a history entry that does not exist."""
    pass
