from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Optional, Tuple
from enum import Enum

from tictactoe.models.board import Mark


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class Outcome(BaseModel):
    """Classification of a board: in progress, won or drawn."""
    model_config = ConfigDict(frozen=True)

    state: GameStatus
    next_mark: Optional[Mark] = Field(None, description="Mark to play next while in progress")
    winner: Optional[Mark] = None
    line: Optional[Tuple[int, int, int]] = Field(None, description="Cells of the winning triple")

    @model_validator(mode="after")
    def check_fields_match_state(self):
        if self.state == GameStatus.IN_PROGRESS:
            if self.next_mark in (None, Mark.EMPTY) or self.winner or self.line:
                raise ValueError("in-progress outcome needs a next mark and no winner")
        elif self.state == GameStatus.WON:
            if self.winner in (None, Mark.EMPTY) or self.line is None or self.next_mark:
                raise ValueError("won outcome needs a winner and a line")
        elif self.next_mark or self.winner or self.line:
            raise ValueError("draw outcome carries no marks")
        return self

    @classmethod
    def in_progress(cls, next_mark: Mark) -> "Outcome":
        return cls(state=GameStatus.IN_PROGRESS, next_mark=next_mark)

    @classmethod
    def won(cls, winner: Mark, line: Tuple[int, int, int]) -> "Outcome":
        return cls(state=GameStatus.WON, winner=winner, line=line)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(state=GameStatus.DRAW)

    @property
    def is_over(self) -> bool:
        return self.state != GameStatus.IN_PROGRESS

    def is_winning_cell(self, cell: int) -> bool:
        return self.line is not None and cell in self.line

    def describe(self) -> str:
        if self.state == GameStatus.WON:
            return f"Winner: {self.winner.value}"
        if self.state == GameStatus.DRAW:
            return "Draw! No winner."
        return f"Next player: {self.next_mark.value}"


class MoveEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0, description="Position in history, 0 is game start")
    row: Optional[int] = Field(None, ge=1, le=3)
    column: Optional[int] = Field(None, ge=1, le=3)
    label: str
    is_current: bool = False


class GameView(BaseModel):
    """Everything a renderer needs to draw one frame of the game."""
    model_config = ConfigDict(frozen=True)

    board: List[Mark]
    outcome: Outcome
    status_text: str
    winning_cells: List[int] = Field(default_factory=list)
    cursor: int
    history_length: int
    ascending: bool
    order_label: str
    moves: List[MoveEntry]
