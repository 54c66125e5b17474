import pytest

from tictactoe.services.game_session import GameSession

# X completes the top row on move 5
SCENARIO_A = [0, 4, 1, 7, 2]
# Fills the board with no three in a row
SCENARIO_B = [0, 1, 2, 4, 3, 5, 7, 6, 8]


def play_all(session, cells):
    for cell in cells:
        assert session.play_move(cell), f"move at {cell} was rejected"
    return session


@pytest.fixture
def session():
    return GameSession(ascending=True)


@pytest.fixture
def won_session(session):
    return play_all(session, SCENARIO_A)


@pytest.fixture
def drawn_session(session):
    return play_all(session, SCENARIO_B)
