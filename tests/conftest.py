# tests/conftest.py
import pytest

from core.board import load

# Wikipedia's example puzzle (30 givens) and its unique solution
EASY = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
EASY_SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"

# Arto Inkala's puzzle
HARD = "800000000003600000070090200050007000000045700000100030001000068008500010090000400"
HARD_SOLUTION = "812753649943682175675491283154237896369845721287169534521974368438526917796318452"


@pytest.fixture
def easy_board():
    return load(EASY)


@pytest.fixture
def solved_board():
    return load(EASY_SOLUTION)


@pytest.fixture
def hard_board():
    return load(HARD)
