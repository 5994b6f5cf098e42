import numpy as np
import pytest

from core.board import Board, load
from core.cell import Cell
from solvers.validator import (check_domain, find_conflicts, get_conflict_mask,
                               givens_preserved, is_consistent, is_solved)
from conftest import EASY, EASY_SOLUTION


def test_solution_is_solved(solved_board):
    assert is_solved(solved_board)
    assert is_consistent(solved_board)


def test_partial_board_is_not_solved(easy_board):
    assert not is_solved(easy_board)
    assert is_consistent(easy_board)


def test_swapped_cells_are_not_solved():
    # swapping within a row keeps rows valid but breaks two columns
    swapped = EASY_SOLUTION[1] + EASY_SOLUTION[0] + EASY_SOLUTION[2:]
    board = load(swapped)
    assert not is_solved(board)
    units = {issue["unit"] for issue in find_conflicts(board)}
    assert {"c1", "c2"} <= units


def test_duplicate_in_row_is_reported():
    board = load("55" + EASY[2:])
    issues = find_conflicts(board)
    row_issue = [i for i in issues if i["unit"] == "r1"][0]
    assert row_issue["digits"] == [5]
    assert row_issue["cells"] == [(0, 0), (0, 1)]
    assert not is_consistent(board)


def test_conflict_mask():
    grid = np.zeros((9, 9), dtype=int)
    grid[0, 0] = 4
    grid[2, 2] = 4
    grid[5, 5] = 4
    mask = get_conflict_mask(grid)
    assert mask[0, 0] and mask[2, 2]
    assert not mask[5, 5]
    assert mask.sum() == 2


def test_givens_preserved(easy_board, solved_board):
    assert givens_preserved(easy_board, solved_board)
    tampered = load("6" + EASY_SOLUTION[1:])
    assert not givens_preserved(easy_board, tampered)


def _latin_square():
    # rows and columns hold 1-9, blocks do not
    return np.array([[(r + c) % 9 + 1 for c in range(9)] for r in range(9)])


@pytest.mark.parametrize("value", [10, 0, -1])
def test_out_of_domain_value_is_not_solved(value):
    board = load(EASY_SOLUTION)
    board.cells[0] = Cell(fixed=True, value=value, candidates=set())
    assert not is_solved(board)


def test_missing_digit_is_not_solved():
    # every 5 replaced by 10: still nine distinct values per grouping, but no 5
    values = [10 if ch == "5" else int(ch) for ch in EASY_SOLUTION]
    board = Board([Cell(fixed=True, value=v, candidates=set()) for v in values])
    assert not is_solved(board)


def test_duplicate_blocks_are_not_solved():
    board = Board.from_array(_latin_square())
    assert not is_solved(board)
    assert any(issue["unit"].startswith("b") for issue in find_conflicts(board))


def test_check_domain_accepts_loaded_boards(easy_board, solved_board):
    check_domain(easy_board)
    check_domain(solved_board)


@pytest.mark.parametrize("cell", [
    Cell(fixed=True, value=10, candidates=set()),
    Cell(fixed=True, value=0, candidates=set()),
    Cell(fixed=False, value=3),
    Cell(candidates={1, 10}),
])
def test_check_domain_rejects_bad_cells(easy_board, cell):
    easy_board.cells[2] = cell
    with pytest.raises(ValueError):
        check_domain(easy_board)
