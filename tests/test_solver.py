import pytest

from core.board import Board, load
from core.cell import Cell
from solvers.search import SearchStats, backtrack, select_branch_cell
from solvers.solver import SolveStatus, solve, solve_sudoku
from solvers.validator import givens_preserved, is_solved
from conftest import EASY, EASY_SOLUTION, HARD, HARD_SOLUTION


def test_solves_published_puzzle(easy_board):
    result = solve(easy_board)

    assert result.status is SolveStatus.SOLVED
    assert result.solved
    assert result.board.to_string() == EASY_SOLUTION
    assert all(cell.fixed for cell in result.board.cells)


def test_solves_hard_puzzle_with_search(hard_board):
    result = solve(hard_board)

    assert result.solved
    assert is_solved(result.board)
    assert givens_preserved(hard_board, result.board)
    assert result.board.to_string() == HARD_SOLUTION
    assert result.stats.branches > 0


def test_solve_does_not_mutate_input(easy_board):
    solve(easy_board)
    assert easy_board == load(EASY)


def test_solved_board_is_returned_unchanged(solved_board):
    result = solve(solved_board)
    assert result.solved
    assert result.board == solved_board
    assert result.stats.branches == 0

    again = solve(result.board)
    assert again.board == result.board


def test_single_unknown_resolves_without_branching():
    result = solve_sudoku("0" + EASY_SOLUTION[1:])
    assert result.solved
    assert result.board.to_string() == EASY_SOLUTION
    assert result.stats.branches == 0
    assert result.stats.fixes == 1


def test_duplicate_givens_have_no_solution():
    result = solve_sudoku("55" + EASY[2:])
    assert result.status is SolveStatus.NO_SOLUTION
    assert result.board is None
    assert not result.solved
    assert result.stats.steps == 0


def test_cell_without_candidates_has_no_solution():
    # r1c9 sees 1..8 in its row and 9 in its column
    grid = [[0] * 9 for _ in range(9)]
    grid[0][:8] = [1, 2, 3, 4, 5, 6, 7, 8]
    grid[5][8] = 9
    result = solve_sudoku(grid)
    assert result.status is SolveStatus.NO_SOLUTION
    assert result.board is None
    assert result.stats.branches == 0


def test_timeout_on_empty_board():
    result = solve(Board(), timeout=1e-9)
    assert result.status is SolveStatus.TIMEOUT
    assert result.board is None


def test_malformed_input_fails_fast():
    with pytest.raises(ValueError):
        solve_sudoku("12x" + "0" * 78)


def test_mrv_picks_first_smallest_cell():
    board = Board()
    board.cell(2, 1).candidates = {3, 4}
    board.cell(0, 3).candidates = {5, 6}
    board.cell(7, 7).candidates = {1, 2, 3}
    assert select_branch_cell(board) == (0, 3)

    board.cell(8, 8).candidates = set()
    assert select_branch_cell(board) == (8, 8)


def test_mrv_returns_none_when_all_fixed(solved_board):
    assert select_branch_cell(solved_board) is None


def test_backtrack_rejects_inconsistent_full_board():
    swapped = load(EASY_SOLUTION[1] + EASY_SOLUTION[0] + EASY_SOLUTION[2:])
    assert backtrack(swapped, SearchStats()) is None


def test_out_of_domain_candidate_fails_fast():
    board = load("0" + EASY_SOLUTION[1:])
    board.cells[0] = Cell(candidates={10})
    with pytest.raises(ValueError):
        solve(board)


def test_out_of_domain_given_fails_fast(solved_board):
    solved_board.cells[0] = Cell(fixed=True, value=10, candidates=set())
    with pytest.raises(ValueError):
        solve(solved_board)
