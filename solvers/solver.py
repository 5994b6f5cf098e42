import time
from enum import Enum
from typing import NamedTuple, Optional

from core.board import Board, load
from solvers.propagation import propagate_constraints
from solvers.scanner import scan
from solvers.search import SearchStats, SearchTimeout, backtrack
from solvers.validator import check_domain, is_consistent


class SolveStatus(Enum):
    SOLVED = "solved"
    NO_SOLUTION = "no_solution"
    TIMEOUT = "timeout"


class SolveResult(NamedTuple):
    status: SolveStatus
    board: Optional[Board]  # only set when SOLVED
    stats: SearchStats

    @property
    def solved(self):
        return self.status is SolveStatus.SOLVED


def solve(board, timeout=0.0):
    """
    Solve a loaded board. The caller's board is left untouched.

    Args:
        board: Board with givens fixed and unknown cells carrying full candidate sets
        timeout: seconds, 0 = unlimited. Checked before every branch trial.

    Raises ValueError if a cell lies outside the digit / unknown domain.
    """
    check_domain(board)

    stats = SearchStats()
    if timeout > 0:
        stats.deadline = time.time() + timeout

    # 1. Givens that already clash can never be completed
    if not is_consistent(board):
        return SolveResult(SolveStatus.NO_SOLUTION, None, stats)

    # 2. Constraint propagation + hidden singles
    work = board.copy()
    propagate_constraints(work)
    stats.fixes = scan(work)

    # 3. Search
    try:
        solved = backtrack(work, stats)
    except SearchTimeout:
        return SolveResult(SolveStatus.TIMEOUT, None, stats)

    if solved is None:
        return SolveResult(SolveStatus.NO_SOLUTION, None, stats)
    return SolveResult(SolveStatus.SOLVED, solved, stats)


def solve_sudoku(grid_input, timeout=0.0):
    """load + solve. Malformed input raises ValueError."""
    return solve(load(grid_input), timeout=timeout)
