import time
from dataclasses import dataclass

from solvers.propagation import mark
from solvers.scanner import scan
from solvers.validator import is_solved


class SearchTimeout(Exception):
    """Deadline passed; unwinds the whole recursion."""


@dataclass
class SearchStats:
    steps: int = 0       # recursive calls
    branches: int = 0    # candidate trials
    max_depth: int = 0
    fixes: int = 0       # cells fixed by scanning before the search started
    deadline: float = 0.0  # time.time() value, 0 = no limit

    def check_deadline(self):
        if self.deadline > 0 and time.time() > self.deadline:
            raise SearchTimeout()


def select_branch_cell(board):
    """
    MRV: unknown cell with the fewest candidates, first in row-major order on ties.
    Returns None when every cell is fixed.
    """
    best = None
    min_len = None

    for r, c in board.unknown_coords():
        n = len(board.cell(r, c).candidates)
        if min_len is None or n < min_len:
            min_len = n
            best = (r, c)
            if n == 0:
                break  # dead end, nothing beats it
    return best


def backtrack(board, stats, depth=0):
    """
    Depth-first search over copies of the board.

    board must already be at a propagation/scan fixed point.
    returns: solved Board, or None if this branch is unsatisfiable
    """
    stats.steps += 1
    stats.max_depth = max(stats.max_depth, depth)

    # 1. Base case
    if is_solved(board):
        return board

    # 2. MRV
    target = select_branch_cell(board)
    if target is None:
        return None  # all fixed but inconsistent
    row, col = target
    candidates = sorted(board.cell(row, col).candidates)
    if not candidates:
        return None

    # 3. Branching, each trial owns its copy
    for digit in candidates:
        stats.check_deadline()
        stats.branches += 1

        trial = board.copy()
        mark(trial, row, col, digit)
        scan(trial)

        result = backtrack(trial, stats, depth + 1)
        if result is not None:
            return result

    return None
