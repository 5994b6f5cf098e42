import numpy as np

from core.board import Board
from core.constants import BOX_SIZE, GRID_SIZE
from solvers.validator import get_conflict_mask

# ANSI Colors
RED = '\033[91m'   # conflict
BLUE = '\033[94m'  # filled in by the solver
RESET = '\033[0m'

RULE = "-" * 25


def _as_array(grid):
    if isinstance(grid, Board):
        return grid.to_array()
    return np.asarray(grid).reshape(GRID_SIZE, GRID_SIZE)


def format_sudoku(grid, original=None, color=False):
    """
    grid: Board or 9x9 array (0 = unknown)
    original: starting puzzle, used to tell givens from filled cells
    """
    grid = _as_array(grid)
    return _render(grid, original, get_conflict_mask(grid), color)


def _render(grid, original, conflicts, color):
    if original is not None:
        original = _as_array(original)

    lines = [RULE]
    for i in range(GRID_SIZE):
        if i > 0 and i % BOX_SIZE == 0:
            lines.append(RULE)
        row_str = ""
        for j in range(GRID_SIZE):
            if j > 0 and j % BOX_SIZE == 0:
                row_str += "| "

            val = grid[i, j]
            val_str = str(val) if val != 0 else "."

            is_filled = (original is not None) and (original[i, j] == 0) and (val != 0)

            if color and conflicts[i, j]:
                row_str += f"{RED}{val_str}{RESET} "
            elif color and is_filled:
                row_str += f"{BLUE}{val_str}{RESET} "
            else:
                row_str += f"{val_str} "

        lines.append(row_str.rstrip())
    lines.append(RULE)
    return "\n".join(lines)


def print_sudoku(grid, original=None):
    grid = _as_array(grid)
    conflicts = get_conflict_mask(grid)
    print(_render(grid, original, conflicts, color=True))

    if np.any(conflicts):
        print(f"{RED}⚠️  DETECTED ERRORS: The grid violates Sudoku rules!{RESET}")
    elif np.all(grid != 0):
        print(f"{BLUE}✅ Perfect Solution!{RESET}")
