import numpy as np

from core.board import BLOCKS, COLS, GROUPINGS, ROWS
from core.constants import BOX_SIZE, DIGITS, EMPTY, GRID_SIZE

_DIGIT_SET = frozenset(DIGITS)


def is_solved(board):
    """True iff every row, column and block holds exactly the digits 1-9, all fixed."""
    for coords in GROUPINGS:
        if board.fixed_values(coords) != _DIGIT_SET:
            return False
    return True


def check_domain(board):
    """
    Raise ValueError on any cell outside the fixed-digit / unknown domain:
    fixed cells hold a digit, unknown cells hold EMPTY and digit candidates only.
    """
    for idx, cell in enumerate(board.cells):
        row, col = divmod(idx, GRID_SIZE)
        if cell.fixed:
            if cell.value not in _DIGIT_SET:
                raise ValueError(f"Fixed cell r{row + 1}c{col + 1} holds {cell.value!r}")
        elif cell.value != EMPTY:
            raise ValueError(f"Unknown cell r{row + 1}c{col + 1} holds value {cell.value!r}")
        elif not set(cell.candidates) <= _DIGIT_SET:
            bad = sorted(set(cell.candidates) - _DIGIT_SET, key=repr)
            raise ValueError(f"Unknown cell r{row + 1}c{col + 1} has invalid candidates {bad}")


def _unit_names():
    names = [f"r{i + 1}" for i in range(GRID_SIZE)]
    names += [f"c{i + 1}" for i in range(GRID_SIZE)]
    names += [f"b{i + 1}" for i in range(GRID_SIZE)]
    return names

_UNITS = list(zip(_unit_names(), ROWS + COLS + BLOCKS))


def find_conflicts(board):
    """Fixed values repeated within a grouping, one issue per offending unit."""
    issues = []
    for name, coords in _UNITS:
        seen = set()
        dups = set()
        for r, c in coords:
            cell = board.cell(r, c)
            if not cell.fixed:
                continue
            if cell.value in seen:
                dups.add(cell.value)
            seen.add(cell.value)
        if dups:
            cells = [(r, c) for r, c in coords
                     if board.cell(r, c).fixed and board.cell(r, c).value in dups]
            issues.append({"type": "duplicate", "unit": name,
                           "digits": sorted(dups), "cells": cells})
    return issues


def is_consistent(board):
    return not find_conflicts(board)


def givens_preserved(original, solved):
    for before, after in zip(original.cells, solved.cells):
        if before.fixed and (not after.fixed or after.value != before.value):
            return False
    return True


def get_conflict_mask(grid):
    """
    9x9 bool mask (True = violation) of cells whose value repeats in its
    row, column or block. grid: 9x9 integer array, 0 = empty.
    """
    grid = np.asarray(grid)
    conflict_mask = np.zeros((GRID_SIZE, GRID_SIZE), dtype=bool)

    for r in range(GRID_SIZE):
        for c in range(GRID_SIZE):
            val = grid[r, c]
            if val == 0: continue

            if np.sum(grid[r, :] == val) > 1:
                conflict_mask[r, c] = True
            if np.sum(grid[:, c] == val) > 1:
                conflict_mask[r, c] = True
            br, bc = r // BOX_SIZE, c // BOX_SIZE
            box = grid[br*BOX_SIZE:(br+1)*BOX_SIZE, bc*BOX_SIZE:(bc+1)*BOX_SIZE]
            if np.sum(box == val) > 1:
                conflict_mask[r, c] = True

    return conflict_mask
