from core.board import BLOCKS, COLS, ROWS
from solvers.propagation import mark


def build_candidate_map(board, coords):
    """digit -> [(row, col), ...] over the unknown cells of one grouping"""
    p_map = {}
    for r, c in coords:
        cell = board.cell(r, c)
        if cell.fixed:
            continue
        for digit in sorted(cell.candidates):
            p_map.setdefault(digit, []).append((r, c))
    return p_map


def scan_grouping(board, coords):
    """Fix every digit that has exactly one possible cell left in this grouping."""
    # 1. Inverted map for this grouping
    fixes = 0
    p_map = build_candidate_map(board, coords)

    # 2. Digits with a single home
    for digit in sorted(p_map):
        positions = p_map[digit]
        if len(positions) != 1:
            continue
        r, c = positions[0]
        cell = board.cell(r, c)
        # an earlier digit of this map may have taken the cell already
        if cell.fixed or not cell.has_candidate(digit):
            continue
        mark(board, r, c, digit)
        fixes += 1
    return fixes


def scan_pass(board):
    """One rows -> columns -> blocks pass. returns: number of cells fixed"""
    fixes = 0
    for groupings in (ROWS, COLS, BLOCKS):
        for coords in groupings:
            fixes += scan_grouping(board, coords)
    return fixes


def scan(board):
    """
    Repeat full passes until one fixes nothing (fixed point).
    Hidden singles only; deeper patterns are left to the search.

    returns: total number of cells fixed
    """
    total = 0
    while True:
        fixes = scan_pass(board)
        if fixes == 0:
            return total
        total += fixes
