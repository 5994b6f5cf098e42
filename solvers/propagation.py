from core.board import GROUPINGS, peers


def propagate_constraints(board):
    """
    Remove, from every unknown cell, the values already fixed in its row,
    column and block. One sweep over the 27 groupings, in place.
    Convergence is driven by the scanner loop, not here.

    returns: number of candidates removed
    """
    removed = 0
    for coords in GROUPINGS:
        # 1. Values already settled in this grouping
        fixed_values = board.fixed_values(coords)
        if not fixed_values:
            continue
        # 2. Strike them from every unknown cell
        for r, c in coords:
            cell = board.cell(r, c)
            if cell.fixed:
                continue
            before = len(cell.candidates)
            for val in fixed_values:
                cell.eliminate(val)
            removed += before - len(cell.candidates)
    return removed


def mark(board, row, col, digit):
    """
    Fix (row, col) to digit and drop digit from every unknown peer.
    Single mutation point shared by the scanner and the search.
    """
    # 1. Fix
    board.cell(row, col).fix(digit)
    # 2. Re-propagate to the row, column and block
    for r, c in peers(row, col):
        cell = board.cell(r, c)
        if not cell.fixed:
            cell.eliminate(digit)
