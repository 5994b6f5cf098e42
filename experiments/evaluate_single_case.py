import sys
import os
import time
import numpy as np

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
from core.board import Board, load
from solvers.solver import solve
from solvers.validator import is_solved
from experiments.evaluate import solve_sudoku_backtracking

# Arto Inkala's Puzzle
INKALA = "800000000003600000070090200050007000000045700000100030001000068008500010090000400"

def grid_is_solved(grid):
    """9x9 array, 0 = empty. Rows, columns and blocks must all hold 1-9."""
    return is_solved(Board.from_array(grid))

def run_comparison(puzzle_str):
    print(f"🧩 Puzzle: {puzzle_str[:15]}...")

    # 1. CSP Solver Run
    board = load(puzzle_str)
    start_csp = time.time()
    result = solve(board)
    time_csp = time.time() - start_csp

    is_csp_valid = result.solved and is_solved(result.board)

    # 2. Backtracking Run
    bt_grid = board.to_array()
    start_bt = time.time()
    solve_sudoku_backtracking(bt_grid)
    time_bt = time.time() - start_bt

    is_bt_valid = grid_is_solved(bt_grid)

    # 3. Report
    print("\n" + "="*50)
    print(f"⚔️  Face-off Results")
    print("="*50)

    print(f"🧠 [CSP Solver (propagation + MRV)]")
    print(f"   Time:     {time_csp:.5f} sec")
    print(f"   Branches: {result.stats.branches}")
    print(f"   Status:   {'✅ Valid Solution' if is_csp_valid else '❌ Failed'}")

    print(f"\n🐢 [Backtracking Algorithm]")
    print(f"   Time:   {time_bt:.5f} sec")
    print(f"   Status: {'✅ Valid Solution' if is_bt_valid else '❌ Failed'}")

    print("-" * 50)
    if is_csp_valid and is_bt_valid:
        ratio = time_bt / time_csp if time_csp > 0 else float('inf')
        if ratio > 1:
            print(f"🚀 Winner: CSP solver is {ratio:.2f}x FASTER than Backtracking!")
        else:
            print(f"🐌 Result: CSP solver is {1/ratio:.2f}x slower than Backtracking.")
    else:
        print("⚠️ One of the solvers failed. Check logic.")

    return {'csp_valid': is_csp_valid, 'bt_valid': is_bt_valid,
            'csp_time': time_csp, 'bt_time': time_bt,
            'agree': is_csp_valid and is_bt_valid and np.array_equal(result.board.to_array(), bt_grid)}

if __name__ == "__main__":
    run_comparison(INKALA)
