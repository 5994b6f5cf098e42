import argparse
import time

from core.board import load
from data.load_dataset import load_puzzle_file
from utils.visualize import print_sudoku
from solvers.solver import SolveStatus, solve

EXIT_CODES = {
    SolveStatus.SOLVED: 0,
    SolveStatus.NO_SOLUTION: 1,
    SolveStatus.TIMEOUT: 2,
}
EXIT_BAD_INPUT = 3

def main(argv=None):
    parser = argparse.ArgumentParser(description="Constraint-propagation Sudoku solver")
    parser.add_argument('--input', type=str,
    default="800000000003600000070090200050007000000045700000100030001000068008500010090000400",
    help='Sudoku string (81 cells, 0 or . for unknown)')
    parser.add_argument('--file', type=str, default=None,
    help='Puzzle file: 9 lines of 9 characters, . for unknown (overrides --input)')
    parser.add_argument('--timeout', type=float, default=0.0, help='Seconds, 0 = no limit')
    args = parser.parse_args(argv)

    # 1. Load
    try:
        board = load_puzzle_file(args.file) if args.file else load(args.input)
    except (FileNotFoundError, ValueError) as e:
        print(f"❌ Failed to load puzzle: {e}")
        return EXIT_BAD_INPUT

    print(f"\n🧩 Puzzle: {board.to_string()[:15]}... ({board.num_fixed()} givens)")
    print_sudoku(board)

    # 2. Solve
    start_time = time.time()
    result = solve(board, timeout=args.timeout)
    elapsed = time.time() - start_time

    # 3. Report
    if result.status is SolveStatus.SOLVED:
        print(f"\n🎉 Solved in {elapsed:.4f} sec!")
        print_sudoku(result.board, original=board)
    elif result.status is SolveStatus.TIMEOUT:
        print(f"\n⏱️  Gave up after {elapsed:.4f} sec (timeout {args.timeout}s).")
    else:
        print(f"\n💀 No solution exists ({elapsed:.4f} sec).")

    stats = result.stats
    print(f"   scan fixes: {stats.fixes} | search steps: {stats.steps} | "
          f"branches: {stats.branches} | max depth: {stats.max_depth}")

    return EXIT_CODES[result.status]

if __name__ == "__main__":
    raise SystemExit(main())
