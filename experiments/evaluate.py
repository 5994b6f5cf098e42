import sys
import os
import time
import numpy as np
import argparse
import matplotlib.pyplot as plt
from tqdm import tqdm

# project root
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from core.constants import BOX_SIZE, DIGITS, EMPTY, GRID_SIZE
from data.load_dataset import SudokuDataset
from solvers.solver import solve

# -------------------------------------------------------------------------
# 1. Standard Backtracking Solver (Baseline)
# -------------------------------------------------------------------------
def is_valid(board, row, col, num):
    if num in board[row]: return False
    if num in [board[i][col] for i in range(GRID_SIZE)]: return False
    start_row, start_col = BOX_SIZE * (row // BOX_SIZE), BOX_SIZE * (col // BOX_SIZE)
    for i in range(BOX_SIZE):
        for j in range(BOX_SIZE):
            if board[start_row + i][start_col + j] == num: return False
    return True

def solve_sudoku_backtracking(board):
    """Row-major, no propagation, no heuristic. Fills board in place."""
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            if board[row][col] == EMPTY:
                for num in DIGITS:
                    if is_valid(board, row, col, num):
                        board[row][col] = num
                        if solve_sudoku_backtracking(board): return True
                        board[row][col] = EMPTY
                return False
    return True

# -------------------------------------------------------------------------
# 2. Visualization
# -------------------------------------------------------------------------
def save_performance_graph(csp_time, bt_time, csp_acc, bt_acc, save_path='benchmark_result.png'):
    labels = ['CSP (MRV)', 'Backtracking']
    times = [csp_time, bt_time]
    accs = [csp_acc, bt_acc]

    fig, ax1 = plt.subplots(figsize=(10, 6))

    color = 'tab:blue'
    ax1.set_xlabel('Solver Type')
    ax1.set_ylabel('Avg Time (sec)', color=color)
    bars = ax1.bar(labels, times, color=color, alpha=0.6, label='Time')
    ax1.tick_params(axis='y', labelcolor=color)

    for bar in bars:
        height = bar.get_height()
        ax1.text(bar.get_x() + bar.get_width()/2., height,
                f'{height:.4f}s', ha='center', va='bottom')

    ax2 = ax1.twinx()
    color = 'tab:red'
    ax2.set_ylabel('Accuracy (%)', color=color)
    ax2.plot(labels, accs, color=color, marker='o', linewidth=2, label='Accuracy')
    ax2.tick_params(axis='y', labelcolor=color)
    ax2.set_ylim(0, 110)

    for i, acc in enumerate(accs):
        ax2.text(i, acc + 2, f'{acc:.1f}%', ha='center', color='red', fontweight='bold')

    plt.title('Performance Benchmark: CSP Solver vs Backtracking')
    fig.tight_layout()

    plt.savefig(save_path)
    print(f"📈 Saved chart to {save_path}")
    plt.close(fig)

# -------------------------------------------------------------------------
# 3. Evaluation Logic
# -------------------------------------------------------------------------
def evaluate_benchmark(dataset, num_samples=1000, seed=0, timeout=0.0, save_path='benchmark_result.png'):
    rng = np.random.default_rng(seed)
    indices = rng.choice(len(dataset), size=min(len(dataset), num_samples), replace=False)

    csp_correct = 0
    csp_total_time = 0
    bt_correct = 0
    bt_total_time = 0

    print(f"🔍 Benchmarking on {len(indices)} samples...")

    for idx in tqdm(indices, desc="Running Benchmark"):
        quiz, target = dataset[int(idx)]

        # --- A. CSP Solver ---
        start = time.time()
        result = solve(quiz, timeout=timeout)
        csp_total_time += time.time() - start

        if result.solved and np.array_equal(result.board.to_array(), target):
            csp_correct += 1

        # --- B. Backtracking Solver ---
        bt_input = quiz.to_array()
        start = time.time()
        solve_sudoku_backtracking(bt_input)
        bt_total_time += time.time() - start

        if np.array_equal(bt_input, target):
            bt_correct += 1

    # Report
    n = len(indices)
    report = {
        'samples': n,
        'csp_acc': (csp_correct / n) * 100 if n else 0.0,
        'bt_acc': (bt_correct / n) * 100 if n else 0.0,
        'csp_time': csp_total_time / n if n else 0.0,
        'bt_time': bt_total_time / n if n else 0.0,
    }

    print("\n" + "="*55)
    print("📊 Final Benchmark Results")
    print("="*55)
    print(f"CSP Solver (MRV):     {report['csp_acc']:.2f}% Acc | {report['csp_time']:.5f} sec")
    print(f"Backtracking (plain): {report['bt_acc']:.2f}% Acc | {report['bt_time']:.5f} sec")
    print("="*55)

    save_performance_graph(report['csp_time'], report['bt_time'],
                           report['csp_acc'], report['bt_acc'], save_path=save_path)
    return report

def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--csv', type=str, default='data/raw/sudoku.csv')
    parser.add_argument('--samples', type=int, default=100)
    parser.add_argument('--seed', type=int, default=0)
    parser.add_argument('--timeout', type=float, default=0.0)
    parser.add_argument('--output', type=str, default='benchmark_result.png')
    args = parser.parse_args()

    try:
        dataset = SudokuDataset(csv_path=args.csv)
    except (FileNotFoundError, ValueError) as e:
        print(f"❌ {e}")
        return

    evaluate_benchmark(dataset, num_samples=args.samples, seed=args.seed,
                       timeout=args.timeout, save_path=args.output)

if __name__ == "__main__":
    main()
