import os

import numpy as np
import pandas as pd

from core.board import load
from core.constants import GRID_SIZE


def load_puzzle_file(path):
    """
    Read a puzzle file: 9 lines of 9 characters, '.' (or '0') for unknown cells.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Puzzle file not found at {path}")
    with open(path, 'r', encoding='utf-8') as f:
        text = f.read()
    return load(text)


class SudokuDataset:
    """
    CSV puzzle set with 'quizzes' and 'solutions' columns of 81-digit strings.
    Rows are converted on access.
    """

    def __init__(self, csv_path):
        self.csv_path = csv_path
        if csv_path and os.path.exists(csv_path):
            # keep leading zeros: read as strings
            self.df = pd.read_csv(csv_path, dtype=str)
        else:
            raise FileNotFoundError(f"CSV file not found at {csv_path}")

        missing = {'quizzes', 'solutions'} - set(self.df.columns)
        if missing:
            raise ValueError(f"CSV is missing columns: {sorted(missing)}")

    def __len__(self):
        return len(self.df)

    def __getitem__(self, idx):
        row = self.df.iloc[idx]
        quiz = load(row['quizzes'].strip())
        solution = np.array([int(ch) for ch in row['solutions'].strip()]).reshape(GRID_SIZE, GRID_SIZE)
        return quiz, solution
