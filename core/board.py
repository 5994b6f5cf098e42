import numpy as np

from core.cell import Cell
from core.constants import BOX_SIZE, CELL_COUNT, DIGITS, EMPTY, GRID_SIZE

# -------------------------------------------------------------------------
# 1. Groupings (pure index arithmetic, no references into a board)
# -------------------------------------------------------------------------
def row_coords(row):
    return [(row, col) for col in range(GRID_SIZE)]

def col_coords(col):
    return [(row, col) for row in range(GRID_SIZE)]

def block_coords(block):
    """Blocks are numbered left-to-right, top-to-bottom."""
    r0 = (block // BOX_SIZE) * BOX_SIZE
    c0 = (block % BOX_SIZE) * BOX_SIZE
    return [(r0 + i, c0 + j) for i in range(BOX_SIZE) for j in range(BOX_SIZE)]

def block_index(row, col):
    return (row // BOX_SIZE) * BOX_SIZE + (col // BOX_SIZE)


ROWS = [row_coords(i) for i in range(GRID_SIZE)]
COLS = [col_coords(i) for i in range(GRID_SIZE)]
BLOCKS = [block_coords(i) for i in range(GRID_SIZE)]
GROUPINGS = ROWS + COLS + BLOCKS


def _build_peers():
    peers = {}
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            ps = set(ROWS[row]) | set(COLS[col]) | set(BLOCKS[block_index(row, col)])
            ps.discard((row, col))
            peers[(row, col)] = frozenset(ps)
    return peers

_PEERS = _build_peers()

def peers(row, col):
    """Coordinates sharing a row, column or block with (row, col), excluding itself."""
    return _PEERS[(row, col)]


# -------------------------------------------------------------------------
# 2. Board
# -------------------------------------------------------------------------
class Board:
    """9x9 grid of Cells stored as a flat row-major list."""

    def __init__(self, cells=None):
        if cells is None:
            cells = [Cell() for _ in range(CELL_COUNT)]
        cells = list(cells)
        if len(cells) != CELL_COUNT:
            raise ValueError(f"Board needs {CELL_COUNT} cells, got {len(cells)}")
        self.cells = cells

    @classmethod
    def from_array(cls, grid):
        """Build a board from a 9x9 integer array, 0 = unknown."""
        grid = np.asarray(grid).reshape(GRID_SIZE, GRID_SIZE)
        cells = []
        for val in grid.flatten():
            val = int(val)
            cells.append(Cell() if val == EMPTY else Cell.given(val))
        return cls(cells)

    def cell(self, row, col):
        return self.cells[row * GRID_SIZE + col]

    def __getitem__(self, coord):
        row, col = coord
        return self.cell(row, col)

    def copy(self):
        return Board(c.copy() for c in self.cells)

    def to_array(self):
        values = [c.value if c.fixed else EMPTY for c in self.cells]
        return np.array(values, dtype=int).reshape(GRID_SIZE, GRID_SIZE)

    def to_string(self):
        return "".join(str(c.value) if c.fixed else "." for c in self.cells)

    def unknown_coords(self):
        """Non-fixed positions in row-major order."""
        return [divmod(i, GRID_SIZE) for i, c in enumerate(self.cells) if not c.fixed]

    def fixed_values(self, coords):
        return {self.cell(r, c).value for r, c in coords if self.cell(r, c).fixed}

    def num_fixed(self):
        return sum(1 for c in self.cells if c.fixed)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self):
        return f"Board('{self.to_string()}')"


# -------------------------------------------------------------------------
# 3. Load
# -------------------------------------------------------------------------
_UNKNOWN_CHARS = ".0"
_GIVEN_CHARS = "".join(str(d) for d in DIGITS)

def _parse_string(text):
    chars = [ch for ch in text if not ch.isspace()]
    if len(chars) != CELL_COUNT:
        raise ValueError(f"Puzzle string must hold {CELL_COUNT} cells, got {len(chars)}")

    values = []
    for idx, ch in enumerate(chars):
        if ch in _UNKNOWN_CHARS:
            values.append(EMPTY)
        elif ch in _GIVEN_CHARS:
            values.append(int(ch))
        else:
            row, col = divmod(idx, GRID_SIZE)
            raise ValueError(f"Invalid character {ch!r} at r{row + 1}c{col + 1}")
    return np.array(values, dtype=int)

def load(grid_input):
    """
    Turn puzzle data into a Board.

    Accepts an 81-cell string ('1'-'9' givens, '0' or '.' unknown, whitespace
    ignored), a 9x9 / flat-81 integer sequence or numpy array (0 = unknown),
    or an existing Board (returned as a copy). Anything else raises ValueError.
    """
    if isinstance(grid_input, Board):
        return grid_input.copy()
    if isinstance(grid_input, str):
        return Board.from_array(_parse_string(grid_input))

    arr = np.asarray(grid_input)
    if arr.shape not in ((GRID_SIZE, GRID_SIZE), (CELL_COUNT,)):
        raise ValueError(f"Grid must be {GRID_SIZE}x{GRID_SIZE} or flat {CELL_COUNT}, got shape {arr.shape}")
    if not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"Grid values must be integers, got dtype {arr.dtype}")
    if np.any((arr < EMPTY) | (arr > GRID_SIZE)):
        bad = arr.flatten()[(arr.flatten() < EMPTY) | (arr.flatten() > GRID_SIZE)]
        raise ValueError(f"Grid values must be in 0..{GRID_SIZE}, got {bad.tolist()}")
    return Board.from_array(arr)
