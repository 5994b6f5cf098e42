# Grid geometry. Every index derivation in the project reads these.
GRID_SIZE = 9
BOX_SIZE = 3
CELL_COUNT = GRID_SIZE * GRID_SIZE

DIGITS = tuple(range(1, GRID_SIZE + 1))
EMPTY = 0
