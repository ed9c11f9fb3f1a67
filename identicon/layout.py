"""Fixed identicon geometry.

The canvas is a 5x5 array of 50x50 cells. A flat grid index ``i`` lives at
column ``i % GRID_SIZE`` and row ``i // GRID_SIZE``.
"""

from typing import Tuple


DIGEST_SIZE = 16
GRID_SIZE = 5
ROW_SEED_SIZE = 3
CELL_SIZE = 50
CANVAS_SIZE = GRID_SIZE * CELL_SIZE
CELL_COUNT = GRID_SIZE * GRID_SIZE


def cell_origin(index: int) -> Tuple[int, int]:
    """Return ``(column, row)`` of the grid cell at flat ``index``."""
    return index % GRID_SIZE, index // GRID_SIZE


def is_valid_index(index: int) -> bool:
    return 0 <= index < CELL_COUNT
