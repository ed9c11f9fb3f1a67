"""GridBuilder stage.

The digest is cut into rows of three bytes. Each row ``[a, b, c]`` is
mirrored around its last element into ``[a, b, c, b, a]``, which makes every
identicon horizontally symmetric. Five such rows form the 5x5 grid; the
16th digest byte is left over and ignored.
"""

from dataclasses import replace
from typing import List, Sequence
from pyrsistent import pvector

from identicon.components import GridCell
from identicon.errors import InvalidStateError
from identicon.image import IdenticonImage
from identicon.layout import GRID_SIZE, ROW_SEED_SIZE
from identicon.types import Byte


def mirror_row(row: Sequence[Byte]) -> List[Byte]:
    """Append the second and first elements of ``row`` in that order.

    ``[1, 2, 3]`` becomes ``[1, 2, 3, 2, 1]``. Longer rows are accepted and
    only their first two elements are reflected.

    Raises:
        ValueError: If ``row`` has fewer than 2 elements.
    """
    if len(row) < 2:
        raise ValueError(f"Cannot mirror a row of length {len(row)}")
    return list(row) + [row[1], row[0]]


def chunk_rows(values: Sequence[Byte], size: int) -> List[List[Byte]]:
    """Split ``values`` into consecutive rows of ``size``, dropping a short tail."""
    return [
        list(values[start : start + size])
        for start in range(0, len(values) - size + 1, size)
    ]


def build_grid(image: IdenticonImage) -> IdenticonImage:
    """Expand ``hex`` into 25 mirrored ``GridCell`` values in index order.

    Raises:
        InvalidStateError: If ``hex`` is missing or holds fewer than 15 bytes.
    """
    required = GRID_SIZE * ROW_SEED_SIZE
    if image.hex is None or len(image.hex) < required:
        raise InvalidStateError(f"build_grid requires at least {required} hex bytes")

    rows = chunk_rows(image.hex, ROW_SEED_SIZE)[:GRID_SIZE]
    values = [value for row in rows for value in mirror_row(row)]
    grid = pvector(GridCell(value, index) for index, value in enumerate(values))
    return replace(image, grid=grid)
