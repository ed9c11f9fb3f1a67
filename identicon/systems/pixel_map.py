"""PixelMapper stage."""

from dataclasses import replace
from pyrsistent import pvector

from identicon.components import GridCell, Point, Rect
from identicon.errors import InvalidStateError
from identicon.image import IdenticonImage
from identicon.layout import CELL_SIZE, cell_origin, is_valid_index


def cell_rect(cell: GridCell) -> Rect:
    """Return the 50x50 canvas rectangle covered by ``cell``."""
    column, row = cell_origin(cell.index)
    top_left = Point(column * CELL_SIZE, row * CELL_SIZE)
    bottom_right = Point(top_left.x + CELL_SIZE, top_left.y + CELL_SIZE)
    return Rect(top_left, bottom_right)


def build_pixel_map(image: IdenticonImage) -> IdenticonImage:
    """Map every grid cell to its canvas rectangle, keeping grid order.

    Raises:
        InvalidStateError: If ``grid`` is missing or a cell index is outside 0..24.
    """
    if image.grid is None:
        raise InvalidStateError("build_pixel_map requires a grid")

    for cell in image.grid:
        if not is_valid_index(cell.index):
            raise InvalidStateError(f"Grid index {cell.index} is outside the canvas")

    pixel_map = pvector(cell_rect(cell) for cell in image.grid)
    return replace(image, pixel_map=pixel_map)
