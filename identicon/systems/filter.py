"""OddFilter stage."""

from dataclasses import replace
from pyrsistent import pvector

from identicon.errors import InvalidStateError
from identicon.image import IdenticonImage


def filter_odd_grids(image: IdenticonImage) -> IdenticonImage:
    """Drop grid cells with an odd value.

    Surviving cells keep their order and their original ``index``; the grid
    may end up empty, which renders as a blank image.

    Raises:
        InvalidStateError: If ``grid`` is missing.
    """
    if image.grid is None:
        raise InvalidStateError("filter_odd_grids requires a grid")

    grid = pvector(cell for cell in image.grid if cell.is_even)
    return replace(image, grid=grid)
