"""Pipeline orchestration.

Wires the stages of :mod:`identicon.systems` into the full identicon flow.
Stage order is fixed and every step returns a new
:class:`identicon.image.IdenticonImage`:

1. ``hash_input`` digests the string into 16 bytes.
2. ``pick_color`` takes the fill color from the first three bytes.
3. ``build_grid`` mirrors five 3-byte rows into a 5x5 grid.
4. ``filter_odd_grids`` keeps the even cells only.
5. ``build_pixel_map`` turns surviving cells into canvas rectangles.

:func:`generate` adds rendering and :func:`main` adds the ``<input>.png``
write on top of :func:`build`.
"""

import logging
from typing import Optional

from identicon.image import IdenticonImage
from identicon.systems import (
    build_grid,
    build_pixel_map,
    draw_image,
    filter_odd_grids,
    hash_input,
    pick_color,
)
from identicon.types import RenderFn
from identicon.utils.storage import save_image

logger = logging.getLogger(__name__)


def build(input: str) -> IdenticonImage:
    """Run every pure stage for ``input`` and return the populated record."""
    image = hash_input(input)
    image = pick_color(image)
    image = build_grid(image)
    image = filter_odd_grids(image)
    image = build_pixel_map(image)
    logger.debug(
        "Built identicon with color %s and %d painted cells",
        image.color,
        len(image.pixel_map or ()),
    )
    return image


def generate(input: str, render_fn: Optional[RenderFn] = None) -> bytes:
    """Build the identicon for ``input`` and return its encoded image bytes.

    Args:
        input (str): Identity string (user name, hash, ...).
        render_fn (RenderFn | None): Rasterizer; the Pillow renderer when ``None``.

    Raises:
        EncodingError: If the renderer fails.
    """
    return draw_image(build(input), render_fn)


def main(
    input: str, render_fn: Optional[RenderFn] = None, directory: str = "."
) -> str:
    """Render the identicon for ``input`` and save it as ``<input>.png``.

    Nothing is written unless rendering succeeds.

    Returns:
        str: Path of the written file.

    Raises:
        EncodingError: If the renderer fails.
        PersistenceError: If the file cannot be written.
    """
    data = generate(input, render_fn)
    return save_image(data, input, directory)
