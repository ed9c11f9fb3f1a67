"""identicon
=========

Deterministic identicon avatars. An input string is hashed, its digest picks
a color and a mirrored 5x5 pattern, and the pattern is rendered on a 250x250
canvas::

    from identicon import generate, main

    png_bytes = generate("alice")
    path = main("alice")  # writes ./alice.png

The same input always produces the same bytes.
"""

from .components import GridCell, Point, Rect
from .errors import EncodingError, IdenticonError, InvalidStateError, PersistenceError
from .image import IdenticonImage
from .pipeline import build, generate, main
from .renderer import PillowRenderer, RenderConfig
from .systems import (
    build_grid,
    build_pixel_map,
    draw_image,
    filter_odd_grids,
    hash_input,
    mirror_row,
    pick_color,
)
from .utils.storage import save_image

__all__ = [
    "EncodingError",
    "GridCell",
    "IdenticonError",
    "IdenticonImage",
    "InvalidStateError",
    "PersistenceError",
    "PillowRenderer",
    "Point",
    "Rect",
    "RenderConfig",
    "build",
    "build_grid",
    "build_pixel_map",
    "draw_image",
    "filter_odd_grids",
    "generate",
    "hash_input",
    "main",
    "mirror_row",
    "pick_color",
    "save_image",
]
