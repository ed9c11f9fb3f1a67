"""Pipeline stages.

Every stage is a pure ``IdenticonImage -> IdenticonImage`` function, except
:func:`hash_input` which creates the record and :func:`draw_image` which hands
the finished record to a renderer.
"""

from .hash import hash_input
from .color import pick_color
from .grid import build_grid, mirror_row
from .filter import filter_odd_grids
from .pixel_map import build_pixel_map
from .draw import draw_image

__all__ = [
    "build_grid",
    "build_pixel_map",
    "draw_image",
    "filter_odd_grids",
    "hash_input",
    "mirror_row",
    "pick_color",
]
