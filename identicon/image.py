"""Immutable identicon record.

:class:`IdenticonImage` is the single value threaded through the pipeline.
Each stage in :mod:`identicon.systems` is a pure function that takes a
record and returns a *new* one with exactly one more field populated:

* ``hash_input`` creates the record with ``hex``.
* ``pick_color`` sets ``color``.
* ``build_grid`` sets ``grid``; ``filter_odd_grids`` narrows it.
* ``build_pixel_map`` sets ``pixel_map``.

Sequences are persistent vectors (``pyrsistent.PVector``) so a field, once
set, cannot be changed in place by a later stage.
"""

from dataclasses import dataclass
from typing import Optional
from pyrsistent.typing import PVector

from identicon.components import GridCell, Rect
from identicon.types import Byte, Color


@dataclass(frozen=True)
class IdenticonImage:
    """Progressively populated identicon record.

    ``None`` marks a field that no stage has produced yet.

    Attributes:
        hex (PVector[int] | None): Digest bytes of the input string (16 values).
        color (Color | None): Fill color taken from the first three digest bytes.
        grid (PVector[GridCell] | None): Mirrored 5x5 grid, possibly filtered.
        pixel_map (PVector[Rect] | None): Canvas rectangle for each grid cell.
    """

    hex: Optional[PVector[Byte]] = None
    color: Optional[Color] = None
    grid: Optional[PVector[GridCell]] = None
    pixel_map: Optional[PVector[Rect]] = None
