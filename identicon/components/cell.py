"""Grid cell component.

One square of the 5x5 identicon grid. ``index`` is the flat position in the
unfiltered grid and is never renumbered, so it always encodes the canvas
location of the cell.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GridCell:
    """Byte value paired with its grid position.

    Attributes:
        value: Digest byte (0..255). Even values are painted.
        index: Flat grid index (0..24).
    """

    value: int
    index: int

    @property
    def is_even(self) -> bool:
        return self.value % 2 == 0
