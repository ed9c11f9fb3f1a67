"""Common type aliases.

``RenderFn`` is the extension point used by :func:`identicon.systems.draw.draw_image`
to plug in any rasterization backend.
"""

from typing import Callable, Sequence, Tuple, TYPE_CHECKING


if TYPE_CHECKING:
    from identicon.components import Rect

Byte = int

Color = Tuple[Byte, Byte, Byte]

RenderFn = Callable[[int, int, Color, Sequence["Rect"]], bytes]
