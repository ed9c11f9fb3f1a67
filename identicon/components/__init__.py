"""identicon.components
=======================

Aggregate import surface for the value objects carried by an
:class:`identicon.image.IdenticonImage`::

    from identicon.components import GridCell, Point, Rect

All components are frozen ``@dataclass`` value objects; stages create new
ones rather than editing existing ones.
"""

from .cell import GridCell
from .rect import Point, Rect

__all__ = [
    "GridCell",
    "Point",
    "Rect",
]
