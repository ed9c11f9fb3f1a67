"""Rendering subpackage.

Turns the rectangles of a finished :class:`identicon.image.IdenticonImage`
into an encoded image buffer. The pipeline only depends on the ``RenderFn``
contract ``(width, height, fill, rects) -> bytes``; this package ships the
default NumPy + Pillow implementation.

See :mod:`identicon.renderer.pillow` for the rasterizer and
:mod:`identicon.renderer.config` for its tunables.
"""

from .config import RenderConfig, DEFAULT_RENDER_CONFIG
from .pillow import PillowRenderer, render

__all__ = [
    "DEFAULT_RENDER_CONFIG",
    "PillowRenderer",
    "RenderConfig",
    "render",
]
