"""Hand a finished record to a renderer."""

from typing import Optional

from identicon.errors import InvalidStateError
from identicon.image import IdenticonImage
from identicon.layout import CANVAS_SIZE
from identicon.renderer.pillow import PillowRenderer
from identicon.types import RenderFn


def draw_image(image: IdenticonImage, render_fn: Optional[RenderFn] = None) -> bytes:
    """Paint ``pixel_map`` in ``color`` on a 250x250 canvas and return the encoded bytes.

    Args:
        image (IdenticonImage): Record with ``color`` and ``pixel_map`` populated.
        render_fn (RenderFn | None): Rasterizer to use. Defaults to
            :meth:`PillowRenderer.render` with the default ``RenderConfig``.

    Returns:
        bytes: Encoded image buffer produced by ``render_fn``.

    Raises:
        InvalidStateError: If ``color`` or ``pixel_map`` is missing.
    """
    if image.color is None:
        raise InvalidStateError("draw_image requires a color")
    if image.pixel_map is None:
        raise InvalidStateError("draw_image requires a pixel map")

    if render_fn is None:
        render_fn = PillowRenderer().render

    return render_fn(CANVAS_SIZE, CANVAS_SIZE, image.color, list(image.pixel_map))
