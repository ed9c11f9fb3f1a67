import logging
from typing import Optional, Sequence

from identicon.components import Rect
from identicon.errors import EncodingError
from identicon.renderer.config import DEFAULT_RENDER_CONFIG, RenderConfig
from identicon.types import Color
from identicon.utils.image import blank_canvas, encode_image, fill_rects

logger = logging.getLogger(__name__)


def render(
    width: int,
    height: int,
    fill: Color,
    rects: Sequence[Rect],
    config: Optional[RenderConfig] = None,
) -> bytes:
    """
    Rasterize ``rects`` in ``fill`` on a ``width`` x ``height`` canvas and encode it.

    Painting the same pixel twice is harmless since every rectangle shares
    one color.

    Raises:
        EncodingError: If the canvas cannot be built or encoded.
    """
    if config is None:
        config = DEFAULT_RENDER_CONFIG

    try:
        canvas = blank_canvas(width, height, config.background)
        canvas = fill_rects(canvas, fill, rects)
        data = encode_image(canvas, config.image_format)
    except (KeyError, OSError, OverflowError, ValueError, TypeError) as exc:
        raise EncodingError(
            f"Could not encode {width}x{height} image as {config.image_format}"
        ) from exc

    logger.debug(
        "Rendered %d rects into %d bytes of %s", len(rects), len(data), config.image_format
    )
    return data


class PillowRenderer:
    config: RenderConfig

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or DEFAULT_RENDER_CONFIG

    def render(
        self, width: int, height: int, fill: Color, rects: Sequence[Rect]
    ) -> bytes:
        return render(width, height, fill, rects, config=self.config)
