from dataclasses import dataclass

from identicon.types import Color


DEFAULT_BACKGROUND: Color = (255, 255, 255)
DEFAULT_IMAGE_FORMAT = "PNG"


@dataclass(frozen=True)
class RenderConfig:
    """Rasterizer settings.

    Attributes:
        background: Color of cells that are not painted.
        image_format: Pillow format name used to encode the canvas.
    """

    background: Color = DEFAULT_BACKGROUND
    image_format: str = DEFAULT_IMAGE_FORMAT


DEFAULT_RENDER_CONFIG = RenderConfig()
