import io
import numpy as np
import numpy.typing as npt
from PIL import Image
from typing import Sequence

from identicon.components import Rect
from identicon.types import Color

# Type aliases for clarity
UInt8Array = npt.NDArray[np.uint8]


def color_array(color: Color) -> UInt8Array:
    """
    Return ``color`` as a uint8 RGB triple, rejecting channels outside 0..255.
    """
    if len(color) != 3 or any(not 0 <= channel <= 255 for channel in color):
        raise ValueError(f"Invalid RGB color: {color}")
    return np.asarray(color, dtype=np.uint8)


def blank_canvas(width: int, height: int, background: Color) -> UInt8Array:
    """
    Return an (height, width, 3) uint8 RGB canvas filled with ``background``.
    """
    canvas: UInt8Array = np.empty((height, width, 3), dtype=np.uint8)
    canvas[...] = color_array(background)
    return canvas


def fill_rects(canvas: UInt8Array, fill: Color, rects: Sequence[Rect]) -> UInt8Array:
    """
    Paint each half-open rectangle of ``rects`` with ``fill`` on a copy of ``canvas``.
    Rectangles reaching past the canvas edge are clipped; ones wholly outside paint nothing.
    """
    out: UInt8Array = canvas.copy()
    color = color_array(fill)
    for rect in rects:
        x0, y0 = max(rect.top_left.x, 0), max(rect.top_left.y, 0)
        x1, y1 = max(rect.bottom_right.x, 0), max(rect.bottom_right.y, 0)
        if x1 <= x0 or y1 <= y0:
            continue
        out[y0:y1, x0:x1] = color
    return out


def encode_image(canvas: UInt8Array, image_format: str) -> bytes:
    """
    Encode an RGB canvas with Pillow and return the raw bytes.
    """
    buffer = io.BytesIO()
    Image.fromarray(canvas).save(buffer, format=image_format)
    return buffer.getvalue()


def decode_image(data: bytes) -> UInt8Array:
    """
    Decode an encoded image back into an (height, width, 3) uint8 RGB array.
    """
    with Image.open(io.BytesIO(data)) as img:
        return np.array(img.convert("RGB"), dtype=np.uint8)
