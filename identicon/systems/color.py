"""ColorPicker stage."""

from dataclasses import replace

from identicon.errors import InvalidStateError
from identicon.image import IdenticonImage


def pick_color(image: IdenticonImage) -> IdenticonImage:
    """Set ``color`` to the first three digest bytes read as ``(r, g, b)``.

    Raises:
        InvalidStateError: If ``hex`` is missing or shorter than 3 bytes.
    """
    if image.hex is None or len(image.hex) < 3:
        raise InvalidStateError("pick_color requires at least 3 hex bytes")

    r, g, b = image.hex[0], image.hex[1], image.hex[2]
    return replace(image, color=(r, g, b))
