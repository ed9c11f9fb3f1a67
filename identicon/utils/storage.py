"""Persisting rendered identicons.

Kept apart from the pipeline so any other store (database, object storage)
can replace it. Input strings are used verbatim as file names; callers must
sanitize anything path-unsafe.
"""

import logging
import os

from identicon.errors import PersistenceError

logger = logging.getLogger(__name__)

IMAGE_EXTENSION = ".png"


def image_path(input: str, directory: str = ".") -> str:
    """Return ``<directory>/<input>.png``."""
    return os.path.join(directory, f"{input}{IMAGE_EXTENSION}")


def save_image(data: bytes, input: str, directory: str = ".") -> str:
    """Write ``data`` to ``<directory>/<input>.png`` and return the path.

    The bytes land in a temporary sibling first and are moved into place with
    ``os.replace``, so a failed write never leaves a truncated image behind.

    Raises:
        PersistenceError: If the file cannot be written.
    """
    path = image_path(input, directory)
    tmp_path = f"{path}.tmp"
    try:
        with open(tmp_path, "wb") as f:
            f.write(data)
        os.replace(tmp_path, path)
    except OSError as exc:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise PersistenceError(f"Could not write identicon to {path}") from exc

    logger.debug("Saved %d bytes to %s", len(data), path)
    return path
