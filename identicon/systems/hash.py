"""Hasher stage."""

import hashlib
from pyrsistent import pvector

from identicon.image import IdenticonImage


def hash_input(input: str) -> IdenticonImage:
    """Create a record holding the MD5 digest of ``input`` as 16 byte values.

    The string is UTF-8 encoded first. Every string hashes, the empty one
    included.
    """
    digest = hashlib.md5(input.encode("utf-8")).digest()
    return IdenticonImage(hex=pvector(digest))
