"""Error types raised by the identicon pipeline."""


class IdenticonError(Exception):
    """Base class for all identicon errors."""


class InvalidStateError(IdenticonError, ValueError):
    """A stage received an ``IdenticonImage`` missing a prerequisite field.

    This is a contract error: the standard pipeline order always satisfies
    every precondition, so it only shows up for hand-built records.
    """


class EncodingError(IdenticonError):
    """The renderer could not produce an encoded image buffer."""


class PersistenceError(IdenticonError):
    """The encoded image could not be written to its destination."""
