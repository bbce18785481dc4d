"""Error types raised by the evaluation toolkit."""


class InvalidInputError(ValueError):
    """Raised when an argument violates a precondition.

    Covers empty candidate/reference strings, out-of-range numeric
    arguments and too-short token sequences. Subclasses ValueError so
    callers can catch either.
    """
