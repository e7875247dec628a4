"""Errors raised by the calculation core."""


class InvalidArgumentError(ValueError):
    """A calculation was called with an argument outside its domain.

    This signals a programming error in the caller. The core raises it
    immediately and never catches it.
    """
