"""Exceptions raised by crosspath."""


class CrossPathError(Exception):
    """Base class for all crosspath errors."""


class InvalidArgument(CrossPathError, TypeError):
    """
    Raised when an operation is called with the wrong number of arguments
    or with a non-string argument.

    The message names the operation and what it expects, e.g.
    ``path.join requires at least one string parameters.``
    """

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(message)
