"""error signals raised by terminal extraction and operator application."""


class LazyqError(Exception):
    """base class for errors raised by lazyq itself."""


class EmptySequenceError(LazyqError, ValueError):
    """the sequence had no elements where at least one was required."""

    def __init__(self, message: str = "sequence contains no elements"):
        super().__init__(message)


class OutOfRangeError(LazyqError, ValueError):
    """no element of the sequence satisfied the predicate."""

    def __init__(self, message: str = "no element satisfies the condition"):
        super().__init__(message)


class OperatorReusedError(LazyqError, RuntimeError):
    """a configured operator was applied to a second source."""
