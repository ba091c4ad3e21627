"""
Exception types for the accumulator.
"""


class TallyError(Exception):
    """Base class for accumulator errors."""
    pass


class InvalidArgumentError(TallyError, ValueError):
    """Raised when an operand or operation kind is rejected (e.g. divide by zero)."""
    pass


class InvalidStateError(TallyError):
    """Raised when internal state is inconsistent or an operation kind is unknown."""
    pass
