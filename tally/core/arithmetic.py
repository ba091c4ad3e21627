"""
Arithmetic: pure value transitions for operations.

Each handler maps (current_value, operand) -> new_value. Handlers must be
pure so that replaying the same history always yields the same value.
Add, subtract and multiply are exact. Divide rounds the exact quotient to
SCALE fractional digits, half-up.
"""

from decimal import (
    Context,
    Decimal,
    Inexact,
    InvalidOperation,
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Overflow,
    ROUND_DOWN,
    ROUND_HALF_UP,
)
from typing import Callable, Dict

from .errors import InvalidArgumentError, InvalidStateError
from .operations import Operation, OperationKind

SCALE = 6
QUANTUM = Decimal(1).scaleb(-SCALE)
INITIAL_VALUE = Decimal(0)

# Inexact is trapped: add/subtract/multiply must never round.
_EXACT = Context(
    prec=MAX_PREC,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, Overflow, Inexact],
)
_ROUNDING = Context(
    prec=MAX_PREC,
    rounding=ROUND_HALF_UP,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, Overflow],
)

Handler = Callable[[Decimal, Decimal], Decimal]


def _add(value: Decimal, operand: Decimal) -> Decimal:
    return _EXACT.add(value, operand)


def _subtract(value: Decimal, operand: Decimal) -> Decimal:
    return _EXACT.subtract(value, operand)


def _multiply(value: Decimal, operand: Decimal) -> Decimal:
    return _EXACT.multiply(value, operand)


def _divide(value: Decimal, operand: Decimal) -> Decimal:
    """
    Fixed-scale division, rounded half-up.

    The quotient is first truncated with enough digits to cover the integer
    part plus SCALE + 2 fractional digits. Truncation never crosses the
    half-way point, so the final half-up quantize rounds exactly once.
    """
    if operand.is_zero():
        raise InvalidArgumentError("Cannot divide by zero.")

    int_digits = max(value.adjusted() - operand.adjusted() + 2, 0)
    truncating = Context(
        prec=int_digits + SCALE + 2,
        rounding=ROUND_DOWN,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
        traps=[InvalidOperation, Overflow],
    )
    quotient = truncating.divide(value, operand)
    return quotient.quantize(QUANTUM, context=_ROUNDING)


class Arithmetic:
    """
    Registry of operation handlers.

    Usage:
        arithmetic = Arithmetic()
        arithmetic.register(OperationKind.ADD, handle_add)
        new_value = arithmetic.apply(value, op)
    """

    def __init__(self) -> None:
        self._handlers: Dict[OperationKind, Handler] = {}

    def register(self, kind: OperationKind, handler: Handler) -> None:
        """
        Register handler for an operation kind.

        Args:
            kind: Operation kind
            handler: Pure function (current_value, operand) -> new_value
        """
        self._handlers[kind] = handler

    def kinds(self):
        return tuple(self._handlers)

    def apply(self, value: Decimal, op: Operation) -> Decimal:
        """
        Apply operation to value using registered handler.

        Raises:
            InvalidArgumentError: If the handler rejects the operand
            InvalidStateError: If no handler registered for op.kind
        """
        handler = self._handlers.get(op.kind)
        if handler is None:
            raise InvalidStateError(f"No handler for operation kind: {op.kind}")
        return handler(value, op.operand)


def default_arithmetic() -> Arithmetic:
    """Arithmetic with the four standard handlers registered."""
    arithmetic = Arithmetic()
    arithmetic.register(OperationKind.ADD, _add)
    arithmetic.register(OperationKind.SUBTRACT, _subtract)
    arithmetic.register(OperationKind.MULTIPLY, _multiply)
    arithmetic.register(OperationKind.DIVIDE, _divide)
    return arithmetic


DEFAULT_ARITHMETIC = default_arithmetic()
