"""
Tests for operation arithmetic.

Critical: add/subtract/multiply must be exact, divide must round once.
"""

from decimal import Decimal

import pytest

from tally.core.arithmetic import Arithmetic, DEFAULT_ARITHMETIC, SCALE, default_arithmetic
from tally.core.errors import InvalidArgumentError, InvalidStateError
from tally.core.operations import Operation, OperationKind


def apply(value, kind, operand):
    return DEFAULT_ARITHMETIC.apply(Decimal(value), Operation(kind, operand))


def test_basic_operations():
    assert apply("0", OperationKind.ADD, 3) == Decimal("3")
    assert apply("3", OperationKind.SUBTRACT, 1) == Decimal("2")
    assert apply("2", OperationKind.MULTIPLY, 5) == Decimal("10")


def test_divide_rounds_to_scale_half_up():
    assert SCALE == 6
    assert str(apply("10", OperationKind.DIVIDE, 3)) == "3.333333"
    assert str(apply("2", OperationKind.DIVIDE, 3)) == "0.666667"
    assert str(apply("-2", OperationKind.DIVIDE, 3)) == "-0.666667"
    assert str(apply("0.0000005", OperationKind.DIVIDE, 1)) == "0.000001"
    assert str(apply("-0.0000005", OperationKind.DIVIDE, 1)) == "-0.000001"
    assert str(apply("0.00000049999999999", OperationKind.DIVIDE, 1)) == "0.000000"


def test_divide_keeps_fixed_scale():
    """Division results always carry six fractional digits."""
    assert str(apply("4", OperationKind.DIVIDE, 2)) == "2.000000"
    assert str(apply("1", OperationKind.DIVIDE, 8)) == "0.125000"
    assert str(apply("0", OperationKind.DIVIDE, 3)) == "0.000000"


def test_divide_large_quotient_is_exact():
    """Integer part beyond default decimal precision survives division."""
    result = apply("1E30", OperationKind.DIVIDE, 3)
    assert str(result) == "3" * 30 + "." + "3" * 6


def test_divide_by_zero_raises():
    with pytest.raises(InvalidArgumentError):
        apply("5", OperationKind.DIVIDE, 0)
    with pytest.raises(InvalidArgumentError):
        apply("5", OperationKind.DIVIDE, "0.000")


def test_multiply_is_exact_beyond_default_precision():
    a = 12345678901234567890
    b = 98765432109876543210
    assert apply(a, OperationKind.MULTIPLY, b) == Decimal(a * b)


def test_add_is_exact_for_long_fractions():
    result = apply("1E+20", OperationKind.ADD, "0.000000000000000001")
    assert result == Decimal("100000000000000000000.000000000000000001")


def test_missing_handler_raises_invalid_state():
    arithmetic = Arithmetic()
    arithmetic.register(OperationKind.ADD, lambda v, o: v + o)

    with pytest.raises(InvalidStateError):
        arithmetic.apply(Decimal(1), Operation(OperationKind.DIVIDE, 2))


def test_default_arithmetic_registers_all_kinds():
    assert set(default_arithmetic().kinds()) == set(OperationKind)
