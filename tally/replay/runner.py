"""
Replay runner: reconstruct the accumulator value from an operation log.

Replay is pure: folds the arithmetic over each operation in order, starting
from the initial value. It never touches history or undo/redo stacks.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from ..core.arithmetic import Arithmetic, DEFAULT_ARITHMETIC, INITIAL_VALUE
from ..core.operations import Operation


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replay operation.

    Fields:
        value: Final value after applying operations
        applied: Number of operations applied
    """
    value: Decimal
    applied: int


def replay(
    operations: Iterable[Operation],
    arithmetic: Optional[Arithmetic] = None,
    initial: Decimal = INITIAL_VALUE,
    to_index: Optional[int] = None,
) -> ReplayResult:
    """
    Replay operations to reconstruct a value.

    Same operations always produce the same value.

    Args:
        operations: Ordered operations (e.g. an accumulator history)
        arithmetic: Handler registry (None = default four operations)
        initial: Seed value
        to_index: Stop after this position (inclusive, None = all)

    Returns:
        ReplayResult with final value and count
    """
    arithmetic = arithmetic or DEFAULT_ARITHMETIC
    value = initial
    count = 0

    for idx, op in enumerate(operations):
        if to_index is not None and idx > to_index:
            break
        value = arithmetic.apply(value, op)
        count += 1

    return ReplayResult(value=value, applied=count)
