"""
Accumulator: running decimal value with undo/redo by history replay.

Undo never applies an inverse operation. It drops the tail of the history
and replays what remains from the initial value, so the value always equals
"every operation in history, in order, applied to zero". Redo is a single
incremental apply.
"""

from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from .core.arithmetic import Arithmetic, DEFAULT_ARITHMETIC, INITIAL_VALUE
from .core.errors import InvalidStateError
from .core.operations import Number, Operation, OperationKind, REDO_NOTE
from .logging_config import get_logger
from .replay.runner import replay


class Accumulator:
    """
    Mutable accumulator with history, undo stack and redo stack.

    Not thread safe: one caller performs one operation at a time.

    Usage:
        acc = Accumulator()
        acc.add(3)
        acc.multiply("2.5")
        acc.undo()
        acc.current_value  # Decimal("3")
    """

    def __init__(self, arithmetic: Optional[Arithmetic] = None, trace_id: Optional[str] = None) -> None:
        self._arithmetic = arithmetic or DEFAULT_ARITHMETIC
        self._current: Decimal = INITIAL_VALUE
        self._history: List[Operation] = []
        self._undo_stack: List[Operation] = []
        self._redo_stack: List[Operation] = []
        self._log = get_logger(__name__, trace_id=trace_id)

    @property
    def current_value(self) -> Decimal:
        return self._current

    def get_history(self) -> Tuple[Operation, ...]:
        """Ordered operation log (a copy; callers cannot mutate it)."""
        return tuple(self._history)

    @property
    def undo_stack(self) -> Tuple[Operation, ...]:
        return tuple(self._undo_stack)

    @property
    def redo_stack(self) -> Tuple[Operation, ...]:
        return tuple(self._redo_stack)

    @property
    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def apply(self, kind: OperationKind, operand: Number) -> Decimal:
        """
        Apply a new operation to the current value.

        The new value is computed before any log is touched, so a rejected
        operation (e.g. divide by zero) leaves the accumulator unchanged.

        Args:
            kind: Operation kind
            operand: Operand (int, str or Decimal)

        Returns:
            New current value

        Raises:
            InvalidArgumentError: If operand is invalid or divides by zero
        """
        op = Operation(kind, operand)
        new_value = self._arithmetic.apply(self._current, op)

        self._current = new_value
        self._undo_stack.append(op)
        self._redo_stack.clear()
        self._history.append(op)

        self._log.debug(f"Applied {op} -> {new_value}")
        return new_value

    def add(self, operand: Number) -> Decimal:
        return self.apply(OperationKind.ADD, operand)

    def subtract(self, operand: Number) -> Decimal:
        return self.apply(OperationKind.SUBTRACT, operand)

    def multiply(self, operand: Number) -> Decimal:
        return self.apply(OperationKind.MULTIPLY, operand)

    def divide(self, operand: Number) -> Decimal:
        return self.apply(OperationKind.DIVIDE, operand)

    def undo(self) -> bool:
        """
        Undo the most recent operation.

        Moves the undo stack tail to the redo stack, drops the history tail
        and replays the remaining history from the initial value.

        Returns:
            True if an operation was undone, False if there was nothing to undo
        """
        if not self._undo_stack:
            self._log.info("Nothing to undo")
            return False

        op = self._undo_stack.pop()
        self._redo_stack.append(op)

        # History can only be shorter than the undo stack through misuse.
        if self._history:
            self._history.pop()

        result = replay(self._history, arithmetic=self._arithmetic)
        self._current = result.value

        self._log.debug(f"Undid {op}, replayed {result.applied} operations -> {self._current}")
        return True

    def redo(self) -> bool:
        """
        Redo the most recently undone operation.

        Applies it incrementally and records a REDO-tagged copy in history.

        Returns:
            True if an operation was redone, False if there was nothing to redo
        """
        if not self._redo_stack:
            self._log.info("Nothing to redo")
            return False

        op = self._redo_stack.pop()
        self._undo_stack.append(op)
        self._current = self._arithmetic.apply(self._current, op)
        self._history.append(op.with_note(REDO_NOTE))

        self._log.debug(f"Redid {op} -> {self._current}")
        return True

    def verify(self) -> bool:
        """
        Check that replaying history reproduces the current value.

        Raises:
            InvalidStateError: If the replayed value differs
        """
        replayed = replay(self._history, arithmetic=self._arithmetic).value
        if replayed != self._current:
            raise InvalidStateError(
                f"History replays to {replayed} but current value is {self._current}"
            )
        return True

    def snapshot(self) -> Dict[str, Any]:
        """
        JSON-friendly view of the accumulator.

        Decimals stay Decimal; pass through canonical_json_str for output.
        """
        return {
            "current_value": self._current,
            "history": [op.to_dict() for op in self._history],
            "undo_depth": len(self._undo_stack),
            "redo_depth": len(self._redo_stack),
        }
