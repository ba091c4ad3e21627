"""
Operation model for accumulator history.

Operations are immutable (kind, operand) records. They carry no reference
to prior state, so the same instance can sit in the history, the undo stack
and the redo stack at once.
"""

from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, Optional, Union

from .errors import InvalidArgumentError

REDO_NOTE = "REDO"

Number = Union[int, str, Decimal]

_SYMBOLS = {
    "+": "ADD",
    "-": "SUBTRACT",
    "*": "MULTIPLY",
    "x": "MULTIPLY",
    "/": "DIVIDE",
    "sub": "SUBTRACT",
    "mul": "MULTIPLY",
    "div": "DIVIDE",
}


class OperationKind(str, Enum):
    ADD = "ADD"
    SUBTRACT = "SUBTRACT"
    MULTIPLY = "MULTIPLY"
    DIVIDE = "DIVIDE"

    @classmethod
    def parse(cls, text: str) -> "OperationKind":
        """
        Resolve a kind from its name (any case), a short alias or a symbol.

        Raises:
            InvalidArgumentError: If text names no known kind
        """
        key = text.strip()
        key = _SYMBOLS.get(key.lower(), key.upper())
        try:
            return cls(key)
        except ValueError:
            raise InvalidArgumentError(f"Unknown operation: {text!r}") from None


def to_decimal(value: Any) -> Decimal:
    """
    Coerce an operand to an exact, finite Decimal.

    Floats are refused: they are not exact and would make replay lossy.

    Raises:
        InvalidArgumentError: If value cannot be represented exactly
    """
    if isinstance(value, bool) or isinstance(value, float):
        raise InvalidArgumentError(f"Operand must be int, str or Decimal, got {type(value).__name__}")
    if isinstance(value, Decimal):
        dec = value
    elif isinstance(value, (int, str)):
        try:
            dec = Decimal(value.strip() if isinstance(value, str) else value)
        except InvalidOperation:
            raise InvalidArgumentError(f"Invalid operand: {value!r}") from None
    else:
        raise InvalidArgumentError(f"Operand must be int, str or Decimal, got {type(value).__name__}")

    if not dec.is_finite():
        raise InvalidArgumentError(f"Operand must be finite, got {value!r}")
    return dec


@dataclass(frozen=True)
class Operation:
    """
    Immutable operation record.

    Fields:
        kind: One of ADD, SUBTRACT, MULTIPLY, DIVIDE
        operand: Decimal operand
        note: Optional provenance tag (REDO_NOTE for redone entries)
    """
    kind: OperationKind
    operand: Decimal
    note: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, OperationKind):
            object.__setattr__(self, "kind", OperationKind.parse(str(self.kind)))
        object.__setattr__(self, "operand", to_decimal(self.operand))

    def with_note(self, note: Optional[str]) -> "Operation":
        """Return a copy carrying a different note."""
        return replace(self, note=note)

    def same_as(self, other: "Operation") -> bool:
        """True if both operations do the same arithmetic, ignoring notes."""
        return self.kind == other.kind and self.operand == other.operand

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "operand": str(self.operand),
            "note": self.note,
        }

    def __str__(self) -> str:
        text = f"{self.kind.value} {self.operand}"
        if self.note:
            text += f" [{self.note}]"
        return text
