"""
Core accumulator primitives.

- Operation: Immutable (kind, operand) records
- Arithmetic: Pure value transitions per operation kind
- Canonical: Deterministic serialization
"""

from .operations import Operation, OperationKind, REDO_NOTE, to_decimal
from .arithmetic import Arithmetic, DEFAULT_ARITHMETIC, INITIAL_VALUE, SCALE, default_arithmetic
from .canonical import canonicalize, canonical_json_str
from .errors import TallyError, InvalidArgumentError, InvalidStateError

__all__ = [
    "Operation",
    "OperationKind",
    "REDO_NOTE",
    "to_decimal",
    "Arithmetic",
    "DEFAULT_ARITHMETIC",
    "INITIAL_VALUE",
    "SCALE",
    "default_arithmetic",
    "canonicalize",
    "canonical_json_str",
    "TallyError",
    "InvalidArgumentError",
    "InvalidStateError",
]
